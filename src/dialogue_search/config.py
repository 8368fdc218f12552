"""Configuration management for dialogue search."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from .answer import DEFAULT_MAX_ANSWER_LENGTH
from .merge import DEFAULT_MERGE_THRESHOLD
from .pagination import DEFAULT_ITEMS_PER_PAGE


class SearchConfig(BaseModel):
    """Presentation settings for search listings."""
    items_per_page: int = Field(default=DEFAULT_ITEMS_PER_PAGE, ge=1)
    merge_threshold: int = Field(default=DEFAULT_MERGE_THRESHOLD, ge=0)
    max_answer_length: int = Field(default=DEFAULT_MAX_ANSWER_LENGTH, ge=1)


class StoreConfig(BaseModel):
    """Reference store settings."""
    data_path: Optional[Path] = None  # YAML file with a top-level "dialogues" list


class DialogueSearchConfig(BaseModel):
    """Root configuration."""
    search: SearchConfig = Field(default_factory=SearchConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)


def load_config(config_path: Path) -> DialogueSearchConfig:
    """Load and validate configuration file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated DialogueSearchConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is invalid
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return DialogueSearchConfig(**data)


def save_config(config: DialogueSearchConfig, config_path: Path):
    """Save configuration to file.

    Args:
        config: Configuration to save
        config_path: Path to save YAML file
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, 'w', encoding="utf-8") as f:
        yaml.dump(config.model_dump(mode='json'), f, default_flow_style=False, allow_unicode=True)
