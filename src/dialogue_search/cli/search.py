"""CLI command for dialogue search."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..config import DialogueSearchConfig, SearchConfig, load_config
from ..paths import get_config_path, get_default_data_path
from ..search import DialogueSearch, SearchOptions
from ..store import DialogueStore
from .core.command_wrapper import command_context
from .errors import ConfigNotFoundError, DataFileNotFoundError, InvalidArgumentError
from .logging_config import setup_logging
from .output import print_search_result

logger = logging.getLogger(__name__)


def resolve_config(config_path: Optional[str]) -> DialogueSearchConfig:
    """Load the explicit config, the default config, or built-in defaults.

    Raises:
        ConfigNotFoundError: If an explicitly given config file is missing
        InvalidArgumentError: If the config file is invalid
    """
    path = Path(config_path) if config_path else get_config_path()
    if not path.exists():
        if config_path:
            raise ConfigNotFoundError(f"Config file not found: {path}")
        logger.debug(f"No config at {path}, using defaults")
        return DialogueSearchConfig()

    try:
        return load_config(path)
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid config file {path}: {e}")


def open_store(data_path: Optional[str], config: DialogueSearchConfig) -> DialogueStore:
    """Open the dialogue data file from the option, the config, or the default location.

    Raises:
        DataFileNotFoundError: If the data file is missing
        InvalidArgumentError: If the data file is malformed
    """
    if data_path:
        path = Path(data_path)
    elif config.store.data_path:
        path = config.store.data_path
    else:
        path = get_default_data_path()

    try:
        return DialogueStore.from_yaml(path)
    except FileNotFoundError as e:
        raise DataFileNotFoundError(str(e))
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid dialogue data: {e}")


def search_command(
    question: Optional[str],
    answer: Optional[str],
    keyword: bool,
    page: int,
    auto_merge: bool,
    recursive: bool,
    data_path: Optional[str],
    config_path: Optional[str],
    items_per_page: Optional[int],
    merge_threshold: Optional[int],
    max_answer_length: Optional[int],
    output_json: bool,
    verbose: bool,
    debug: bool = False,
):
    """Search the dialogue store and print the rendered listing.

    Args:
        question: Question text (exact, or a keyword with ``keyword``)
        answer: Answer text (exact, or a keyword with ``keyword``)
        keyword: Use keyword (substring) matching
        page: 1-based page number
        auto_merge: Merge keyword results with identical text
        recursive: Resolve redirected answers
        data_path: Dialogue data YAML file (overrides config)
        config_path: Config YAML file
        items_per_page: Page size override
        merge_threshold: Merge threshold override
        max_answer_length: Answer truncation override
        output_json: If True, output JSON format
        verbose: If True, show progress logging
        debug: If True, show debug logging
    """
    setup_logging(verbose=verbose, debug=debug)

    with command_context("Search failed", output_json):
        config = resolve_config(config_path)
        overrides = {
            key: value
            for key, value in (
                ("items_per_page", items_per_page),
                ("merge_threshold", merge_threshold),
                ("max_answer_length", max_answer_length),
            )
            if value is not None
        }
        try:
            search_config = SearchConfig(**{**config.search.model_dump(), **overrides})
            options = SearchOptions(
                question=question,
                answer=answer,
                keyword=keyword,
                page=page,
                auto_merge=auto_merge,
                recursive=recursive,
            )
        except ValidationError as e:
            raise InvalidArgumentError(str(e))

        store = open_store(data_path, config)
        searcher = DialogueSearch(
            lookup=store.get_dialogues,
            weight_total=store.total_weight,
            config=search_config,
        )
        output = asyncio.run(searcher.search(options))
        print_search_result(options, output, output_json)
