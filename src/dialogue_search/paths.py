"""Dialogue search directory and path management.

XDG Base Directory Specification compliant:
- Config: ~/.config/dialogue-search/config.yaml
- Data (user-created): ~/.local/share/dialogue-search/
"""

import os
from pathlib import Path

APP_DIR_NAME = "dialogue-search"


def get_config_dir() -> Path:
    """Get the config directory (XDG-compliant: ~/.config/dialogue-search).

    Does not create the directory; a missing config means defaults.

    Returns:
        Path to ~/.config/dialogue-search directory
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    return Path(config_home) / APP_DIR_NAME


def get_config_path() -> Path:
    """Get the config file path.

    DLG_CONFIG overrides the XDG location.

    Returns:
        Path to the YAML config file (may not exist)
    """
    override = os.environ.get("DLG_CONFIG")
    if override:
        return Path(override)
    return get_config_dir() / "config.yaml"


def get_data_dir() -> Path:
    """Get the data directory (XDG-compliant: ~/.local/share/dialogue-search).

    Returns:
        Path to ~/.local/share/dialogue-search directory (may not exist)
    """
    data_home = os.environ.get("XDG_DATA_HOME", str(Path.home() / ".local" / "share"))
    return Path(data_home) / APP_DIR_NAME


def get_default_data_path() -> Path:
    """Get the default dialogue data file used when none is configured."""
    return get_data_dir() / "dialogues.yaml"
