"""XDG-compliant path management for tman.

This module provides standardized paths following the XDG Base Directory
Specification for configuration, state, and trashed data.

XDG defaults:
- Config: ~/.config/tman/
- State: ~/.local/state/tman/
- Data: ~/.local/share/tman/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "tman"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/tman/ (or XDG_CONFIG_HOME/tman/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    The state directory holds the index of trashed files.

    Returns:
        Path to ~/.local/state/tman/ (or XDG_STATE_HOME/tman/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_data_dir() -> Path:
    """Get the data directory path.

    Returns:
        Path to ~/.local/share/tman/ (or XDG_DATA_HOME/tman/).
    """
    return _get_xdg_dir("XDG_DATA_HOME", ".local/share")


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/tman/settings.toml.
    """
    return get_config_dir() / "settings.toml"


def get_theme_path() -> Path:
    """Get the user theme file path.

    Returns:
        Path to ~/.config/tman/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_index_path() -> Path:
    """Get the index file path.

    Returns:
        Path to ~/.local/state/tman/index.json.
    """
    return get_state_dir() / "index.json"


def get_storage_root() -> Path:
    """Get the storage root holding one directory per trashed entry.

    Returns:
        Path to ~/.local/share/tman/trash/.
    """
    return get_data_dir() / "trash"
