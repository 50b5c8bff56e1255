"""Configuration file management for pennywise."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

DEFAULT_SETTINGS: dict[str, Any] = {
    "export_dir": ".",
    "csv_quoting": False,
}


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "pennywise" / "config.toml"


def create_default_config(config_path: Path | None = None, db_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
        db_path: Database location to record in the config, if any.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = dict(DEFAULT_SETTINGS)
    if db_path is not None:
        default_config["db_path"] = str(db_path)

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If config file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_setting(key: str, config_path: Path | None = None) -> Any:
    """Get a setting, falling back to built-in defaults.

    A missing config file is not an error: defaults apply until 'pennywise init'.

    Args:
        key: Setting name.
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configured value, the default value, or None for unknown keys.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}

    return config.get(key, DEFAULT_SETTINGS.get(key))
