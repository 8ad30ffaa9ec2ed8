"""TOML configuration loader with deep merge support.

syncflags runs inside other people's workspaces, so every file is optional:
with no config directory the model defaults in ``syncflags.config.models``
apply unchanged.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

DEFAULT_FILE = "default.toml"
SEARCH_DEPTH = 5


def get_config_dir() -> Path | None:
    """Get the configuration directory, if there is one.

    SYNCFLAGS_CONFIG_DIR wins and must exist. Otherwise the nearest
    ``config/`` directory holding a default.toml, searching cwd and its
    parents. A ``config/`` without default.toml belongs to someone else
    and is skipped.

    Raises:
        FileNotFoundError: If SYNCFLAGS_CONFIG_DIR points nowhere
    """
    config_dir_env = os.environ.get("SYNCFLAGS_CONFIG_DIR")
    if config_dir_env:
        path = Path(config_dir_env)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {config_dir_env}")
        return path

    current = Path.cwd()
    for _ in range(SEARCH_DEPTH):
        config_path = current / "config"
        if (config_path / DEFAULT_FILE).is_file():
            return config_path
        if current.parent == current:
            break
        current = current.parent

    return None


def get_environment() -> str:
    """Get the current environment from SYNCFLAGS_ENV.

    Defaults to 'development' if not set.
    """
    return os.environ.get("SYNCFLAGS_ENV", "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    Nested dictionaries are merged recursively; any other override
    value replaces the base value. Neither input is modified.
    """
    result = base.copy()

    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_config() -> dict[str, Any]:
    """Load configuration from TOML files.

    Loading order, each file optional:
    1. config/default.toml
    2. config/{SYNCFLAGS_ENV}.toml

    Returns:
        Merged configuration dictionary; empty when no file was found
    """
    config_dir = get_config_dir()
    if config_dir is None:
        return {}

    config: dict[str, Any] = {}

    default_path = config_dir / DEFAULT_FILE
    if default_path.exists():
        config = load_toml(default_path)

    env_path = config_dir / f"{get_environment()}.toml"
    if env_path.exists():
        config = deep_merge(config, load_toml(env_path))

    return config
