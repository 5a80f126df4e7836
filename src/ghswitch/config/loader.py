"""Configuration loading utilities.

Settings come from, in increasing priority: built-in defaults,
``GHSWITCH_*`` environment variables, and a YAML file.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ghswitch.config.models import Config
from ghswitch.errors import ConfigurationError

CONFIG_ENV_VAR = "GHSWITCH_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/ghswitch/config.yaml")


def default_config_path() -> Path | None:
    """
    Locate the config file to use when none is given explicitly.

    ``$GHSWITCH_CONFIG`` wins when set; otherwise
    ``~/.config/ghswitch/config.yaml`` is used if it exists.
    """
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()

    candidate = DEFAULT_CONFIG_PATH.expanduser()
    return candidate if candidate.is_file() else None


def _read_yaml(config_path: Path) -> dict[str, Any]:
    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {config_path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"YAML root must be a mapping, not {type(data).__name__}")

    return data


def load_config(config_path: Path | None) -> Config:
    """
    Load configuration from YAML file or return defaults.

    Args:
        config_path: Path to YAML config file, or None for defaults.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If config_path doesn't exist.
        ConfigurationError: If the YAML is invalid or fails validation.
    """
    if config_path is None:
        data: dict[str, Any] = {}
    elif not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        data = _read_yaml(config_path)

    try:
        return Config(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
