"""Configuration management for ghswitch."""

from ghswitch.config.loader import default_config_path, load_config
from ghswitch.config.models import Config, KeyConfig, LoggingConfig, PathsConfig, ServiceConfig

__all__ = [
    "Config",
    "KeyConfig",
    "LoggingConfig",
    "PathsConfig",
    "ServiceConfig",
    "default_config_path",
    "load_config",
]
