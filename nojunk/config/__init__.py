"""Configuration management for nojunk."""

from .errors import ConfigError
from .settings import Settings, default_config_path
from .store import Config, ConfigStore, DEFAULT_BLACKLIST

__all__ = ["Config", "ConfigError", "ConfigStore", "DEFAULT_BLACKLIST", "Settings", "default_config_path"]
