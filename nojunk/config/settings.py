"""
Process settings: where the blacklist lives and how loud to log.
Loads from environment variables with sensible defaults.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os
from dotenv import load_dotenv

from .errors import ConfigError

# Load environment variables
load_dotenv()

CONFIG_FILENAME = ".config.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_config_path() -> Path:
    """Per-user blacklist file, ``~/.config.yaml``."""
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as e:
        raise ConfigError(f"Error getting user home directory: {e}") from e
    return home / CONFIG_FILENAME


@dataclass
class Settings:
    """Resolved once at startup and passed to whatever needs it."""

    config_path: Path
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, config_path: Optional[str] = None, verbose: bool = False) -> "Settings":
        """Build settings from the environment; explicit arguments win."""
        path = config_path or os.getenv("NOJUNK_CONFIG")
        log_level = "DEBUG" if verbose else os.getenv("NOJUNK_LOG_LEVEL", "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid NOJUNK_LOG_LEVEL {log_level!r}, expected one of {', '.join(LOG_LEVELS)}")

        return cls(
            config_path=Path(path).expanduser() if path else default_config_path(),
            log_level=log_level,
        )
