"""Errors raised while resolving or loading the blacklist config."""

from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """The config file is unreachable or malformed. Always fatal."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path
