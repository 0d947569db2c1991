"""
Blacklist config persistence.

The blacklist is kept in a small YAML file under the user's home directory.
It is read once per run and written only when it does not exist yet, seeded
with DEFAULT_BLACKLIST. A malformed file is never repaired.
"""

import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_BLACKLIST = [
    "otf", "woff2", "js", "ttf", "woff", "eot",
    "svg", "png", "jpg", "jpeg", "gif", "bmp",
    "css", "webp", "tiff", "heic", "heif",
]


@dataclass
class Config:
    blacklist: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data) -> "Config":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"expected a mapping at top level, got {type(data).__name__}")

        blacklist = data.get("blacklist")
        # BaseLoader reads an empty `blacklist:` as ""
        if blacklist is None or blacklist == "":
            return cls()
        if not isinstance(blacklist, list):
            raise ValueError(f"'blacklist' must be a list, got {type(blacklist).__name__}")

        entries = []
        for item in blacklist:
            if not isinstance(item, str):
                raise ValueError(f"'blacklist' entries must be plain strings, got {item!r}")
            entries.append(item)
        return cls(blacklist=entries)

    @classmethod
    def default(cls) -> "Config":
        return cls(blacklist=list(DEFAULT_BLACKLIST))


class ConfigStore:
    """Loads the blacklist config, creating it with defaults on first run."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Config:
        """
        Return the persisted config.

        If the file is missing, write the default blacklist to it and return
        that. Raises ConfigError if the file cannot be read or parsed.
        """
        if not self._path.exists():
            logger.warning(f"Config file not found. Creating default config at {self._path}")
            config = Config.default()
            self.save(config)
            logger.warning(f"Default config written to {self._path}")
            return config

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                # scalars stay as written: `- 001` must not become 1
                data = yaml.load(f, Loader=yaml.BaseLoader)
        except OSError as e:
            raise ConfigError(f"Error loading YAML file {self._path}: {e}", self._path) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML file {self._path}: {e}", self._path) from e

        try:
            config = Config.from_dict(data)
        except ValueError as e:
            raise ConfigError(f"Error parsing YAML file {self._path}: {e}", self._path) from e

        logger.debug(f"Loaded {len(config.blacklist)} blacklisted extensions from {self._path}")
        return config

    def save(self, config: Config) -> None:
        """Write config as block-style YAML, one blacklist entry per line."""
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigError(f"Failed to write config file {self._path}: {e}", self._path) from e
