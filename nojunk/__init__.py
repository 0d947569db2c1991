"""Filter URL lists by file-extension blacklist."""

__version__ = "1.0.0"
