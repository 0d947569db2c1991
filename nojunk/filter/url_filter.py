"""
Extension blacklist filtering for URL lists.

A URL is dropped when the extension of its last path segment, once the
query string and fragment are removed, is on the blacklist. Matching is
case-insensitive on the extension only. Everything else is kept, in input
order, exactly as it was given.
"""

import logging
from collections import Counter
from typing import Iterable

logger = logging.getLogger(__name__)


def strip_query_fragment(url: str) -> str:
    """Cut the URL at the first '?' and at the first '#', whichever comes first."""
    for marker in ("?", "#"):
        idx = url.find(marker)
        if idx != -1:
            url = url[:idx]
    return url


def extract_extension(url: str) -> str:
    """
    Lower-cased extension of the final path segment, including the dot.

    Returns "" when the segment has no dot, and "." for a trailing dot.

    Examples:
        "http://a.com/x/IMG.PNG?v=2" -> ".png"
        "http://a.com/file"          -> ""
        "http://a.com/v1.2/file"     -> ""
    """
    path = strip_query_fragment(url)
    segment = path.rsplit("/", 1)[-1]
    dot = segment.rfind(".")
    if dot == -1:
        return ""
    return segment[dot:].lower()


class UrlFilter:
    """
    Blacklist matcher for URL extensions.

    Keeps counters of what it has seen so a run summary can be shown.
    """

    def __init__(self, blacklist: Iterable[str]):
        self.blacklist: list[str] = [entry.lower() for entry in blacklist]
        self._blocked_extensions: set[str] = {f".{entry}" for entry in self.blacklist}

        self._total_checks = 0
        self._excluded_count = 0
        self._excluded_by_extension: Counter = Counter()

    def is_excluded(self, url: str) -> bool:
        """True if the URL's extension is blacklisted."""
        self._total_checks += 1

        ext = extract_extension(url)
        if ext in self._blocked_extensions:
            self._excluded_count += 1
            self._excluded_by_extension[ext] += 1
            logger.debug(f"Excluded {url} (extension {ext})")
            return True
        return False

    def filter(self, urls: Iterable[str]) -> list[str]:
        """URLs whose extension is not blacklisted, in their original order."""
        return [url for url in urls if not self.is_excluded(url)]

    def stats(self) -> dict:
        """
        Counters since construction or the last reset_stats().

        Returns:
            {
                "total_checks": int,
                "kept_count": int,
                "excluded_count": int,
                "excluded_by_extension": {".png": int, ...},
                "exclude_rate": float (percentage)
            }
        """
        exclude_rate = (self._excluded_count / self._total_checks * 100) if self._total_checks > 0 else 0.0

        return {
            "total_checks": self._total_checks,
            "kept_count": self._total_checks - self._excluded_count,
            "excluded_count": self._excluded_count,
            "excluded_by_extension": dict(self._excluded_by_extension),
            "exclude_rate": round(exclude_rate, 1),
        }

    def reset_stats(self) -> None:
        self._total_checks = 0
        self._excluded_count = 0
        self._excluded_by_extension.clear()
