"""Reading URL lists in and writing them back out, one URL per line."""

import io
import logging
from pathlib import Path
from typing import Iterable, Iterator, TextIO

logger = logging.getLogger(__name__)


class UrlIOError(Exception):
    """An input or output file could not be opened, read or written."""


def read_urls(stream: TextIO) -> Iterator[str]:
    """Yield every non-blank line, stripped of surrounding whitespace."""
    for line in stream:
        url = line.strip()
        if not url:
            continue
        yield url


def read_urls_from_file(path: str | Path) -> list[str]:
    try:
        f = open(path, "r", encoding="utf-8", newline="\n")
    except OSError as e:
        raise UrlIOError(f"Error opening input file: {e}") from e

    with f:
        try:
            urls = list(read_urls(f))
        except (OSError, UnicodeDecodeError) as e:
            raise UrlIOError(f"Error reading from file {path}: {e}") from e

    logger.debug(f"Read {len(urls)} URLs from {path}")
    return urls


def read_urls_from_stdin(stdin: TextIO) -> list[str]:
    try:
        if isinstance(stdin, io.TextIOWrapper):
            # split on "\n" only, a lone "\r" stays inside the URL
            stdin.reconfigure(newline="\n")
        urls = list(read_urls(stdin))
    except (OSError, UnicodeDecodeError) as e:
        raise UrlIOError(f"Error reading from stdin: {e}") from e

    logger.debug(f"Read {len(urls)} URLs from stdin")
    return urls


def write_urls(urls: Iterable[str], stream: TextIO) -> None:
    for url in urls:
        stream.write(f"{url}\n")


def write_urls_to_stdout(urls: Iterable[str], stdout: TextIO) -> None:
    try:
        write_urls(urls, stdout)
        stdout.flush()
    except OSError as e:
        raise UrlIOError(f"Error writing to stdout: {e}") from e


def save_urls_to_file(urls: Iterable[str], path: str | Path) -> None:
    try:
        f = open(path, "w", encoding="utf-8")
    except OSError as e:
        raise UrlIOError(f"Error creating output file: {e}") from e

    try:
        with f:
            write_urls(urls, f)
    except OSError as e:
        raise UrlIOError(f"Error writing to output file {path}: {e}") from e

    logger.debug(f"Saved filtered URLs to {path}")


def stdin_is_piped(stdin: TextIO) -> bool:
    """True unless stdin is an interactive terminal."""
    try:
        return not stdin.isatty()
    except (AttributeError, ValueError):
        # closed or detached stream
        return False
