#!/usr/bin/env python3
"""
nojunk: drop URLs that point at static assets.

Reads URLs one per line, removes those whose file extension is on the
blacklist in ~/.config.yaml and writes the rest back out.

Usage:
  nojunk -i urls.txt                 # Filter a file, print to stdout
  nojunk -i urls.txt -o clean.txt    # Filter a file into another file
  cat urls.txt | nojunk              # Filter stdin
  cat urls.txt | nojunk --stats      # Also print a summary on stderr
  nojunk -c ./blacklist.yaml -i urls.txt
"""

import argparse
import logging
import sys

from rich.console import Console

from .config import ConfigError, ConfigStore, Settings
from .display import print_summary, print_usage
from .filter import UrlFilter
from .url_io import (
    UrlIOError,
    read_urls_from_file,
    read_urls_from_stdin,
    save_urls_to_file,
    stdin_is_piped,
    write_urls_to_stdout,
)

logger = logging.getLogger(__name__)

error_console = Console(stderr=True, style="bold red")


def setup_logging(level: str) -> None:
    """Root logger: everything at `level` and above to stderr."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing console handlers
    for handler in root_logger.handlers[:]:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(console_handler)


def handle_error(msg: str, exception: Exception | None = None, exit_code: int = 1) -> None:
    """Unified error handler - logs, displays, exits."""
    error_console.print(f"ERROR: {msg}", markup=False, soft_wrap=True)
    if exception:
        logger.debug(f"{msg}: {exception}", exc_info=True)
    sys.exit(exit_code)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nojunk",
        description="Filter URLs based on a blacklist of file extensions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-i", "--input", metavar="FILE", help="Input file containing URLs (default: stdin)")
    parser.add_argument("-o", "--output", metavar="FILE", help="Output file for filtered URLs (default: stdout)")
    parser.add_argument("-c", "--config", metavar="FILE", help="Blacklist config file (default: ~/.config.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging on stderr")
    parser.add_argument("--stats", action="store_true", help="Print a filtering summary on stderr")
    return parser


def run(args: argparse.Namespace, settings: Settings) -> dict:
    """Load the blacklist, filter the input, write the output. Returns filter stats."""
    config = ConfigStore(settings.config_path).load()
    url_filter = UrlFilter(config.blacklist)

    if args.input:
        urls = read_urls_from_file(args.input)
    else:
        urls = read_urls_from_stdin(sys.stdin)

    clean_urls = url_filter.filter(urls)

    if args.output:
        save_urls_to_file(clean_urls, args.output)
    else:
        write_urls_to_stdout(clean_urls, sys.stdout)

    stats = url_filter.stats()
    logger.info(f"Kept {stats['kept_count']} of {stats['total_checks']} URLs")
    return stats


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]

    # Nothing to read: no arguments and an interactive stdin
    if not argv and not stdin_is_piped(sys.stdin):
        print_usage()
        sys.exit(1)

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env(config_path=args.config, verbose=args.verbose)
    except ConfigError as e:
        handle_error(str(e), e)

    setup_logging(settings.log_level)

    try:
        stats = run(args, settings)
    except ConfigError as e:
        handle_error(str(e), e)
    except UrlIOError as e:
        handle_error(str(e), e)

    if args.stats:
        print_summary(stats)


if __name__ == "__main__":
    main()
