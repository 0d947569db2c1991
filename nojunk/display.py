"""
Console output for humans: the usage screen and the run summary.

Filtered URLs never go through here; they are written as plain lines so
stdout stays pipeable. The summary is printed on stderr.
"""

import logging

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

logger = logging.getLogger(__name__)
console = Console()
stderr_console = Console(stderr=True)

USAGE_OPTIONS = [
    ("-i <file>", "Input file containing URLs (one per line)"),
    ("-o <file>", "Output file to save filtered URLs"),
    ("-c <file>", "Blacklist config file (default: ~/.config.yaml)"),
    ("-v", "Verbose logging on stderr"),
    ("--stats", "Print a filtering summary on stderr"),
]


def print_usage(prog: str = "nojunk") -> None:
    """Usage screen shown when there is nothing to read."""
    console.print(Text(f"Usage: {prog} [OPTIONS]", style="bold cyan"))
    console.print("A program to filter URLs based on a blacklist from a YAML configuration file.")
    console.print()
    console.print(Text("Options:", style="cyan"))
    for flag, description in USAGE_OPTIONS:
        line = Text("  ")
        line.append(f"{flag:<12}", style="green")
        line.append(f" {description}")
        console.print(line)
    console.print()
    console.print("If no input or output file is provided, the program reads from stdin and writes to stdout.")


def summary_table(stats: dict) -> Table:
    """
    Build the run summary.

    Args:
        stats: Statistics from UrlFilter.stats()
    """
    table = Table(title="URL filter summary", box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Extension", style="cyan")
    table.add_column("Excluded", justify="right")

    by_extension = stats.get("excluded_by_extension", {})
    for ext, count in sorted(by_extension.items(), key=lambda x: (-x[1], x[0])):
        table.add_row(ext, str(count))

    table.add_section()
    table.add_row("[bold]Total excluded[/bold]", f"[yellow]{stats['excluded_count']}[/yellow]")
    table.add_row("[bold]Kept[/bold]", f"[green]{stats['kept_count']}[/green]")
    table.add_row("[bold]Checked[/bold]", str(stats["total_checks"]))
    table.caption = f"{stats['exclude_rate']}% excluded"
    return table


def print_summary(stats: dict) -> None:
    stderr_console.print(summary_table(stats))
