"""
Rich console helpers for the oasis-vimiumc CLI.

Provides styled headers, status lines, numbered lists, and line input.
"""

from collections.abc import Iterable, Sequence

from rich.console import Console
from rich.style import Style
from rich.text import Text

# soft_wrap keeps long output paths on one line
console = Console(soft_wrap=True)

STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "number": Style(color="cyan"),
    "label": Style(color="white"),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
}


def print_header(title: str, subtitle: str = "") -> None:
    """Print a styled header."""
    console.print()
    console.print(Text(title, style=STYLES["title"]))
    if subtitle:
        console.print(Text(subtitle, style=STYLES["subtitle"]))


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(Text(f"✗ Error: {message}", style=STYLES["error"]))


def print_info(message: str) -> None:
    console.print(Text(f"  {message}", style=STYLES["muted"]))


def print_numbered(labels: Iterable[str], start: int = 1) -> None:
    """Print ``labels`` as an indented, numbered list."""
    for i, label in enumerate(labels, start):
        line = Text("  ")
        line.append(f"{i}.", style=STYLES["number"])
        line.append(f" {label}", style=STYLES["label"])
        console.print(line)


def print_menu(title: str, entries: Sequence[str]) -> None:
    """Print a header followed by its numbered entries."""
    print_header(title)
    print_numbered(entries)


def ask(message: str) -> str:
    """Read one line of input after a blank line and ``message``.

    Raises EOFError when input is exhausted.
    """
    console.print()
    return console.input(Text(message, style=STYLES["info"]))
