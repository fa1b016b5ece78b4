"""Colored log helpers for the ad command system.

Errors go to stderr, everything else to stdout. Messages are rendered as
plain text, so brackets in paths or git output are never read as markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from ad_cli.paths import verbose

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def _line(tag: str, style: str, message: str) -> Text:
    return Text.assemble((tag, style), " ", message)


def info(message: str) -> None:
    console.print(_line("[INFO]", "blue", message))


def success(message: str) -> None:
    console.print(_line("[SUCCESS]", "green", message))


def warning(message: str) -> None:
    console.print(_line("[WARNING]", "bold yellow", message))


def error(message: str) -> None:
    err_console.print(_line("[ERROR]", "red", message))


def debug(message: str) -> None:
    if verbose():
        console.print(Text(message, style="dim"))


def plain(message: str = "", style: str | None = None) -> None:
    """Print an untagged line, optionally styled."""
    console.print(Text(message, style=style or ""))
