"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so every command keeps working when Rich is not installed.

Two streams are used:

* stdout carries command *results* (sliced text, widths) as plain text
  with no markup, so output can be piped safely.
* stderr carries titles, errors, and hints via :data:`console`.
"""

from __future__ import annotations

import sys
from typing import Any

from runeslice.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def escape(text: str) -> str:
    """Escape user text so Rich does not read ``[...]`` as markup."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def emit(text: str = "") -> None:
    """Write one line of command output to stdout, verbatim."""
    print(text, file=sys.stdout)
