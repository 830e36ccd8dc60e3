"""``runeslice version`` — report package and Unicode table versions.

This module lives in the CLI layer.  It collects version strings from
the package, the grapheme engine and the width tables, then prints them
either as an aligned listing or as JSON.
"""

from __future__ import annotations

import json

from runeslice.cli import exit_codes
from runeslice.cli.console import console, emit
from runeslice.infra.width_policy import unicode_version, wcwidth_version
from runeslice.version import __version__


# ---------------------------------------------------------------------------
# Collectors
# ---------------------------------------------------------------------------

def _regex_version() -> str:
    """Return the installed ``regex`` release."""
    import regex

    return getattr(regex, "__version__", "unknown")


def collect_versions() -> list[tuple[str, str, str]]:
    """Return ``(label, json key, value)`` rows in display order."""
    return [
        ("runeslice", "runeslice-version", __version__),
        ("regex", "regex-version", _regex_version()),
        ("wcwidth", "wcwidth-version", wcwidth_version()),
        ("Unicode Data", "unicode-version", unicode_version()),
    ]


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_version(*, as_json: bool = False) -> int:
    """Print the version report.

    With *as_json* the report is a single JSON object on stdout and no
    title is printed.
    """
    rows = collect_versions()
    if as_json:
        emit(json.dumps({key: value for _, key, value in rows}, indent=2))
        return exit_codes.SUCCESS

    console.print("[bold cyan]runeslice Version[/bold cyan]")
    for label, _, value in rows:
        emit(f"{label:<16}{value}")
    return exit_codes.SUCCESS
