"""wcwidth backed per-grapheme width oracles.

This module is the **only** place in the codebase that imports
``wcwidth``.  Each :class:`WidthPolicy` maps to a pure function
satisfying :class:`~runeslice.core.protocols.GlyphWidthFn`, which the
CLI injects into the core services.

Policies
--------
* ``terminal`` — column width as reported by ``wcwidth``.
* ``markdown`` — terminal width, but emoji sequences (variation
  selector 16 or zero-width joiner) always take two cells.
* ``compact``  — every visible grapheme takes at most one cell.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

import wcwidth

from runeslice.core.protocols import GlyphWidthFn

_EMOJI_PRESENTATION = "\ufe0f"
_ZERO_WIDTH_JOINER = "\u200d"


class WidthPolicy(str, Enum):
    """Named width tables selectable from the command line."""

    TERMINAL = "terminal"
    MARKDOWN = "markdown"
    COMPACT = "compact"


# ---------------------------------------------------------------------------
# Width functions
# ---------------------------------------------------------------------------

def terminal_width(grapheme: str) -> int:
    """Return the terminal column width of *grapheme*.

    ``wcswidth`` reports ``-1`` for strings holding non-printable
    characters; those fall back to a per-codepoint sum where
    non-printables count as zero.
    """
    width = wcwidth.wcswidth(grapheme)
    if width >= 0:
        return width
    return sum(max(wcwidth.wcwidth(ch), 0) for ch in grapheme)


def markdown_width(grapheme: str) -> int:
    """Return the width of *grapheme* as rendered in Markdown previews."""
    width = terminal_width(grapheme)
    if width > 0 and (_EMOJI_PRESENTATION in grapheme or _ZERO_WIDTH_JOINER in grapheme):
        return 2
    return width


def compact_width(grapheme: str) -> int:
    """Return the width of *grapheme* with wide glyphs folded to one cell."""
    return min(terminal_width(grapheme), 1)


_POLICY_FUNCTIONS: dict[WidthPolicy, Callable[[str], int]] = {
    WidthPolicy.TERMINAL: terminal_width,
    WidthPolicy.MARKDOWN: markdown_width,
    WidthPolicy.COMPACT: compact_width,
}


def width_function(policy: WidthPolicy | str = WidthPolicy.TERMINAL) -> GlyphWidthFn:
    """Return the width oracle for *policy*.

    Raises
    ------
    ValueError
        If *policy* is not a known policy name.
    """
    return _POLICY_FUNCTIONS[WidthPolicy(policy)]


# ---------------------------------------------------------------------------
# Table versions
# ---------------------------------------------------------------------------

def wcwidth_version() -> str:
    """Return the installed ``wcwidth`` release."""
    return wcwidth.__version__


def unicode_version() -> str:
    """Return the newest Unicode version covered by the width tables."""
    return wcwidth.list_versions()[-1]
