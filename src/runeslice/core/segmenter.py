"""Unit segmentation — split text into chars, graphemes, or width cells.

Every function here is a **pure** transformation: the concatenation of
the returned units always reproduces the input exactly, and the
boundary table always starts at ``0`` and never decreases.

Width-cell mode buffers graphemes until the accumulated width turns
positive, so a zero-width grapheme (e.g. a joiner) attaches to the
*next* visible grapheme.  Trailing zero-width graphemes with nothing
after them are flushed as a final unit that repeats the last boundary.
"""

from __future__ import annotations

import logging

import regex

from runeslice.core.models import Segmentation, UnitMode
from runeslice.core.protocols import GlyphWidthFn

logger = logging.getLogger(__name__)

_GRAPHEME_RE = regex.compile(r"\X")


def split_graphemes(text: str) -> list[str]:
    """Split *text* into extended grapheme clusters."""
    if not text:
        return []
    return _GRAPHEME_RE.findall(text)


# ---------------------------------------------------------------------------
# Per-mode segmenters
# ---------------------------------------------------------------------------

def _index_segmentation(mode: UnitMode, units: list[str]) -> Segmentation:
    return Segmentation(
        mode=mode,
        units=tuple(units),
        boundaries=tuple(range(len(units) + 1)),
    )


def _width_cells(text: str, width_of: GlyphWidthFn) -> Segmentation:
    units: list[str] = []
    boundaries: list[int] = [0]

    buffer: list[str] = []
    buffer_width = 0
    total = 0

    for grapheme in split_graphemes(text):
        buffer.append(grapheme)
        buffer_width += width_of(grapheme)

        if buffer_width > 0:
            units.append("".join(buffer))
            total += buffer_width
            boundaries.append(total)
            buffer.clear()
            buffer_width = 0

    if buffer:
        # Zero-width tail: nothing left to attach to.
        units.append("".join(buffer))
        boundaries.append(total)

    return Segmentation(
        mode=UnitMode.WIDTH,
        units=tuple(units),
        boundaries=tuple(boundaries),
    )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def segment(
    text: str,
    mode: UnitMode,
    width_of: GlyphWidthFn | None = None,
) -> Segmentation:
    """Segment *text* into units of *mode* with a boundary table.

    Parameters
    ----------
    text:
        Input text (a single line in normal use, but any string works).
    mode:
        Unit system to use.
    width_of:
        Per-grapheme width oracle.  Required for :attr:`UnitMode.WIDTH`,
        ignored otherwise.

    Raises
    ------
    ValueError
        If *mode* is :attr:`UnitMode.WIDTH` and no *width_of* is given.
    """
    if mode is UnitMode.CHAR:
        result = _index_segmentation(mode, list(text))
    elif mode is UnitMode.GRAPHEME:
        result = _index_segmentation(mode, split_graphemes(text))
    elif mode is UnitMode.WIDTH:
        if width_of is None:
            raise ValueError("width mode requires a width function")
        result = _width_cells(text, width_of)
    else:  # pragma: no cover
        raise ValueError(f"unknown unit mode: {mode!r}")

    logger.debug(
        "Segmented %d chars into %d %s units (total=%d)",
        len(text),
        len(result),
        mode.value,
        result.total,
    )
    return result
