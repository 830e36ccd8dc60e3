"""Core slice service — orchestrates parse → segment → resolve per line.

The width oracle is injected at construction time (dependency
inversion), keeping the core free of any width-table imports.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``.
* Lines are processed independently and in input order.
* A single non-blank line propagates its error; multi-line input
  isolates failures per line.
"""

from __future__ import annotations

import logging

from runeslice.core.models import LineOutcome, ResolvedSlice, SliceOptions
from runeslice.core.protocols import GlyphWidthFn
from runeslice.core.range_parser import parse_range
from runeslice.core.resolver import resolve
from runeslice.core.segmenter import segment
from runeslice.exceptions import RuneSliceError

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n``, dropping a trailing ``\\r`` per line.

    A final newline does not start an extra empty line, and empty text
    has no lines at all.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class SliceService:
    """Stateless service that slices text by a range expression.

    Parameters
    ----------
    width_of:
        Per-grapheme width oracle used in width mode.
    """

    def __init__(self, width_of: GlyphWidthFn) -> None:
        self._width_of: GlyphWidthFn = width_of

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def slice_line(self, line: str, expr: str, options: SliceOptions) -> ResolvedSlice:
        """Slice a single line.

        Raises
        ------
        SliceExpressionError
            If *expr* is malformed.
        SliceResolutionError
            If the range is rejected under strict policy.
        """
        parsed = parse_range(expr)
        segmentation = segment(line, options.mode, self._width_of)
        return resolve(segmentation, parsed, options.policy)

    def slice_text(self, text: str, expr: str, options: SliceOptions) -> list[LineOutcome]:
        """Slice every line of *text* independently.

        Blank lines pass through untouched.  When the input is exactly
        one line, its error propagates; otherwise each failure is
        captured in the corresponding :class:`LineOutcome`.
        """
        lines = split_lines(text)
        single_line = len(lines) == 1
        outcomes: list[LineOutcome] = []

        for number, line in enumerate(lines, start=1):
            if not line.strip():
                outcomes.append(LineOutcome(line_number=number, text=line))
                continue

            try:
                result = self.slice_line(line, expr, options)
            except RuneSliceError as exc:
                if single_line:
                    raise
                logger.debug("Line %d failed: %s", number, exc)
                outcomes.append(LineOutcome(line_number=number, text=None, error=exc))
                continue

            outcomes.append(LineOutcome(line_number=number, text=result.text, result=result))

        return outcomes
