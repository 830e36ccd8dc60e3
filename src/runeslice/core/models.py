"""Domain models for runeslice.

All models are **frozen** dataclasses or enums — immutable value objects
with no behaviour beyond data access.  They carry zero I/O and zero
dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from runeslice.exceptions import RuneSliceError


# ---------------------------------------------------------------------------
# Configuration enums
# ---------------------------------------------------------------------------

class UnitMode(str, Enum):
    """Unit system used to segment text before slicing."""

    CHAR = "char"
    """One unit per Unicode scalar value."""

    GRAPHEME = "grapheme"
    """One unit per extended grapheme cluster."""

    WIDTH = "width"
    """Display-width cells; positions are cumulative column counts."""


class SlicePolicy(str, Enum):
    """How out-of-range or misaligned requests are handled."""

    STRICT = "strict"
    LENIENT = "lenient"


# ---------------------------------------------------------------------------
# Parsed slice expression
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedRange:
    """Half-open interval parsed from a ``[start:end]`` expression."""

    start: int
    """Inclusive start position (unit index, or width column in width mode)."""

    end: int | None
    """Exclusive end position, or ``None`` for "to the end of the text"."""


# ---------------------------------------------------------------------------
# Segmentation result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Segmentation:
    """Ordered units plus a parallel boundary table.

    ``boundaries`` always holds one more entry than ``units``;
    ``boundaries[i]`` is the position immediately before unit ``i``.
    """

    mode: UnitMode
    units: tuple[str, ...]
    boundaries: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.units)

    @property
    def total(self) -> int:
        """Position after the last unit (unit count, or total width)."""
        return self.boundaries[-1]

    @property
    def text(self) -> str:
        """The original text, rebuilt from its units."""
        return "".join(self.units)


# ---------------------------------------------------------------------------
# Resolution output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResolvedSlice:
    """Complete output of one range resolution."""

    text: str
    """Selected units concatenated in order."""

    unit_total: int
    """Unit count, or total display width in width mode."""

    resolved_start: int
    resolved_end: int


@dataclass(frozen=True, slots=True)
class LineOutcome:
    """Result of slicing one line of a multi-line input.

    Exactly one of ``text`` and ``error`` is set.  Blank lines carry
    their original content in ``text`` and no ``result``.
    """

    line_number: int
    """1-based position of the line in the input."""

    text: str | None
    result: ResolvedSlice | None = None
    error: RuneSliceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Caller-supplied options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SliceOptions:
    """Options chosen by the caller for one slice invocation."""

    mode: UnitMode = UnitMode.GRAPHEME
    policy: SlicePolicy = SlicePolicy.LENIENT
    verbose: bool = False


# ---------------------------------------------------------------------------
# Width inspection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Atom:
    """One layout-affecting piece of a grapheme cluster."""

    text: str
    width: int

    label: str | None = None
    """Name of the emoji component kind, or ``None`` for plain text."""

    @property
    def codepoints(self) -> str:
        """Space-separated ``U+XXXX`` notation of every codepoint."""
        return " ".join(f"U+{ord(ch):04X}" for ch in self.text)
