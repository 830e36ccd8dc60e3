"""Core / service layer — pure segmentation and slicing logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or terminal I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from runeslice.core.models import (
    Atom,
    LineOutcome,
    ParsedRange,
    ResolvedSlice,
    Segmentation,
    SliceOptions,
    SlicePolicy,
    UnitMode,
)
from runeslice.core.protocols import GlyphWidthFn
from runeslice.core.range_parser import parse_range
from runeslice.core.resolver import resolve
from runeslice.core.segmenter import segment, split_graphemes
from runeslice.core.slice_service import SliceService

__all__: list[str] = [
    "Atom",
    "GlyphWidthFn",
    "LineOutcome",
    "ParsedRange",
    "ResolvedSlice",
    "Segmentation",
    "SliceOptions",
    "SlicePolicy",
    "SliceService",
    "UnitMode",
    "parse_range",
    "resolve",
    "segment",
    "split_graphemes",
]
