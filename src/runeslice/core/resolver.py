"""Range resolution — apply a parsed range to a segmentation.

Index modes (char / grapheme)
    Positions are unit indices.  Strict policy rejects anything outside
    ``0..len`` and reversed ranges; lenient policy clamps start and end
    independently, so a reversed range collapses to an empty slice.

Width mode
    Positions are display columns.  Strict policy requires both ends to
    appear in the boundary table; lenient policy snaps each end forward
    to the first boundary ``>=`` the position, saturating at the end of
    the text.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from runeslice.core.models import (
    ParsedRange,
    ResolvedSlice,
    Segmentation,
    SlicePolicy,
    UnitMode,
)
from runeslice.exceptions import OutOfBoundsError, UnalignedBoundaryError

logger = logging.getLogger(__name__)


def _snap_forward(boundaries: Sequence[int], position: int) -> int | None:
    """Return the index of the first boundary ``>= position``."""
    return next(
        (index for index, value in enumerate(boundaries) if value >= position),
        None,
    )


# ---------------------------------------------------------------------------
# Per-mode resolution
# ---------------------------------------------------------------------------

def _resolve_index(
    segmentation: Segmentation,
    start: int,
    end: int,
    policy: SlicePolicy,
) -> ResolvedSlice:
    count = len(segmentation)

    if policy is SlicePolicy.STRICT and (start > count or end > count or start > end):
        raise OutOfBoundsError(count)

    safe_start = min(start, count)
    safe_end = min(end, count)

    return ResolvedSlice(
        text="".join(segmentation.units[safe_start:safe_end]),
        unit_total=count,
        resolved_start=safe_start,
        resolved_end=safe_end,
    )


def _resolve_width(
    segmentation: Segmentation,
    start: int,
    end: int | None,
    policy: SlicePolicy,
) -> ResolvedSlice:
    boundaries = segmentation.boundaries
    count = len(segmentation)
    # Positions here are display columns, so an open end is the total
    # width; the unit count would cut wide text short.
    effective_end = end if end is not None else segmentation.total

    if policy is SlicePolicy.STRICT:
        if start not in boundaries or effective_end not in boundaries:
            raise UnalignedBoundaryError(boundaries)
        if start > effective_end:
            raise OutOfBoundsError(segmentation.total)

    start_index = _snap_forward(boundaries, start)
    if start_index is None:
        start_index = len(boundaries) - 1

    # An open end keeps every remaining unit, zero-width tail included.
    end_index = None if end is None else _snap_forward(boundaries, end)
    if end_index is None:
        end_index = count

    if (boundaries[start_index], boundaries[end_index]) != (start, effective_end):
        logger.debug(
            "Snapped width range %d..%d to boundaries %d..%d",
            start,
            effective_end,
            boundaries[start_index],
            boundaries[end_index],
        )

    return ResolvedSlice(
        text="".join(segmentation.units[start_index:end_index]),
        unit_total=segmentation.total,
        resolved_start=boundaries[start_index],
        resolved_end=boundaries[end_index],
    )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def resolve(
    segmentation: Segmentation,
    parsed: ParsedRange,
    policy: SlicePolicy = SlicePolicy.LENIENT,
) -> ResolvedSlice:
    """Select the units covered by *parsed* and join them.

    An open end (``parsed.end is None``) runs to the last unit: the unit
    count in index modes, the total width in width mode.

    Raises
    ------
    OutOfBoundsError
        Strict index mode with an out-of-range or reversed range, or
        strict width mode with a reversed range.
    UnalignedBoundaryError
        Strict width mode with a position that is not a cell boundary.
    """
    if segmentation.mode is UnitMode.WIDTH:
        return _resolve_width(segmentation, parsed.start, parsed.end, policy)

    end = parsed.end if parsed.end is not None else len(segmentation)
    return _resolve_index(segmentation, parsed.start, end, policy)
