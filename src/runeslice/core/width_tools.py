"""Display-width helpers built on width-cell segmentation.

Every function in this module is a **pure** transformation.  Units come
from :func:`~runeslice.core.segmenter.segment` in width mode, so a
zero-width grapheme is never separated from the visible grapheme that
follows it.
"""

from __future__ import annotations

from runeslice.core.models import Atom, Segmentation, UnitMode
from runeslice.core.protocols import GlyphWidthFn
from runeslice.core.segmenter import segment, split_graphemes
from runeslice.exceptions import InvalidWidthError


def _width_units(text: str, width_of: GlyphWidthFn) -> list[tuple[str, int]]:
    """Return ``(unit, width)`` pairs for the width cells of *text*."""
    cells: Segmentation = segment(text, UnitMode.WIDTH, width_of)
    widths = [
        after - before
        for before, after in zip(cells.boundaries, cells.boundaries[1:])
    ]
    return list(zip(cells.units, widths))


def _check_max_width(max_width: int) -> None:
    if max_width < 0:
        raise InvalidWidthError(
            f"width must be a non-negative integer, got {max_width}",
        )


def display_width(text: str, width_of: GlyphWidthFn) -> int:
    """Total display width of *text*."""
    return sum(width_of(grapheme) for grapheme in split_graphemes(text))


def grapheme_widths(text: str, width_of: GlyphWidthFn) -> list[tuple[str, int]]:
    """Each grapheme cluster of *text* paired with its width."""
    return [(grapheme, width_of(grapheme)) for grapheme in split_graphemes(text)]


def truncate_by_width(text: str, max_width: int, width_of: GlyphWidthFn) -> str:
    """Return the longest prefix of *text* at most *max_width* cells wide.

    Raises
    ------
    InvalidWidthError
        If *max_width* is negative.
    """
    _check_max_width(max_width)
    kept: list[str] = []
    used = 0
    for unit, width in _width_units(text, width_of):
        if used + width > max_width:
            break
        kept.append(unit)
        used += width
    return "".join(kept)


def split_by_width(text: str, max_width: int, width_of: GlyphWidthFn) -> list[str]:
    """Greedily split *text* into segments at most *max_width* cells wide.

    A single unit wider than *max_width* is emitted as its own segment
    rather than being broken apart.

    Raises
    ------
    InvalidWidthError
        If *max_width* is negative.
    """
    _check_max_width(max_width)
    segments: list[str] = []
    current: list[str] = []
    current_width = 0

    for unit, width in _width_units(text, width_of):
        if current and current_width + width > max_width:
            segments.append("".join(current))
            current = []
            current_width = 0
        current.append(unit)
        current_width += width

    if current:
        segments.append("".join(current))
    return segments


# ---------------------------------------------------------------------------
# Atoms
# ---------------------------------------------------------------------------

_ZERO_WIDTH_LABELS: dict[str, str] = {
    "\N{ZERO WIDTH JOINER}": "ZWJ",
    "\N{VARIATION SELECTOR-16}": "Emoji Variant",
    "\N{COMBINING ENCLOSING KEYCAP}": "Combining Mark",
}

_MODIFIER_LABELS: dict[str, str] = {
    **{chr(cp): "Skin Tone" for cp in range(0x1F3FB, 0x1F400)},
    **{chr(cp): "Hair Colors" for cp in range(0x1F9B0, 0x1F9B4)},
}


def split_atoms(text: str) -> list[str]:
    """Split *text* into atoms.

    Each grapheme cluster is cut around its joiners, emoji variation
    selectors, keycap marks, skin tone and hair modifiers, which become
    atoms of their own.  Other codepoints stay with the atom they follow
    within the cluster, so a base letter keeps its combining accents.
    """
    pieces: list[str] = []
    for grapheme in split_graphemes(text):
        current = ""
        for ch in grapheme:
            if ch in _ZERO_WIDTH_LABELS or ch in _MODIFIER_LABELS:
                if current:
                    pieces.append(current)
                    current = ""
                pieces.append(ch)
            else:
                current += ch
        if current:
            pieces.append(current)
    return pieces


def atoms(text: str, width_of: GlyphWidthFn) -> list[Atom]:
    """Return the atoms of *text* with their widths and component labels.

    Joiners, variation selectors and keycap marks measure 0; skin tone
    and hair modifiers measure 2 even when the width table disagrees.
    """
    result: list[Atom] = []
    for piece in split_atoms(text):
        if piece in _ZERO_WIDTH_LABELS:
            result.append(Atom(piece, 0, _ZERO_WIDTH_LABELS[piece]))
        elif piece in _MODIFIER_LABELS:
            result.append(Atom(piece, 2, _MODIFIER_LABELS[piece]))
        else:
            result.append(Atom(piece, width_of(piece)))
    return result
