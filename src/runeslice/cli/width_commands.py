"""Width inspection commands: ``graphemes``, ``atoms``, ``width``,
``widths``, ``truncate`` and ``split``.

Results go to stdout as plain text; optional titles go to stderr.
"""

from __future__ import annotations

from runeslice.cli import exit_codes
from runeslice.cli.console import console, emit
from runeslice.core.protocols import GlyphWidthFn
from runeslice.core.width_tools import (
    atoms,
    display_width,
    grapheme_widths,
    split_by_width,
    truncate_by_width,
)
from runeslice.infra.width_policy import WidthPolicy

_RULE_WIDTH = 32


def _title(text: str) -> None:
    console.print(f"[bold cyan]{text}[/bold cyan]")


def _pad(text: str, text_width: int, target: int) -> str:
    return text + " " * max(target - text_width, 0)


def run_graphemes(text: str, width_of: GlyphWidthFn) -> int:
    """Print a table of grapheme clusters with their index and width."""
    _title("Grapheme Clusters")
    rows = grapheme_widths(text, width_of)
    column = max((width for _, width in rows), default=1)

    emit(f" {'No.':<4}   {'Grapheme':<{column}}    Width")
    emit("─" * _RULE_WIDTH)
    for index, (grapheme, width) in enumerate(rows):
        emit(f" {index:02}     {_pad(grapheme, width, column)}          {width}")
    if len(rows) >= 5:
        emit("─" * _RULE_WIDTH)
    return exit_codes.SUCCESS


_ATOM_LEGEND = (
    "ZWJ = Zero Width Joiner (U+200D)",
    "Emoji Variant = U+FE0F (Forces Emoji Presentation)",
    "Combining Mark = U+20E3 (Combining Enclosing Keycap)",
    "Skin Tone = U+1F3FB-U+1F3FF (Fitzpatrick Modifiers)",
    "Hair Colors = U+1F9B0-U+1F9B3 (Hair/Beard modifiers)",
)


def run_atoms(text: str, width_of: GlyphWidthFn) -> int:
    """Print every atom of *text* with its codepoints and width.

    Zero-width components are shown as ``''`` in the rune column so the
    table stays aligned; the legend explains each component label.
    """
    _title("Unicode Atoms")
    pieces = atoms(text, width_of)

    emit(f" {'No.':<4}   {'Rune':<4}    {'Unicode / Hint':<26}      {'Width':>5}")
    emit("─" * _RULE_WIDTH)
    for index, atom in enumerate(pieces):
        rune = "''" if atom.width == 0 and atom.label else atom.text
        hint = atom.codepoints
        if atom.label:
            hint = f"{hint:<7} ({atom.label})"
        spacing = "   " if atom.width == 2 else "    "
        emit(f" {index:02}     {rune:<4}{spacing}{hint:<26}      {atom.width:>5}")
    emit("─" * _RULE_WIDTH)

    total = sum(atom.width for atom in pieces)
    emit(f"{'':<26}Total width: {total:2}")
    emit()
    emit("Legend:")
    for line in _ATOM_LEGEND:
        emit(line)
    return exit_codes.SUCCESS


def run_width(
    text: str,
    width_of: GlyphWidthFn,
    policy: WidthPolicy,
    *,
    verbose: bool = False,
) -> int:
    """Print the total display width of *text*."""
    if verbose:
        _title("Display Width")
    emit(f'Text: "{text}"')
    emit(f"Policy: {policy.value.capitalize()}")
    emit()
    emit(f"Display width: {display_width(text, width_of)}")
    return exit_codes.SUCCESS


def run_widths(text: str, width_of: GlyphWidthFn, *, verbose: bool = False) -> int:
    """Print ``[grapheme] = width`` for every grapheme cluster."""
    if verbose:
        _title("Width per Grapheme")
    for grapheme, width in grapheme_widths(text, width_of):
        emit(f"[{grapheme}] = {width}")
    return exit_codes.SUCCESS


def run_truncate(
    text: str,
    max_width: int,
    width_of: GlyphWidthFn,
    *,
    verbose: bool = False,
) -> int:
    """Print the longest prefix of *text* fitting in *max_width* cells."""
    if verbose:
        _title("Truncated Output")
    emit(truncate_by_width(text, max_width, width_of))
    return exit_codes.SUCCESS


def run_split(
    text: str,
    max_width: int,
    width_of: GlyphWidthFn,
    *,
    verbose: bool = False,
) -> int:
    """Print *text* split into segments of at most *max_width* cells."""
    if verbose:
        _title("Split Lines")
    segments = split_by_width(text, max_width, width_of)
    widths = [display_width(segment, width_of) for segment in segments]
    widest = max(widths, default=0)
    for number, (segment, width) in enumerate(zip(segments, widths), start=1):
        emit(f"Line {number:>2}:    [{_pad(segment, width, widest)}] (width = {width})")
    return exit_codes.SUCCESS
