"""Tests for display-width helpers (core/width_tools.py)."""

from __future__ import annotations

import pytest

from runeslice.core.width_tools import (
    atoms,
    display_width,
    grapheme_widths,
    split_atoms,
    split_by_width,
    truncate_by_width,
)
from runeslice.exceptions import InvalidWidthError

ZH = "\N{CJK UNIFIED IDEOGRAPH-4E2D}"
JIE = "\N{CJK UNIFIED IDEOGRAPH-754C}"
ZWSP = "\N{ZERO WIDTH SPACE}"
E_ACUTE = "e\N{COMBINING ACUTE ACCENT}"
ZWJ = "\N{ZERO WIDTH JOINER}"
VS16 = "\N{VARIATION SELECTOR-16}"
KEYCAP = "\N{COMBINING ENCLOSING KEYCAP}"
MEDIUM_SKIN = "\N{EMOJI MODIFIER FITZPATRICK TYPE-4}"
RED_HAIR = chr(0x1F9B0)
MAN = "\N{MAN}"
WOMAN = "\N{WOMAN}"
THUMBS_UP = "\N{THUMBS UP SIGN}"


class TestDisplayWidth:
    def test_mixed(self, width_of) -> None:
        assert display_width(f"a{ZH}{E_ACUTE}{ZWSP}", width_of) == 4

    def test_empty(self, width_of) -> None:
        assert display_width("", width_of) == 0


class TestGraphemeWidths:
    def test_pairs(self, width_of) -> None:
        assert grapheme_widths(f"a{ZH}{E_ACUTE}", width_of) == [
            ("a", 1),
            (ZH, 2),
            (E_ACUTE, 1),
        ]


class TestTruncateByWidth:
    def test_fits_exactly(self, width_of) -> None:
        assert truncate_by_width(f"a{ZH}b", 3, width_of) == f"a{ZH}"

    def test_never_splits_wide_glyph(self, width_of) -> None:
        assert truncate_by_width(f"a{ZH}b", 2, width_of) == "a"

    def test_zero_width_prefix_dropped_with_its_glyph(self, width_of) -> None:
        assert truncate_by_width(f"a{ZWSP}b", 1, width_of) == "a"

    def test_wide_enough_returns_all(self, width_of) -> None:
        assert truncate_by_width(f"{ZH}{JIE}", 10, width_of) == f"{ZH}{JIE}"

    def test_zero(self, width_of) -> None:
        assert truncate_by_width("abc", 0, width_of) == ""

    def test_negative_rejected(self, width_of) -> None:
        with pytest.raises(InvalidWidthError):
            truncate_by_width("abc", -1, width_of)


class TestSplitByWidth:
    def test_even_split(self, width_of) -> None:
        assert split_by_width("abcdef", 2, width_of) == ["ab", "cd", "ef"]

    def test_wide_glyph_moves_to_next_segment(self, width_of) -> None:
        assert split_by_width(f"ab{ZH}c", 3, width_of) == ["ab", f"{ZH}c"]

    def test_oversized_unit_gets_own_segment(self, width_of) -> None:
        assert split_by_width(f"{ZH}a", 1, width_of) == [ZH, "a"]

    def test_lossless(self, width_of) -> None:
        text = f"{E_ACUTE}{ZWSP}x{ZH}yz{JIE}"
        assert "".join(split_by_width(text, 3, width_of)) == text

    def test_empty(self, width_of) -> None:
        assert split_by_width("", 4, width_of) == []

    def test_negative_rejected(self, width_of) -> None:
        with pytest.raises(InvalidWidthError):
            split_by_width("abc", -2, width_of)


class TestSplitAtoms:
    def test_plain_text_is_one_atom_per_grapheme(self) -> None:
        assert split_atoms(f"a{E_ACUTE}b") == ["a", E_ACUTE, "b"]

    def test_zwj_sequence_is_cut_at_joiner(self) -> None:
        assert split_atoms(f"{MAN}{ZWJ}{WOMAN}") == [MAN, ZWJ, WOMAN]

    def test_keycap_sequence(self) -> None:
        assert split_atoms(f"1{VS16}{KEYCAP}") == ["1", VS16, KEYCAP]

    def test_skin_tone_is_separate(self) -> None:
        assert split_atoms(f"{THUMBS_UP}{MEDIUM_SKIN}") == [THUMBS_UP, MEDIUM_SKIN]

    def test_lossless(self) -> None:
        text = f"x{MAN}{ZWJ}{RED_HAIR}{E_ACUTE}1{VS16}{KEYCAP}"
        assert "".join(split_atoms(text)) == text

    def test_empty(self) -> None:
        assert split_atoms("") == []


class TestAtoms:
    def test_components_have_fixed_widths(self, width_of) -> None:
        result = atoms(f"{MAN}{ZWJ}{RED_HAIR}", width_of)
        assert [(atom.width, atom.label) for atom in result] == [
            (1, None),
            (0, "ZWJ"),
            (2, "Hair Colors"),
        ]

    def test_keycap_labels(self, width_of) -> None:
        result = atoms(f"1{VS16}{KEYCAP}", width_of)
        assert [atom.label for atom in result] == [None, "Emoji Variant", "Combining Mark"]
        assert sum(atom.width for atom in result) == 1

    def test_skin_tone_is_double(self, width_of) -> None:
        result = atoms(f"{THUMBS_UP}{MEDIUM_SKIN}", width_of)
        assert result[1].label == "Skin Tone"
        assert result[1].width == 2

    def test_plain_atoms_use_width_oracle(self, width_of) -> None:
        result = atoms(f"a{ZH}{E_ACUTE}", width_of)
        assert [atom.width for atom in result] == [1, 2, 1]
        assert all(atom.label is None for atom in result)
