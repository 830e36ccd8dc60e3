"""Tests for the slice expression parser (core/range_parser.py).

Every test is a pure function call.  These tests exercise:

* Full, open-start, open-end and shorthand forms
* Optional single/double quote wrapping
* The validation order that decides which error type is raised
"""

from __future__ import annotations

import pytest

from runeslice.core.models import ParsedRange
from runeslice.core.range_parser import parse_range
from runeslice.exceptions import (
    EndIndexFormatError,
    InteriorSpacesError,
    MalformedRangeError,
    MissingBracketsError,
    SingleIndexFormatError,
    SliceExpressionError,
    StartIndexFormatError,
    TrimViolationError,
)


# ---------------------------------------------------------------------------
# Valid expressions
# ---------------------------------------------------------------------------

class TestValidExpressions:
    @pytest.mark.parametrize(
        ("expr", "expected"),
        [
            ("[1:4]", ParsedRange(start=1, end=4)),
            ("[:2]", ParsedRange(start=0, end=2)),
            ("[2:]", ParsedRange(start=2, end=None)),
            ("[:]", ParsedRange(start=0, end=None)),
            ("[0:0]", ParsedRange(start=0, end=0)),
            ("[10:25]", ParsedRange(start=10, end=25)),
        ],
    )
    def test_range_forms(self, expr: str, expected: ParsedRange) -> None:
        assert parse_range(expr) == expected

    def test_shorthand_index(self) -> None:
        assert parse_range("[3]") == ParsedRange(start=3, end=4)

    @pytest.mark.parametrize("index", [0, 1, 7, 42])
    def test_shorthand_equals_explicit_range(self, index: int) -> None:
        assert parse_range(f"[{index}]") == parse_range(f"[{index}:{index + 1}]")

    def test_single_quoted(self) -> None:
        assert parse_range("'[:2]'") == ParsedRange(start=0, end=2)

    def test_double_quoted(self) -> None:
        assert parse_range('"[1]"') == ParsedRange(start=1, end=2)

    def test_reversed_range_is_a_valid_parse(self) -> None:
        assert parse_range("[5:2]") == ParsedRange(start=5, end=2)

    def test_leading_zeros_allowed(self) -> None:
        assert parse_range("[007:010]") == ParsedRange(start=7, end=10)


# ---------------------------------------------------------------------------
# Rule 1 — trimming
# ---------------------------------------------------------------------------

class TestTrimViolation:
    @pytest.mark.parametrize("expr", [" [1:3]", "[1:3] ", "' [1:3]'", '"[1:3] "', "\t[0]"])
    def test_outer_whitespace(self, expr: str) -> None:
        with pytest.raises(TrimViolationError):
            parse_range(expr)


# ---------------------------------------------------------------------------
# Rule 2 — brackets
# ---------------------------------------------------------------------------

class TestMissingBrackets:
    @pytest.mark.parametrize("expr", ["1:3", "[1:3", "1:3]", "(1:3)", "", "[", "'1:3'", "'[1:3]\""])
    def test_missing_or_unbalanced(self, expr: str) -> None:
        with pytest.raises(MissingBracketsError):
            parse_range(expr)

    def test_only_one_quote_layer_is_removed(self) -> None:
        with pytest.raises(MissingBracketsError):
            parse_range("''[1:3]''")


# ---------------------------------------------------------------------------
# Rule 3 — interior whitespace
# ---------------------------------------------------------------------------

class TestInteriorSpaces:
    @pytest.mark.parametrize("expr", ["[ 1:3]", "[1 :3]", "[1: 3]", "[1:3 ]", "[ 1 : 3 ]", "[\t2]"])
    def test_whitespace_inside_brackets(self, expr: str) -> None:
        with pytest.raises(InteriorSpacesError):
            parse_range(expr)


# ---------------------------------------------------------------------------
# Rules 4–5 — index formats
# ---------------------------------------------------------------------------

class TestIndexFormats:
    @pytest.mark.parametrize("expr", ["[]", "[a]", "[-1]", "[+1]", "[1.5]"])
    def test_bad_shorthand(self, expr: str) -> None:
        with pytest.raises(SingleIndexFormatError):
            parse_range(expr)

    @pytest.mark.parametrize("expr", ["[x:3]", "[-1:3]", "[+1:]"])
    def test_bad_start(self, expr: str) -> None:
        with pytest.raises(StartIndexFormatError):
            parse_range(expr)

    @pytest.mark.parametrize("expr", ["[1:y]", "[:-2]", "[0:3.0]"])
    def test_bad_end(self, expr: str) -> None:
        with pytest.raises(EndIndexFormatError):
            parse_range(expr)

    @pytest.mark.parametrize("expr", ["[1:2:3]", "[::]", "[::1]"])
    def test_extra_colons(self, expr: str) -> None:
        with pytest.raises(MalformedRangeError):
            parse_range(expr)

    def test_non_ascii_digits_rejected(self) -> None:
        with pytest.raises(SingleIndexFormatError):
            parse_range("[\N{ARABIC-INDIC DIGIT THREE}]")

    def test_start_checked_before_end(self) -> None:
        with pytest.raises(StartIndexFormatError):
            parse_range("[a:b]")


# ---------------------------------------------------------------------------
# Error metadata
# ---------------------------------------------------------------------------

class TestErrorMetadata:
    def test_all_errors_share_base(self) -> None:
        with pytest.raises(SliceExpressionError) as exc_info:
            parse_range("nope")
        assert "brackets" in str(exc_info.value)
        assert exc_info.value.hint is not None
