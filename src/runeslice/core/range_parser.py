"""Parser for bracketed slice expressions.

Grammar
-------
::

    slice_expr := quoted | bare
    quoted     := "'" bare "'" | '"' bare '"'
    bare       := "[" body "]"
    body       := index | index ":" | ":" index | index ":" index | ":"
    index      := digit+

Validation runs in a fixed order and the first failing rule decides the
error type:

1. Whitespace around the (unquoted) expression  → :class:`TrimViolationError`
2. Missing ``[`` / ``]``                         → :class:`MissingBracketsError`
3. Whitespace between the brackets               → :class:`InteriorSpacesError`
4. Bad shorthand index ``[N]``                   → :class:`SingleIndexFormatError`
5. More than one ``:``                           → :class:`MalformedRangeError`
6. Bad start / end index                         → :class:`StartIndexFormatError`
   / :class:`EndIndexFormatError`

The parser knows nothing about the text being sliced: an omitted end is
kept as ``None`` and ``start > end`` is a valid parse.
"""

from __future__ import annotations

import logging

from runeslice.core.models import ParsedRange
from runeslice.exceptions import (
    EndIndexFormatError,
    InteriorSpacesError,
    MalformedRangeError,
    MissingBracketsError,
    SingleIndexFormatError,
    StartIndexFormatError,
    TrimViolationError,
)

logger = logging.getLogger(__name__)

_QUOTES: tuple[str, ...] = ("'", '"')


def _strip_quotes(expr: str) -> str:
    """Remove exactly one layer of matching single or double quotes."""
    for quote in _QUOTES:
        if len(expr) >= 2 and expr.startswith(quote) and expr.endswith(quote):
            return expr[1:-1]
    return expr


def _parse_index(token: str) -> int | None:
    """Parse a base-10 run of ASCII digits, or return ``None``."""
    if token.isascii() and token.isdigit():
        return int(token)
    return None


def parse_range(expr: str) -> ParsedRange:
    """Parse *expr* (e.g. ``"[1:4]"``, ``"[3]"``, ``"'[:2]'"``).

    ``[N]`` is shorthand for ``[N:N+1]``.  An empty start means ``0``;
    an empty end means "to the end".

    Raises
    ------
    SliceExpressionError
        One of its subclasses, according to the first rule violated.
    """
    body = _strip_quotes(expr)

    if body != body.strip():
        raise TrimViolationError()

    if not (len(body) >= 2 and body.startswith("[") and body.endswith("]")):
        raise MissingBracketsError()

    content = body[1:-1]

    if any(ch.isspace() for ch in content):
        raise InteriorSpacesError()

    if ":" not in content:
        index = _parse_index(content)
        if index is None:
            raise SingleIndexFormatError()
        parsed = ParsedRange(start=index, end=index + 1)
        logger.debug("Parsed %r as shorthand %s", expr, parsed)
        return parsed

    parts = content.split(":")
    if len(parts) != 2:
        raise MalformedRangeError()
    raw_start, raw_end = parts

    start = 0
    if raw_start:
        parsed_start = _parse_index(raw_start)
        if parsed_start is None:
            raise StartIndexFormatError()
        start = parsed_start

    end: int | None = None
    if raw_end:
        end = _parse_index(raw_end)
        if end is None:
            raise EndIndexFormatError()

    parsed = ParsedRange(start=start, end=end)
    logger.debug("Parsed %r as %s", expr, parsed)
    return parsed
