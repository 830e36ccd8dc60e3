"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete
implementations — so a fixed synthetic width function can stand in for
the real oracle in tests.
"""

from __future__ import annotations

from typing import Protocol


class GlyphWidthFn(Protocol):
    """Contract for per-grapheme display width oracles.

    Any callable taking one grapheme cluster and returning its width in
    terminal cells satisfies this protocol structurally.
    """

    def __call__(self, grapheme: str) -> int:
        """Return the non-negative display width of *grapheme*.

        Implementations must be pure: calling them repeatedly or out of
        order must not change the result.
        """
        ...  # pragma: no cover
