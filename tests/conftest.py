"""Shared pytest fixtures and configuration for the runeslice test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Width-mode tests use the synthetic width function below so results do
  not depend on the installed ``wcwidth`` tables.
* Tests must not depend on terminal state.
"""

from __future__ import annotations

import logging

import pytest

WIDE = "\N{CJK UNIFIED IDEOGRAPH-4E2D}\N{CJK UNIFIED IDEOGRAPH-754C}"
"""CJK ideographs treated as two cells wide."""

ZERO = "\N{ZERO WIDTH SPACE}\N{ZERO WIDTH JOINER}\N{COMBINING ACUTE ACCENT}"
"""Zero-width space, zero-width joiner, combining acute accent."""


def synthetic_width(grapheme: str) -> int:
    """Deterministic width oracle: wide = 2, zero-width = 0, else 1."""
    return sum(0 if ch in ZERO else 2 if ch in WIDE else 1 for ch in grapheme)


@pytest.fixture()
def width_of():
    return synthetic_width


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by ``main()`` so they never outlive a test."""
    yield
    logger = logging.getLogger("runeslice")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
