"""Regression tests for the optional Rich dependency.

These tests verify every command keeps working when Rich is missing,
falling back to plain stderr output.
"""

from __future__ import annotations

import sys

import pytest

from runeslice.cli import exit_codes
from runeslice.cli.app import main
from runeslice.cli.console import escape, get_rich_console
from runeslice.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_verbose_slice_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["slice", "-v", "[0:2]", "hello"])
    captured = capsys.readouterr()
    assert code == exit_codes.SUCCESS
    assert captured.out.startswith("he\n")
    assert "Slice Preview" in captured.err


def test_debug_logging_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    main(["--debug", "slice", "[0:2]", "hello"])
    assert "DEBUG" in capsys.readouterr().err


def test_rich_console_raises_typed_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_escape_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape("[bold]x[/bold]") == "[bold]x[/bold]"


def test_atoms_and_version_work_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["atoms", "ab"]) == exit_codes.SUCCESS
    assert main(["version"]) == exit_codes.SUCCESS
    captured = capsys.readouterr()
    assert "Unicode Atoms" in captured.err
    assert "runeslice Version" in captured.err
