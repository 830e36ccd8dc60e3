"""``runeslice slice`` — render the result of slicing each input line.

This module lives in the CLI layer.  All slicing work happens in
:class:`~runeslice.core.slice_service.SliceService`; this module only
turns :class:`~runeslice.core.models.LineOutcome` values into output.
"""

from __future__ import annotations

from runeslice.cli import exit_codes
from runeslice.cli.console import console, emit, escape
from runeslice.core.models import ResolvedSlice, SliceOptions
from runeslice.core.protocols import GlyphWidthFn
from runeslice.core.slice_service import SliceService

TITLE = "Slice Preview"


def format_summary(result: ResolvedSlice) -> str:
    """Return the verbose footer line for one resolved slice."""
    return (
        f"Total units: {result.unit_total}, "
        f"Range: [{result.resolved_start}..{result.resolved_end}]"
    )


def run_slice(
    text: str,
    expr: str,
    options: SliceOptions,
    width_of: GlyphWidthFn,
) -> int:
    """Slice *text* line by line and print the results.

    With *options.verbose* every sliced line gets its own title on
    stderr; blank lines pass through without one.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`.  A failing line in multi-line input is
        reported on stderr as ``line N: <message>`` and does not change
        the exit code; a single-line failure propagates as an exception.
    """
    service = SliceService(width_of)
    for outcome in service.slice_text(text, expr, options):
        sliced = outcome.result is not None or outcome.error is not None
        if options.verbose and sliced:
            console.print(f"[bold cyan]{TITLE}[/bold cyan]")

        if outcome.error is not None:
            console.print(f"line {outcome.line_number}: {escape(str(outcome.error))}")
            continue

        emit(outcome.text or "")
        if options.verbose and outcome.result is not None:
            emit()
            emit(format_summary(outcome.result))

    return exit_codes.SUCCESS
