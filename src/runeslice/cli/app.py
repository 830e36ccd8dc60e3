"""CLI application entry point and command routing for runeslice.

This module is the **sole error boundary** for the entire application.
It catches :class:`~runeslice.exceptions.RuneSliceError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from runeslice.cli import exit_codes
from runeslice.cli.console import console, escape
from runeslice.core.models import SliceOptions, SlicePolicy, UnitMode
from runeslice.exceptions import RuneSliceError
from runeslice.infra.width_policy import WidthPolicy
from runeslice.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_text_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        metavar="TEXT",
        help="Input text (read from stdin when omitted).",
    )


def _add_policy_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-p",
        "--policy",
        choices=[policy.value for policy in WidthPolicy],
        default=WidthPolicy.TERMINAL.value,
        help="Width policy used for display-width calculations (default: terminal).",
    )


def _add_verbose_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show titles and summaries.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``runeslice slice RANGE [TEXT]`` — slice by char, grapheme, or width
    * ``runeslice graphemes [TEXT]``   — list grapheme clusters
    * ``runeslice atoms [TEXT]``       — list atoms with codepoints
    * ``runeslice width [TEXT]``       — total display width
    * ``runeslice widths [TEXT]``      — width of each grapheme
    * ``runeslice truncate [TEXT] -w N``
    * ``runeslice split [TEXT] -w N``
    * ``runeslice version [--json]``
    """
    parser = argparse.ArgumentParser(
        prog="runeslice",
        description="Unicode-aware slicing by character, grapheme, or display width.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debug details to stderr.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    slice_parser = commands.add_parser(
        "slice",
        help="Slice input using a [start:end] style expression.",
    )
    slice_parser.add_argument(
        "range",
        metavar="RANGE",
        help="Slice range such as [2:5], [3], [:4] or [1:].",
    )
    _add_text_argument(slice_parser)
    units = slice_parser.add_mutually_exclusive_group()
    units.add_argument(
        "-c",
        "--char",
        dest="mode",
        action="store_const",
        const=UnitMode.CHAR,
        help="Slice by Unicode characters.",
    )
    units.add_argument(
        "-g",
        "--grapheme",
        dest="mode",
        action="store_const",
        const=UnitMode.GRAPHEME,
        help="Slice by grapheme clusters (default).",
    )
    units.add_argument(
        "-w",
        "--width",
        dest="mode",
        action="store_const",
        const=UnitMode.WIDTH,
        help="Slice by display-width columns.",
    )
    slice_parser.set_defaults(mode=UnitMode.GRAPHEME)
    slice_parser.add_argument(
        "-s",
        "--strict",
        action="store_true",
        help="Reject out-of-range or misaligned ranges instead of clamping.",
    )
    _add_policy_option(slice_parser)
    _add_verbose_option(slice_parser)

    for name, help_text in (
        ("graphemes", "Split input into grapheme clusters."),
        ("atoms", "Break input into atoms and show codepoints and widths."),
    ):
        table_parser = commands.add_parser(name, help=help_text)
        _add_text_argument(table_parser)
        _add_policy_option(table_parser)

    for name, help_text in (
        ("width", "Measure the total display width of the input."),
        ("widths", "Show the display width of each grapheme."),
    ):
        policy_parser = commands.add_parser(name, help=help_text)
        _add_text_argument(policy_parser)
        _add_policy_option(policy_parser)
        _add_verbose_option(policy_parser)

    for name, help_text in (
        ("truncate", "Truncate input to a maximum display width."),
        ("split", "Split input into segments that fit a display width."),
    ):
        width_parser = commands.add_parser(name, help=help_text)
        _add_text_argument(width_parser)
        width_parser.add_argument(
            "-w",
            "--width",
            type=int,
            required=True,
            dest="max_width",
            help="Maximum display width in columns.",
        )
        _add_policy_option(width_parser)
        _add_verbose_option(width_parser)

    version_parser = commands.add_parser(
        "version",
        help="Show package and Unicode table versions.",
    )
    version_parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print the report as JSON.",
    )

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_slice(args: argparse.Namespace, text: str) -> int:
    """Dispatch ``slice`` to the slice renderer."""
    from runeslice.cli.slice_command import run_slice
    from runeslice.infra.width_policy import width_function

    options = SliceOptions(
        mode=args.mode,
        policy=SlicePolicy.STRICT if args.strict else SlicePolicy.LENIENT,
        verbose=args.verbose,
    )
    return run_slice(text, args.range, options, width_function(args.policy))


def _handle_width_command(args: argparse.Namespace, text: str) -> int:
    """Dispatch the width inspection commands."""
    from runeslice.cli import width_commands
    from runeslice.infra.width_policy import width_function

    policy = WidthPolicy(args.policy)
    width_of = width_function(policy)

    if args.command == "graphemes":
        return width_commands.run_graphemes(text, width_of)
    if args.command == "atoms":
        return width_commands.run_atoms(text, width_of)
    if args.command == "width":
        return width_commands.run_width(text, width_of, policy, verbose=args.verbose)
    if args.command == "widths":
        return width_commands.run_widths(text, width_of, verbose=args.verbose)
    if args.command == "truncate":
        return width_commands.run_truncate(
            text, args.max_width, width_of, verbose=args.verbose,
        )
    return width_commands.run_split(text, args.max_width, width_of, verbose=args.verbose)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the runeslice CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from runeslice.infra.input_reader import read_input
    from runeslice.utils.log_setup import configure_logging

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(debug=args.debug)

    if args.command == "version":
        from runeslice.cli.version_command import run_version

        return run_version(as_json=args.as_json)

    text = read_input(args.text)

    if args.command == "slice":
        return _handle_slice(args, text)
    return _handle_width_command(args, text)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RuneSliceError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
