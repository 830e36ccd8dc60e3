"""Allow ``python -m runeslice`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m runeslice`` behaves identically to the ``runeslice``
console script.
"""

from __future__ import annotations

from runeslice.cli.app import cli

if __name__ == "__main__":
    cli()
