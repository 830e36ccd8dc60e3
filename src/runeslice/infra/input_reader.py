"""Infrastructure: resolve command input from an argument or stdin.

Rules
-----
* Reads stdin only when no text argument was given.
* Refuses to block on an interactive terminal.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from runeslice.exceptions import InputError

logger = logging.getLogger(__name__)


def read_input(text: str | None, stdin: TextIO | None = None) -> str:
    """Return *text*, or the whole of *stdin* when *text* is ``None``.

    Trailing newlines are stripped from piped input.

    Raises
    ------
    InputError
        When *text* is ``None`` and stdin is an interactive terminal.
    """
    if text is not None:
        return text

    stream = stdin if stdin is not None else sys.stdin
    if stream.isatty():
        raise InputError(
            "no input text provided",
            hint="Pass TEXT as an argument or pipe it via stdin.",
        )

    data = stream.read()
    logger.debug("Read %d chars from stdin", len(data))
    return data.rstrip("\n")
