"""Infrastructure layer — external system integration.

This layer wraps the width tables and the process's standard input.
Every raw third-party exception must be caught here and re-raised as a
:class:`~runeslice.exceptions.RuneSliceError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from runeslice.infra.input_reader import read_input
from runeslice.infra.width_policy import (
    WidthPolicy,
    unicode_version,
    wcwidth_version,
    width_function,
)

__all__: list[str] = [
    "WidthPolicy",
    "read_input",
    "unicode_version",
    "wcwidth_version",
    "width_function",
]
