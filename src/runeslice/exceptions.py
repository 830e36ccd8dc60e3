"""Custom exception hierarchy for runeslice.

All exceptions that cross layer boundaries must inherit from
:class:`RuneSliceError`.  Raw third-party exceptions must never
propagate beyond the infrastructure layer — they are caught there and
re-raised as a typed subclass defined here.

Hierarchy
---------
RuneSliceError
├── SliceExpressionError
│   ├── TrimViolationError
│   ├── MissingBracketsError
│   ├── InteriorSpacesError
│   ├── SingleIndexFormatError
│   ├── StartIndexFormatError
│   ├── EndIndexFormatError
│   └── MalformedRangeError
├── SliceResolutionError
│   ├── OutOfBoundsError
│   └── UnalignedBoundaryError
├── InvalidWidthError
├── InputError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Sequence


class RuneSliceError(Exception):
    """Base exception for all runeslice errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Slice expressions -----------------------------------------------------

_EXPRESSION_HINT = "Use a bracketed range such as [2:5], [3], [:4] or [1:]."


class SliceExpressionError(RuneSliceError):
    """Raised when a slice expression cannot be parsed."""

    default_message: str = "failed to parse slice expression"

    def __init__(self, message: str | None = None, *, hint: str | None = _EXPRESSION_HINT) -> None:
        super().__init__(message or self.default_message, hint=hint)


class TrimViolationError(SliceExpressionError):
    default_message = "slice expression must not have leading/trailing spaces"


class MissingBracketsError(SliceExpressionError):
    default_message = "slice must be in [start:end] format (with brackets)"


class InteriorSpacesError(SliceExpressionError):
    default_message = "slice range must not contain spaces"


class SingleIndexFormatError(SliceExpressionError):
    default_message = "slice index must be a non-negative integer (e.g. [0], [3])"


class StartIndexFormatError(SliceExpressionError):
    default_message = "start index must be a non-negative integer"


class EndIndexFormatError(SliceExpressionError):
    default_message = "end index must be a non-negative integer"


class MalformedRangeError(SliceExpressionError):
    default_message = "slice format must be [start:end]"


# --- Range resolution ------------------------------------------------------

class SliceResolutionError(RuneSliceError):
    """Raised when a parsed range cannot be applied under strict policy."""


class OutOfBoundsError(SliceResolutionError):
    """Raised when a strict index range exceeds the unit sequence."""

    def __init__(self, length: int) -> None:
        super().__init__(
            f"slice range out of bounds (len = {length})",
            hint="Drop --strict to clamp the range to the available units.",
        )
        self.length: int = length


class UnalignedBoundaryError(SliceResolutionError):
    """Raised when a strict width range does not land on a cell boundary."""

    def __init__(self, boundaries: Sequence[int]) -> None:
        self.boundaries: tuple[int, ...] = tuple(boundaries)
        super().__init__(
            "width slice must align with visual cell boundaries\n"
            f"valid boundaries: {list(self.boundaries)}",
            hint="Omit --strict to snap the range to the nearest boundary.",
        )


# --- Width tools -----------------------------------------------------------

class InvalidWidthError(RuneSliceError):
    """Raised when a maximum display width is negative."""


# --- Input / environment ---------------------------------------------------

class InputError(RuneSliceError):
    """Raised when no input text is available."""


class EnvironmentError(RuneSliceError):
    """Raised when a required runtime dependency is not available."""
