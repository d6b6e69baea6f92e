"""Error hierarchy for approxax.

Numeric domain problems (negative radicands, NaN, infinities) never raise: they
surface as NaN or as an unspecified bit pattern in the returned array. The
exceptions below cover Python-level misuse that is detected before tracing,
such as an invalid iteration count or an unsupported float width.
"""

import numbers
from typing import Any


class ApproximationError(Exception):
    """Base exception for approxax errors."""

    pass


class InvalidIterationCountError(ApproximationError, ValueError):
    """Exception for Newton-Raphson iteration counts that are not non-negative integers."""

    def __init__(self, message: str, iterations: Any = None):
        """Initialize InvalidIterationCountError with the rejected value."""
        super().__init__(message)
        self.iterations = iterations


class UnsupportedDtypeError(ApproximationError, TypeError):
    """Exception for dtypes that have no IEEE-754 layout in this library."""

    def __init__(self, message: str, expected: tuple[str, ...] | None = None, actual: str | None = None):
        """Initialize UnsupportedDtypeError with dtype information."""
        super().__init__(message)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        """Return string representation with dtype information."""
        base_msg = super().__str__()
        if self.expected is not None and self.actual is not None:
            return f"{base_msg} (expected one of {', '.join(self.expected)}, actual={self.actual})"
        return base_msg


class PrecisionUnavailableError(ApproximationError):
    """Exception raised when float64 is requested but JAX runs in 32-bit mode."""

    def __init__(self, message: str, recommended_action: str | None = None):
        """Initialize PrecisionUnavailableError with a remedy hint."""
        super().__init__(message)
        self.recommended_action = recommended_action

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.recommended_action:
            return f"{base_msg}. {self.recommended_action}"
        return base_msg


class LayoutError(ApproximationError):
    """Exception for float layouts whose bit fields are inconsistent."""

    def __init__(self, message: str, layout_name: str | None = None):
        """Initialize LayoutError with the offending layout name."""
        super().__init__(message)
        self.layout_name = layout_name


def validate_iterations(iterations: Any) -> int:
    """Validate a Newton-Raphson iteration count.

    Args:
        iterations: Requested number of refinement steps.

    Returns:
        The iteration count as a plain ``int`` so it can be used as a static JIT argument.

    Raises:
        InvalidIterationCountError: If ``iterations`` is not an ``int`` or is negative.
    """
    # bool is an int subclass but never a meaningful step count
    if isinstance(iterations, bool) or not isinstance(iterations, numbers.Integral):
        raise InvalidIterationCountError(
            f"Iteration count must be a non-negative int, got {type(iterations).__name__}", iterations=iterations
        )
    if iterations < 0:
        raise InvalidIterationCountError(
            f"Iteration count must be non-negative, got {iterations}", iterations=iterations
        )
    return int(iterations)
