"""Exception hierarchy for cantilever evaluation.

All errors are local to a single evaluation call. Nothing in the core
catches them; they propagate to the solver or CLI.

Example:
    try:
        result = evaluate_candidate(x, variant)
    except CantileverError as e:
        print(f"Evaluation failed: {e}")
"""

from __future__ import annotations

from typing import Any


class CantileverError(Exception):
    """Base exception for all cantilever errors.

    Attributes:
        message: Human-readable error description
        details: Optional dict with additional context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class IndexOutOfRangeError(CantileverError, IndexError):
    """Raised when an integer code falls outside [1, len(value_set)]."""

    def __init__(self, code: Any, size: int) -> None:
        message = f"Code {code!r} outside valid range [1, {size}]"
        super().__init__(message, {"code": code, "size": size})


class DimensionMismatchError(CantileverError, ValueError):
    """Raised on a wrong design vector length or an out-of-layout slot position."""

    pass


class NumericDomainError(CantileverError, ArithmeticError):
    """Raised when an evaluation would divide by zero or produce a non-finite value."""

    pass
