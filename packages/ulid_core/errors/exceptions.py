"""Exception types raised by ULID constructors, parsers, and generators.

Every exception subclasses ``ValueError`` so callers that only care about
"bad input" can catch the builtin, while callers that need detail can branch
on the concrete type or on ``code``.
"""

from __future__ import annotations

from . import codes
from .factories import validation_error
from .types import ErrorDetail


class UlidError(ValueError):
    """Base error type for ULID failures."""

    code: str = codes.VALIDATION_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self.message

    def to_detail(self) -> ErrorDetail:
        """Return the shared ``ErrorDetail`` shape for this failure."""
        return validation_error(
            self.message,
            code=self.code,
            metadata={"exception_type": type(self).__name__},
        )


class RangeError(UlidError):
    """A time or integer argument falls outside its representable range."""

    code = codes.TIME_OUT_OF_RANGE


class LengthError(UlidError):
    """A byte buffer is missing or has the wrong size."""

    code = codes.INVALID_LENGTH


class FormatError(UlidError):
    """A string fails the length, alphabet, or leading-character checks."""

    code = codes.INVALID_FORMAT
