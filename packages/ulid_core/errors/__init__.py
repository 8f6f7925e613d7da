"""Public shared error API for ULID operations."""

from . import codes
from .exceptions import FormatError, LengthError, RangeError, UlidError
from .factories import internal_error, validation_error
from .normalize import exception_to_error
from .types import ErrorCategory, ErrorDetail

__all__ = [
    "ErrorCategory",
    "ErrorDetail",
    "FormatError",
    "LengthError",
    "RangeError",
    "UlidError",
    "codes",
    "exception_to_error",
    "internal_error",
    "validation_error",
]
