"""Exception normalization utilities for shared error contracts."""

from __future__ import annotations

from . import codes
from .exceptions import UlidError
from .factories import internal_error, validation_error
from .types import ErrorDetail


def exception_to_error(exc: Exception) -> ErrorDetail:
    """Normalize a Python exception into a shared ``ErrorDetail``.

    ULID errors keep their own code. Other argument errors collapse into
    ``INVALID_ARGUMENT`` and anything else is reported as unexpected.
    """
    if isinstance(exc, UlidError):
        return exc.to_detail()

    metadata = {"exception_type": type(exc).__name__}

    if isinstance(exc, (ValueError, TypeError)):
        return validation_error(str(exc), code=codes.INVALID_ARGUMENT, metadata=metadata)

    return internal_error(
        str(exc) or "unexpected exception",
        code=codes.UNEXPECTED_EXCEPTION,
        metadata=metadata,
    )
