"""Tests for ULID error types and shared error normalization."""

from __future__ import annotations

import pytest

from packages.ulid_core.errors import (
    ErrorCategory,
    FormatError,
    LengthError,
    RangeError,
    UlidError,
    codes,
    exception_to_error,
)
from packages.ulid_core.ids import Ulid


@pytest.mark.parametrize(
    ("error_type", "code"),
    [
        (RangeError, codes.TIME_OUT_OF_RANGE),
        (LengthError, codes.INVALID_LENGTH),
        (FormatError, codes.INVALID_FORMAT),
    ],
)
def test_ulid_errors_are_value_errors_with_stable_codes(
    error_type: type[UlidError], code: str
) -> None:
    """Each concrete error is a ValueError carrying its own code."""
    error = error_type("bad input")

    assert isinstance(error, ValueError)
    assert error.code == code
    assert str(error) == "bad input"


def test_to_detail_reports_validation_category() -> None:
    """ULID errors normalize into validation-category details."""
    with pytest.raises(FormatError) as excinfo:
        Ulid.from_string("U" * 26)

    detail = excinfo.value.to_detail()

    assert detail.code == codes.INVALID_FORMAT
    assert detail.category is ErrorCategory.VALIDATION
    assert detail.retryable is False
    assert detail.metadata == {"exception_type": "FormatError"}
    assert "excluded" in detail.message


def test_exception_to_error_keeps_ulid_codes() -> None:
    """exception_to_error preserves ULID-specific codes."""
    detail = exception_to_error(LengthError("short"))

    assert detail.code == codes.INVALID_LENGTH
    assert detail.category is ErrorCategory.VALIDATION


def test_exception_to_error_maps_generic_argument_errors() -> None:
    """Builtin argument errors become INVALID_ARGUMENT."""
    detail = exception_to_error(TypeError("not an int"))

    assert detail.code == codes.INVALID_ARGUMENT
    assert detail.category is ErrorCategory.VALIDATION
    assert detail.metadata == {"exception_type": "TypeError"}


def test_exception_to_error_maps_unknown_errors_to_internal() -> None:
    """Anything else is an unexpected internal failure."""
    detail = exception_to_error(RuntimeError())

    assert detail.code == codes.UNEXPECTED_EXCEPTION
    assert detail.category is ErrorCategory.INTERNAL
    assert detail.message == "unexpected exception"
