"""Helpers for inspecting the components of a ULID string without decoding it all."""

from __future__ import annotations

from datetime import UTC, datetime

from .constants import ALPHABET_VALUES, TIME_CHARS_LENGTH
from .validation import require_valid


def extract_time(value: str) -> int:
    """Return the millisecond timestamp encoded in a ULID string."""
    milliseconds = 0
    for char in extract_time_component(value):
        milliseconds = (milliseconds << 5) | ALPHABET_VALUES[char]
    return milliseconds


def extract_datetime(value: str) -> datetime:
    """Return the timestamp of a ULID string as a UTC datetime."""
    return datetime.fromtimestamp(extract_time(value) / 1000, tz=UTC)


def extract_time_component(value: str) -> str:
    """Return the 10-character time component of a ULID string."""
    return require_valid(value)[:TIME_CHARS_LENGTH]


def extract_random_component(value: str) -> str:
    """Return the 16-character random component of a ULID string."""
    return require_valid(value)[TIME_CHARS_LENGTH:]
