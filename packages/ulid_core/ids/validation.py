"""Canonical ULID string validation.

A valid ULID string is a sequence of 26 characters from Crockford's Base32
alphabet. Input is case-insensitive and accepts the visually confusable
synonyms ``O`` (zero) and ``I``/``L`` (one). ``U`` is never valid.

Base32 encoding of 128 bits needs 130 bits of text, so the two extra high bits
carried by the first character must be zero; otherwise the encoded time would
exceed ``2^48 - 1``.
"""

from __future__ import annotations

from packages.ulid_core.errors import FormatError

from .constants import ALPHABET_VALUES, LEADING_CHAR_MAX, ULID_CHARS_LENGTH


def invalid_reason(value: object) -> str | None:
    """Return why ``value`` is not a valid ULID string, or ``None`` if it is."""
    if not isinstance(value, str):
        return f"ULID must be a string, not {type(value).__name__}"

    if len(value) != ULID_CHARS_LENGTH:
        return f"ULID string must be exactly {ULID_CHARS_LENGTH} characters, got {len(value)}"

    for position, char in enumerate(value):
        if char not in ALPHABET_VALUES:
            if char in "Uu":
                return f"ULID character {char!r} at position {position} is excluded from Crockford Base32"
            return f"Invalid ULID character {char!r} at position {position}"

    if ALPHABET_VALUES[value[0]] > LEADING_CHAR_MAX:
        return f"ULID leading character {value[0]!r} encodes a time beyond 2^48 - 1"

    return None


def is_valid(value: object) -> bool:
    """Return whether ``value`` is a valid ULID string."""
    return invalid_reason(value) is None


def require_valid(value: object) -> str:
    """Return ``value`` unchanged when valid, else raise ``FormatError``."""
    reason = invalid_reason(value)
    if reason is not None:
        raise FormatError(f"Invalid ULID {value!r}: {reason}")
    return value  # type: ignore[return-value]
