"""Shared ULID layout constants and Crockford Base32 tables.

This module centralizes the scalar sizes and alphabet tables used by the codec,
validator, and generators so all bit-level code relies on one canonical source.
The tables are built once at import time and never mutated afterward.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

ULID_CHARS_LENGTH = 26
TIME_CHARS_LENGTH = 10
RANDOM_CHARS_LENGTH = 16

ULID_BYTES_LENGTH = 16
TIME_BYTES_LENGTH = 6
RANDOM_BYTES_LENGTH = 10

TIME_BITS = 48
RANDOM_BITS = 80

# Date: 10889-08-02T05:31:50.655Z
TIME_MAX = (1 << TIME_BITS) - 1
RANDOM_MAX = (1 << RANDOM_BITS) - 1
ULID_MAX = (1 << 128) - 1

WORD_MASK = (1 << 64) - 1
# Random bits that share the high word with the time field.
MSB_RANDOM_MASK = 0xFFFF

ALPHABET_UPPERCASE = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
ALPHABET_LOWERCASE = ALPHABET_UPPERCASE.lower()


def _build_alphabet_values() -> Mapping[str, int]:
    """Return the case-insensitive reverse lookup table with OIL synonyms."""
    values: dict[str, int] = {}
    for index, char in enumerate(ALPHABET_UPPERCASE):
        values[char] = index
        values[char.lower()] = index
    for char, index in (("O", 0), ("I", 1), ("L", 1)):
        values[char] = index
        values[char.lower()] = index
    return MappingProxyType(values)


ALPHABET_VALUES: Mapping[str, int] = _build_alphabet_values()

# The first character carries 5 bits but only 3 belong to the 128-bit value.
LEADING_CHAR_MAX = 0b00111
