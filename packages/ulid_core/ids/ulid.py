"""ULID value type and conversion helpers.

This module standardizes canonical big-endian ULID handling. A ``Ulid`` is two
unsigned 64-bit words (``msb``, ``lsb``) whose concatenation is the 128-bit
value: the top 48 bits are the millisecond timestamp and the low 80 bits are
randomness (or counter state once produced by a monotonic generator).

The canonical string form is 26 Crockford Base32 characters. Because the time
field leads and the alphabet is ordered, lexicographic order of the uppercase
string matches the unsigned numeric order of the value.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from packages.ulid_core.errors import LengthError, RangeError

from .constants import (
    ALPHABET_LOWERCASE,
    ALPHABET_UPPERCASE,
    ALPHABET_VALUES,
    MSB_RANDOM_MASK,
    RANDOM_BYTES_LENGTH,
    TIME_MAX,
    ULID_BYTES_LENGTH,
    ULID_MAX,
    WORD_MASK,
)
from .validation import require_valid

_TIME_SHIFTS = tuple(range(45, -1, -5))
_RANDOM_SHIFTS = tuple(range(75, -1, -5))


def require_time(time: object) -> int:
    """Coerce ``time`` to integer milliseconds within the 48-bit range.

    Floats are truncated like ``int()`` does; values ``int()`` cannot convert
    raise ``RangeError``.
    """
    try:
        millis = int(time)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        raise RangeError(
            f"ULID time must be an integer millisecond count, got {type(time).__name__}"
        ) from exc
    if millis < 0 or millis > TIME_MAX:
        raise RangeError(f"ULID time must be within [0, {TIME_MAX}], got {millis}")
    return millis


def _require_length(data: object, expected: int, label: str) -> None:
    if not isinstance(data, (bytes, bytearray)):
        raise LengthError(
            f"{label} must be exactly {expected} bytes, got {type(data).__name__}"
        )
    if len(data) != expected:
        raise LengthError(f"{label} must be exactly {expected} bytes, got {len(data)}")


@dataclass(frozen=True, order=True, slots=True)
class Ulid:
    """Immutable 128-bit ULID stored as two unsigned 64-bit words.

    Construction from raw words never fails: each word is masked to 64 bits
    and any bit pattern is a structurally valid identifier. Use the
    ``from_*`` constructors to validate semantic inputs.
    """

    msb: int
    lsb: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "msb", self.msb & WORD_MASK)
        object.__setattr__(self, "lsb", self.lsb & WORD_MASK)

    @classmethod
    def from_parts(cls, time: int, random: bytes | bytearray | None) -> Ulid:
        """Pack a 48-bit millisecond time and 10 random bytes into a ULID."""
        time = require_time(time)
        _require_length(random, RANDOM_BYTES_LENGTH, "ULID random component")

        entropy = int.from_bytes(random, byteorder="big", signed=False)
        msb = (time << 16) | (entropy >> 64)
        lsb = entropy & WORD_MASK
        return cls(msb, lsb)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | None) -> Ulid:
        """Decode the canonical 16-byte big-endian form."""
        _require_length(data, ULID_BYTES_LENGTH, "ULID bytes")
        return cls(
            int.from_bytes(data[:8], byteorder="big", signed=False),
            int.from_bytes(data[8:], byteorder="big", signed=False),
        )

    @classmethod
    def from_string(cls, value: str) -> Ulid:
        """Decode a canonical 26-character Crockford Base32 string.

        Raises ``FormatError`` naming the failed check when the string has the
        wrong length, contains a character outside the alphabet, or encodes a
        time beyond ``2^48 - 1``.
        """
        number = 0
        for char in require_valid(value):
            number = (number << 5) | ALPHABET_VALUES[char]

        # 26 base32 chars encode 130 bits; the two leading bits are zero here.
        number &= ULID_MAX
        return cls(number >> 64, number & WORD_MASK)

    @classmethod
    def from_uuid(cls, value: UUID) -> Ulid:
        """Reinterpret the 128 bits of a UUID as a ULID."""
        return cls.from_int(value.int)

    @classmethod
    def from_int(cls, value: int) -> Ulid:
        """Build a ULID from its unsigned 128-bit integer value."""
        if value < 0 or value > ULID_MAX:
            raise RangeError(f"ULID integer must be within [0, 2^128 - 1], got {value}")
        return cls(value >> 64, value & WORD_MASK)

    @property
    def time(self) -> int:
        """Milliseconds since the Unix epoch held in the top 48 bits."""
        return self.msb >> 16

    @property
    def random(self) -> bytes:
        """The 80-bit random component as 10 big-endian bytes."""
        return self._random_int().to_bytes(RANDOM_BYTES_LENGTH, byteorder="big", signed=False)

    @property
    def datetime(self) -> datetime:
        """The time component as a timezone-aware UTC datetime."""
        return datetime.fromtimestamp(self.time / 1000, tz=UTC)

    def to_string(self, *, lowercase: bool = False) -> str:
        """Encode as 26 Crockford Base32 characters."""
        alphabet = ALPHABET_LOWERCASE if lowercase else ALPHABET_UPPERCASE
        time = self.time
        random = self._random_int()
        chars = [alphabet[(time >> shift) & 0x1F] for shift in _TIME_SHIFTS]
        chars.extend(alphabet[(random >> shift) & 0x1F] for shift in _RANDOM_SHIFTS)
        return "".join(chars)

    def to_upper(self) -> str:
        return self.to_string()

    def to_lower(self) -> str:
        return self.to_string(lowercase=True)

    def to_bytes(self) -> bytes:
        """Encode as 16 big-endian bytes: 6 bytes of time, then 10 of random."""
        return self.msb.to_bytes(8, byteorder="big", signed=False) + self.lsb.to_bytes(
            8, byteorder="big", signed=False
        )

    def to_uuid(self) -> UUID:
        """Return a UUID carrying the same 128 bits."""
        return UUID(int=int(self))

    def increment(self) -> Ulid:
        """Return the next ULID, treating the random field as a counter.

        The carry runs through the whole 128-bit value: when the low word
        wraps, the high word is incremented too, so exhausting the 80 random
        bits advances the time field by one millisecond. The maximum value
        wraps silently to zero.
        """
        lsb = (self.lsb + 1) & WORD_MASK
        msb = self.msb
        if lsb == 0:
            msb = (msb + 1) & WORD_MASK
        return Ulid(msb, lsb)

    def compare_to(self, other: Ulid) -> int:
        """Return -1, 0, or 1 comparing unsigned words, high word first."""
        if self.msb != other.msb:
            return -1 if self.msb < other.msb else 1
        if self.lsb != other.lsb:
            return -1 if self.lsb < other.lsb else 1
        return 0

    def _random_int(self) -> int:
        return ((self.msb & MSB_RANDOM_MASK) << 64) | self.lsb

    def __int__(self) -> int:
        return (self.msb << 64) | self.lsb

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Ulid('{self.to_string()}')"


def parse(value: str) -> Ulid:
    """Parse a canonical ULID string; raises ``FormatError`` when invalid."""
    return Ulid.from_string(value)


def ulid_str_to_bytes(value: str) -> bytes:
    """Decode canonical 26-char ULID string into 16-byte big-endian form."""
    return Ulid.from_string(value).to_bytes()


def ulid_bytes_to_str(value: bytes) -> str:
    """Encode 16-byte big-endian ULID into canonical 26-char Base32 string."""
    return Ulid.from_bytes(value).to_string()
