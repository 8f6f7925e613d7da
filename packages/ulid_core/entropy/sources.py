"""Pluggable random sources for ULID generation.

Two interchangeable strategies are provided so callers can trade determinism
or speed against cryptographic strength:

- ``ByteRandom`` asks its function for exactly N bytes per call.
- ``WordRandom`` asks its function for one 64-bit word per call and
  synthesizes byte sequences by concatenating words big-endian.

The strategy is chosen when the source is constructed; generators only see the
``RandomSource`` protocol. Thread-safety is that of the wrapped function; the
``secrets`` defaults are safe for concurrent use.
"""

from __future__ import annotations

import random as _random
import secrets
from typing import Callable, Protocol

from packages.ulid_core.errors import LengthError

_WORD_BYTES = 8
_WORD_MASK = (1 << 64) - 1


class RandomSource(Protocol):
    """Capability contract for entropy providers."""

    def next_bytes(self, length: int) -> bytes:
        """Return exactly ``length`` random bytes."""

    def next_word(self) -> int:
        """Return one random unsigned 64-bit integer."""


class ByteRandom:
    """Random source backed by a function returning N bytes per call."""

    def __init__(self, random_function: Callable[[int], bytes] | None = None) -> None:
        self._random_function = random_function or secrets.token_bytes

    @classmethod
    def from_random(cls, rng: _random.Random) -> ByteRandom:
        """Return a byte source drawing from a seeded ``random.Random``."""
        return cls(rng.randbytes)

    def next_bytes(self, length: int) -> bytes:
        data = self._random_function(length)
        if len(data) != length:
            raise LengthError(f"Random function returned {len(data)} bytes, expected {length}")
        return bytes(data)

    def next_word(self) -> int:
        return int.from_bytes(self.next_bytes(_WORD_BYTES), byteorder="big", signed=False)


class WordRandom:
    """Random source backed by a function returning one 64-bit word per call."""

    def __init__(self, random_function: Callable[[], int] | None = None) -> None:
        self._random_function = random_function or _secure_word

    @classmethod
    def from_random(cls, rng: _random.Random) -> WordRandom:
        """Return a word source drawing from a seeded ``random.Random``."""
        return cls(lambda: rng.getrandbits(64))

    def next_word(self) -> int:
        return self._random_function() & _WORD_MASK

    def next_bytes(self, length: int) -> bytes:
        """Concatenate big-endian words and keep the first ``length`` bytes."""
        words = -(-length // _WORD_BYTES)
        data = b"".join(
            self.next_word().to_bytes(_WORD_BYTES, byteorder="big", signed=False)
            for _ in range(words)
        )
        return data[:length]


def _secure_word() -> int:
    return secrets.randbits(64)
