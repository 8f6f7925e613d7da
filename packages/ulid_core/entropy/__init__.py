"""Random sources feeding the ULID random component."""

from packages.ulid_core.entropy.sources import ByteRandom, RandomSource, WordRandom

__all__ = [
    "ByteRandom",
    "RandomSource",
    "WordRandom",
]
