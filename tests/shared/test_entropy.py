"""Tests for byte- and word-oriented random sources."""

from __future__ import annotations

import random

import pytest

from packages.ulid_core.entropy import ByteRandom, WordRandom
from packages.ulid_core.errors import LengthError
from tests.helpers import word_sequence


def test_byte_random_returns_function_output() -> None:
    """Byte sources pass the requested length through to their function."""
    source = ByteRandom(lambda length: bytes(range(length)))

    assert source.next_bytes(10) == bytes(range(10))


def test_byte_random_synthesizes_big_endian_word() -> None:
    """next_word reads eight bytes big-endian."""
    source = ByteRandom(lambda length: bytes(range(length)))

    assert source.next_word() == 0x0001020304050607


def test_byte_random_rejects_short_function_output() -> None:
    """A function returning the wrong size is a LengthError."""
    source = ByteRandom(lambda length: bytes(length - 1))

    with pytest.raises(LengthError):
        source.next_bytes(10)


def test_word_random_concatenates_words_and_slices() -> None:
    """Byte requests concatenate big-endian words and keep the leading bytes."""
    source = WordRandom(word_sequence([0x0102030405060708, 0x1112131415161718]))

    assert source.next_bytes(10) == bytes.fromhex("01020304050607081112")


def test_word_random_draws_fresh_words_per_call() -> None:
    """Leftover bytes from one request are not reused by the next."""
    source = WordRandom(word_sequence([0xAABB000000000000, 0xCCDD000000000000]))

    assert source.next_bytes(2) == b"\xaa\xbb"
    assert source.next_bytes(2) == b"\xcc\xdd"


def test_word_random_masks_words_to_64_bits() -> None:
    """Out-of-range function output is masked to an unsigned 64-bit word."""
    source = WordRandom(lambda: -1)

    assert source.next_word() == (1 << 64) - 1
    assert source.next_bytes(10) == b"\xff" * 10


def test_seeded_sources_are_deterministic() -> None:
    """Sources built from equally seeded generators agree."""
    assert ByteRandom.from_random(random.Random(42)).next_bytes(10) == ByteRandom.from_random(
        random.Random(42)
    ).next_bytes(10)
    assert WordRandom.from_random(random.Random(42)).next_bytes(10) == WordRandom.from_random(
        random.Random(42)
    ).next_bytes(10)


@pytest.mark.parametrize("source", [ByteRandom(), WordRandom()])
def test_default_sources_return_requested_sizes(source: ByteRandom | WordRandom) -> None:
    """Secure defaults honor requested lengths and word width."""
    assert len(source.next_bytes(10)) == 10
    assert len(source.next_bytes(3)) == 3
    assert 0 <= source.next_word() < (1 << 64)
