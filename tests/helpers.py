"""Deterministic clocks and random functions shared by ULID tests."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator


class FixedClock:
    """Millisecond clock that only moves when a test moves it."""

    def __init__(self, now: int) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


def counting_bytes() -> Callable[[int], bytes]:
    """Return a byte function yielding ``bytes([1]) * n``, then ``bytes([2]) * n``, ..."""
    calls = 0

    def _next(length: int) -> bytes:
        nonlocal calls
        calls += 1
        return bytes([calls % 256]) * length

    return _next


def word_sequence(words: Iterable[int]) -> Callable[[], int]:
    """Return a word function replaying ``words`` in order."""
    iterator: Iterator[int] = iter(words)
    return lambda: next(iterator)
