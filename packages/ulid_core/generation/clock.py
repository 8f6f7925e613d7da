"""Millisecond clock used by ULID factories when none is injected."""

from __future__ import annotations

import time


def system_clock() -> int:
    """Return the current wall-clock time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000
