"""Pytest configuration for the ULID test suite."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from tests.helpers import FixedClock  # noqa: E402


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Return a clock pinned to a recent millisecond timestamp."""
    return FixedClock(1_700_000_000_000)


@pytest.fixture(autouse=True)
def _clear_ulid_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host ``ULID_*`` variables from leaking into settings tests."""
    for key in list(os.environ):
        if key.startswith("ULID_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Restore root handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
