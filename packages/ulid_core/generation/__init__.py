"""ULID generation strategies and factories."""

from packages.ulid_core.generation.clock import system_clock
from packages.ulid_core.generation.factory import UlidFactory, build_factory
from packages.ulid_core.generation.strategies import (
    DRIFT_TOLERANCE_MS,
    DefaultStrategy,
    MonotonicStrategy,
    RegressionPolicy,
    UlidStrategy,
)

__all__ = [
    "DRIFT_TOLERANCE_MS",
    "DefaultStrategy",
    "MonotonicStrategy",
    "RegressionPolicy",
    "UlidFactory",
    "UlidStrategy",
    "build_factory",
    "system_clock",
]
