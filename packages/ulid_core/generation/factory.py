"""ULID factories binding a generation strategy to a clock.

Factories are plain objects owned by the caller; there is no process-wide
singleton. Applications that want one shared monotonic sequence construct a
single factory and pass it around.
"""

from __future__ import annotations

from typing import Callable

from packages.ulid_core.config import GeneratorSettings
from packages.ulid_core.entropy import ByteRandom, RandomSource, WordRandom
from packages.ulid_core.ids import Ulid

from .clock import system_clock
from .strategies import (
    DRIFT_TOLERANCE_MS,
    DefaultStrategy,
    MonotonicStrategy,
    RegressionPolicy,
    UlidStrategy,
)


class UlidFactory:
    """Create ULIDs from a strategy, using the clock when no time is given."""

    def __init__(
        self,
        strategy: UlidStrategy,
        *,
        clock: Callable[[], int] | None = None,
        lowercase: bool = False,
    ) -> None:
        self._strategy = strategy
        self._clock = clock or system_clock
        self._lowercase = lowercase

    @classmethod
    def default(
        cls,
        random: RandomSource | None = None,
        *,
        clock: Callable[[], int] | None = None,
        lowercase: bool = False,
    ) -> UlidFactory:
        """Return a factory drawing fresh randomness for every ULID."""
        return cls(DefaultStrategy(random), clock=clock, lowercase=lowercase)

    @classmethod
    def monotonic(
        cls,
        random: RandomSource | None = None,
        *,
        clock: Callable[[], int] | None = None,
        drift_tolerance_ms: int = DRIFT_TOLERANCE_MS,
        regression_policy: RegressionPolicy = RegressionPolicy.RESET,
        lowercase: bool = False,
    ) -> UlidFactory:
        """Return a factory whose ULIDs never decrease within its drift tolerance."""
        strategy = MonotonicStrategy(
            random,
            clock=clock,
            drift_tolerance_ms=drift_tolerance_ms,
            regression_policy=regression_policy,
        )
        return cls(strategy, clock=clock, lowercase=lowercase)

    @property
    def strategy(self) -> UlidStrategy:
        return self._strategy

    def create(self, time: int | None = None) -> Ulid:
        """Return a ULID for ``time`` in milliseconds, or for the current time."""
        return self._strategy.create(self._clock() if time is None else time)

    def create_string(self, time: int | None = None) -> str:
        """Return a ULID string in the factory's configured case."""
        return self.create(time).to_string(lowercase=self._lowercase)


def build_factory(
    settings: GeneratorSettings,
    *,
    random: RandomSource | None = None,
    clock: Callable[[], int] | None = None,
) -> UlidFactory:
    """Build a factory from generator settings.

    An explicit ``random`` source overrides ``settings.random_source``.
    """
    if random is None:
        random = WordRandom() if settings.random_source == "words" else ByteRandom()

    if settings.strategy == "default":
        return UlidFactory.default(random, clock=clock, lowercase=settings.lowercase)

    return UlidFactory.monotonic(
        random,
        clock=clock,
        drift_tolerance_ms=settings.drift_tolerance_ms,
        regression_policy=RegressionPolicy(settings.regression_policy),
        lowercase=settings.lowercase,
    )
