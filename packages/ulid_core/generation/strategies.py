"""ULID generation strategies.

``DefaultStrategy`` draws fresh randomness for every identifier and holds no
state. ``MonotonicStrategy`` remembers the last identifier it emitted and,
while the requested time has not moved past it, increments the random field
instead of drawing new randomness. Successive identifiers from one monotonic
instance are therefore non-decreasing, across every thread that shares it.

Monotonic transition on ``create(requested_time)``, with
``last_time = cursor.time``:

- ``last_time - drift_tolerance_ms < requested_time <= last_time``: the same
  millisecond repeated, or the clock stepped back a little (NTP slew, a leap
  second). The cursor is incremented.
- otherwise: the clock advanced, or stepped back further than the tolerance.
  The cursor is reset to ``requested_time`` with fresh randomness, unless the
  regression policy is ``CLAMP``, in which case a large step back is absorbed
  by incrementing too.

Exhausting the 80-bit counter inside one window carries into the time field
(see ``Ulid.increment``). Generation does not fail; the emitted time simply
runs slightly ahead of the requested time, and a warning is logged.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Callable, Protocol

from packages.ulid_core.entropy import ByteRandom, RandomSource
from packages.ulid_core.errors import RangeError
from packages.ulid_core.ids import RANDOM_BYTES_LENGTH, Ulid, require_time
from packages.ulid_core.logging import fields, get_logger, log_context

from .clock import system_clock

DRIFT_TOLERANCE_MS = 10_000

_LOGGER = get_logger(__name__)


class RegressionPolicy(str, Enum):
    """What a monotonic strategy does when the clock falls back past the tolerance."""

    RESET = "reset"
    CLAMP = "clamp"


class UlidStrategy(Protocol):
    """Contract shared by generation strategies."""

    def create(self, time: int) -> Ulid:
        """Return a ULID for the given millisecond time."""


class DefaultStrategy:
    """Stateless strategy: every ULID gets a fresh 80-bit random component.

    Safe for concurrent callers exactly when the injected random source is;
    the ``secrets``-backed defaults are.
    """

    def __init__(self, random: RandomSource | None = None) -> None:
        self._random = random if random is not None else ByteRandom()
        with log_context(
            {
                fields.EVENT: fields.STRATEGY_CREATED_EVENT,
                fields.STRATEGY: "default",
                fields.RANDOM_SOURCE: type(self._random).__name__,
            }
        ):
            _LOGGER.debug("ULID strategy created")

    def create(self, time: int) -> Ulid:
        return Ulid.from_parts(time, self._random.next_bytes(RANDOM_BYTES_LENGTH))


class MonotonicStrategy:
    """Stateful strategy keeping emitted ULIDs non-decreasing.

    The last emitted ULID is the only mutable state and is only read or
    replaced while holding ``_lock``. No I/O happens under the lock; log
    events are collected and emitted after release.
    """

    def __init__(
        self,
        random: RandomSource | None = None,
        *,
        clock: Callable[[], int] | None = None,
        drift_tolerance_ms: int = DRIFT_TOLERANCE_MS,
        regression_policy: RegressionPolicy = RegressionPolicy.RESET,
    ) -> None:
        if drift_tolerance_ms < 1:
            raise RangeError(f"drift_tolerance_ms must be at least 1, got {drift_tolerance_ms}")

        self._random = random if random is not None else ByteRandom()
        self._drift_tolerance_ms = drift_tolerance_ms
        self._regression_policy = RegressionPolicy(regression_policy)
        self._lock = threading.Lock()

        now = (clock or system_clock)()
        self._last = Ulid.from_parts(now, self._random.next_bytes(RANDOM_BYTES_LENGTH))

        with log_context(
            {
                fields.EVENT: fields.STRATEGY_CREATED_EVENT,
                fields.STRATEGY: "monotonic",
                fields.RANDOM_SOURCE: type(self._random).__name__,
                fields.DRIFT_TOLERANCE_MS: drift_tolerance_ms,
                fields.REGRESSION_POLICY: self._regression_policy.value,
            }
        ):
            _LOGGER.debug("ULID strategy created")

    @property
    def drift_tolerance_ms(self) -> int:
        return self._drift_tolerance_ms

    @property
    def regression_policy(self) -> RegressionPolicy:
        return self._regression_policy

    @property
    def last(self) -> Ulid:
        """Snapshot of the most recently emitted ULID."""
        with self._lock:
            return self._last

    def create(self, time: int) -> Ulid:
        time = require_time(time)

        with self._lock:
            last = self._last
            last_time = last.time
            regressed = time <= last_time - self._drift_tolerance_ms
            frozen = time <= last_time and (
                not regressed or self._regression_policy is RegressionPolicy.CLAMP
            )

            if frozen:
                current = last.increment()
            else:
                current = Ulid.from_parts(time, self._random.next_bytes(RANDOM_BYTES_LENGTH))
            self._last = current

        if regressed:
            self._log_regression(time, last_time)
        if frozen and current.time != last_time:
            self._log_carry(time, last_time, current.time)
        return current

    def _log_regression(self, requested_time: int, last_time: int) -> None:
        clamped = self._regression_policy is RegressionPolicy.CLAMP
        values = {
            fields.EVENT: (
                fields.CLOCK_REGRESSION_CLAMPED_EVENT if clamped else fields.CLOCK_REGRESSION_EVENT
            ),
            fields.REQUESTED_TIME: requested_time,
            fields.LAST_TIME: last_time,
            fields.DRIFT_MS: last_time - requested_time,
            fields.REGRESSION_POLICY: self._regression_policy.value,
        }
        with log_context(values):
            if clamped:
                _LOGGER.debug("Clock regression beyond drift tolerance clamped to last ULID")
            else:
                _LOGGER.warning(
                    "Clock regression beyond drift tolerance; ULID sequence is no longer monotonic"
                )

    def _log_carry(self, requested_time: int, last_time: int, emitted_time: int) -> None:
        values = {
            fields.EVENT: fields.COUNTER_CARRY_EVENT,
            fields.REQUESTED_TIME: requested_time,
            fields.LAST_TIME: last_time,
            fields.EMITTED_TIME: emitted_time,
        }
        with log_context(values):
            _LOGGER.warning("ULID random counter exhausted; carried into the time field")
