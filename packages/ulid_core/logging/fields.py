"""Canonical logging field names for structured ULID logs.

These constants define a stable key set for structured logs and context
propagation, so generator events can be filtered the same way everywhere.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"

# Generator fields.
STRATEGY = "strategy"
RANDOM_SOURCE = "random_source"
REGRESSION_POLICY = "regression_policy"
DRIFT_TOLERANCE_MS = "drift_tolerance_ms"
REQUESTED_TIME = "requested_time"
LAST_TIME = "last_time"
EMITTED_TIME = "emitted_time"
DRIFT_MS = "drift_ms"

# Generator events.
STRATEGY_CREATED_EVENT = "strategy_created"
CLOCK_REGRESSION_EVENT = "clock_regression"
CLOCK_REGRESSION_CLAMPED_EVENT = "clock_regression_clamped"
COUNTER_CARRY_EVENT = "counter_carry"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
