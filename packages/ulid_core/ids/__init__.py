"""ULID value type, codec, and validation primitives."""

from packages.ulid_core.ids.components import (
    extract_datetime,
    extract_random_component,
    extract_time,
    extract_time_component,
)
from packages.ulid_core.ids.constants import (
    RANDOM_BYTES_LENGTH,
    TIME_MAX,
    ULID_BYTES_LENGTH,
    ULID_CHARS_LENGTH,
)
from packages.ulid_core.ids.ulid import (
    Ulid,
    parse,
    require_time,
    ulid_bytes_to_str,
    ulid_str_to_bytes,
)
from packages.ulid_core.ids.validation import invalid_reason, is_valid, require_valid

__all__ = [
    "RANDOM_BYTES_LENGTH",
    "TIME_MAX",
    "ULID_BYTES_LENGTH",
    "ULID_CHARS_LENGTH",
    "Ulid",
    "extract_datetime",
    "extract_random_component",
    "extract_time",
    "extract_time_component",
    "invalid_reason",
    "is_valid",
    "parse",
    "require_time",
    "require_valid",
    "ulid_bytes_to_str",
    "ulid_str_to_bytes",
]
