"""Universally Unique Lexicographically Sortable Identifiers.

The common entry points are re-exported here; subpackages hold the rest:
``ids`` (value type, codec, validation), ``entropy`` (random sources),
``generation`` (strategies and factories), ``errors``, ``logging`` and
``config``; ``runtime.bootstrap`` wires them together for applications.
"""

from packages.ulid_core.runtime import bootstrap
from packages.ulid_core.entropy import ByteRandom, RandomSource, WordRandom
from packages.ulid_core.errors import FormatError, LengthError, RangeError, UlidError
from packages.ulid_core.generation import (
    DefaultStrategy,
    MonotonicStrategy,
    RegressionPolicy,
    UlidFactory,
    build_factory,
)
from packages.ulid_core.ids import Ulid, is_valid, parse

__all__ = [
    "ByteRandom",
    "DefaultStrategy",
    "FormatError",
    "LengthError",
    "MonotonicStrategy",
    "RandomSource",
    "RangeError",
    "RegressionPolicy",
    "Ulid",
    "UlidError",
    "UlidFactory",
    "WordRandom",
    "bootstrap",
    "build_factory",
    "is_valid",
    "parse",
]
