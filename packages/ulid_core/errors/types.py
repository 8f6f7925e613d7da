"""Canonical shared error types for ULID operations.

This module defines a transport-agnostic error taxonomy so callers embedding
the codec in services can report failures in one stable shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class ErrorCategory(str, Enum):
    """High-level error categories."""

    UNSPECIFIED = "unspecified"
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error object describing one failed operation."""

    code: str
    message: str
    category: ErrorCategory
    retryable: bool = False
    metadata: Mapping[str, str] = field(default_factory=dict)
