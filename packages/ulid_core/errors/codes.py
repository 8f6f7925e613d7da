"""Shared error code constants.

These constants are stable machine-readable identifiers for ULID failures.
Callers that wrap this package should branch on codes rather than on message
text, which is free to change.
"""

# Validation
VALIDATION_ERROR = "VALIDATION_ERROR"
INVALID_ARGUMENT = "INVALID_ARGUMENT"

# ULID-specific validation
TIME_OUT_OF_RANGE = "TIME_OUT_OF_RANGE"
INVALID_LENGTH = "INVALID_LENGTH"
INVALID_FORMAT = "INVALID_FORMAT"

# Internal
INTERNAL_ERROR = "INTERNAL_ERROR"
UNEXPECTED_EXCEPTION = "UNEXPECTED_EXCEPTION"
