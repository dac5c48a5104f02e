"""Shared error code constants.

These constants are stable machine-readable identifiers. Codes specific to
the envelope codec live next to the generic ones so consumers can match on
them without importing codec internals.
"""

# Validation
VALIDATION_ERROR = "VALIDATION_ERROR"
INVALID_ARGUMENT = "INVALID_ARGUMENT"

# Internal
INTERNAL_ERROR = "INTERNAL_ERROR"
UNEXPECTED_EXCEPTION = "UNEXPECTED_EXCEPTION"

# Envelope codec
ENVELOPE_PARSE_FAILED = "ENVELOPE_PARSE_FAILED"
ENVELOPE_SERIALIZATION_FAILED = "ENVELOPE_SERIALIZATION_FAILED"
