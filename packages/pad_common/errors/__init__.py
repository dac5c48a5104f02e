"""Public shared error API."""

from . import codes
from .exceptions import EnvelopeCodecError, ParseError, SerializationError
from .factories import internal_error, validation_error
from .normalize import exception_to_error
from .types import ErrorCategory, ErrorDetail

__all__ = [
    "EnvelopeCodecError",
    "ErrorCategory",
    "ErrorDetail",
    "ParseError",
    "SerializationError",
    "codes",
    "exception_to_error",
    "internal_error",
    "validation_error",
]
