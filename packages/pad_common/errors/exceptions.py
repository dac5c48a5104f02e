"""Raised error types for envelope encode/decode failures."""

from __future__ import annotations

from dataclasses import dataclass

from . import codes
from .factories import internal_error, validation_error
from .types import ErrorDetail


@dataclass(eq=False)
class EnvelopeCodecError(Exception):
    """Base error type for envelope codec failures."""

    message: str
    operation: str

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self.message

    def to_error(self) -> ErrorDetail:
        """Map this exception into a shared ``ErrorDetail``."""
        return internal_error(
            self.message,
            metadata={"operation": self.operation},
        )


@dataclass(eq=False)
class SerializationError(EnvelopeCodecError):
    """An envelope could not be rendered as markup."""

    operation: str = "encode"

    def to_error(self) -> ErrorDetail:
        """Map to an internal-category error."""
        return internal_error(
            self.message,
            code=codes.ENVELOPE_SERIALIZATION_FAILED,
            metadata={"operation": self.operation},
        )


@dataclass(eq=False)
class ParseError(EnvelopeCodecError):
    """Markup text could not be decoded into an envelope.

    ``text`` holds the offending input, truncated to the codec's configured
    excerpt length.
    """

    operation: str = "decode"
    text: str = ""

    def to_error(self) -> ErrorDetail:
        """Map to a validation-category error carrying the input excerpt."""
        return validation_error(
            self.message,
            code=codes.ENVELOPE_PARSE_FAILED,
            metadata={"operation": self.operation, "text": self.text},
        )
