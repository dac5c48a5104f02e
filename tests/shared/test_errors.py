"""Tests for shared error types, codec exceptions, and normalization."""

from __future__ import annotations

from packages.pad_common.errors import (
    EnvelopeCodecError,
    ErrorCategory,
    ParseError,
    SerializationError,
    codes,
    exception_to_error,
)


def test_codec_errors_share_a_base_class() -> None:
    """Both codec failures should be catchable as EnvelopeCodecError."""
    assert issubclass(ParseError, EnvelopeCodecError)
    assert issubclass(SerializationError, EnvelopeCodecError)
    assert issubclass(EnvelopeCodecError, Exception)


def test_codec_error_str_is_its_message() -> None:
    """str() of a codec error should be the human-readable message."""
    error = ParseError(message="expected root element <message>", text="<x/>")

    assert str(error) == "expected root element <message>"
    assert error.operation == "decode"


def test_serialization_error_maps_to_internal_category() -> None:
    """SerializationError should normalize to a non-retryable internal error."""
    detail = SerializationError(message="cannot encode").to_error()

    assert detail.category == ErrorCategory.INTERNAL
    assert detail.code == codes.ENVELOPE_SERIALIZATION_FAILED
    assert detail.retryable is False
    assert detail.metadata == {"operation": "encode"}


def test_exception_to_error_delegates_to_codec_errors() -> None:
    """Codec exceptions should keep their own mapping when normalized."""
    detail = exception_to_error(ParseError(message="bad", text="zzz"))

    assert detail.category == ErrorCategory.VALIDATION
    assert detail.code == codes.ENVELOPE_PARSE_FAILED
    assert detail.metadata["text"] == "zzz"


def test_exception_to_error_maps_generic_exceptions() -> None:
    """ValueError should map to bad input and anything else to internal."""
    assert exception_to_error(ValueError("nope")).code == codes.INVALID_ARGUMENT

    fallback = exception_to_error(RuntimeError("boom"))
    assert fallback.category == ErrorCategory.INTERNAL
    assert fallback.code == codes.UNEXPECTED_EXCEPTION
    assert fallback.retryable is False
    assert fallback.metadata == {"exception_type": "RuntimeError"}


def test_codec_errors_accept_traceback_and_notes() -> None:
    """Raised codec errors must allow the interpreter to attach frame data."""
    error = SerializationError(message="cannot encode")

    error.__traceback__ = None
    error.add_note("while encoding")

    assert error.__notes__ == ["while encoding"]
