"""Success-or-error result type for non-raising codec calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, TypeVar

from packages.pad_common.errors import (
    EnvelopeCodecError,
    ErrorDetail,
    ParseError,
    SerializationError,
    codes,
)


T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Typed outcome holding either a value or one or more errors."""

    value: T | None
    errors: list[ErrorDetail] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when no errors are present."""
        return len(self.errors) == 0

    @property
    def has_value(self) -> bool:
        """Return True when a value is present."""
        return self.value is not None

    def unwrap(self) -> T:
        """Return the value, or raise the codec error the first detail describes."""
        if self.ok:
            return self.value  # type: ignore[return-value]
        raise _error_from_detail(self.errors[0])


def success(*, value: T) -> Result[T]:
    """Build a successful result with no errors."""
    return Result(value=value, errors=[])


def failure(*, errors: Iterable[ErrorDetail]) -> Result[T]:
    """Build a failed result; at least one error is required."""
    normalized = list(errors)
    if not normalized:
        raise ValueError("failure result requires at least one error")
    return Result(value=None, errors=normalized)


def _error_from_detail(detail: ErrorDetail) -> EnvelopeCodecError:
    """Rebuild the raised error type for one error detail."""
    if detail.code == codes.ENVELOPE_PARSE_FAILED:
        return ParseError(
            message=detail.message,
            text=detail.metadata.get("text", ""),
        )
    if detail.code == codes.ENVELOPE_SERIALIZATION_FAILED:
        return SerializationError(message=detail.message)
    return EnvelopeCodecError(
        message=detail.message,
        operation=detail.metadata.get("operation", "unknown"),
    )
