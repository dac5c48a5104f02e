"""Canonical shared error types.

This module defines a transport-agnostic error taxonomy used wherever an
error has to be carried as data (for example inside a ``Result``) instead of
being raised.
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
    """Structured error object carried by ``Result`` values."""

    code: str
    message: str
    category: ErrorCategory
    retryable: bool = False
    metadata: Mapping[str, str] = field(default_factory=dict)
