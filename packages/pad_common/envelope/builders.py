"""Convenience constructors for message envelopes."""

from __future__ import annotations

from .model import MessageEnvelope


def new_envelope(message_type: str = "", payload: str = "") -> MessageEnvelope:
    """Build an envelope from verbatim field values.

    Called with no arguments this yields the zero-value envelope ``("", "")``.
    """
    return MessageEnvelope(type=message_type, payload=payload)
