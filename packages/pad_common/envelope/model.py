"""Two-field message envelope value type."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from .codec import EnvelopeCodec


class MessageEnvelope(BaseModel):
    """Immutable message envelope carrying a ``type`` tag and a ``payload``.

    Both fields are always strings. ``None`` is accepted on construction and
    stored as ``""`` so an unset field is indistinguishable from an empty one.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    type: str = ""
    payload: str = ""

    @field_validator("type", "payload", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        """Store unset fields as the empty string."""
        return "" if value is None else value

    def encode(self, *, codec: EnvelopeCodec | None = None) -> str:
        """Render this envelope as XML text.

        Raises ``SerializationError`` when a field holds a character that
        XML 1.0 cannot represent.
        """
        from .codec import default_codec

        return (codec or default_codec()).encode(self)

    @staticmethod
    def decode(
        text: str | bytes, *, codec: EnvelopeCodec | None = None
    ) -> MessageEnvelope:
        """Parse XML text into an envelope, raising ``ParseError`` on bad input."""
        from .codec import default_codec

        return (codec or default_codec()).decode(text)
