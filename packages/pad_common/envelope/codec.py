"""XML codec for message envelopes.

Wire format::

    <?xml version="1.0" encoding="UTF-8" standalone="yes"?>
    <message>
        <type>TEXT</type>
        <payload>TEXT</payload>
    </message>

Decoding ignores root attributes (such as a future ``version``) and unknown
child elements. Missing ``type`` or ``payload`` elements decode to ``""``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from xml.etree import ElementTree
from xml.sax.saxutils import escape

from packages.pad_common.config import CodecSettings, PadSettings
from packages.pad_common.errors import ErrorDetail, ParseError, SerializationError
from packages.pad_common.logging import fields, get_logger, log_context

from .model import MessageEnvelope
from .result import Result, failure, success

ROOT_TAG = "message"
TYPE_TAG = "type"
PAYLOAD_TAG = "payload"
FIELD_TAGS = (TYPE_TAG, PAYLOAD_TAG)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

# CR would be folded into LF by XML end-of-line handling.
_TEXT_ENTITIES = {"\r": "&#13;"}
_UNREPRESENTABLE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")

_LOGGER = get_logger(__name__)


class EnvelopeCodec:
    """Stateless encoder/decoder for ``MessageEnvelope`` XML text.

    A codec only holds immutable settings, so one instance can be shared
    across threads and tasks. Each ``decode`` call builds its own parser.
    """

    __slots__ = ("_settings",)

    def __init__(self, settings: CodecSettings | None = None) -> None:
        self._settings = settings or CodecSettings()

    @classmethod
    def from_settings(cls, settings: PadSettings) -> EnvelopeCodec:
        """Build a codec from resolved runtime settings."""
        return cls(settings.codec)

    @property
    def settings(self) -> CodecSettings:
        return self._settings

    def encode(self, envelope: MessageEnvelope) -> str:
        """Render ``envelope`` as XML text.

        Output is deterministic for a given envelope and settings. Raises
        ``SerializationError`` when a field cannot be represented in XML 1.0.
        """
        try:
            type_text = _escape_text(TYPE_TAG, envelope.type)
            payload_text = _escape_text(PAYLOAD_TAG, envelope.payload)
        except ValueError as exc:
            error = SerializationError(message=f"cannot encode envelope: {exc}")
            with log_context(
                {fields.OPERATION: "encode", fields.ERROR_CODE: error.to_error().code}
            ):
                _LOGGER.warning("Envelope encode failed: %s", error.message)
            raise error from exc

        text = self._render(type_text, payload_text)
        with log_context(
            {
                fields.OPERATION: "encode",
                fields.MESSAGE_TYPE: envelope.type,
                fields.OUTPUT_LENGTH: len(text),
            }
        ):
            _LOGGER.debug("Encoded message envelope")
        return text

    def decode(self, text: str | bytes) -> MessageEnvelope:
        """Parse XML text into a ``MessageEnvelope``.

        Raises ``ParseError`` when the input is oversized, not well-formed,
        has a root other than ``<message>``, repeats a known field, or nests
        markup inside a known field.
        """
        if not isinstance(text, (str, bytes)):
            raise TypeError(f"expected str or bytes, got {type(text).__name__}")

        limit = self._settings.max_input_chars
        if len(text) > limit:
            raise self._parse_error(
                f"input length {len(text)} exceeds limit of {limit}", text
            )

        try:
            root = ElementTree.fromstring(text)
        except (ElementTree.ParseError, UnicodeError) as exc:
            raise self._parse_error(f"input is not well-formed XML: {exc}", text) from exc

        if root.tag != ROOT_TAG:
            raise self._parse_error(
                f"expected root element <{ROOT_TAG}>, found <{root.tag}>", text
            )

        values: dict[str, str] = {}
        for child in root:
            if child.tag not in FIELD_TAGS:
                continue
            if child.tag in values:
                raise self._parse_error(f"duplicate <{child.tag}> element", text)
            if len(child) > 0:
                raise self._parse_error(
                    f"<{child.tag}> must contain text only, found nested elements",
                    text,
                )
            values[child.tag] = child.text or ""

        envelope = MessageEnvelope(
            type=values.get(TYPE_TAG, ""),
            payload=values.get(PAYLOAD_TAG, ""),
        )
        with log_context(
            {
                fields.OPERATION: "decode",
                fields.MESSAGE_TYPE: envelope.type,
                fields.INPUT_LENGTH: len(text),
            }
        ):
            _LOGGER.debug("Decoded message envelope")
        return envelope

    def try_encode(self, envelope: MessageEnvelope) -> Result[str]:
        """Encode without raising; failures come back as error details."""
        try:
            return success(value=self.encode(envelope))
        except SerializationError as exc:
            return failure(errors=[exc.to_error()])

    def try_decode(self, text: str | bytes) -> Result[MessageEnvelope]:
        """Decode without raising; failures come back as error details."""
        try:
            return success(value=self.decode(text))
        except ParseError as exc:
            return failure(errors=[exc.to_error()])

    def _render(self, type_text: str, payload_text: str) -> str:
        elements = [
            f"<{TYPE_TAG}>{type_text}</{TYPE_TAG}>",
            f"<{PAYLOAD_TAG}>{payload_text}</{PAYLOAD_TAG}>",
        ]
        lines: list[str] = []
        if self._settings.xml_declaration:
            lines.append(XML_DECLARATION)

        if not self._settings.pretty_print:
            lines.append(f"<{ROOT_TAG}>{''.join(elements)}</{ROOT_TAG}>")
            return "".join(lines)

        indent = self._settings.indent
        lines.append(f"<{ROOT_TAG}>")
        lines.extend(f"{indent}{element}" for element in elements)
        lines.append(f"</{ROOT_TAG}>")
        return "\n".join(lines) + "\n"

    def _parse_error(self, message: str, text: str | bytes) -> ParseError:
        """Build and log one ``ParseError``; the caller raises it."""
        error = ParseError(
            message=message,
            text=_excerpt(text, self._settings.error_excerpt_chars),
        )
        detail: ErrorDetail = error.to_error()
        with log_context(
            {
                fields.OPERATION: "decode",
                fields.ERROR_CODE: detail.code,
                fields.INPUT_LENGTH: len(text),
            }
        ):
            _LOGGER.warning("Envelope decode failed: %s", message)
        return error


@lru_cache(maxsize=1)
def default_codec() -> EnvelopeCodec:
    """Return the shared codec built from default ``CodecSettings``."""
    return EnvelopeCodec()


def encode(envelope: MessageEnvelope) -> str:
    """Encode with the default codec."""
    return default_codec().encode(envelope)


def decode(text: str | bytes) -> MessageEnvelope:
    """Decode with the default codec."""
    return default_codec().decode(text)


def try_encode(envelope: MessageEnvelope) -> Result[str]:
    return default_codec().try_encode(envelope)


def try_decode(text: str | bytes) -> Result[MessageEnvelope]:
    return default_codec().try_decode(text)


def _escape_text(name: str, value: str) -> str:
    """Escape markup-significant characters for element content.

    Raises ``ValueError`` for characters outside the XML 1.0 ``Char``
    production.
    """
    match = _UNREPRESENTABLE.search(value)
    if match is not None:
        raise ValueError(
            f"{name} contains U+{ord(match.group()):04X} at index {match.start()}, "
            "which XML 1.0 cannot represent"
        )
    return escape(value, _TEXT_ENTITIES)


def _excerpt(text: str | bytes, limit: int) -> str:
    """Return at most ``limit`` characters of the input for error reporting."""
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
