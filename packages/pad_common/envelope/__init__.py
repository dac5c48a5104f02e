"""Public message envelope API."""

from .builders import new_envelope
from .codec import (
    EnvelopeCodec,
    decode,
    default_codec,
    encode,
    try_decode,
    try_encode,
)
from .model import MessageEnvelope
from .result import Result, failure, success

__all__ = [
    "EnvelopeCodec",
    "MessageEnvelope",
    "Result",
    "decode",
    "default_codec",
    "encode",
    "failure",
    "new_envelope",
    "success",
    "try_decode",
    "try_encode",
]
