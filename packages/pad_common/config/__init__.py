"""Public API for configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ENV_PREFIX,
    CodecSettings,
    LoggingSettings,
    PadSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "CodecSettings",
    "LoggingSettings",
    "PadSettings",
    "load_settings",
]
