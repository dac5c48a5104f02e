"""Process startup: resolve settings, configure logging, build the codec."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from packages.pad_common.config import PadSettings, load_settings
from packages.pad_common.envelope import EnvelopeCodec
from packages.pad_common.logging import configure_logging_from_settings, get_logger

_LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class StartupResult:
    """Settings and codec produced by one startup pass."""

    settings: PadSettings
    codec: EnvelopeCodec


def run_startup(
    *,
    settings: PadSettings | None = None,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> StartupResult:
    """Configure logging and build an ``EnvelopeCodec`` from one settings tree.

    Settings are loaded through the usual cascade unless ``settings`` is given.
    """
    resolved = settings or load_settings(
        cli_params=cli_params,
        environ=environ,
        config_path=config_path,
    )
    configure_logging_from_settings(resolved.logging)
    codec = EnvelopeCodec.from_settings(resolved)
    _LOGGER.info(
        "Envelope codec ready (pretty_print=%s, xml_declaration=%s)",
        resolved.codec.pretty_print,
        resolved.codec.xml_declaration,
    )
    return StartupResult(settings=resolved, codec=codec)
