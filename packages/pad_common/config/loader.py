"""Configuration loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/pad/pad.yaml
4) Model defaults

Environment variable format:
- Prefix: ``PAD_``
- Nested keys: ``__`` separator
- Example: ``PAD_CODEC__PRETTY_PRINT=false`` -> ``codec.pretty_print = False``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping

from .models import DEFAULT_CONFIG_PATH, ENV_PREFIX, PadSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> PadSettings:
    """Resolve ``PadSettings`` from CLI params, env, YAML, and defaults.

    When ``environ`` is given it replaces ``os.environ`` as the environment
    source, which keeps tests hermetic.
    """
    resolved_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    use_process_env = environ is None

    init_data: dict[str, Any] = {}
    if environ is not None:
        init_data = _env_overrides(environ, prefix=ENV_PREFIX)
    if cli_params is not None:
        init_data = _deep_merge(init_data, cli_params)

    class _LoadedPadSettings(PadSettings):
        _config_path: ClassVar[Path] = resolved_path
        _read_process_env: ClassVar[bool] = use_process_env

    return _LoadedPadSettings(**init_data)


def _env_overrides(environ: Mapping[str, str], *, prefix: str) -> dict[str, Any]:
    """Map ``PREFIX_A__B=value`` entries to ``{"a": {"b": "value"}}``.

    Values stay strings; pydantic coerces them against the settings models.
    """
    overrides: dict[str, Any] = {}
    for key, value in environ.items():
        if not key.upper().startswith(prefix):
            continue
        path = [part.lower() for part in key[len(prefix) :].split("__") if part]
        if not path:
            continue
        cursor = overrides
        for part in path[:-1]:
            child = cursor.get(part)
            if not isinstance(child, dict):
                child = cursor[part] = {}
            cursor = child
        cursor[path[-1]] = value
    return overrides


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, recursing into mappings."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        elif isinstance(value, Mapping):
            merged[key] = _deep_merge({}, value)
        else:
            merged[key] = value
    return merged
