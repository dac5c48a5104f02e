"""Context propagation helpers for structured logging.

Bound fields live in a ``ContextVar``, so each thread and asyncio task sees
its own copy and every log line emitted through the stdout handler carries
them without manual repetition.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar("pad_log_context", default={})


def get_context() -> dict[str, str]:
    """Return a shallow copy of current logging context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind values into the current logging context.

    Values are stringified; ``None`` values are skipped.
    """
    updates = {str(key): str(value) for key, value in values.items() if value is not None}
    if updates:
        _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **updates})


def clear_context(*keys: str) -> None:
    """Clear selected keys, or the entire context when no keys are given."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    remaining = {key: value for key, value in _LOG_CONTEXT.get().items() if key not in keys}
    _LOG_CONTEXT.set(remaining)


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of a block, then restore the previous context."""
    token = _LOG_CONTEXT.set(dict(_LOG_CONTEXT.get()))
    try:
        bind_context(**{str(key): value for key, value in values.items()})
        yield
    finally:
        _LOG_CONTEXT.reset(token)
