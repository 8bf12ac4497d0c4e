"""Structured logging for combinator calls and settings loading.

Purpose
    Every record the package emits carries a ``context`` mapping (operation,
    field name, trace id, extra detail) so hosts can route composer
    diagnostics without parsing message strings.

Contents
    - ``TRACE_ID``: context variable holding the active trace identifier.
    - ``get_logger``: the ``field_composer`` logger, silent until a host
      attaches a handler.
    - ``bind_trace_id`` / ``trace_scope``: set the trace identifier globally or
      for the duration of a ``with`` block.
    - ``log_debug`` / ``log_info`` / ``log_error``: level-specific emitters.
    - ``make_event``: payload builder for one combinator call.

System Integration
    The composition root, the settings adapters and the CLI log through this
    module. Pure combinators in :mod:`field_composer.application` never log.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Final, Iterator, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("field_composer_trace", default=None)
"""Trace identifier attached to every record, ``None`` when unbound."""

_LOGGER: Final[logging.Logger] = logging.getLogger("field_composer")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the package logger so hosts can attach handlers and levels."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind *trace_id* for subsequent records; ``None`` clears it.

    Examples
    --------
    >>> bind_trace_id('abc123')
    >>> TRACE_ID.get()
    'abc123'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


@contextmanager
def trace_scope(trace_id: str | None) -> Iterator[None]:
    """Bind *trace_id* inside the block and restore the previous one after.

    Examples
    --------
    >>> with trace_scope('cli-1'):
    ...     TRACE_ID.get()
    'cli-1'
    >>> TRACE_ID.get() is None
    True
    """

    token = TRACE_ID.set(trace_id)
    try:
        yield
    finally:
        TRACE_ID.reset(token)


def log_debug(message: str, **fields: Any) -> None:
    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    _emit(logging.ERROR, message, fields)


def make_event(
    operation: str,
    field: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Describe one combinator call.

    ``operation`` is the combinator name, ``field`` the subject's name (if it
    has one); *payload* entries are appended and never replace the two keys.

    Examples
    --------
    >>> make_event('merge', 'title', {'arguments': 3})
    {'operation': 'merge', 'field': 'title', 'arguments': 3}
    >>> make_event('merge', None, {'operation': 'ignored'})
    {'operation': 'merge', 'field': None}
    """

    event: dict[str, Any] = {"operation": operation, "field": field}
    for key, value in (payload or {}).items():
        event.setdefault(key, value)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    if not _LOGGER.isEnabledFor(level):
        return
    context: dict[str, Any] = {"trace_id": TRACE_ID.get(), **fields}
    _LOGGER.log(level, message, extra={"context": context})
