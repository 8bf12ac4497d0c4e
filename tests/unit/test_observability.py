"""Unit tests for structured logging utilities in ``observability``.

Validates the null handler, trace binding, and event construction behaviour
the composer relies on when emitting per-call diagnostics.
"""

from __future__ import annotations

import logging

import pytest

from field_composer import Field, FieldComposer, bind_trace_id, get_logger
from field_composer.observability import TRACE_ID, log_debug, log_info, make_event, trace_scope


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to avoid surprises."""

    logger = get_logger()
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_trace_id_in_log(caplog: pytest.LogCaptureFixture) -> None:
    """Structured logs should include the bound trace identifier and contextual fields."""

    caplog.set_level(logging.INFO, logger="field_composer")
    bind_trace_id("trace-123")
    try:
        log_info("settings_resolved", operation="settings", field=None)
    finally:
        bind_trace_id(None)
    assert caplog.records
    record = caplog.records[-1]
    assert getattr(record, "context") == {"trace_id": "trace-123", "operation": "settings", "field": None}


def test_bind_trace_id_clears_context() -> None:
    bind_trace_id("trace-temp")
    bind_trace_id(None)
    assert TRACE_ID.get() is None


def test_make_event_merges_optional_payload() -> None:
    event = make_event("merge", "title", {"arguments": 3})
    assert event == {"operation": "merge", "field": "title", "arguments": 3}


def test_composer_emits_debug_event_per_call(caplog: pytest.LogCaptureFixture) -> None:
    """Each combinator call should leave one structured debug record naming the operation."""

    caplog.set_level(logging.DEBUG, logger="field_composer")
    FieldComposer().merge(Field("Haze", name="title"), "Jil Nash")
    contexts = [getattr(record, "context", {}) for record in caplog.records]
    assert any(ctx.get("operation") == "merge" and ctx.get("field") == "title" for ctx in contexts)


def test_trace_scope_restores_previous_id() -> None:
    bind_trace_id("outer")
    try:
        with trace_scope("inner"):
            assert TRACE_ID.get() == "inner"
        assert TRACE_ID.get() == "outer"
    finally:
        bind_trace_id(None)


def test_records_are_skipped_below_logger_level(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="field_composer")
    log_debug("field_composed", operation="merge", field=None)
    assert not caplog.records
