"""JSON log formatter: base fields, correlation id, extras, exceptions."""

import json
import logging
import sys

from cleanups.config.logging import JsonFormatter
from cleanups.core.context import correlation_id_ctx, correlation_scope


def _record(msg="event_create", **extra):
    record = logging.LogRecord("cleanups.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_format_emits_base_fields():
    payload = json.loads(JsonFormatter().format(_record()))
    assert payload["message"] == "event_create"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "cleanups.test"
    assert "timestamp" in payload


def test_format_includes_correlation_id():
    token = correlation_id_ctx.set("corr-42")
    try:
        payload = json.loads(JsonFormatter().format(_record()))
    finally:
        correlation_id_ctx.reset(token)
    assert payload["correlation_id"] == "corr-42"


def test_format_includes_extra_fields():
    payload = json.loads(JsonFormatter().format(_record(status_code=409, event_id=7)))
    assert payload["status_code"] == 409
    assert payload["event_id"] == 7


def test_format_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exc_info"]


def test_correlation_scope_sets_and_restores_id():
    assert correlation_id_ctx.get() is None
    with correlation_scope("run-1") as value:
        assert value == "run-1"
        payload = json.loads(JsonFormatter().format(_record()))
        assert payload["correlation_id"] == "run-1"
    assert correlation_id_ctx.get() is None


def test_correlation_scope_generates_id():
    with correlation_scope() as value:
        assert len(value) == 36
        assert correlation_id_ctx.get() == value
