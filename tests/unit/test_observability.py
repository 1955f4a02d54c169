"""Tests for the shared logging helpers."""

import json
import logging
import sys

from kindle_builder_observability import current_log_context, log_context
from kindle_builder_observability.logging import ContextFilter, JsonFormatter


def _record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("kindle.test", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_log_context_nests_and_resets() -> None:
    with log_context(stage="PAGES", target_pages=12):
        with log_context(stage="GUIDANCE", target_pages=None):
            assert current_log_context() == {"stage": "GUIDANCE"}
        assert current_log_context() == {"stage": "PAGES", "target_pages": 12}
    assert current_log_context() == {}


def test_context_filter_injects_service_and_context() -> None:
    record = _record()

    with log_context(stage="BLUEPRINT"):
        ContextFilter("orchestrator").filter(record)

    assert record.service == "orchestrator"
    assert record.stage == "BLUEPRINT"


def test_context_filter_keeps_explicit_extra() -> None:
    record = _record(stage="MARKETING")

    with log_context(stage="BLUEPRINT"):
        ContextFilter("orchestrator").filter(record)

    assert record.stage == "MARKETING"


def test_json_formatter_renders_fields_and_extras() -> None:
    record = _record("Stage finished", stage="PAGES", duration_ms=1.5, outcome="success")
    record.service = "orchestrator"
    record.unserialisable = object()

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Stage finished"
    assert payload["level"] == "INFO"
    assert payload["service"] == "orchestrator"
    assert payload["stage"] == "PAGES"
    assert payload["duration_ms"] == 1.5
    assert payload["outcome"] == "success"
    assert "unserialisable" not in payload
    assert "lineno" not in payload


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "kindle.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: boom" in payload["exc_info"]
