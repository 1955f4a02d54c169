"""Centralised logging configuration helpers."""

from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Iterator


_LOG_CONTEXT: ContextVar[Dict[str, Any]] = ContextVar("kindle_builder_log_context", default={})

# Attributes every LogRecord carries; never copied into the JSON payload.
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "observability_context"}


class ContextFilter(logging.Filter):
    """Inject contextual fields captured via :func:`log_context`."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - inherited docstring
        context = _LOG_CONTEXT.get()
        if context:
            record.observability_context = context
            for key, value in context.items():
                if not hasattr(record, key):
                    setattr(record, key, value)
        if getattr(record, "service", None) is None:
            record.service = self.service_name
        return True


class JsonFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    FIELD_ORDER = (
        "service",
        "stage",
        "request_id",
        "route",
        "method",
        "status_code",
        "target_pages",
        "chapter_count",
        "page_count",
        "duration_ms",
    )

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - inherited docstring
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in self.FIELD_ORDER:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value

        context = getattr(record, "observability_context", {})
        if isinstance(context, dict):
            for key, value in context.items():
                if value is not None:
                    payload.setdefault(key, value)

        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRIBUTES or key in payload or key.startswith("_"):
                continue
            if _is_json_safe(value):
                payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)
        return json.dumps(payload, ensure_ascii=True)


def _is_json_safe(value: Any) -> bool:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return False
    return True


def setup_logging(
    service_name: str,
    level: str | int = "INFO",
    *,
    capture_warnings: bool | None = None,
) -> None:
    """Configure JSON logging for the current process.

    Safe to call more than once; later calls replace the handler configuration
    and adjust the level.
    """

    handlers = ["default"]
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "kindle_builder_observability.logging.JsonFormatter",
            }
        },
        "filters": {
            "context": {
                "()": "kindle_builder_observability.logging.ContextFilter",
                "service_name": service_name,
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "stream": sys.stdout,
                "formatter": "json",
                "filters": ["context"],
            }
        },
        "root": {
            "level": level,
            "handlers": handlers,
        },
        "loggers": {
            "uvicorn": {"handlers": handlers, "level": level, "propagate": False},
            "uvicorn.error": {"handlers": handlers, "level": level, "propagate": False},
            "uvicorn.access": {"handlers": handlers, "level": level, "propagate": False},
        },
    }

    logging.config.dictConfig(config)

    if capture_warnings is None:
        capture_env = os.getenv("KINDLE_BUILDER_CAPTURE_WARNINGS", "")
        capture_warnings = capture_env.strip().lower() in {"1", "true", "t", "yes", "y"}

    if capture_warnings:
        logging.captureWarnings(True)


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Temporarily bind contextual information that should accompany logs."""

    updated = dict(_LOG_CONTEXT.get())
    for key, value in kwargs.items():
        if value is None:
            updated.pop(key, None)
        else:
            updated[key] = value
    token = _LOG_CONTEXT.set(updated)
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def current_log_context() -> dict[str, Any]:
    """Return a copy of the fields bound by the innermost :func:`log_context`."""

    return dict(_LOG_CONTEXT.get())
