"""Shared observability helpers used by the Kindle short-read builder."""

from .logging import current_log_context, log_context, setup_logging
from .metrics import (
    observe_manuscript,
    observe_stage_duration,
    setup_fastapi_metrics,
)

__all__ = [
    "current_log_context",
    "log_context",
    "observe_manuscript",
    "observe_stage_duration",
    "setup_fastapi_metrics",
    "setup_logging",
]
