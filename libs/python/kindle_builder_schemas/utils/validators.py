"""Reusable validation helpers."""

from __future__ import annotations

from typing import Callable

TARGET_PAGES_MIN = 10
TARGET_PAGES_MAX = 30


def ensure_non_blank(
    value: str,
    *,
    field_name: str,
    error: Callable[[str], Exception] = ValueError,
) -> str:
    """Return ``value`` stripped of surrounding whitespace.

    Args:
        value: Input text to evaluate.
        field_name: Name used in the raised error message.
        error: Exception type raised on failure.

    Raises:
        The ``error`` type when the value is not a string or is blank.
    """

    if not isinstance(value, str) or not value.strip():
        raise error(f"Missing required field: {field_name}")
    return value.strip()


def ensure_target_pages(
    value: int,
    *,
    error: Callable[[str], Exception] = ValueError,
) -> int:
    """Validate that ``value`` is an integer page count within the supported band."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise error(_target_pages_message())
    if not TARGET_PAGES_MIN <= value <= TARGET_PAGES_MAX:
        raise error(_target_pages_message())
    return value


def _target_pages_message() -> str:
    return f"targetPages must be a number between {TARGET_PAGES_MIN} and {TARGET_PAGES_MAX}"
