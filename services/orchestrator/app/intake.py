"""Normalise raw request payloads into validated briefs."""

from __future__ import annotations

import math
from typing import Optional, Union

from pydantic.alias_generators import to_camel

from kindle_builder_schemas import BriefValidationError, ManuscriptInputs
from kindle_builder_schemas.utils.validators import ensure_non_blank, ensure_target_pages

from .models import GenerateRequest

REQUIRED_FIELDS = ("working_title", "core_idea", "audience", "tone", "target_pages")


def normalise_brief(payload: GenerateRequest) -> ManuscriptInputs:
    """Trim and validate ``payload``.

    Fields are checked in declaration order so the first missing one is
    reported, e.g. ``Missing required field: coreIdea``.

    Raises:
        BriefValidationError: If a field is missing or blank, or the page
            count is not an integer between 10 and 30.
    """

    for field_name in REQUIRED_FIELDS:
        value = getattr(payload, field_name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise BriefValidationError(f"Missing required field: {to_camel(field_name)}")

    strings = {
        field_name: ensure_non_blank(
            getattr(payload, field_name),
            field_name=to_camel(field_name),
            error=BriefValidationError,
        )
        for field_name in REQUIRED_FIELDS[:-1]
    }
    target_pages = ensure_target_pages(
        _coerce_page_count(payload.target_pages), error=BriefValidationError
    )
    return ManuscriptInputs(**strings, target_pages=target_pages)


def _coerce_page_count(value: Union[int, float, str, None]) -> Optional[int]:
    """Accept integral numbers and numeric strings; anything else yields ``None``."""

    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if math.isfinite(value) and float(value).is_integer():
        return int(value)
    return None
