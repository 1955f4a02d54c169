"""Pydantic models for the manuscript HTTP API."""

from __future__ import annotations

from typing import Optional, Union

from kindle_builder_schemas import ManuscriptInputs
from kindle_builder_schemas.models import WireModel


class GenerateRequest(WireModel):
    """Raw brief as posted by the client; every field is checked by intake."""

    working_title: Optional[str] = None
    core_idea: Optional[str] = None
    audience: Optional[str] = None
    tone: Optional[str] = None
    target_pages: Optional[Union[int, float, str]] = None


SAMPLE_BRIEF = ManuscriptInputs(
    working_title="The 30-Minute Creator Sprint",
    core_idea="building a daily creative routine that ships ideas",
    audience="solopreneur creators",
    tone="energizing and practical",
    target_pages=24,
)
