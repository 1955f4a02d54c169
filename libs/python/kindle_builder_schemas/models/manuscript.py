"""Domain models describing a brief and the manuscript synthesised from it."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Immutable model serialised with camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ManuscriptInputs(WireModel):
    """Normalised brief supplied by the requester.

    Upstream intake guarantees trimmed, non-empty strings and a page count in
    the supported band; the pipeline re-checks both before synthesis.
    """

    working_title: str
    core_idea: str
    audience: str
    tone: str
    target_pages: int


class Blueprint(WireModel):
    """Book-level strategy derived once per brief."""

    promise: str
    measurable_outcome: str
    tonal_palette: tuple[str, ...]
    anchor_stories: tuple[str, ...]
    research_buckets: tuple[str, ...]


class Chapter(WireModel):
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    focus: str
    page_estimate: int = Field(..., ge=1)
    key_questions: tuple[str, ...]


class Page(WireModel):
    """One Kindle-page-equivalent unit of draft content."""

    page_number: int = Field(..., ge=1)
    chapter_title: str
    heading: str
    content: tuple[str, ...]
    call_to_action: Optional[str] = None

    @field_validator("content")
    @classmethod
    def validate_paragraph_count(cls, content: tuple[str, ...]) -> tuple[str, ...]:
        if not 2 <= len(content) <= 4:
            raise ValueError("A page holds between two and four paragraphs")
        return content


class Guidance(WireModel):
    trim_size: str
    interior: str
    font: str
    margins: str
    front_matter: tuple[str, ...]
    back_matter: tuple[str, ...]


class Marketing(WireModel):
    subtitle: str
    elevator_pitch: str
    author_persona: str
    keywords: tuple[str, ...]
    categories: tuple[str, ...]


class Manuscript(WireModel):
    """Aggregate returned to the caller for a single brief."""

    inputs: ManuscriptInputs
    blueprint: Blueprint
    chapters: tuple[Chapter, ...]
    pages: tuple[Page, ...]
    guidance: Guidance
    marketing: Marketing
