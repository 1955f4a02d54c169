"""Page drafting: expand each chapter allocation into numbered pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from kindle_builder_schemas import Blueprint, Chapter, ManuscriptInputs, Page, PageKind

from ..archetypes import (
    BRIDGE_TO_NEXT,
    BRIDGE_TO_READER,
    CHAPTER_ARCHETYPES,
    PAGE_TEMPLATES,
    chapter_roles,
    page_kind,
)
from ..text import clean_phrase, lower_first


@dataclass
class _SourceRotation:
    """Hands out blueprint stories and research angles in round-robin order."""

    items: Sequence[str]
    cursor: int = 0

    def next(self) -> str:
        item = self.items[self.cursor % len(self.items)]
        self.cursor += 1
        return item


def draft_pages(
    chapters: Sequence[Chapter],
    blueprint: Blueprint,
    inputs: ManuscriptInputs,
) -> list[Page]:
    """Draft every page of the manuscript in reading order.

    Page numbers run from 1 across the whole book and are never reset per
    chapter. Story and research pages consume the blueprint's anchor stories
    and research buckets in order, wrapping around when exhausted.
    """

    roles = chapter_roles(len(chapters))
    stories = _SourceRotation(blueprint.anchor_stories)
    research = _SourceRotation(blueprint.research_buckets)
    base_fields = {
        "core_idea": clean_phrase(inputs.core_idea),
        "audience": clean_phrase(inputs.audience),
        "tone": clean_phrase(inputs.tone).lower(),
    }

    pages: list[Page] = []
    page_number = 1
    for index, chapter in enumerate(chapters):
        next_title = chapters[index + 1].title if index + 1 < len(chapters) else None
        chapter_fields = {
            **base_fields,
            "focus": chapter.focus,
            "focus_lower": lower_first(chapter.focus),
            "chapter_theme": _chapter_theme(chapter),
            "chapter_pages": chapter.page_estimate,
            "bridge": _bridge(next_title),
        }
        chapter_fields["closing_action"] = CHAPTER_ARCHETYPES[roles[index]].closing_action.format(
            **chapter_fields
        )

        for slot in range(chapter.page_estimate):
            kind = page_kind(slot, chapter.page_estimate)
            fields = dict(chapter_fields)
            if kind is PageKind.STORY:
                fields["story"] = stories.next()
            elif kind is PageKind.RESEARCH:
                fields["research"] = research.next()
            pages.append(_render_page(kind, page_number, chapter, fields))
            page_number += 1
    return pages


def _render_page(kind: PageKind, page_number: int, chapter: Chapter, fields: dict) -> Page:
    template = PAGE_TEMPLATES[kind]
    call_to_action: Optional[str] = None
    if template.call_to_action is not None:
        call_to_action = template.call_to_action.format(**fields)
    return Page(
        page_number=page_number,
        chapter_title=chapter.title,
        heading=template.heading.format(**fields),
        content=tuple(paragraph.format(**fields) for paragraph in template.paragraphs),
        call_to_action=call_to_action,
    )


def _chapter_theme(chapter: Chapter) -> str:
    # "Chapter 2: Laying the Groundwork" -> "Laying the Groundwork"
    _, _, theme = chapter.title.partition(": ")
    return theme or chapter.title


def _bridge(next_title: str | None) -> str:
    if next_title is None:
        return BRIDGE_TO_READER
    return BRIDGE_TO_NEXT.format(next_title=next_title)
