"""Chapter architecture: partition the target page count into chapters."""

from __future__ import annotations

from kindle_builder_schemas import Blueprint, Chapter, ManuscriptInputs

from ..archetypes import CHAPTER_ARCHETYPES, chapter_roles
from ..text import clean_phrase

MIN_CHAPTERS = 3
MAX_CHAPTERS = 6
PAGES_PER_CHAPTER = 5


def chapter_count_for(target_pages: int) -> int:
    """Roughly one chapter per five pages, clamped to the supported band."""

    return max(MIN_CHAPTERS, min(MAX_CHAPTERS, target_pages // PAGES_PER_CHAPTER))


def allocate_pages(target_pages: int, chapter_count: int) -> list[int]:
    """Split ``target_pages`` as evenly as possible across ``chapter_count`` chapters.

    When the split is uneven the earliest chapters each absorb one extra page,
    so ``allocate_pages(11, 3) == [4, 4, 3]``.
    """

    if chapter_count < 1 or target_pages < chapter_count:
        raise ValueError(
            f"Cannot allocate {target_pages} pages across {chapter_count} chapters"
        )
    base, extra = divmod(target_pages, chapter_count)
    return [base + 1 if index < extra else base for index in range(chapter_count)]


def architect_chapters(inputs: ManuscriptInputs, blueprint: Blueprint) -> list[Chapter]:
    """Build the ordered chapter list for a brief.

    ``blueprint`` is part of the stage contract only: chapter count, page
    allocation and roles depend on ``target_pages`` alone.
    """

    count = chapter_count_for(inputs.target_pages)
    allocations = allocate_pages(inputs.target_pages, count)
    fields = {
        "core_idea": clean_phrase(inputs.core_idea),
        "audience": clean_phrase(inputs.audience),
    }

    chapters: list[Chapter] = []
    for number, (role, pages) in enumerate(zip(chapter_roles(count), allocations), start=1):
        archetype = CHAPTER_ARCHETYPES[role]
        chapters.append(
            Chapter(
                id=f"chapter-{number}",
                title=f"Chapter {number}: {archetype.title}",
                focus=archetype.focus.format(**fields),
                page_estimate=pages,
                key_questions=tuple(question.format(**fields) for question in archetype.questions),
            )
        )
    return chapters
