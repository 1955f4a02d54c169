"""Tests for the page drafter."""

from collections import Counter

import pytest

from kindle_builder_schemas import PageKind, PagePosition
from services.orchestrator.app.archetypes import page_kind, page_position
from services.orchestrator.app.blueprint import synthesize_blueprint
from services.orchestrator.app.structure import architect_chapters
from services.orchestrator.app.writing import draft_pages


def _draft(inputs):
    blueprint = synthesize_blueprint(inputs)
    chapters = architect_chapters(inputs, blueprint)
    return blueprint, chapters, draft_pages(chapters, blueprint, inputs)


def test_page_positions_within_chapter() -> None:
    assert [page_position(slot, 4) for slot in range(4)] == [
        PagePosition.OPENING,
        PagePosition.DEVELOPMENT,
        PagePosition.DEVELOPMENT,
        PagePosition.CLOSING,
    ]
    assert page_position(0, 1) is PagePosition.CLOSING


def test_development_pages_cycle_story_research_practice() -> None:
    assert [page_kind(slot, 6) for slot in range(6)] == [
        PageKind.LESSON,
        PageKind.STORY,
        PageKind.RESEARCH,
        PageKind.PRACTICE,
        PageKind.STORY,
        PageKind.RECAP,
    ]


@pytest.mark.parametrize("target_pages", [10, 11, 17, 24, 30])
def test_numbering_runs_across_chapters(make_inputs, target_pages: int) -> None:
    _, chapters, pages = _draft(make_inputs(target_pages=target_pages))

    assert [page.page_number for page in pages] == list(range(1, target_pages + 1))
    per_chapter = Counter(page.chapter_title for page in pages)
    assert all(per_chapter[chapter.title] == chapter.page_estimate for chapter in chapters)


def test_pages_follow_chapter_order(sample_inputs) -> None:
    _, chapters, pages = _draft(sample_inputs)

    expected = [chapter.title for chapter in chapters for _ in range(chapter.page_estimate)]
    assert [page.chapter_title for page in pages] == expected


def test_call_to_action_only_on_action_pages(sample_inputs) -> None:
    _, chapters, pages = _draft(sample_inputs)

    last_page_numbers = set()
    running = 0
    for chapter in chapters:
        running += chapter.page_estimate
        last_page_numbers.add(running)

    for page in pages:
        is_practice = page.heading.startswith("Practice:")
        if page.page_number in last_page_numbers or is_practice:
            assert page.call_to_action
        else:
            assert page.call_to_action is None


def test_content_references_brief(sample_inputs) -> None:
    _, _, pages = _draft(sample_inputs)

    for page in pages:
        assert 2 <= len(page.content) <= 4
    opening = pages[0]
    assert opening.heading.startswith("Why It Matters:")
    assert any("energizing and practical" in paragraph for paragraph in opening.content)
    assert any("building a daily creative routine that ships ideas" in p for p in opening.content)


def test_story_and_research_pages_rotate_blueprint_sources(sample_inputs) -> None:
    blueprint, _, pages = _draft(sample_inputs)

    story_pages = [page for page in pages if page.heading.startswith("Story:")]
    research_pages = [page for page in pages if page.heading.startswith("Evidence:")]

    assert story_pages and research_pages
    for index, page in enumerate(story_pages):
        story = blueprint.anchor_stories[index % len(blueprint.anchor_stories)]
        assert story in page.content[0]
    for index, page in enumerate(research_pages):
        bucket = blueprint.research_buckets[index % len(blueprint.research_buckets)]
        assert bucket in page.content[0]


def test_closing_pages_bridge_to_next_chapter(sample_inputs) -> None:
    _, chapters, pages = _draft(sample_inputs)

    first_closing = pages[chapters[0].page_estimate - 1]
    assert chapters[1].title in first_closing.content[-1]
    assert "the next chapter is the one they live" in pages[-1].content[-1]
