"""Static archetype tables shared by the chapter architect and page drafter.

The tables are read-only module data; every engine formats them with plain
``str.format`` so identical briefs always yield identical text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from kindle_builder_schemas import ChapterRole, PageKind, PagePosition


@dataclass(frozen=True)
class ChapterArchetype:
    """Templating rules for a chapter playing a given narrative role."""

    role: ChapterRole
    title: str
    focus: str
    questions: tuple[str, ...]
    closing_action: str


@dataclass(frozen=True)
class PageTemplate:
    """Heading, paragraphs and optional call to action for one page kind."""

    kind: PageKind
    heading: str
    paragraphs: tuple[str, ...]
    call_to_action: Optional[str] = None


CHAPTER_ARCHETYPES: dict[ChapterRole, ChapterArchetype] = {
    ChapterRole.HOOK: ChapterArchetype(
        role=ChapterRole.HOOK,
        title="The Wake-Up Call",
        focus="Show {audience} why {core_idea} deserves their attention today",
        questions=(
            "What does ignoring {core_idea} cost {audience} right now?",
            "Which moment made {core_idea} impossible to put off any longer?",
            "What will the reader be able to do by the final page?",
        ),
        closing_action="Write down the one reason {core_idea} matters to you this week.",
    ),
    ChapterRole.FOUNDATION: ChapterArchetype(
        role=ChapterRole.FOUNDATION,
        title="Laying the Groundwork",
        focus="Lay out the core principles that make {core_idea} work",
        questions=(
            "Which principles sit underneath {core_idea}?",
            "What do {audience} most often misunderstand about {core_idea}?",
            "Which terms does the reader need before going further?",
            "What is the smallest proof that {core_idea} works?",
        ),
        closing_action="List the two principles from this chapter you already practise and the one you skip.",
    ),
    ChapterRole.DEVELOPMENT: ChapterArchetype(
        role=ChapterRole.DEVELOPMENT,
        title="Building Momentum",
        focus="Turn {core_idea} into repeatable habits for {audience}",
        questions=(
            "Which daily actions move {core_idea} forward?",
            "Where do {audience} lose momentum, and how do they recover?",
            "Which tools or templates remove friction from {core_idea}?",
            "How will the reader measure progress this week?",
        ),
        closing_action="Schedule the first habit from this chapter for tomorrow and protect the time.",
    ),
    ChapterRole.CLIMAX: ChapterArchetype(
        role=ChapterRole.CLIMAX,
        title="The Breakthrough",
        focus="Push {core_idea} through its hardest test and name the breakthrough",
        questions=(
            "What is the hardest obstacle between {audience} and {core_idea}?",
            "Which story proves that obstacle can be beaten?",
            "What changes for the reader once the breakthrough lands?",
        ),
        closing_action="Name the obstacle you are facing and the first move you will make against it.",
    ),
    ChapterRole.RESOLUTION: ChapterArchetype(
        role=ChapterRole.RESOLUTION,
        title="Making It Last",
        focus="Help {audience} sustain {core_idea} long after the last page",
        questions=(
            "How does {core_idea} become part of who the reader is?",
            "Which routine keeps the results compounding?",
            "What single step should the reader take after closing the book?",
        ),
        closing_action="Commit to your next step with {core_idea} and share it with one person today.",
    ),
}

PAGE_TEMPLATES: dict[PageKind, PageTemplate] = {
    PageKind.LESSON: PageTemplate(
        kind=PageKind.LESSON,
        heading="Why It Matters: {focus}",
        paragraphs=(
            "{chapter_theme} starts from a simple observation: {core_idea} only pays off "
            "when it fits the real days of {audience}.",
            "In this chapter we {focus_lower}. Keep the voice {tone} so the reader feels "
            "guided rather than lectured.",
            "Preview the {chapter_pages} pages ahead: one idea per page, each one ending a "
            "little closer to action.",
        ),
    ),
    PageKind.STORY: PageTemplate(
        kind=PageKind.STORY,
        heading="Story: {focus}",
        paragraphs=(
            "Anchor this page in a story. {story}.",
            "Tell it in a voice that stays {tone}, and slow down at the decision point where "
            "{core_idea} stopped being theory.",
            "Close by naming the lesson {audience} can borrow without living the same story.",
        ),
    ),
    PageKind.RESEARCH: PageTemplate(
        kind=PageKind.RESEARCH,
        heading="Evidence: {focus}",
        paragraphs=(
            "Bring in proof from this research angle. {research}.",
            "Summarise the finding in plain language and tie it directly back to {core_idea}.",
            "Show {audience} what the evidence means for the very next decision they make.",
        ),
    ),
    PageKind.PRACTICE: PageTemplate(
        kind=PageKind.PRACTICE,
        heading="Practice: {focus}",
        paragraphs=(
            "Pause the reading here and put {core_idea} to work on something real.",
            "Walk {audience} through a ten-minute exercise, keeping the instructions {tone} "
            "and the bar for success low enough to start immediately.",
        ),
        call_to_action="Try it now: spend ten minutes applying one idea from \"{chapter_theme}\" "
        "to a real task, then note what changed.",
    ),
    PageKind.RECAP: PageTemplate(
        kind=PageKind.RECAP,
        heading="Key Takeaways: {focus}",
        paragraphs=(
            "Recap what {audience} now know about {core_idea} and why it matters for them.",
            "{bridge}",
        ),
        call_to_action="{closing_action}",
    ),
}

DEVELOPMENT_KIND_CYCLE: tuple[PageKind, ...] = (
    PageKind.STORY,
    PageKind.RESEARCH,
    PageKind.PRACTICE,
)

BRIDGE_TO_NEXT = "Bridge to {next_title}, which builds directly on what this chapter set up."
BRIDGE_TO_READER = "Hand the story over to the reader: the next chapter is the one they live."


def chapter_roles(chapter_count: int) -> list[ChapterRole]:
    """Return the narrative role of each chapter position, in order.

    The first chapter hooks and the last resolves. Between them the first
    chapter lays the foundation, the last (when there are two or more middle
    chapters) is the climax, and any others develop.
    """

    if chapter_count < 2:
        raise ValueError("A manuscript needs at least an opening and a closing chapter")
    middle_count = chapter_count - 2
    middle: list[ChapterRole] = []
    for index in range(middle_count):
        if index == 0:
            middle.append(ChapterRole.FOUNDATION)
        elif index == middle_count - 1:
            middle.append(ChapterRole.CLIMAX)
        else:
            middle.append(ChapterRole.DEVELOPMENT)
    return [ChapterRole.HOOK, *middle, ChapterRole.RESOLUTION]


def page_position(slot: int, chapter_pages: int) -> PagePosition:
    """Position of ``slot`` inside a chapter; the last slot always closes."""

    if slot == chapter_pages - 1:
        return PagePosition.CLOSING
    if slot == 0:
        return PagePosition.OPENING
    return PagePosition.DEVELOPMENT


def page_kind(slot: int, chapter_pages: int) -> PageKind:
    position = page_position(slot, chapter_pages)
    if position is PagePosition.OPENING:
        return PageKind.LESSON
    if position is PagePosition.CLOSING:
        return PageKind.RECAP
    return DEVELOPMENT_KIND_CYCLE[(slot - 1) % len(DEVELOPMENT_KIND_CYCLE)]
