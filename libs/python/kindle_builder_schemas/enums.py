"""Enum definitions shared across the manuscript pipeline."""

from __future__ import annotations

from enum import Enum


class ManuscriptStage(str, Enum):
    BLUEPRINT = "BLUEPRINT"
    STRUCTURE = "STRUCTURE"
    PAGES = "PAGES"
    GUIDANCE = "GUIDANCE"
    MARKETING = "MARKETING"
    COMPLETE = "COMPLETE"


class ChapterRole(str, Enum):
    """Narrative role a chapter plays in the arc of a short read."""

    HOOK = "hook"
    FOUNDATION = "foundation"
    DEVELOPMENT = "development"
    CLIMAX = "climax"
    RESOLUTION = "resolution"


class PagePosition(str, Enum):
    OPENING = "opening"
    DEVELOPMENT = "development"
    CLOSING = "closing"


class PageKind(str, Enum):
    LESSON = "lesson"
    STORY = "story"
    RESEARCH = "research"
    PRACTICE = "practice"
    RECAP = "recap"
