"""Shared schemas for the Kindle short-read builder."""

from .enums import ChapterRole, ManuscriptStage, PageKind, PagePosition
from .exceptions import (
    BriefValidationError,
    InputContractError,
    ManuscriptError,
    ManuscriptInvariantError,
)
from .models.manuscript import (
    Blueprint,
    Chapter,
    Guidance,
    Manuscript,
    ManuscriptInputs,
    Marketing,
    Page,
)
from .utils.validators import TARGET_PAGES_MAX, TARGET_PAGES_MIN

__all__ = [
    "Blueprint",
    "BriefValidationError",
    "Chapter",
    "ChapterRole",
    "Guidance",
    "InputContractError",
    "Manuscript",
    "ManuscriptError",
    "ManuscriptInputs",
    "ManuscriptInvariantError",
    "ManuscriptStage",
    "Marketing",
    "Page",
    "PageKind",
    "PagePosition",
    "TARGET_PAGES_MAX",
    "TARGET_PAGES_MIN",
]
