"""Smoke tests for the manuscript schemas."""

import pytest
from pydantic import ValidationError

from kindle_builder_schemas import Chapter, ManuscriptInputs, Page
from kindle_builder_schemas.exceptions import (
    InputContractError,
    ManuscriptError,
    ManuscriptInvariantError,
)


def test_inputs_accept_camel_case_and_snake_case() -> None:
    from_wire = ManuscriptInputs.model_validate(
        {
            "workingTitle": "Tiny Habits",
            "coreIdea": "small habits",
            "audience": "busy parents",
            "tone": "warm",
            "targetPages": 12,
        }
    )
    from_python = ManuscriptInputs(
        working_title="Tiny Habits",
        core_idea="small habits",
        audience="busy parents",
        tone="warm",
        target_pages=12,
    )
    assert from_wire == from_python


def test_inputs_are_immutable(sample_inputs) -> None:
    with pytest.raises(ValidationError):
        sample_inputs.target_pages = 12


def test_models_dump_camel_case_keys() -> None:
    chapter = Chapter(
        id="chapter-1",
        title="Chapter 1: Start",
        focus="Begin",
        page_estimate=3,
        key_questions=("Why?",),
    )
    dumped = chapter.model_dump(by_alias=True)
    assert dumped["pageEstimate"] == 3
    assert dumped["keyQuestions"] == ("Why?",)


def test_chapter_requires_a_page() -> None:
    with pytest.raises(ValidationError):
        Chapter(id="chapter-1", title="Chapter 1", focus="Begin", page_estimate=0, key_questions=())


def test_page_rejects_single_paragraph() -> None:
    with pytest.raises(ValidationError):
        Page(page_number=1, chapter_title="Chapter 1", heading="Intro", content=("Only one",))


def test_page_call_to_action_is_optional() -> None:
    page = Page(page_number=1, chapter_title="Chapter 1", heading="Intro", content=("One", "Two"))
    assert page.call_to_action is None
    assert "callToAction" not in page.model_dump(by_alias=True, exclude_none=True)


def test_error_taxonomy() -> None:
    assert issubclass(InputContractError, ManuscriptInvariantError)
    assert issubclass(ManuscriptInvariantError, ManuscriptError)
    assert issubclass(ManuscriptError, RuntimeError)
