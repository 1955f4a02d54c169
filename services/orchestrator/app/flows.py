"""Manuscript assembly: run every stage in order and enforce cross-stage invariants."""

from __future__ import annotations

import logging
from collections import Counter
from time import perf_counter
from typing import Callable, Sequence, TypeVar

from pydantic.alias_generators import to_camel

from kindle_builder_observability import log_context, observe_manuscript, observe_stage_duration
from kindle_builder_schemas import (
    Chapter,
    InputContractError,
    Manuscript,
    ManuscriptInputs,
    ManuscriptInvariantError,
    ManuscriptStage,
    Page,
)
from kindle_builder_schemas.utils.validators import ensure_non_blank, ensure_target_pages

from .blueprint import synthesize_blueprint
from .guidelines import generate_guidance
from .marketing import compose_marketing
from .structure import architect_chapters
from .structure.engine import MIN_CHAPTERS
from .writing import draft_pages

logger = logging.getLogger(__name__)
SERVICE_NAME = "orchestrator"

T = TypeVar("T")


def assemble_manuscript(inputs: ManuscriptInputs, *, service_name: str = SERVICE_NAME) -> Manuscript:
    """Synthesize a complete manuscript for ``inputs``.

    Stages run in a fixed order (blueprint, chapters, pages, guidance,
    marketing) and the result is checked before it is returned. Identical
    inputs always produce an identical manuscript.

    Raises:
        InputContractError: If ``inputs`` violates the brief invariants.
        ManuscriptInvariantError: If the assembled manuscript is inconsistent.
    """

    with log_context(target_pages=inputs.target_pages):
        try:
            ensure_input_contract(inputs)
        except InputContractError:
            logger.error("Brief violates the input contract")
            observe_manuscript(service_name=service_name, target_pages=None, status="rejected")
            raise

        logger.info("Starting manuscript assembly")
        try:
            blueprint = _run_stage(
                ManuscriptStage.BLUEPRINT, service_name, lambda: synthesize_blueprint(inputs)
            )
            chapters = _run_stage(
                ManuscriptStage.STRUCTURE,
                service_name,
                lambda: architect_chapters(inputs, blueprint),
            )
            pages = _run_stage(
                ManuscriptStage.PAGES,
                service_name,
                lambda: draft_pages(chapters, blueprint, inputs),
            )
            guidance = _run_stage(
                ManuscriptStage.GUIDANCE, service_name, lambda: generate_guidance(inputs)
            )
            marketing = _run_stage(
                ManuscriptStage.MARKETING,
                service_name,
                lambda: compose_marketing(inputs, blueprint),
            )
            verify_manuscript(inputs, chapters, pages)
        except ManuscriptInvariantError:
            logger.error("Manuscript failed consistency checks", exc_info=True)
            observe_manuscript(service_name=service_name, target_pages=None, status="failure")
            raise

        manuscript = Manuscript(
            inputs=inputs,
            blueprint=blueprint,
            chapters=tuple(chapters),
            pages=tuple(pages),
            guidance=guidance,
            marketing=marketing,
        )
        observe_manuscript(service_name=service_name, target_pages=inputs.target_pages)
        with log_context(stage=ManuscriptStage.COMPLETE.value):
            logger.info(
                "Completed manuscript assembly",
                extra={"chapter_count": len(chapters), "page_count": len(pages)},
            )
        return manuscript


def ensure_input_contract(inputs: ManuscriptInputs) -> None:
    """Fail fast when an invalid brief slipped past upstream validation."""

    for field_name in ("working_title", "core_idea", "audience", "tone"):
        ensure_non_blank(
            getattr(inputs, field_name), field_name=to_camel(field_name), error=InputContractError
        )
    ensure_target_pages(inputs.target_pages, error=InputContractError)


def verify_manuscript(
    inputs: ManuscriptInputs,
    chapters: Sequence[Chapter],
    pages: Sequence[Page],
) -> None:
    """Check the cross-stage invariants of an assembled manuscript.

    Raises:
        ManuscriptInvariantError: Naming the first check that failed.
    """

    target = inputs.target_pages
    if len(chapters) < MIN_CHAPTERS:
        raise ManuscriptInvariantError(
            f"Expected at least {MIN_CHAPTERS} chapters, got {len(chapters)}"
        )
    if any(chapter.page_estimate < 1 for chapter in chapters):
        raise ManuscriptInvariantError("Every chapter must be allocated at least one page")
    allocated = sum(chapter.page_estimate for chapter in chapters)
    if allocated != target:
        raise ManuscriptInvariantError(
            f"Chapter allocations sum to {allocated} pages, expected {target}"
        )
    if len({chapter.id for chapter in chapters}) != len(chapters):
        raise ManuscriptInvariantError("Chapter ids must be unique")
    if len({chapter.title for chapter in chapters}) != len(chapters):
        raise ManuscriptInvariantError("Chapter titles must be unique")
    if len(pages) != target:
        raise ManuscriptInvariantError(f"Drafted {len(pages)} pages, expected {target}")

    numbers = [page.page_number for page in pages]
    if numbers != list(range(1, target + 1)):
        raise ManuscriptInvariantError("Page numbers must run contiguously from 1")

    owner_by_number: dict[int, str] = {}
    first_page = 1
    for chapter in chapters:
        for number in range(first_page, first_page + chapter.page_estimate):
            owner_by_number[number] = chapter.title
        first_page += chapter.page_estimate
    for page in pages:
        if owner_by_number.get(page.page_number) != page.chapter_title:
            raise ManuscriptInvariantError(
                f"Page {page.page_number} is linked to {page.chapter_title!r}, "
                f"outside that chapter's page range"
            )

    per_chapter = Counter(page.chapter_title for page in pages)
    for chapter in chapters:
        if per_chapter[chapter.title] != chapter.page_estimate:
            raise ManuscriptInvariantError(
                f"{chapter.title!r} holds {per_chapter[chapter.title]} pages, "
                f"expected {chapter.page_estimate}"
            )


def _run_stage(stage: ManuscriptStage, service_name: str, action: Callable[[], T]) -> T:
    stage_start = perf_counter()
    outcome = "success"
    with log_context(stage=stage.value):
        try:
            result = action()
        except ValueError as exc:
            # pydantic.ValidationError is a ValueError too.
            outcome = "failure"
            raise ManuscriptInvariantError(f"{stage.value} stage produced an invalid result") from exc
        except Exception:
            outcome = "failure"
            raise
        finally:
            elapsed = perf_counter() - stage_start
            observe_stage_duration(stage.value, elapsed, service_name=service_name, status=outcome)
            logger.info(
                "Stage finished",
                extra={"duration_ms": round(elapsed * 1000, 3), "outcome": outcome},
            )
    return result
