"""Tests for the Kindle guidance generator."""

from services.orchestrator.app.guidelines import generate_guidance
from services.orchestrator.app.guidelines.engine import LONG_BAND, SHORT_BAND


def test_short_reads_use_short_band(make_inputs) -> None:
    for pages in (10, 15, 20):
        assert generate_guidance(make_inputs(target_pages=pages)).trim_size == SHORT_BAND.trim_size


def test_longer_reads_use_long_band(make_inputs) -> None:
    for pages in (21, 25, 30):
        guidance = generate_guidance(make_inputs(target_pages=pages))
        assert guidance.trim_size == LONG_BAND.trim_size
        assert guidance.interior == LONG_BAND.interior


def test_matter_checklists_are_fixed(make_inputs) -> None:
    guidance = generate_guidance(make_inputs())

    assert guidance.front_matter == ("Title page", "Copyright page", "Dedication", "Table of contents")
    assert guidance.back_matter[0] == "About the author"
    assert guidance.back_matter[-1] == "Related reads"


def test_guidance_ignores_content_fields(make_inputs) -> None:
    first = generate_guidance(make_inputs(core_idea="learning to paint", tone="calm"))
    second = generate_guidance(make_inputs(core_idea="negotiating a raise", tone="bold"))

    assert first == second
