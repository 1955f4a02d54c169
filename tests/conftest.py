"""Shared pytest configuration for the Kindle short-read builder."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
EXTRA_PATHS = [ROOT, ROOT / "libs/python"]
for extra in EXTRA_PATHS:
    if str(extra) not in sys.path:
        sys.path.insert(0, str(extra))

from kindle_builder_schemas import ManuscriptInputs  # noqa: E402


@pytest.fixture
def make_inputs():
    """Build a brief, overriding any field of the sample creator-sprint brief."""

    def _factory(**overrides) -> ManuscriptInputs:
        fields = {
            "working_title": "The 30-Minute Creator Sprint",
            "core_idea": "building a daily creative routine that ships ideas",
            "audience": "solopreneur creators",
            "tone": "energizing and practical",
            "target_pages": 24,
        }
        fields.update(overrides)
        return ManuscriptInputs(**fields)

    return _factory


@pytest.fixture
def sample_inputs(make_inputs) -> ManuscriptInputs:
    return make_inputs()
