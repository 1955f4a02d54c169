"""Blueprint synthesis: the book-level promise, palette, stories and research."""

from __future__ import annotations

import re

from kindle_builder_schemas import Blueprint, ManuscriptInputs

from ..text import clean_phrase, unique_preserve_order
from .templates import (
    ANCHOR_STORY_TEMPLATES,
    FALLBACK_DESCRIPTORS,
    MEASURABLE_OUTCOME_TEMPLATE,
    OUTCOME_DAYS,
    PALETTE_MAX,
    PALETTE_MIN,
    PROMISE_TEMPLATE,
    RESEARCH_BUCKET_TEMPLATES,
    TONE_COMPANIONS,
    TONE_SEPARATORS,
)


def synthesize_blueprint(inputs: ManuscriptInputs) -> Blueprint:
    """Derive the blueprint for a brief. Pure and deterministic."""

    fields = {
        "core_idea": clean_phrase(inputs.core_idea),
        "audience": clean_phrase(inputs.audience),
        "outcome_days": OUTCOME_DAYS,
    }
    return Blueprint(
        promise=PROMISE_TEMPLATE.format(**fields),
        measurable_outcome=MEASURABLE_OUTCOME_TEMPLATE.format(**fields),
        tonal_palette=tuple(build_tonal_palette(inputs.tone)),
        anchor_stories=tuple(template.format(**fields) for template in ANCHOR_STORY_TEMPLATES),
        research_buckets=tuple(template.format(**fields) for template in RESEARCH_BUCKET_TEMPLATES),
    )


def build_tonal_palette(tone: str) -> list[str]:
    """Expand a tone description into three to five ordered descriptors.

    The author's own wording always comes first, followed by its individual
    parts, their companion words and finally generic fallbacks.
    """

    original = clean_phrase(tone)
    parts = [part.lower() for part in re.split(TONE_SEPARATORS, original, flags=re.IGNORECASE) if part]
    candidates = [original]
    if len(parts) > 1:
        candidates.extend(parts)
    for part in parts:
        candidates.extend(TONE_COMPANIONS.get(part, ()))

    palette = unique_preserve_order(candidates)
    for fallback in FALLBACK_DESCRIPTORS:
        if len(palette) >= PALETTE_MIN:
            break
        palette = unique_preserve_order([*palette, fallback])
    return palette[:PALETTE_MAX]
