"""Marketing launch kit: subtitle, pitch, keywords, categories and persona."""

from __future__ import annotations

from kindle_builder_schemas import Blueprint, ManuscriptInputs, Marketing

from ..text import clean_phrase, lower_first, title_case, unique_preserve_order, words
from .templates import (
    AUTHOR_PERSONA_TEMPLATE,
    DEFAULT_CATEGORY,
    ELEVATOR_PITCH_TEMPLATE,
    KEYWORD_BOOSTERS,
    KEYWORD_LIMIT,
    KEYWORD_MIN_LENGTH,
    SHORT_READ_SHELVES,
    SIGNIFICANT_KEYWORD_LIMIT,
    STOPWORDS,
    SUBTITLE_TEMPLATE,
    TOPICAL_CATEGORIES,
    TOPICAL_CATEGORY_LIMIT,
)


def compose_marketing(inputs: ManuscriptInputs, blueprint: Blueprint) -> Marketing:
    core_idea = clean_phrase(inputs.core_idea)
    audience = clean_phrase(inputs.audience)
    terms = significant_terms(inputs)

    return Marketing(
        subtitle=SUBTITLE_TEMPLATE.format(
            core_idea_title=title_case(core_idea),
            audience_title=title_case(audience),
        ),
        elevator_pitch=ELEVATOR_PITCH_TEMPLATE.format(
            working_title=clean_phrase(inputs.working_title),
            promise_lower=lower_first(blueprint.promise),
            measurable_outcome=blueprint.measurable_outcome,
        ),
        author_persona=AUTHOR_PERSONA_TEMPLATE.format(
            tone=clean_phrase(inputs.tone).lower(),
            core_idea=core_idea,
            audience=audience,
        ),
        keywords=tuple(build_keywords(terms)),
        categories=tuple(choose_categories(terms, inputs.target_pages)),
    )


def significant_terms(inputs: ManuscriptInputs) -> list[str]:
    """Distinct content words from the core idea, audience and tone, in that order."""

    candidates = [
        word
        for source in (inputs.core_idea, inputs.audience, inputs.tone)
        for word in words(source)
        if len(word) >= KEYWORD_MIN_LENGTH and word not in STOPWORDS
    ]
    return unique_preserve_order(candidates)


def build_keywords(terms: list[str]) -> list[str]:
    keywords = unique_preserve_order([*terms[:SIGNIFICANT_KEYWORD_LIMIT], *KEYWORD_BOOSTERS])
    return keywords[:KEYWORD_LIMIT]


def choose_categories(terms: list[str], target_pages: int) -> list[str]:
    """Pick a reading-time shelf plus the best topical matches for ``terms``.

    Topical categories are ranked by how many terms they share with the brief;
    ties keep taxonomy order. Fewer than two matches are padded with the
    default category.
    """

    shelf = next(label for last_page, label in SHORT_READ_SHELVES if target_pages <= last_page)

    term_set = set(terms)
    scored = [
        (len(term_set & keywords), position, category)
        for position, (category, keywords) in enumerate(TOPICAL_CATEGORIES)
    ]
    ranked = sorted((item for item in scored if item[0] > 0), key=lambda item: (-item[0], item[1]))
    topical = [category for _, _, category in ranked[:TOPICAL_CATEGORY_LIMIT]]
    if len(topical) < TOPICAL_CATEGORY_LIMIT:
        topical.append(DEFAULT_CATEGORY)
    return unique_preserve_order([shelf, *topical])
