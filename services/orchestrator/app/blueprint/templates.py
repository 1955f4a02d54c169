"""Sentence templates and lookup tables for the blueprint synthesizer."""

PROMISE_TEMPLATE = "Give {audience} a clear, repeatable path to {core_idea}."

MEASURABLE_OUTCOME_TEMPLATE = (
    "Within {outcome_days} days of finishing, {audience} can point to one concrete "
    "result from {core_idea} and a routine that repeats it."
)

OUTCOME_DAYS = 7

ANCHOR_STORY_TEMPLATES = (
    "Origin story: the moment {core_idea} first became personal",
    "Failure story: an early attempt at {core_idea} that fell apart, and what it taught",
    "Transformation story: one of the {audience} who changed course through {core_idea}",
    "Breakthrough story: the small win that proved {core_idea} was worth the effort",
)

RESEARCH_BUCKET_TEMPLATES = (
    "Data: recent numbers on how {audience} spend time and attention on {core_idea}",
    "Case studies: real examples of {core_idea} done well by {audience}",
    "Expert quotes: practitioners who can vouch for {core_idea}",
    "Tools: checklists and templates that make {core_idea} easier to start",
)

# Splits compound tone descriptions such as "energizing and practical".
TONE_SEPARATORS = r"\s*(?:,|/|&|\+|;|\band\b|\bor\b|\bbut\b)\s*"

TONE_COMPANIONS: dict[str, tuple[str, ...]] = {
    "authoritative": ("credible", "precise"),
    "bold": ("direct", "confident"),
    "calm": ("steady", "reassuring"),
    "conversational": ("friendly", "relaxed"),
    "energizing": ("upbeat", "motivating"),
    "energetic": ("upbeat", "motivating"),
    "funny": ("witty", "light"),
    "humorous": ("witty", "light"),
    "inspiring": ("hopeful", "uplifting"),
    "playful": ("witty", "light"),
    "practical": ("actionable", "grounded"),
    "reflective": ("thoughtful", "calm"),
    "serious": ("measured", "precise"),
    "urgent": ("direct", "focused"),
    "warm": ("encouraging", "friendly"),
}

FALLBACK_DESCRIPTORS = ("clear", "encouraging", "confident")

PALETTE_MIN = 3
PALETTE_MAX = 5
