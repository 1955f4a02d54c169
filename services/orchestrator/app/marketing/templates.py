"""Copy templates and lookup tables for the marketing composer."""

SUBTITLE_TEMPLATE = "A Short-Read Guide to {core_idea_title} for {audience_title}"

ELEVATOR_PITCH_TEMPLATE = (
    "{working_title} is a Kindle short read built around one promise: {promise_lower} "
    "{measurable_outcome}"
)

AUTHOR_PERSONA_TEMPLATE = (
    "Write as a {tone} guide who has lived {core_idea} and now coaches {audience}. "
    "Favour first-hand stories over theory, speak to the reader directly, and end "
    "every chapter with something they can do today."
)

KEYWORD_LIMIT = 7
SIGNIFICANT_KEYWORD_LIMIT = 4
KEYWORD_MIN_LENGTH = 4

KEYWORD_BOOSTERS = (
    "kindle short read",
    "quick guide",
    "step by step",
)

STOPWORDS = frozenset(
    {
        "about", "after", "also", "and", "are", "because", "been", "before",
        "being", "between", "both", "but", "does", "each", "every", "from",
        "have", "into", "just", "like", "made", "make", "more", "most", "much",
        "only", "other", "over", "same", "some", "such", "than", "that", "their",
        "them", "then", "there", "these", "they", "this", "those", "through",
        "very", "want", "were", "what", "when", "where", "which", "while", "who",
        "will", "with", "without", "your", "yours",
    }
)

# Amazon Kindle Short Reads shelves, keyed by the last page each shelf covers.
SHORT_READ_SHELVES = (
    (11, "Kindle Short Reads > 15 minutes (1-11 pages)"),
    (21, "Kindle Short Reads > 30 minutes (12-21 pages)"),
    (32, "Kindle Short Reads > 45 minutes (22-32 pages)"),
)

TOPICAL_CATEGORIES: tuple[tuple[str, frozenset[str]], ...] = (
    (
        "Business & Money > Entrepreneurship",
        frozenset({"business", "entrepreneur", "entrepreneurs", "founder", "founders",
                   "solopreneur", "solopreneurs", "startup", "startups", "freelancer",
                   "freelancers", "sales", "marketing", "clients"}),
    ),
    (
        "Self-Help > Personal Transformation",
        frozenset({"habit", "habits", "routine", "routines", "mindset", "confidence",
                   "growth", "change", "transformation", "motivation", "goals"}),
    ),
    (
        "Arts & Photography > Creativity",
        frozenset({"creative", "creativity", "creator", "creators", "art", "artists",
                   "writing", "writers", "design", "designers", "ideas"}),
    ),
    (
        "Business & Money > Time Management",
        frozenset({"time", "productivity", "productive", "focus", "daily", "minute",
                   "minutes", "schedule", "deadlines", "shipping", "ships"}),
    ),
    (
        "Health, Fitness & Dieting > Mental Health",
        frozenset({"stress", "anxiety", "burnout", "wellbeing", "wellness", "health",
                   "mindfulness", "rest", "sleep"}),
    ),
    (
        "Parenting & Relationships",
        frozenset({"parent", "parents", "parenting", "family", "families", "kids",
                   "children", "marriage", "relationships", "couples"}),
    ),
    (
        "Education & Teaching",
        frozenset({"students", "teachers", "teaching", "learning", "learners",
                   "study", "school", "education"}),
    ),
    (
        "Computers & Technology",
        frozenset({"software", "developers", "coding", "programming", "technology",
                   "tech", "data", "automation", "engineers"}),
    ),
)

TOPICAL_CATEGORY_LIMIT = 2
DEFAULT_CATEGORY = "Self-Help > Personal Transformation"
