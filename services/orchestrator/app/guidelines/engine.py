"""Kindle formatting guidance derived from the target page count."""

from __future__ import annotations

from dataclasses import dataclass

from kindle_builder_schemas import Guidance, ManuscriptInputs

SHORT_READ_MAX_PAGES = 20


@dataclass(frozen=True)
class FormatBand:
    trim_size: str
    interior: str


SHORT_BAND = FormatBand(
    trim_size="5 x 8 in",
    interior="Reflowable Kindle eBook; paperback proof in black & white on cream paper",
)
LONG_BAND = FormatBand(
    trim_size="5.5 x 8.5 in",
    interior="Reflowable Kindle eBook; paperback proof in black & white on white paper",
)

FONT = "Body: Georgia 11 pt with 1.3 line spacing; headings: Helvetica Neue Bold 16 pt"
MARGINS = "0.375 in gutter, 0.5 in outside, 0.5 in top and bottom, no bleed"

FRONT_MATTER = (
    "Title page",
    "Copyright page",
    "Dedication",
    "Table of contents",
)
BACK_MATTER = (
    "About the author",
    "Call to action: leave a review and join the reader list",
    "Related reads",
)


def format_band(target_pages: int) -> FormatBand:
    return SHORT_BAND if target_pages <= SHORT_READ_MAX_PAGES else LONG_BAND


def generate_guidance(inputs: ManuscriptInputs) -> Guidance:
    """Return publishing guidance; depends only on ``inputs.target_pages``."""

    band = format_band(inputs.target_pages)
    return Guidance(
        trim_size=band.trim_size,
        interior=band.interior,
        font=FONT,
        margins=MARGINS,
        front_matter=FRONT_MATTER,
        back_matter=BACK_MATTER,
    )
