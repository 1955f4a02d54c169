from .manuscript import (
    Blueprint,
    Chapter,
    Guidance,
    Manuscript,
    ManuscriptInputs,
    Marketing,
    Page,
    WireModel,
)

__all__ = [
    "Blueprint",
    "Chapter",
    "Guidance",
    "Manuscript",
    "ManuscriptInputs",
    "Marketing",
    "Page",
    "WireModel",
]
