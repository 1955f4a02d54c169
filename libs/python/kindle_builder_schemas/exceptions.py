"""Error taxonomy for manuscript synthesis."""

from __future__ import annotations


class ManuscriptError(RuntimeError):
    """Base error raised for manuscript synthesis failures."""


class ManuscriptInvariantError(ManuscriptError):
    """Raised when an assembled manuscript breaks an internal consistency check."""


class InputContractError(ManuscriptInvariantError):
    """Raised when an invalid brief reaches the pipeline despite upstream validation."""


class BriefValidationError(ValueError):
    """Raised when a raw request payload cannot be turned into a brief."""
