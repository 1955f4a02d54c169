from .engine import format_band, generate_guidance

__all__ = ["format_band", "generate_guidance"]
