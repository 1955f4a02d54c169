from .engine import build_tonal_palette, synthesize_blueprint

__all__ = ["build_tonal_palette", "synthesize_blueprint"]
