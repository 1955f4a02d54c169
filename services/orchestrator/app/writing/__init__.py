from .engine import draft_pages

__all__ = ["draft_pages"]
