from .engine import allocate_pages, architect_chapters, chapter_count_for

__all__ = ["allocate_pages", "architect_chapters", "chapter_count_for"]
