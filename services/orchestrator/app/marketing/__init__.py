from .engine import build_keywords, choose_categories, compose_marketing, significant_terms

__all__ = ["build_keywords", "choose_categories", "compose_marketing", "significant_terms"]
