"""Manuscript synthesis pipeline and HTTP service."""
