"""Utility functions for SemSearch."""

from .similarity import cosine_similarity

__all__ = ["cosine_similarity"]
