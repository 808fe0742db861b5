"""Extractive answer module."""

from .extractive import NO_RESULTS_MESSAGE, STOPWORDS, ExtractiveAnswerer

__all__ = ["ExtractiveAnswerer", "NO_RESULTS_MESSAGE", "STOPWORDS"]
