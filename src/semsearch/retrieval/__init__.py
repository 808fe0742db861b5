"""Retrieval module: ranking stored chunks against a query vector."""

from .ranker import SimilarityRanker

__all__ = ["SimilarityRanker"]
