"""Brute-force cosine ranking over the stored chunks."""

from collections.abc import Sequence

from loguru import logger

from ..entities.chunk import Chunk
from ..entities.search_result import SearchResult
from ..utils.similarity import cosine_similarity


class SimilarityRanker:
    """Scores every chunk against a query vector and keeps the best ones.

    This is a linear scan, sized for a handful of documents and a few hundred
    chunks. Chunks with equal scores keep their corpus order.

    Attributes:
        default_top_k: Results returned when ``rank`` is called without top_k
        default_min_score: Threshold used when ``rank`` is called without min_score
    """

    def __init__(self, default_top_k: int = 5, default_min_score: float = 0.3):
        self._validate(default_top_k, default_min_score)
        self.default_top_k = default_top_k
        self.default_min_score = default_min_score

    def rank(
        self,
        query_embedding: Sequence[float],
        corpus: Sequence[Chunk],
        top_k: int | None = None,
        min_score: float | None = None,
    ) -> list[SearchResult]:
        """Rank chunks by cosine similarity to the query.

        Args:
            query_embedding: Query vector of dimension D
            corpus: Chunks to score, in store order
            top_k: Maximum number of results (default: self.default_top_k)
            min_score: Results scoring below this are dropped
                (default: self.default_min_score)

        Returns:
            Results sorted by score descending, ties in corpus order

        Raises:
            ValueError: If top_k is not positive or min_score is outside [-1, 1]
            DimensionMismatchError: If any chunk's embedding length differs
                from the query's; this is a misconfigured embedder, not bad input
        """
        top_k = self.default_top_k if top_k is None else top_k
        min_score = self.default_min_score if min_score is None else min_score
        self._validate(top_k, min_score)

        if not corpus:
            return []

        scored = [
            (cosine_similarity(query_embedding, chunk.embedding), chunk)
            for chunk in corpus
        ]
        # sorted() is stable, so equal scores keep corpus order
        scored = sorted(scored, key=lambda item: item[0], reverse=True)

        results = [
            SearchResult(content=chunk.content, score=score, source=chunk.source)
            for score, chunk in scored
            if score >= min_score
        ][:top_k]

        logger.debug(
            f"Ranked {len(corpus)} chunks: {len(results)} results "
            f"(top_k={top_k}, min_score={min_score})"
        )
        return results

    @staticmethod
    def _validate(top_k: int, min_score: float) -> None:
        if top_k <= 0:
            raise ValueError("top_k must be positive")
        if not -1.0 <= min_score <= 1.0:
            raise ValueError("min_score must be in [-1, 1]")
