"""Mock embedder for testing (no external model)."""

import hashlib
import random

from loguru import logger

from ..base import BaseEmbedder


class MockEmbedder(BaseEmbedder):
    """Generates deterministic random embeddings for testing.

    WARNING: This embedder is NOT suitable for production use.
    Vectors carry no meaning; identical texts map to identical vectors.

    Attributes:
        dimension: Embedding vector dimension
        seed: Seed mixed into every text's hash
    """

    def __init__(self, dimension: int = 384, seed: int = 42):
        """Initialize the mock embedder.

        Args:
            dimension: Size of embedding vectors
            seed: Seed for deterministic output
        """
        self._dimension = dimension
        self.seed = seed
        logger.warning(
            "Using MockEmbedder - NOT for production use! "
            "Replace with real embedder for actual applications."
        )

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate mock embeddings for texts.

        Uses a stable digest of each text so results survive process restarts.

        Args:
            texts: List of text strings to embed

        Returns:
            List of unit-length random vectors
        """
        logger.debug(f"Generating {len(texts)} mock embeddings")

        embeddings = []
        for text in texts:
            digest = hashlib.sha256(f"{self.seed}:{text}".encode("utf-8")).digest()
            rng = random.Random(int.from_bytes(digest[:8], "big"))

            vec = [rng.gauss(0, 1) for _ in range(self._dimension)]

            # Normalize to unit length
            magnitude = sum(x**2 for x in vec) ** 0.5
            if magnitude > 0:
                vec = [x / magnitude for x in vec]
            else:
                vec = [0.0] * self._dimension

            embeddings.append(vec)

        return embeddings

    @property
    def dimension(self) -> int:
        """Return the embedding dimension."""
        return self._dimension
