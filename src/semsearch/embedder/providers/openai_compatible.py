"""
OpenAI-compatible embedder.

Works with any API that follows the OpenAI embeddings format, including
OpenAI, Azure OpenAI, and local models served via compatible APIs
(e.g., LocalAI, Ollama with OpenAI compatibility layer).

Why httpx instead of openai SDK:
    The ingestion and search paths are synchronous, so a plain
    synchronous client avoids event loop conflicts and keeps timeout
    configuration in one place.
"""

import httpx
from loguru import logger

from ..base import BaseEmbedder


class OpenAICompatibleEmbedder(BaseEmbedder):
    """
    Embedder backed by an ``/embeddings`` HTTP endpoint.

    Attributes:
        base_url: The API base URL (e.g., "https://api.openai.com/v1")
        api_key: API authentication key
        model: Model identifier (e.g., "text-embedding-3-small")
        batch_size: Maximum texts per API call (default: 100)
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        dimension: int = 1536,
        batch_size: int = 100,
        timeout: float = 60.0,
        client: httpx.Client | None = None,
    ):
        """
        Initialize the OpenAI-compatible embedder.

        Args:
            base_url: API endpoint base URL (trailing slash will be stripped)
            api_key: Authentication key for the API
            model: Model name to use for embeddings
            dimension: Expected vector dimension, updated from the first response
            batch_size: Maximum texts per API call (default: 100)
            timeout: Request timeout in seconds
            client: Pre-built httpx client (tests inject a mock transport here)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.batch_size = batch_size
        self.client = client or httpx.Client(timeout=timeout)
        self._dimension = dimension

    def embed(self, texts: list[str]) -> list[list[float]]:
        """
        Generate embeddings for a list of texts.

        Args:
            texts: List of strings to embed

        Returns:
            List of embedding vectors, one per input text

        Raises:
            httpx.HTTPError: If the API call fails (no fallback, fail fast)
        """
        if not texts:
            return []

        if len(texts) <= self.batch_size:
            return self._embed_single_batch(texts)

        all_embeddings = []
        total_batches = (len(texts) + self.batch_size - 1) // self.batch_size

        logger.info(
            f"Processing {len(texts)} texts in {total_batches} batches "
            f"(batch_size={self.batch_size})"
        )

        for i in range(0, len(texts), self.batch_size):
            batch = texts[i:i + self.batch_size]
            logger.debug(f"Embedding batch {i // self.batch_size + 1}/{total_batches} ({len(batch)} texts)")
            all_embeddings.extend(self._embed_single_batch(batch))

        return all_embeddings

    def _embed_single_batch(self, texts: list[str]) -> list[list[float]]:
        url = f"{self.base_url}/embeddings"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }
        payload = {
            "input": texts,
            "model": self.model
        }

        try:
            resp = self.client.post(url, headers=headers, json=payload)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Embedding request to {url} failed: {e}")
            raise

        # Sort by index to ensure correct order
        results = sorted(resp.json().get("data", []), key=lambda x: x.get("index", 0))
        vector_list = [item["embedding"] for item in results]

        if vector_list:
            self._dimension = len(vector_list[0])

        return vector_list

    @property
    def dimension(self) -> int:
        """Return the embedding dimension."""
        return self._dimension
