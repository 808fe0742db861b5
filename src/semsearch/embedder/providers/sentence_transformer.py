"""Local embedder using sentence-transformers (all-MiniLM-L6-v2 by default)."""

from loguru import logger

from ..base import BaseEmbedder

DEFAULT_MODEL = "all-MiniLM-L6-v2"


class SentenceTransformerEmbedder(BaseEmbedder):
    """
    Runs a sentence-transformers model in-process.

    The model is loaded once at construction, so a broken install or an
    unavailable model fails at startup rather than on the first request.
    Vectors are mean-pooled and L2-normalized.

    Requires: pip install semsearch[local]
    """

    def __init__(
        self,
        model_name: str = DEFAULT_MODEL,
        device: str = "cpu",
        batch_size: int = 32,
    ):
        """
        Args:
            model_name: Hugging Face model identifier
            device: Torch device string
            batch_size: Texts per forward pass
        """
        try:
            from sentence_transformers import SentenceTransformer
        except ImportError:
            raise ImportError(
                "sentence-transformers is required for local embeddings. "
                "Install with: pip install semsearch[local]"
            ) from None

        self.model_name = model_name
        self.batch_size = batch_size
        self.model = SentenceTransformer(model_name, device=device)
        self._dimension = self.model.get_sentence_embedding_dimension()
        logger.info(f"Loaded embedding model {model_name} (dimension={self._dimension})")

    def embed(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []

        vectors = self.model.encode(
            texts,
            batch_size=self.batch_size,
            normalize_embeddings=True,
            convert_to_numpy=True,
            show_progress_bar=False,
        )
        return vectors.tolist()

    @property
    def dimension(self) -> int:
        return self._dimension
