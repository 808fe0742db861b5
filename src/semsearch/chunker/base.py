"""Base chunker interface."""

from abc import ABC, abstractmethod

from ..entities.chunk import TextChunk


class BaseChunker(ABC):
    """Abstract base class for text chunking.

    Chunkers split the ordered page texts of one document into
    content-bearing units tagged with their page of origin.
    """

    @abstractmethod
    def chunk(self, pages: list[str], document_name: str) -> list[TextChunk]:
        """Split page texts into chunks.

        Args:
            pages: Page texts in document order (page 1 first)
            document_name: Name of the owning document

        Returns:
            Chunks in page/paragraph order, without embeddings
        """
        pass
