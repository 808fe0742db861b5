"""In-memory vector store implementation."""

from loguru import logger

from ...entities.chunk import Chunk
from ...entities.document import DocumentRecord
from ..base import BaseVectorStore


class InMemoryVectorStore(BaseVectorStore):
    """Process-lifetime store backed by two lists.

    Writes rebind the lists instead of mutating them in place, so a reader
    that already took a reference keeps a consistent view of its collection.

    Attributes:
        max_documents: Maximum number of documents the store accepts
        _documents: Document records in insertion order
        _chunks: Embedded chunks in insertion order
    """

    def __init__(self, max_documents: int = 5):
        """Initialize an empty vector store.

        Args:
            max_documents: Document limit enforced through ``can_add_document``

        Raises:
            ValueError: If max_documents is not positive
        """
        if max_documents <= 0:
            raise ValueError("max_documents must be positive")

        self.max_documents = max_documents
        self._documents: list[DocumentRecord] = []
        self._chunks: list[Chunk] = []
        logger.info(f"Initialized InMemoryVectorStore (max_documents={max_documents})")

    def add_document(self, record: DocumentRecord) -> None:
        self._documents = [*self._documents, record]
        logger.info(
            f"Added document '{record.name}' with {record.chunk_count} chunks "
            f"(documents: {len(self._documents)}/{self.max_documents})"
        )

    def add_chunks(self, chunks: list[Chunk]) -> None:
        self._chunks = [*self._chunks, *chunks]
        logger.debug(f"Added {len(chunks)} chunks to store (total: {len(self._chunks)})")

    def document_exists(self, name: str) -> bool:
        return any(doc.name == name for doc in self._documents)

    def can_add_document(self) -> bool:
        return len(self._documents) < self.max_documents

    def all_chunks(self) -> list[Chunk]:
        return list(self._chunks)

    def all_documents(self) -> list[DocumentRecord]:
        return list(self._documents)

    def chunk_count(self) -> int:
        return len(self._chunks)

    def document_count(self) -> int:
        return len(self._documents)

    def remove_document(self, name: str) -> None:
        before = len(self._chunks)
        self._chunks = [c for c in self._chunks if c.source.document_name != name]
        self._documents = [d for d in self._documents if d.name != name]
        logger.info(f"Removed document '{name}' ({before - len(self._chunks)} chunks)")

    def clear(self) -> None:
        self._chunks = []
        self._documents = []
        logger.info("Cleared vector store")
