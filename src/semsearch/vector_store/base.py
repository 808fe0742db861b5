"""Base vector store interface."""

from abc import ABC, abstractmethod

from ..entities.chunk import Chunk
from ..entities.document import DocumentRecord, StoreStats


class BaseVectorStore(ABC):
    """Abstract base class for document and chunk storage.

    A vector store exclusively owns the document records and the embedded
    chunks of one process. It is not internally synchronized: callers must
    serialize writes (at most one ingestion in flight per store). Reads may
    interleave with a write and observe either the pre- or post-write state.
    """

    @abstractmethod
    def add_document(self, record: DocumentRecord) -> None:
        """Append a document record.

        The caller must already have checked ``document_exists`` and
        ``can_add_document``; the store does not re-validate.

        Args:
            record: Document record to store
        """
        pass

    @abstractmethod
    def add_chunks(self, chunks: list[Chunk]) -> None:
        """Append a batch of embedded chunks.

        Args:
            chunks: Chunks with embeddings to store
        """
        pass

    @abstractmethod
    def document_exists(self, name: str) -> bool:
        """Check whether a document with this name is stored."""
        pass

    @abstractmethod
    def can_add_document(self) -> bool:
        """Check whether the store is below its document limit."""
        pass

    @abstractmethod
    def all_chunks(self) -> list[Chunk]:
        """Get every stored chunk in insertion order.

        Returns:
            A new list; mutating it does not affect the store
        """
        pass

    @abstractmethod
    def all_documents(self) -> list[DocumentRecord]:
        """Get every document record in insertion order.

        Returns:
            A new list; mutating it does not affect the store
        """
        pass

    @abstractmethod
    def remove_document(self, name: str) -> None:
        """Delete a document record and all chunks sourced from it.

        No-op if the document is absent.

        Args:
            name: Document name
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all documents and chunks."""
        pass

    def chunk_count(self) -> int:
        """Get the total number of chunks in this store."""
        return len(self.all_chunks())

    def document_count(self) -> int:
        """Get the total number of documents in this store."""
        return len(self.all_documents())

    def stats(self) -> StoreStats:
        """Get document and chunk counts plus remaining capacity.

        Examples:
            >>> store = InMemoryVectorStore(max_documents=5)
            >>> store.stats().can_add_more
            True
        """
        return StoreStats(
            document_count=self.document_count(),
            chunk_count=self.chunk_count(),
            can_add_more=self.can_add_document(),
        )
