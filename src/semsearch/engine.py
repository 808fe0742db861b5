"""Search Engine - High-level orchestrator for ingestion and search.

Ingestion runs extract -> chunk -> embed -> store and stops at the first
failure, returning an ``IngestResult`` tagged with the reason. Search embeds
the query, ranks the stored chunks and optionally extracts an answer; it
never raises, degrading to an empty, explained response instead.
"""

import threading

from loguru import logger

from .answer import ExtractiveAnswerer
from .chunker import BaseChunker, ParagraphChunker
from .config.settings import Settings, settings as default_settings
from .embedder import BaseEmbedder
from .entities import (
    Answer,
    Chunk,
    DocumentRecord,
    IngestResult,
    SearchResponse,
    StoreStats,
    TextChunk,
)
from .errors import (
    ChunkingError,
    DimensionMismatchError,
    DocumentLimitError,
    DuplicateDocumentError,
    EmbeddingError,
    EmptyQueryError,
    ExtractionError,
    FileTooLargeError,
    IngestFailureReason,
    IntegrationError,
    MissingFileError,
    SemSearchError,
    is_user_error,
    wrap_exception,
)
from .extractor import ExtractorFactory
from .retrieval import SimilarityRanker
from .vector_store import BaseVectorStore, InMemoryVectorStore

NO_DOCUMENTS_MESSAGE = "No documents have been uploaded yet. Please upload a document to search."
SEARCH_FAILED_MESSAGE = "An error occurred during search. Please try again."
NO_TEXT_MESSAGE = "No text content found in document"
NO_CHUNKS_MESSAGE = "Could not extract meaningful content"
EMBEDDING_FAILED_MESSAGE = "Failed to generate embeddings for document"
INTERNAL_ERROR_MESSAGE = "Failed to process document"


class SearchEngine:
    """High-level orchestrator for document ingestion and semantic search.

    The engine is created once per process with an explicit embedder and
    owns a single store for its lifetime. Writes (ingest, remove, clear) are
    serialized through one lock because the store itself is not
    synchronized; reads take no lock and may observe a write in progress.

    Attributes:
        settings: Limits and defaults
        embedder: Embedding generator shared by ingestion and search
        store: Document and chunk storage
        chunker: Page text splitter
        ranker: Cosine similarity ranker
        answerer: Extractive answer builder
        dimension: Expected embedding dimension D
    """

    def __init__(
        self,
        embedder: BaseEmbedder,
        store: BaseVectorStore | None = None,
        chunker: BaseChunker | None = None,
        ranker: SimilarityRanker | None = None,
        answerer: ExtractiveAnswerer | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the engine, defaulting components from settings.

        Args:
            embedder: Embedding generator (required; created at startup)
            store: Storage backend (default: InMemoryVectorStore)
            chunker: Text chunker (default: ParagraphChunker)
            ranker: Similarity ranker (default: SimilarityRanker)
            answerer: Answer extractor (default: ExtractiveAnswerer)
            settings: Configuration (default: module-level settings)
        """
        self.settings = settings or default_settings
        self.embedder = embedder
        self.store = store or InMemoryVectorStore(max_documents=self.settings.MAX_DOCUMENTS)
        self.chunker = chunker or ParagraphChunker(
            min_chunk_length=self.settings.MIN_CHUNK_LENGTH,
            max_chunk_length=self.settings.MAX_CHUNK_LENGTH,
        )
        self.ranker = ranker or SimilarityRanker(
            default_top_k=self.settings.DEFAULT_TOP_K,
            default_min_score=self.settings.RELEVANCE_THRESHOLD,
        )
        self.answerer = answerer or ExtractiveAnswerer()
        self.dimension = embedder.dimension
        self._write_lock = threading.Lock()

        logger.info(
            f"Initialized SearchEngine with {type(embedder).__name__} "
            f"(dimension={self.dimension})"
        )

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def ingest_file(self, filename: str | None, data: bytes | None) -> IngestResult:
        """Validate, extract and ingest an uploaded file.

        Checks run in order: file presence, type, size, capacity, duplicate
        name, extraction, then chunking, embedding and storage.

        Args:
            filename: Uploaded file name, used as the document name
            data: Raw file bytes

        Returns:
            IngestResult describing success or the first failure
        """
        document_name = filename or ""
        with self._write_lock:
            try:
                if not filename or not filename.strip() or data is None:
                    raise MissingFileError()

                extractor = ExtractorFactory.for_filename(filename)
                self._check_size(len(data))
                self._check_can_add(filename)

                extracted = extractor.extract(data)
                return self._ingest_pages(filename, extracted.pages)
            except SemSearchError as e:
                return self._failure(document_name, e)
            except Exception:
                logger.exception(f"Unexpected error ingesting '{document_name}'")
                return IngestResult(
                    success=False,
                    document_name=document_name,
                    message=INTERNAL_ERROR_MESSAGE,
                    reason=IngestFailureReason.INTERNAL,
                )

    def ingest(self, document_name: str, pages: list[str]) -> IngestResult:
        """Ingest already-extracted page texts as one document.

        Args:
            document_name: Unique document name
            pages: Page texts in order

        Returns:
            IngestResult describing success or the first failure
        """
        with self._write_lock:
            try:
                if not document_name or not document_name.strip():
                    raise MissingFileError("Document name must not be empty")
                self._check_can_add(document_name)
                return self._ingest_pages(document_name, pages)
            except SemSearchError as e:
                return self._failure(document_name, e)
            except Exception:
                logger.exception(f"Unexpected error ingesting '{document_name}'")
                return IngestResult(
                    success=False,
                    document_name=document_name,
                    message=INTERNAL_ERROR_MESSAGE,
                    reason=IngestFailureReason.INTERNAL,
                )

    def _ingest_pages(self, document_name: str, pages: list[str]) -> IngestResult:
        """Chunk, embed and store; caller holds the write lock."""
        if not any(page.strip() for page in pages):
            raise ExtractionError(NO_TEXT_MESSAGE, details={"pages": len(pages)})

        text_chunks = self.chunker.chunk(pages, document_name)
        if not text_chunks:
            raise ChunkingError(NO_CHUNKS_MESSAGE, details={"pages": len(pages)})

        chunks = self._embed_chunks(text_chunks)
        record = DocumentRecord(name=document_name, chunk_count=len(chunks))

        # Both writes happen only after every model was built
        self.store.add_chunks(chunks)
        self.store.add_document(record)

        logger.info(f"Ingested '{document_name}': {len(pages)} pages, {len(chunks)} chunks")
        return IngestResult(
            success=True,
            document_name=document_name,
            chunk_count=len(chunks),
            message=f"Successfully processed {document_name}",
        )

    def _embed_chunks(self, text_chunks: list[TextChunk]) -> list[Chunk]:
        texts = [chunk.content for chunk in text_chunks]
        try:
            vectors = self.embedder.embed(texts)
        except Exception as e:
            raise wrap_exception(e, context="Embedding chunks") from e

        if len(vectors) != len(texts):
            raise EmbeddingError(
                f"Embedder returned {len(vectors)} vectors for {len(texts)} texts"
            )
        for vector in vectors:
            self._check_dimension(vector)

        return [
            Chunk.from_text_chunk(text_chunk, list(vector))
            for text_chunk, vector in zip(text_chunks, vectors)
        ]

    def _check_size(self, size: int) -> None:
        limit = self.settings.max_file_size_bytes
        if size > limit:
            raise FileTooLargeError(
                f"File size exceeds {self.settings.MAX_FILE_SIZE_MB}MB limit",
                size_bytes=size,
                limit_bytes=limit,
            )

    def _check_can_add(self, document_name: str) -> None:
        if not self.store.can_add_document():
            raise DocumentLimitError(
                f"Maximum {self.settings.MAX_DOCUMENTS} documents allowed",
                details={"document_count": self.store.document_count()},
            )
        if self.store.document_exists(document_name):
            raise DuplicateDocumentError(details={"document_name": document_name})

    def _check_dimension(self, vector: list[float]) -> None:
        if len(vector) != self.dimension:
            raise DimensionMismatchError(
                f"Embedding dimension {len(vector)} does not match expected {self.dimension}",
                expected=self.dimension,
                actual=len(vector),
            )

    def _failure(self, document_name: str, error: SemSearchError) -> IngestResult:
        if is_user_error(error):
            logger.warning(f"Rejected '{document_name}': {error.message}")
            message = error.message
        else:
            logger.error(f"Failure ingesting '{document_name}': {error.to_dict()}")
            message = EMBEDDING_FAILED_MESSAGE if isinstance(error, IntegrationError) else error.message

        return IngestResult(
            success=False,
            document_name=document_name,
            chunk_count=0,
            message=message,
            reason=error.reason or IngestFailureReason.INTERNAL,
        )

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    @staticmethod
    def validate_query(query: str | None) -> str:
        """Return the stripped query.

        Raises:
            EmptyQueryError: If the query is missing or whitespace
        """
        if not query or not query.strip():
            raise EmptyQueryError()
        return query.strip()

    def search(
        self,
        query: str,
        include_answer: bool = False,
        top_k: int | None = None,
    ) -> SearchResponse:
        """Rank stored chunks against a query.

        Never raises: an empty query, an empty store or any failure yields an
        empty result list with an explanatory message.

        Args:
            query: Natural-language question
            include_answer: Also extract a quoted answer from the top result
            top_k: Maximum results (default: settings.DEFAULT_TOP_K)

        Returns:
            SearchResponse with ranked results and, if requested, an answer
        """
        try:
            query = self.validate_query(query)
        except EmptyQueryError as e:
            return SearchResponse(message=e.message)

        corpus = self.store.all_chunks()
        if not corpus:
            # Nothing to rank, so the embedder is never called
            answer = Answer(answer=NO_DOCUMENTS_MESSAGE) if include_answer else None
            return SearchResponse(answer=answer, message=NO_DOCUMENTS_MESSAGE)

        try:
            query_embedding = self._embed_query(query)
            results = self.ranker.rank(query_embedding, corpus, top_k=top_k)
            answer = self.answerer.answer(query, results) if include_answer else None
        except IntegrationError as e:
            logger.error(f"Integration failure during search: {e.to_dict()}")
            return self._degraded(include_answer)
        except Exception:
            logger.exception("Unexpected error during search")
            return self._degraded(include_answer)

        logger.info(f"Search returned {len(results)} results for query of {len(query)} chars")
        return SearchResponse(results=results, answer=answer)

    def _embed_query(self, query: str) -> list[float]:
        try:
            vector = self.embedder.embed_query(query)
        except Exception as e:
            raise wrap_exception(e, context="Embedding query") from e
        self._check_dimension(vector)
        return vector

    @staticmethod
    def _degraded(include_answer: bool) -> SearchResponse:
        answer = Answer(answer=SEARCH_FAILED_MESSAGE) if include_answer else None
        return SearchResponse(answer=answer, message=SEARCH_FAILED_MESSAGE)

    # ------------------------------------------------------------------
    # Store management
    # ------------------------------------------------------------------

    def remove_document(self, name: str) -> bool:
        """Remove a document and its chunks.

        Returns:
            True if the document existed
        """
        with self._write_lock:
            existed = self.store.document_exists(name)
            self.store.remove_document(name)
            return existed

    def clear(self) -> None:
        """Remove every document and chunk."""
        with self._write_lock:
            self.store.clear()

    def list_documents(self) -> list[DocumentRecord]:
        return self.store.all_documents()

    def stats(self) -> StoreStats:
        return self.store.stats()
