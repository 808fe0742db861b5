"""
SemSearch - Semantic document search with extractive answers.

Uploaded documents are split into paragraph-level chunks, embedded and kept
in memory; questions are answered by ranking chunks with cosine similarity
and quoting the best-matching sentence of the top result.
"""

__version__ = "0.1.0"

from .answer import ExtractiveAnswerer
from .chunker import BaseChunker, ParagraphChunker
from .config import Settings, configure_logging, load_settings
from .embedder import BaseEmbedder, EmbedderFactory, MockEmbedder
from .engine import SearchEngine
from .entities import (
    Answer,
    Chunk,
    DocumentRecord,
    DocumentSource,
    IngestResult,
    SearchResponse,
    SearchResult,
    StoreStats,
    TextChunk,
)
from .extractor import BaseExtractor, ExtractorFactory, PdfExtractor, PlainTextExtractor
from .retrieval import SimilarityRanker
from .utils import cosine_similarity
from .vector_store import BaseVectorStore, InMemoryVectorStore

__all__ = [
    # Version
    "__version__",
    # Entities
    "Chunk",
    "TextChunk",
    "DocumentSource",
    "DocumentRecord",
    "StoreStats",
    "SearchResult",
    "Answer",
    "SearchResponse",
    "IngestResult",
    # Components
    "BaseChunker",
    "ParagraphChunker",
    "BaseVectorStore",
    "InMemoryVectorStore",
    "SimilarityRanker",
    "ExtractiveAnswerer",
    # Collaborators
    "BaseEmbedder",
    "MockEmbedder",
    "EmbedderFactory",
    "BaseExtractor",
    "PdfExtractor",
    "PlainTextExtractor",
    "ExtractorFactory",
    # Config
    "Settings",
    "load_settings",
    "configure_logging",
    # Engine
    "SearchEngine",
    # Utilities
    "cosine_similarity",
]
