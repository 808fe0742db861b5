from .chunk import Chunk, DocumentSource, TextChunk
from .document import DocumentRecord, StoreStats
from .search_result import Answer, IngestResult, SearchResponse, SearchResult

__all__ = [
    "Chunk",
    "DocumentSource",
    "TextChunk",
    "DocumentRecord",
    "StoreStats",
    "SearchResult",
    "Answer",
    "SearchResponse",
    "IngestResult",
]
