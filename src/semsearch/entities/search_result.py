"""Result entities returned across the ingest/search boundary."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from ..errors import IngestFailureReason
from .chunk import DocumentSource


class SearchResult(BaseModel):
    """Represents a search result with relevance score.

    Attributes:
        content: The retrieved chunk's text
        score: Cosine similarity in range [-1, 1]
        source: Owning document and page
    """

    content: str
    score: float = Field(..., ge=-1.0, le=1.0)
    source: DocumentSource

    model_config = {
        "frozen": True,  # Results are immutable
    }


class Answer(BaseModel):
    """A quoted extractive answer plus the results it was drawn from."""

    answer: str
    sources: list[SearchResult] = Field(default_factory=list)


class SearchResponse(BaseModel):
    """Outcome of a search request."""

    results: list[SearchResult] = Field(default_factory=list)
    answer: Answer | None = None
    message: str | None = None


class IngestResult(BaseModel):
    """Outcome of an ingestion request."""

    success: bool
    document_name: str = ""
    chunk_count: int = 0
    message: str
    reason: IngestFailureReason | None = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
