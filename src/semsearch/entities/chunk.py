"""Chunk entities: a content-bearing unit of a document with page provenance."""

from uuid import uuid4

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class DocumentSource(BaseModel):
    """Where a chunk came from.

    Attributes:
        document_name: Name of the owning document
        page: 1-indexed page number
    """

    document_name: str
    page: int = Field(..., ge=1)

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class TextChunk(BaseModel):
    """A chunk as produced by the chunker, before embedding."""

    content: str = Field(..., min_length=1)
    source: DocumentSource

    model_config = {"frozen": True}


class Chunk(BaseModel):
    """A stored chunk with its embedding attached.

    Attributes:
        id: Unique identifier (auto-generated UUID if not provided)
        content: The text content of this chunk
        embedding: Vector representation of ``content``
        source: Owning document and page
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    content: str = Field(..., min_length=1)
    embedding: list[float]
    source: DocumentSource

    model_config = {"frozen": True}

    @classmethod
    def from_text_chunk(cls, text_chunk: TextChunk, embedding: list[float]) -> "Chunk":
        return cls(content=text_chunk.content, embedding=embedding, source=text_chunk.source)
