"""Document entity representing an uploaded source document."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class DocumentRecord(BaseModel):
    """
    Bookkeeping record for an ingested document.

    The record and its chunks are created together; ``chunk_count`` always
    matches the number of stored chunks whose source names this document.
    """

    name: str = Field(..., min_length=1)
    chunk_count: int = Field(..., ge=0)
    uploaded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class StoreStats(BaseModel):
    """Snapshot of store occupancy."""

    document_count: int
    chunk_count: int
    can_add_more: bool

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
