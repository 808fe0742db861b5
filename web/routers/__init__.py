"""API routers."""

from .documents import router as documents_router
from .ingest import router as ingest_router
from .search import router as search_router

__all__ = ["ingest_router", "search_router", "documents_router"]
