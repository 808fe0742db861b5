"""Shared request-scoped dependencies."""

from fastapi import Request

from semsearch import SearchEngine


def get_engine(request: Request) -> SearchEngine:
    """Dependency injection: the SearchEngine created at application startup."""
    return request.app.state.engine
