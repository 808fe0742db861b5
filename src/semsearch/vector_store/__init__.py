"""Vector store module for storage of documents and embedded chunks."""

from .base import BaseVectorStore
from .providers.in_memory import InMemoryVectorStore

__all__ = [
    "BaseVectorStore",
    "InMemoryVectorStore",
]
