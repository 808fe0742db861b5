"""Embedder module for vector generation.

This module provides embedding functionality with multiple
implementations and a factory for creating embedders.
"""

from .base import BaseEmbedder
from .factory import EmbedderFactory
from .providers.mock import MockEmbedder
from .providers.openai_compatible import OpenAICompatibleEmbedder
from .providers.sentence_transformer import SentenceTransformerEmbedder

__all__ = [
    "BaseEmbedder",
    "MockEmbedder",
    "OpenAICompatibleEmbedder",
    "SentenceTransformerEmbedder",
    "EmbedderFactory",
]
