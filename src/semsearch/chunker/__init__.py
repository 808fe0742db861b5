"""Chunker module for text splitting.

This module turns per-page document text into paragraph-level chunks
that carry their document name and page number.
"""

from .base import BaseChunker
from .providers.paragraph import ParagraphChunker

__all__ = ["BaseChunker", "ParagraphChunker"]
