"""Paragraph-level chunker with page provenance.

Pages are split on blank lines into paragraphs. Paragraphs that fit are kept
whole; oversized ones are broken into lines or sentences and greedily packed
back together up to the size limit.
"""

import re

from loguru import logger

from ...entities.chunk import DocumentSource, TextChunk
from ..base import BaseChunker

PARAGRAPH_BREAK = re.compile(r"\n[ \t\f\v]*\n\s*")
# Sentences keep their terminal punctuation; trailing text without it is kept too
SENTENCE = re.compile(r"[^.!?]*[.!?]+|[^.!?]+$")
LINE_BREAK = re.compile(r"[ \t]*\n[ \t]*")


class ParagraphChunker(BaseChunker):
    """Chunks pages by paragraph, re-splitting only oversized paragraphs.

    A single line or sentence longer than ``max_chunk_length`` is emitted
    whole rather than truncated, so chunks can exceed the maximum in that one
    case. Chunks shorter than ``min_chunk_length`` are dropped.

    Attributes:
        min_chunk_length: Minimum characters for a chunk to be kept
        max_chunk_length: Target maximum characters per chunk
    """

    def __init__(self, min_chunk_length: int = 50, max_chunk_length: int = 1000):
        """Initialize the paragraph chunker.

        Args:
            min_chunk_length: Chunks shorter than this are discarded
            max_chunk_length: Paragraphs longer than this are re-split

        Raises:
            ValueError: If max_chunk_length <= 0 or min is outside [0, max]
        """
        if max_chunk_length <= 0:
            raise ValueError("max_chunk_length must be positive")
        if min_chunk_length < 0 or min_chunk_length > max_chunk_length:
            raise ValueError("min_chunk_length must be in [0, max_chunk_length]")

        self.min_chunk_length = min_chunk_length
        self.max_chunk_length = max_chunk_length

    def chunk(self, pages: list[str], document_name: str) -> list[TextChunk]:
        """Split page texts into paragraph-level chunks.

        Args:
            pages: Page texts in document order (page 1 first)
            document_name: Name of the owning document

        Returns:
            Chunks in page/paragraph order; empty if no page has enough content
        """
        chunks: list[TextChunk] = []

        for page_number, page_text in enumerate(pages, start=1):
            source = DocumentSource(document_name=document_name, page=page_number)
            for content in self._split_page(page_text):
                if len(content) >= self.min_chunk_length:
                    chunks.append(TextChunk(content=content, source=source))

        logger.debug(
            f"Chunked '{document_name}': {len(pages)} pages -> {len(chunks)} chunks "
            f"(min={self.min_chunk_length}, max={self.max_chunk_length})"
        )
        return chunks

    def _split_page(self, text: str) -> list[str]:
        """Split one page into candidate chunk texts (before length filtering)."""
        if not text or not text.strip():
            return []

        text = text.replace("\r\n", "\n").replace("\r", "\n")
        paragraphs = [p.strip() for p in PARAGRAPH_BREAK.split(text)]

        result = []
        for paragraph in paragraphs:
            if not paragraph:
                continue
            if len(paragraph) <= self.max_chunk_length:
                result.append(paragraph)
            else:
                result.extend(self._split_long_paragraph(paragraph))
        return result

    def _split_long_paragraph(self, paragraph: str) -> list[str]:
        """Break an oversized paragraph into lines or sentences and repack them."""
        lines = [line.strip() for line in paragraph.split("\n") if line.strip()]

        if len(lines) > 1 and all(len(line) <= self.max_chunk_length for line in lines):
            return self._combine(lines)

        # Line breaks inside a sentence become spaces
        sentences = [
            LINE_BREAK.sub(" ", s.strip()) for s in SENTENCE.findall(paragraph) if s.strip()
        ]
        return self._combine(sentences or [LINE_BREAK.sub(" ", paragraph)])

    def _combine(self, units: list[str]) -> list[str]:
        """Greedily join units with a single space without exceeding the maximum.

        Args:
            units: Atomic pieces in order

        Returns:
            Packed chunk texts; an oversized unit becomes its own chunk
        """
        chunks = []
        current = ""

        for unit in units:
            candidate = f"{current} {unit}" if current else unit
            if len(candidate) <= self.max_chunk_length:
                current = candidate
                continue

            if current:
                chunks.append(current)
            current = unit

        if current:
            chunks.append(current)

        return chunks
