"""Base extractor interface."""

from abc import ABC, abstractmethod
from pathlib import PurePath

from pydantic import BaseModel, Field


class ExtractedText(BaseModel):
    """Ordered page texts pulled out of a binary document.

    Attributes:
        pages: One string per page, in page order (may be empty strings)
        page_count: Number of pages the source document reports
    """

    pages: list[str] = Field(default_factory=list)
    page_count: int = 0

    def has_text(self) -> bool:
        """True if at least one page carries non-whitespace text."""
        return any(page.strip() for page in self.pages)


class BaseExtractor(ABC):
    """Abstract base class for document text extractors.

    Extractors turn the raw bytes of an uploaded document into ordered
    per-page text. They work on bytes in memory; nothing touches disk.
    """

    SUPPORTED_EXTENSIONS: frozenset[str] = frozenset()

    def supports(self, filename: str) -> bool:
        """Check if this extractor handles the given file name."""
        return PurePath(filename).suffix.lower() in self.SUPPORTED_EXTENSIONS

    @abstractmethod
    def extract(self, data: bytes) -> ExtractedText:
        """Extract page texts from a document.

        Args:
            data: Raw document bytes

        Returns:
            Extracted pages in document order

        Raises:
            ExtractionError: If the bytes cannot be read as this format
        """
        pass
