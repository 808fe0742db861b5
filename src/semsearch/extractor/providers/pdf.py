"""PDF text extractor."""

from io import BytesIO

from loguru import logger
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from ...errors import ExtractionError
from ..base import BaseExtractor, ExtractedText


class PdfExtractor(BaseExtractor):
    """PDF text extractor.

    Uses pypdf to pull text page by page. A page whose extraction fails is
    kept as an empty string so page numbers stay aligned with the PDF.

    Usage:
        >>> extractor = PdfExtractor()
        >>> extracted = extractor.extract(Path("document.pdf").read_bytes())
    """

    SUPPORTED_EXTENSIONS = frozenset({".pdf"})

    def extract(self, data: bytes) -> ExtractedText:
        """Extract text from every page of a PDF.

        Args:
            data: Raw PDF bytes

        Returns:
            One entry per PDF page

        Raises:
            ExtractionError: If the bytes are not a readable PDF
        """
        try:
            reader = PdfReader(BytesIO(data))
            total_pages = len(reader.pages)
        except (PdfReadError, ValueError, OSError) as e:
            logger.warning(f"Failed to open PDF: {e}")
            raise ExtractionError("Invalid PDF file", original_error=e) from e

        pages = []
        for page_num in range(total_pages):
            try:
                text = reader.pages[page_num].extract_text() or ""
            except Exception as e:
                logger.warning(f"Failed to extract page {page_num + 1}: {e}")
                text = ""
            pages.append(text.strip())

        extracted = ExtractedText(pages=pages, page_count=total_pages)
        if not extracted.has_text():
            logger.warning("No text content extracted from PDF")

        logger.info(
            f"Parsed PDF: {total_pages} pages, "
            f"{sum(len(p) for p in pages)} characters extracted"
        )
        return extracted
