"""Plain text extractor."""

from loguru import logger

from ...errors import ExtractionError
from ..base import BaseExtractor, ExtractedText

PAGE_BREAK = "\f"


class PlainTextExtractor(BaseExtractor):
    """Extractor for plain text files.

    Form feed characters mark page boundaries; a file without any is a
    single page.

    Attributes:
        encoding: Character encoding to use (default: utf-8)
    """

    SUPPORTED_EXTENSIONS = frozenset({".txt"})

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def extract(self, data: bytes) -> ExtractedText:
        try:
            text = data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise ExtractionError(
                f"File is not valid {self.encoding} text", original_error=e
            ) from e

        pages = [page.strip() for page in text.split(PAGE_BREAK)]
        logger.debug(f"Parsed text file: {len(pages)} pages, {len(text)} characters")

        return ExtractedText(pages=pages, page_count=len(pages))
