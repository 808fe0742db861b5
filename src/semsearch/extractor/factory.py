"""Extractor factory: picks an extractor from a file name's extension."""

from pathlib import PurePath

from loguru import logger

from ..errors import UnsupportedFileTypeError
from .base import BaseExtractor
from .providers.pdf import PdfExtractor
from .providers.simple_text import PlainTextExtractor


class ExtractorFactory:
    """Factory mapping file extensions to extractor classes.

    Supported formats:
    - .pdf: PDF documents (pypdf)
    - .txt: plain UTF-8 text, form feed separated pages
    """

    _registry: dict[str, type[BaseExtractor]] = {
        ".pdf": PdfExtractor,
        ".txt": PlainTextExtractor,
    }

    @classmethod
    def for_filename(cls, filename: str) -> BaseExtractor:
        """Create the extractor that handles ``filename``.

        Args:
            filename: Uploaded file name; only its extension is inspected

        Returns:
            Extractor instance

        Raises:
            UnsupportedFileTypeError: If no extractor handles the extension
        """
        extension = PurePath(filename).suffix.lower()
        if extension not in cls._registry:
            raise UnsupportedFileTypeError(
                f"Only {cls.describe_supported()} files are supported",
                details={"extension": extension or None},
            )

        extractor_class = cls._registry[extension]
        logger.debug(f"Using {extractor_class.__name__} for '{filename}'")
        return extractor_class()

    @classmethod
    def register(cls, extension: str, extractor_class: type[BaseExtractor]):
        """Register an extractor for a file extension (e.g. ".md").

        Raises:
            TypeError: If extractor_class is not a subclass of BaseExtractor
        """
        if not issubclass(extractor_class, BaseExtractor):
            raise TypeError(
                f"{extractor_class.__name__} must be a subclass of BaseExtractor"
            )

        cls._registry[extension.lower()] = extractor_class
        logger.info(f"Registered extractor for '{extension}': {extractor_class.__name__}")

    @classmethod
    def supported_extensions(cls) -> list[str]:
        return list(cls._registry.keys())

    @classmethod
    def describe_supported(cls) -> str:
        """Human-readable list, e.g. "PDF and TXT"."""
        names = [ext.lstrip(".").upper() for ext in cls._registry]
        if len(names) == 1:
            return names[0]
        return ", ".join(names[:-1]) + " and " + names[-1]
