"""Extractor module: binary documents to ordered page texts."""

from .base import BaseExtractor, ExtractedText
from .factory import ExtractorFactory
from .providers.pdf import PdfExtractor
from .providers.simple_text import PlainTextExtractor

__all__ = [
    "BaseExtractor",
    "ExtractedText",
    "ExtractorFactory",
    "PdfExtractor",
    "PlainTextExtractor",
]
