from .paragraph import ParagraphChunker

__all__ = ["ParagraphChunker"]
