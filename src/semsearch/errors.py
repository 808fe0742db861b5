"""
SemSearch Error Classification System.

This module provides the hierarchy of exceptions raised by the ingestion and
search pipeline.

Error Categories:
-----------------
1. Input Errors: The user supplied something we cannot accept
   - Missing file, unsupported file type, oversize file
   - Duplicate document name, document-count limit reached
   - Empty query

2. Content Errors: The document was accepted but carries nothing searchable
   - ExtractionError: the extractor returned no usable text
   - ChunkingError: every paragraph fell below the minimum chunk length

3. Integration Errors: Components are misconfigured or failing
   - Embedder failures
   - Embedding dimension mismatches

Input and content errors are user-visible and non-fatal. Integration errors
are faults to be fixed, not user mistakes, and are logged at error level.

Usage:
------
    from semsearch.errors import InputError, IntegrationError

    try:
        engine.ingest_file(filename, data)
    except InputError as e:
        logger.warning(f"Rejected upload: {e.message}")
    except IntegrationError as e:
        logger.error(f"Embedder misconfigured: {e.to_dict()}")
"""

from enum import StrEnum
from typing import Any


class IngestFailureReason(StrEnum):
    """Machine-readable reason attached to a failed ingestion."""

    MISSING_FILE = "missing_file"
    UNSUPPORTED_TYPE = "unsupported_type"
    FILE_TOO_LARGE = "file_too_large"
    DOCUMENT_LIMIT = "document_limit"
    DUPLICATE_DOCUMENT = "duplicate_document"
    NO_TEXT = "no_text"
    NO_CHUNKS = "no_chunks"
    EMBEDDING_FAILED = "embedding_failed"
    INTERNAL = "internal"


class SemSearchError(Exception):
    """
    Base exception for all SemSearch errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
        reason: Ingestion failure code, if the error maps to one
    """

    reason: IngestFailureReason | None = None

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.original_error:
            base += f" | Caused by: {type(self.original_error).__name__}: {self.original_error}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "reason": self.reason.value if self.reason else None,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None
        }


# =============================================================================
# Input Errors - User-visible, non-fatal
# =============================================================================

class InputError(SemSearchError):
    """
    Base class for invalid user input.

    These errors are reported back to the user as a structured failure with
    an explanatory message; they never indicate a bug.
    """
    pass


class MissingFileError(InputError):
    """Raised when an upload carries no file."""

    reason = IngestFailureReason.MISSING_FILE

    def __init__(
        self,
        message: str = "No file provided",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class UnsupportedFileTypeError(InputError):
    """Raised when no extractor is registered for the file's extension."""

    reason = IngestFailureReason.UNSUPPORTED_TYPE

    def __init__(
        self,
        message: str = "Unsupported file type",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class FileTooLargeError(InputError):
    """
    Raised when an upload exceeds the configured size limit.

    Attributes:
        size_bytes: Size of the rejected upload
        limit_bytes: Configured maximum
    """

    reason = IngestFailureReason.FILE_TOO_LARGE

    def __init__(
        self,
        message: str = "File is too large",
        size_bytes: int | None = None,
        limit_bytes: int | None = None,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        details = details or {}
        details["size_bytes"] = size_bytes
        details["limit_bytes"] = limit_bytes
        super().__init__(message, details, original_error)
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes


class DocumentLimitError(InputError):
    """Raised when the store already holds the maximum number of documents."""

    reason = IngestFailureReason.DOCUMENT_LIMIT

    def __init__(
        self,
        message: str = "Document limit reached",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class DuplicateDocumentError(InputError):
    """Raised when a document with the same name is already stored."""

    reason = IngestFailureReason.DUPLICATE_DOCUMENT

    def __init__(
        self,
        message: str = "Document already uploaded",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class EmptyQueryError(InputError):
    """Raised when a search query is empty or whitespace."""

    def __init__(
        self,
        message: str = "Query must not be empty",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


# =============================================================================
# Content Errors - Document accepted but not searchable
# =============================================================================

class ExtractionError(SemSearchError):
    """Raised when the extractor yields no usable text."""

    reason = IngestFailureReason.NO_TEXT


class ChunkingError(SemSearchError):
    """Raised when non-empty text produces zero chunks after filtering."""

    reason = IngestFailureReason.NO_CHUNKS


# =============================================================================
# Integration Errors - Misconfigured or failing components
# =============================================================================

class IntegrationError(SemSearchError):
    """
    Base class for faults in collaborating components.

    These indicate a configuration problem (wrong model, wrong dimension,
    unreachable embedding service) rather than bad user input.
    """

    reason = IngestFailureReason.EMBEDDING_FAILED


class EmbeddingError(IntegrationError):
    """Raised when the embedder fails or returns the wrong number of vectors."""
    pass


class DimensionMismatchError(IntegrationError):
    """
    Raised when two vectors that must be compared differ in length.

    Attributes:
        expected: The expected dimension
        actual: The dimension that was found
    """

    def __init__(
        self,
        message: str = "Vector dimension mismatch",
        expected: int | None = None,
        actual: int | None = None,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        details = details or {}
        details["expected"] = expected
        details["actual"] = actual
        super().__init__(message, details, original_error)
        self.expected = expected
        self.actual = actual


# =============================================================================
# Helper Functions
# =============================================================================

def is_user_error(error: Exception) -> bool:
    """
    Check if an error was caused by the user rather than the system.

    Args:
        error: The exception to check

    Returns:
        True for input, extraction and chunking errors
    """
    return isinstance(error, (InputError, ExtractionError, ChunkingError))


def wrap_exception(error: Exception, context: str = "") -> SemSearchError:
    """
    Wrap a foreign exception raised by a collaborator.

    SemSearch errors pass through untouched; anything else is treated as an
    embedder/integration fault.

    Args:
        error: The original exception
        context: Additional context about where the error occurred

    Returns:
        SemSearchError instance wrapping the original error

    Example:
        try:
            vectors = embedder.embed(texts)
        except Exception as e:
            raise wrap_exception(e, context="Embedding chunks")
    """
    if isinstance(error, SemSearchError):
        return error

    message = f"{context}: {error}" if context else str(error)
    return EmbeddingError(message=message, original_error=error)
