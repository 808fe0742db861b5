"""Shared test fixtures for all test types."""

from pathlib import Path

import pytest


@pytest.fixture
def sample_documents_content() -> list[str]:
    """Provide sample document contents, one paragraph-rich text per document."""
    return [
        "Cats are small mammals that have lived alongside people for thousands of years.\n\n"
        "A cat spends a large part of the day asleep and hunts mostly at dawn and dusk.",
        "Dogs are loyal companions and one of the most popular pets in the world.\n\n"
        "A dog can be trained to guide, herd, guard and search for missing people.",
        "Vector search compares dense embeddings instead of matching exact keywords.\n\n"
        "Python libraries make it straightforward to build a small vector search demo.",
    ]


@pytest.fixture
def sample_document_files(tmp_path, sample_documents_content) -> list[Path]:
    """Create temporary text files with sample content."""
    files = []
    for i, content in enumerate(sample_documents_content):
        file_path = tmp_path / f"doc_{i}.txt"
        file_path.write_text(content, encoding="utf-8")
        files.append(file_path)
    return files


@pytest.fixture
def multipage_text() -> bytes:
    """Two pages separated by a form feed, as produced by pdftotext."""
    return (
        "Page one talks about cats. Cats are independent mammals and curious pets.\f"
        "Page two talks about dogs. Dogs are loyal pets that enjoy long walks outside."
    ).encode("utf-8")
