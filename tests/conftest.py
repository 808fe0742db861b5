"""Pytest configuration and global fixtures for SemSearch tests."""

from pathlib import Path

import pytest

from semsearch import InMemoryVectorStore, SearchEngine, Settings
from tests.utils.fake_embedders import KeywordEmbedder

# Import shared fixtures
from tests.fixtures.common import (  # noqa: F401
    multipage_text,
    sample_document_files,
    sample_documents_content,
)


# ==================== Component Fixtures ====================

@pytest.fixture
def keyword_embedder():
    return KeywordEmbedder()

@pytest.fixture
def test_settings():
    """Settings sized for the keyword embedder."""
    return Settings(
        ENV="testing",
        EMBEDDER_TYPE="mock",
        EMBEDDING_DIMENSION=8,
        MIN_CHUNK_LENGTH=20,
        MAX_CHUNK_LENGTH=1000,
        RELEVANCE_THRESHOLD=0.3,
        DEFAULT_TOP_K=5,
        MAX_DOCUMENTS=5,
        MAX_FILE_SIZE_MB=1,
    )

@pytest.fixture
def in_memory_vector_store():
    return InMemoryVectorStore(max_documents=5)

@pytest.fixture
def engine(keyword_embedder, test_settings):
    return SearchEngine(keyword_embedder, settings=test_settings)

@pytest.fixture
def mock_engine(mocker):
    """A SearchEngine double for router tests."""
    return mocker.Mock(spec=SearchEngine)

# ==================== Pytest Configuration ====================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")

def pytest_collection_modifyitems(config, items):
    for item in items:
        rel_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
        elif "integration" in rel_path.parts:
            item.add_marker(pytest.mark.integration)
