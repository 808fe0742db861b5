import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

# Load .env file from the project root
# This file: src/semsearch/config/settings.py
SERVER_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = SERVER_ROOT / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    # Fallback to simple load_dotenv which looks in cwd
    load_dotenv()


class Settings(BaseModel):
    """Global Application Settings"""

    # Environment
    ENV: str = Field(default="development", description="Environment: development, production, testing")
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    # Chunking
    MIN_CHUNK_LENGTH: int = Field(default=50, ge=0, description="Chunks shorter than this are discarded")
    MAX_CHUNK_LENGTH: int = Field(default=1000, gt=0, description="Target maximum characters per chunk")

    # Retrieval
    RELEVANCE_THRESHOLD: float = Field(default=0.3, ge=-1.0, le=1.0, description="Minimum cosine similarity")
    DEFAULT_TOP_K: int = Field(default=5, gt=0, description="Results returned per query")

    # Store limits
    MAX_DOCUMENTS: int = Field(default=5, gt=0, description="Maximum documents held in memory")
    MAX_FILE_SIZE_MB: int = Field(default=5, gt=0, description="Maximum upload size in megabytes")

    # Embedding
    EMBEDDING_DIMENSION: int = Field(default=384, gt=0, description="Vector dimension D")
    EMBEDDER_TYPE: str = Field(default="sentence_transformer", description="Registered embedder type")
    EMBEDDING_MODEL: str = Field(default="all-MiniLM-L6-v2", description="Embedding model name")
    EMBEDDING_BASE_URL: Optional[str] = Field(default=None, description="OpenAI-compatible endpoint")
    EMBEDDING_API_KEY: Optional[str] = Field(default=None, description="Embedding API key")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_chunk_bounds(self) -> "Settings":
        if self.MIN_CHUNK_LENGTH > self.MAX_CHUNK_LENGTH:
            raise ValueError(
                f"MIN_CHUNK_LENGTH ({self.MIN_CHUNK_LENGTH}) must not exceed "
                f"MAX_CHUNK_LENGTH ({self.MAX_CHUNK_LENGTH})"
            )
        return self

    @property
    def max_file_size_bytes(self) -> int:
        return self.MAX_FILE_SIZE_MB * 1024 * 1024


def load_settings() -> Settings:
    """Load settings from environment variables."""
    return Settings(
        ENV=os.getenv("ENV", "development"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        MIN_CHUNK_LENGTH=int(os.getenv("MIN_CHUNK_LENGTH", "50")),
        MAX_CHUNK_LENGTH=int(os.getenv("MAX_CHUNK_LENGTH", "1000")),
        RELEVANCE_THRESHOLD=float(os.getenv("RELEVANCE_THRESHOLD", "0.3")),
        DEFAULT_TOP_K=int(os.getenv("DEFAULT_TOP_K", "5")),
        MAX_DOCUMENTS=int(os.getenv("MAX_DOCUMENTS", "5")),
        MAX_FILE_SIZE_MB=int(os.getenv("MAX_FILE_SIZE_MB", "5")),
        EMBEDDING_DIMENSION=int(os.getenv("EMBEDDING_DIMENSION", "384")),
        EMBEDDER_TYPE=os.getenv("EMBEDDER_TYPE", "sentence_transformer"),
        EMBEDDING_MODEL=os.getenv("EMBEDDING_MODEL", "all-MiniLM-L6-v2"),
        EMBEDDING_BASE_URL=os.getenv("EMBEDDING_BASE_URL"),
        EMBEDDING_API_KEY=os.getenv("EMBEDDING_API_KEY"),
    )


# Global settings instance
settings = load_settings()
