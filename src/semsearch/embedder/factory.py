"""Embedder factory for creating embedder instances."""

from typing import Any

from loguru import logger

from ..config.settings import Settings
from .base import BaseEmbedder
from .providers.mock import MockEmbedder
from .providers.openai_compatible import OpenAICompatibleEmbedder
from .providers.sentence_transformer import SentenceTransformerEmbedder


class EmbedderFactory:
    """Factory for creating embedder instances based on type.

    This factory maintains a registry of available embedder types
    and creates instances based on string identifiers.
    """

    _registry: dict[str, type[BaseEmbedder]] = {
        "mock": MockEmbedder,
        "openai": OpenAICompatibleEmbedder,
        "sentence_transformer": SentenceTransformerEmbedder,
    }

    @classmethod
    def create(cls, embedder_type: str, **params: Any) -> BaseEmbedder:
        """Create an embedder instance by type.

        Args:
            embedder_type: Type identifier (e.g., "mock")
            **params: Initialization parameters for the embedder

        Returns:
            Embedder instance

        Raises:
            ValueError: If embedder type is not registered
        """
        if embedder_type not in cls._registry:
            available = ", ".join(cls._registry.keys())
            raise ValueError(
                f"Unknown embedder type: '{embedder_type}'. "
                f"Available types: {available}"
            )

        embedder_class = cls._registry[embedder_type]
        logger.debug(f"Creating {embedder_class.__name__} with params: {sorted(params)}")

        return embedder_class(**params)

    @classmethod
    def from_settings(cls, settings: Settings) -> BaseEmbedder:
        """Create the embedder described by application settings.

        Raises:
            ValueError: If the type is unknown or its required settings are missing
        """
        embedder_type = settings.EMBEDDER_TYPE

        if embedder_type == "mock":
            return cls.create("mock", dimension=settings.EMBEDDING_DIMENSION)

        if embedder_type == "openai":
            if not settings.EMBEDDING_BASE_URL or not settings.EMBEDDING_API_KEY:
                raise ValueError(
                    "EMBEDDING_BASE_URL and EMBEDDING_API_KEY are required "
                    "for the 'openai' embedder"
                )
            return cls.create(
                "openai",
                base_url=settings.EMBEDDING_BASE_URL,
                api_key=settings.EMBEDDING_API_KEY,
                model=settings.EMBEDDING_MODEL,
                dimension=settings.EMBEDDING_DIMENSION,
            )

        if embedder_type == "sentence_transformer":
            return cls.create("sentence_transformer", model_name=settings.EMBEDDING_MODEL)

        return cls.create(embedder_type)

    @classmethod
    def register(cls, embedder_type: str, embedder_class: type[BaseEmbedder]):
        """Register a new embedder type.

        Args:
            embedder_type: Type identifier
            embedder_class: Embedder class to register

        Raises:
            TypeError: If embedder_class is not a subclass of BaseEmbedder
        """
        if not issubclass(embedder_class, BaseEmbedder):
            raise TypeError(
                f"{embedder_class.__name__} must be a subclass of BaseEmbedder"
            )

        cls._registry[embedder_type] = embedder_class
        logger.info(f"Registered embedder type '{embedder_type}': {embedder_class.__name__}")

    @classmethod
    def list_types(cls) -> list[str]:
        """Get list of available embedder types.

        Returns:
            List of registered embedder type identifiers
        """
        return list(cls._registry.keys())
