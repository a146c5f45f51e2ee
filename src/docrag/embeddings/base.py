"""Abstract base class for embedding providers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EmbeddingProvider(ABC):
    """Interface for text embedding models.

    Every vector a provider returns has exactly ``dimension`` components;
    the vector store is created with the same dimension.
    """

    @abstractmethod
    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """Embed a batch of texts.

        Args:
            texts: Strings to embed.

        Returns:
            List of embedding vectors (same order as input).
        """

    @abstractmethod
    def embed_query(self, query: str) -> list[float]:
        """Embed a single query string.

        Some providers use different models/prefixes for queries vs documents.
        """

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Return the embedding dimensionality."""

    def check_dimension(self, vector: list[float]) -> list[float]:
        """Raise ``ValueError`` if ``vector`` does not match ``dimension``."""
        if len(vector) != self.dimension:
            raise ValueError(
                f"{self.provider_name()} returned a {len(vector)}-dim vector, "
                f"expected {self.dimension}"
            )
        return vector

    @classmethod
    def provider_name(cls) -> str:
        """Return human-readable provider name."""
        return cls.__name__
