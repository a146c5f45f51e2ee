"""Vector store factory."""

from __future__ import annotations

from typing import Any

from docrag._registry import ProviderRegistry
from docrag.vectorstore.base import VectorStore

_REGISTRY: ProviderRegistry[VectorStore] = ProviderRegistry(
    "vector store",
    [
        ("faiss", "docrag.vectorstore.faiss_store", "FAISSStore"),
        ("qdrant", "docrag.vectorstore.qdrant_store", "QdrantStore"),
        ("pgvector", "docrag.vectorstore.pgvector_store", "PgVectorStore"),
    ],
)


def get_vector_store(provider: str = "faiss", **kwargs: Any) -> VectorStore:
    """Get a vector store by name.

    Args:
        provider: One of ``faiss``, ``qdrant``, ``pgvector``.
        **kwargs: Passed to the store constructor.
    """
    return _REGISTRY.get(provider, **kwargs)


def available_stores() -> list[str]:
    """Return names of registered vector stores."""
    return _REGISTRY.names()


def clear_cache() -> None:
    """Clear singleton cache (for testing)."""
    _REGISTRY.clear()
