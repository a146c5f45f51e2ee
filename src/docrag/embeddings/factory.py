"""Embedding provider factory."""

from __future__ import annotations

from typing import Any

from docrag._registry import ProviderRegistry
from docrag.embeddings.base import EmbeddingProvider

_REGISTRY: ProviderRegistry[EmbeddingProvider] = ProviderRegistry(
    "embedding provider",
    [
        ("openai", "docrag.embeddings.openai_provider", "OpenAIEmbeddingProvider"),
        ("ollama", "docrag.embeddings.ollama_provider", "OllamaEmbeddingProvider"),
        ("huggingface", "docrag.embeddings.huggingface_provider", "HuggingFaceEmbeddingProvider"),
    ],
)


def get_embedding_provider(provider: str = "openai", **kwargs: Any) -> EmbeddingProvider:
    """Get an embedding provider by name.

    Args:
        provider: One of ``openai``, ``ollama``, ``huggingface``.
        **kwargs: Passed to the provider constructor.
    """
    return _REGISTRY.get(provider, **kwargs)


def available_providers() -> list[str]:
    """Return names of registered embedding providers."""
    return _REGISTRY.names()


def clear_cache() -> None:
    """Clear singleton cache (for testing)."""
    _REGISTRY.clear()
