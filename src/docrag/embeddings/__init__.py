"""Embedding providers — OpenAI, Ollama, HuggingFace."""

from docrag.embeddings.base import EmbeddingProvider
from docrag.embeddings.factory import available_providers, get_embedding_provider

__all__ = [
    "EmbeddingProvider",
    "available_providers",
    "get_embedding_provider",
]
