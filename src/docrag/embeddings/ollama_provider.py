"""Ollama embedding provider — local models, no API key.

Talks to the Ollama REST API (``/api/embed``) with models such as
``nomic-embed-text`` (768 dims) or ``mxbai-embed-large`` (1024 dims).
"""

from __future__ import annotations

import logging

import httpx

from docrag.embeddings.base import EmbeddingProvider

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "nomic-embed-text"
DEFAULT_BASE_URL = "http://localhost:11434"
DEFAULT_DIM = 768


class OllamaEmbeddingProvider(EmbeddingProvider):
    """Embed text via a local Ollama server."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        dimension: int = DEFAULT_DIM,
        timeout: float = 60.0,
        client: httpx.Client | None = None,
    ):
        self.model = model
        self.base_url = base_url.rstrip("/")
        self._dimension = dimension
        self._client = client or httpx.Client(base_url=self.base_url, timeout=timeout)

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []

        resp = self._client.post("/api/embed", json={"model": self.model, "input": texts})
        resp.raise_for_status()
        vectors = resp.json()["embeddings"]
        if len(vectors) != len(texts):
            raise ValueError(f"Ollama returned {len(vectors)} vectors for {len(texts)} inputs")
        return [self.check_dimension(v) for v in vectors]

    def embed_query(self, query: str) -> list[float]:
        return self.embed_texts([query])[0]

    @property
    def dimension(self) -> int:
        return self._dimension
