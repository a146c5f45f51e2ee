"""OpenAI embedding provider — text-embedding-3-small by default (1536 dims).

Requires the ``openai`` extra and ``OPENAI_API_KEY``.
"""

from __future__ import annotations

import logging
from typing import Any

from docrag.embeddings.base import EmbeddingProvider

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "text-embedding-3-small"

_DIMENSION_MAP = {
    "text-embedding-3-small": 1536,
    "text-embedding-3-large": 3072,
    "text-embedding-ada-002": 1536,
}

BATCH_SIZE = 2048  # API limit on inputs per request


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """Embed text via the OpenAI Embeddings API."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
        dimension: int | None = None,
        client: Any = None,
    ):
        self.model = model
        self._dimension = dimension or _DIMENSION_MAP.get(model, 1536)

        if client is None:
            try:
                import openai
            except ImportError as exc:
                raise ImportError("openai package required: pip install docrag[openai]") from exc
            client = openai.OpenAI(api_key=api_key)
        self._client: Any = client

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []

        vectors: list[list[float]] = []
        for start in range(0, len(texts), BATCH_SIZE):
            batch = texts[start : start + BATCH_SIZE]
            resp = self._client.embeddings.create(model=self.model, input=batch)
            for item in sorted(resp.data, key=lambda d: d.index):
                vectors.append(self.check_dimension(item.embedding))

        logger.debug("Embedded %d texts with %s", len(texts), self.model)
        return vectors

    def embed_query(self, query: str) -> list[float]:
        resp = self._client.embeddings.create(model=self.model, input=query)
        return self.check_dimension(resp.data[0].embedding)

    @property
    def dimension(self) -> int:
        return self._dimension
