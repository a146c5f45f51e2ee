"""sentence-transformers embedding provider, run in-process.

Requires the ``huggingface`` extra. Asymmetric retrieval models (the e5 and
bge families) expect different prefixes on queries and passages; pass them
as ``query_prefix`` / ``document_prefix``.
"""

from __future__ import annotations

import logging
from typing import Any

from docrag.embeddings.base import EmbeddingProvider

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "all-MiniLM-L6-v2"
ENCODE_BATCH_SIZE = 64


class HuggingFaceEmbeddingProvider(EmbeddingProvider):
    """Local sentence-transformers model; vectors come back unit-length."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        device: str | None = None,
        query_prefix: str = "",
        document_prefix: str = "",
        encoder: Any = None,
    ):
        self.model = model
        self.query_prefix = query_prefix
        self.document_prefix = document_prefix

        if encoder is None:
            try:
                from sentence_transformers import SentenceTransformer
            except ImportError as exc:
                raise ImportError(
                    "sentence-transformers required: pip install docrag[huggingface]"
                ) from exc
            encoder = SentenceTransformer(model, device=device)

        self._encoder: Any = encoder
        self._dim = int(encoder.get_sentence_embedding_dimension())
        logger.info("Loaded %s on %s (dim=%d)", model, device or "default device", self._dim)

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        return self._encode([f"{self.document_prefix}{t}" for t in texts])

    def embed_query(self, query: str) -> list[float]:
        return self._encode([f"{self.query_prefix}{query}"])[0]

    @property
    def dimension(self) -> int:
        return self._dim

    def _encode(self, inputs: list[str]) -> list[list[float]]:
        if not inputs:
            return []
        matrix = self._encoder.encode(
            inputs,
            batch_size=ENCODE_BATCH_SIZE,
            show_progress_bar=False,
            normalize_embeddings=True,
        )
        return [self.check_dimension(row.tolist()) for row in matrix]
