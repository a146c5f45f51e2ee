"""Retriever — embed the query, threshold search, fall back to best effort."""

from __future__ import annotations

import logging

from docrag.embeddings.base import EmbeddingProvider
from docrag.errors import UpstreamServiceError
from docrag.retrieval.schemas import RetrievalConfig, RetrievalResult
from docrag.vectorstore.base import VectorStore
from docrag.vectorstore.schemas import SearchResult

logger = logging.getLogger(__name__)


class Retriever:
    """Embedding → thresholded similarity search → unthresholded fallback.

    When nothing clears the threshold, the same query vector is searched
    again without one, so a non-empty store always yields results (possibly
    with low scores). Only an empty store yields an empty list.
    """

    def __init__(self, embedding_provider: EmbeddingProvider, vector_store: VectorStore):
        self.embedding_provider = embedding_provider
        self.vector_store = vector_store

    def retrieve(
        self,
        query: str,
        config: RetrievalConfig | None = None,
    ) -> list[RetrievalResult]:
        """Return up to ``config.limit`` results, best first.

        Raises:
            UpstreamServiceError: If embedding or search fails. Nothing is
                retried and no partial results are returned.
        """
        cfg = config or RetrievalConfig()

        query_embedding = self._embed(query)

        hits = self._search(query_embedding, cfg.limit, cfg.threshold)
        if not hits:
            logger.warning(
                "No results above threshold %.2f; retrying without threshold",
                cfg.threshold,
            )
            hits = self._search(query_embedding, cfg.limit, None)

        results = [RetrievalResult(id=h.id, text=h.text, score=h.score) for h in hits]
        results.sort(key=lambda r: r.score, reverse=True)

        logger.info("Retrieved %d results (limit=%d)", len(results), cfg.limit)
        for rank, r in enumerate(results, 1):
            logger.debug("  #%d id=%s score=%.4f %r", rank, r.id, r.score, r.text[:150])
        return results

    def _embed(self, query: str) -> list[float]:
        try:
            vector = self.embedding_provider.embed_query(query)
            return self.embedding_provider.check_dimension(vector)
        except Exception as exc:
            raise UpstreamServiceError("embedding", str(exc)) from exc

    def _search(
        self,
        query_embedding: list[float],
        limit: int,
        min_score: float | None,
    ) -> list[SearchResult]:
        try:
            return self.vector_store.search(query_embedding, limit=limit, min_score=min_score)
        except Exception as exc:
            raise UpstreamServiceError("search", str(exc)) from exc
