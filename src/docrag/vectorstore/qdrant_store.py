"""Qdrant vector store — cosine collection with server-side score threshold.

Requires the ``qdrant`` extra. Connects to a server by URL, to an on-disk
local instance by path, or runs in memory when neither is given.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from typing import Any

from docrag.chunking.schemas import ChunkMetadata
from docrag.vectorstore.base import VectorStore
from docrag.vectorstore.schemas import SearchResult, StoredDocument, StoreStats, VectorRecord

logger = logging.getLogger(__name__)

_SCROLL_PAGE = 256


class QdrantStore(VectorStore):
    """Qdrant-backed vector store."""

    def __init__(
        self,
        collection: str = "documents",
        dimension: int = 1536,
        url: str | None = None,
        api_key: str | None = None,
        path: str | None = None,
    ):
        try:
            from qdrant_client import QdrantClient, models
        except ImportError as exc:
            raise ImportError("qdrant-client required: pip install docrag[qdrant]") from exc

        self._models = models
        self._collection = collection
        self._dimension = dimension

        if url:
            self._client = QdrantClient(url=url, api_key=api_key)
        elif path:
            self._client = QdrantClient(path=path)
        else:
            self._client = QdrantClient(":memory:")

        self._ensure_collection()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add(self, records: list[VectorRecord]) -> list[str]:
        if not records:
            return []

        now = datetime.now(UTC).isoformat()
        ids: list[str] = []
        points = []
        for record in records:
            # Qdrant point ids must be UUIDs or unsigned ints
            point_id = record.id or str(uuid.uuid4())
            ids.append(point_id)
            points.append(self._models.PointStruct(
                id=point_id,
                vector=record.embedding,
                payload={
                    "text": record.text,
                    "metadata": record.metadata.to_dict(),
                    "created_at": now,
                },
            ))

        self._client.upsert(collection_name=self._collection, points=points)
        logger.info("QdrantStore added %d records", len(records))
        return ids

    def search(
        self,
        query_embedding: list[float],
        limit: int = 10,
        min_score: float | None = None,
    ) -> list[SearchResult]:
        response = self._client.query_points(
            collection_name=self._collection,
            query=query_embedding,
            limit=limit,
            score_threshold=min_score,
            with_payload=True,
        )

        results: list[SearchResult] = []
        for point in response.points:
            score = point.score if point.score is not None else 0.0
            # score_threshold is inclusive on the server; the contract is strict
            if min_score is not None and score <= min_score:
                continue
            results.append(self._to_result(point, score))
        return results

    def delete_many(self, ids: list[str]) -> int:
        if not ids:
            return 0
        existing = self._client.retrieve(
            collection_name=self._collection, ids=ids, with_payload=False,
        )
        if not existing:
            return 0
        self._client.delete(
            collection_name=self._collection,
            points_selector=self._models.PointIdsList(points=[p.id for p in existing]),
        )
        return len(existing)

    def list_documents(self, limit: int = 100, offset: int = 0) -> list[StoredDocument]:
        # Scroll pages are ordered by id, so sort client-side by creation time
        points = []
        next_page: Any = None
        while True:
            page, next_page = self._client.scroll(
                collection_name=self._collection,
                limit=_SCROLL_PAGE,
                offset=next_page,
                with_payload=True,
                with_vectors=False,
            )
            points.extend(page)
            if next_page is None:
                break

        points.sort(key=lambda p: (p.payload or {}).get("created_at", ""), reverse=True)
        return [
            StoredDocument(
                id=str(p.id),
                text=(p.payload or {}).get("text", ""),
                metadata=ChunkMetadata.from_dict((p.payload or {}).get("metadata")),
                created_at=(p.payload or {}).get("created_at", ""),
            )
            for p in points[offset : offset + limit]
        ]

    def stats(self) -> StoreStats:
        info = self._client.get_collection(self._collection)
        total = info.points_count or 0
        status = getattr(info.status, "value", str(info.status))
        return StoreStats(
            total=total,
            vector_count=total,
            indexed=info.indexed_vectors_count or 0,
            status=status,
            config={
                "backend": "qdrant",
                "collection": self._collection,
                "dimension": self._dimension,
                "metric": "cosine",
            },
        )

    def count(self) -> int:
        return self._client.count(collection_name=self._collection, exact=True).count

    def clear(self) -> None:
        self._client.delete_collection(self._collection)
        self._ensure_collection()

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _ensure_collection(self) -> None:
        if self._client.collection_exists(self._collection):
            return
        self._client.create_collection(
            collection_name=self._collection,
            vectors_config=self._models.VectorParams(
                size=self._dimension,
                distance=self._models.Distance.COSINE,
            ),
        )
        logger.info("Created Qdrant collection '%s' (dim=%d)", self._collection, self._dimension)

    @staticmethod
    def _to_result(point: Any, score: float) -> SearchResult:
        payload = point.payload or {}
        return SearchResult(
            id=str(point.id),
            text=payload.get("text", ""),
            score=score,
            metadata=ChunkMetadata.from_dict(payload.get("metadata")),
        )
