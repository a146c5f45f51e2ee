"""FAISS vector store — local, zero infrastructure.

Exact cosine search with ``IndexFlatIP`` over L2-normalized vectors. The
normalized vectors are also kept in a numpy matrix so deletes can rebuild
the index and ``save``/``load`` do not depend on FAISS's own format.
"""

from __future__ import annotations

import json
import logging
import uuid
from datetime import UTC, datetime
from pathlib import Path

import numpy as np

from docrag.chunking.schemas import ChunkMetadata
from docrag.vectorstore.base import VectorStore
from docrag.vectorstore.schemas import SearchResult, StoredDocument, StoreStats, VectorRecord

logger = logging.getLogger(__name__)


class FAISSStore(VectorStore):
    """FAISS-backed vector store."""

    def __init__(self, dimension: int = 1536, path: str | None = None):
        try:
            import faiss
        except ImportError as exc:
            raise ImportError("faiss-cpu required: pip install docrag[faiss]") from exc

        self._faiss = faiss
        self._dimension = dimension
        self._path = path
        self._index = faiss.IndexFlatIP(dimension)
        self._vectors = np.empty((0, dimension), dtype=np.float32)
        self._records: list[dict] = []  # row position -> {id, text, metadata, created_at}

        if path and (Path(path) / "records.json").exists():
            self.load(path)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add(self, records: list[VectorRecord]) -> list[str]:
        if not records:
            return []

        vectors = self._normalize([r.embedding for r in records])
        now = datetime.now(UTC).isoformat()

        ids: list[str] = []
        for record in records:
            record_id = record.id or uuid.uuid4().hex
            ids.append(record_id)
            self._records.append({
                "id": record_id,
                "text": record.text,
                "metadata": record.metadata,
                "created_at": now,
            })

        self._index.add(vectors)
        self._vectors = np.vstack([self._vectors, vectors])
        self._autosave()

        logger.info("FAISSStore added %d records (total: %d)", len(records), self.count())
        return ids

    def search(
        self,
        query_embedding: list[float],
        limit: int = 10,
        min_score: float | None = None,
    ) -> list[SearchResult]:
        if self._index.ntotal == 0:
            return []

        query = self._normalize([query_embedding])
        k = min(limit, self._index.ntotal)
        scores, positions = self._index.search(query, k)

        results: list[SearchResult] = []
        for score, pos in zip(scores[0], positions[0], strict=True):
            if pos == -1:
                continue
            # Hits arrive best-first, so the first miss ends the scan
            if min_score is not None and score <= min_score:
                break
            record = self._records[int(pos)]
            results.append(SearchResult(
                id=record["id"],
                text=record["text"],
                score=float(score),
                metadata=record["metadata"],
            ))
        return results

    def delete_many(self, ids: list[str]) -> int:
        id_set = set(ids)
        keep = [i for i, r in enumerate(self._records) if r["id"] not in id_set]
        deleted = len(self._records) - len(keep)
        if deleted == 0:
            return 0

        self._records = [self._records[i] for i in keep]
        self._vectors = self._vectors[keep]
        self._rebuild_index()
        self._autosave()

        logger.info("FAISSStore deleted %d records (total: %d)", deleted, self.count())
        return deleted

    def list_documents(self, limit: int = 100, offset: int = 0) -> list[StoredDocument]:
        newest_first = list(reversed(self._records))
        return [
            StoredDocument(
                id=r["id"],
                text=r["text"],
                metadata=r["metadata"],
                created_at=r["created_at"],
            )
            for r in newest_first[offset : offset + limit]
        ]

    def stats(self) -> StoreStats:
        return StoreStats(
            total=len(self._records),
            vector_count=self._index.ntotal,
            indexed=self._index.ntotal,
            status="green",
            config={
                "backend": "faiss",
                "index": "IndexFlatIP",
                "dimension": self._dimension,
                "metric": "cosine",
            },
        )

    def count(self) -> int:
        return self._index.ntotal

    def clear(self) -> None:
        self._records.clear()
        self._vectors = np.empty((0, self._dimension), dtype=np.float32)
        self._rebuild_index()
        self._autosave()

    def save(self, path: str) -> None:
        """Write vectors and records to ``path``."""
        p = Path(path)
        p.mkdir(parents=True, exist_ok=True)

        np.save(p / "vectors.npy", self._vectors)
        serializable = [
            {**r, "metadata": r["metadata"].to_dict()} for r in self._records
        ]
        with open(p / "records.json", "w", encoding="utf-8") as fh:
            json.dump({"dimension": self._dimension, "records": serializable}, fh)

        logger.debug("FAISSStore saved to %s (%d records)", path, self.count())

    def load(self, path: str) -> None:
        """Replace the store contents with those saved at ``path``."""
        p = Path(path)
        with open(p / "records.json", encoding="utf-8") as fh:
            data = json.load(fh)

        if data.get("dimension", self._dimension) != self._dimension:
            raise ValueError(
                f"Store at {path} has dimension {data['dimension']}, "
                f"expected {self._dimension}"
            )

        self._records = [
            {**r, "metadata": ChunkMetadata.from_dict(r.get("metadata"))}
            for r in data["records"]
        ]
        self._vectors = np.load(p / "vectors.npy").astype(np.float32)
        self._rebuild_index()
        logger.info("FAISSStore loaded from %s (%d records)", path, self.count())

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _normalize(self, vectors: list[list[float]]) -> np.ndarray:
        matrix = np.array(vectors, dtype=np.float32)
        if matrix.ndim != 2 or matrix.shape[1] != self._dimension:
            raise ValueError(
                f"Expected vectors of dimension {self._dimension}, got shape {matrix.shape}"
            )
        self._faiss.normalize_L2(matrix)
        return matrix

    def _rebuild_index(self) -> None:
        self._index = self._faiss.IndexFlatIP(self._dimension)
        if len(self._vectors):
            self._index.add(self._vectors)

    def _autosave(self) -> None:
        if self._path:
            self.save(self._path)
