"""Data models for vector store operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from docrag.chunking.schemas import ChunkMetadata


@dataclass
class VectorRecord:
    """A chunk with its embedding, ready for storage.

    ``id`` is left ``None`` to let the store assign one.
    """

    text: str
    embedding: list[float]
    metadata: ChunkMetadata = field(default_factory=ChunkMetadata)
    id: str | None = None


@dataclass(frozen=True)
class SearchResult:
    """A single similarity match; ``score`` is cosine similarity."""

    id: str
    text: str
    score: float
    metadata: ChunkMetadata = field(default_factory=ChunkMetadata)


@dataclass(frozen=True)
class StoredDocument:
    """A stored row as returned by ``VectorStore.list_documents``."""

    id: str
    text: str
    metadata: ChunkMetadata
    created_at: str  # ISO-8601


@dataclass
class StoreStats:
    """Counts and index health of a store."""

    total: int = 0
    vector_count: int = 0
    indexed: int = 0
    status: str = "green"
    config: dict[str, Any] = field(default_factory=dict)
