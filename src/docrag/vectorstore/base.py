"""Abstract base class for vector stores."""

from __future__ import annotations

from abc import ABC, abstractmethod

from docrag.vectorstore.schemas import SearchResult, StoredDocument, StoreStats, VectorRecord


class VectorStore(ABC):
    """Interface for vector store backends.

    Scores are cosine similarities; higher is more relevant.
    """

    @abstractmethod
    def add(self, records: list[VectorRecord]) -> list[str]:
        """Insert records into the store.

        Returns:
            Store-assigned IDs, in input order.
        """

    def insert(self, record: VectorRecord) -> str:
        """Insert a single record and return its ID."""
        return self.add([record])[0]

    @abstractmethod
    def search(
        self,
        query_embedding: list[float],
        limit: int = 10,
        min_score: float | None = None,
    ) -> list[SearchResult]:
        """Search for similar records.

        Args:
            query_embedding: The query vector.
            limit: Maximum results to return.
            min_score: If given, only results with ``score > min_score``.

        Returns:
            ``SearchResult`` list sorted by score, highest first.
        """

    @abstractmethod
    def delete_many(self, ids: list[str]) -> int:
        """Delete records by ID.

        Returns:
            Number of records deleted.
        """

    def delete(self, id: str) -> bool:
        """Delete one record. Returns True if it existed."""
        return self.delete_many([id]) > 0

    @abstractmethod
    def list_documents(self, limit: int = 100, offset: int = 0) -> list[StoredDocument]:
        """Return stored records, newest first."""

    @abstractmethod
    def stats(self) -> StoreStats:
        """Return record/vector counts and index status."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of records in the store."""

    @abstractmethod
    def clear(self) -> None:
        """Delete all records."""

    def save(self, path: str) -> None:
        """Persist the store to disk (optional)."""
        raise NotImplementedError(f"{self.__class__.__name__} does not support save()")

    def load(self, path: str) -> None:
        """Load the store from disk (optional)."""
        raise NotImplementedError(f"{self.__class__.__name__} does not support load()")

    @classmethod
    def store_name(cls) -> str:
        """Return human-readable store name."""
        return cls.__name__
