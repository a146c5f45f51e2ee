"""Abstract base class for chunkers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from docrag.chunking.schemas import Chunk, ChunkMetadata


class BaseChunker(ABC):
    """Interface for document chunking strategies."""

    @abstractmethod
    def chunk(
        self,
        text: str,
        source_document_id: str,
        metadata: ChunkMetadata | None = None,
    ) -> list[Chunk]:
        """Split text into chunks.

        Args:
            text: Full document text.
            source_document_id: Identifier stamped on every chunk.
            metadata: Optional metadata to propagate to each chunk.

        Returns:
            List of ``Chunk`` objects numbered from 1.
        """

    @classmethod
    def strategy_name(cls) -> str:
        """Return human-readable strategy name."""
        return cls.__name__
