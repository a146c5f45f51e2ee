"""Data models for chunks."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any


@dataclass(frozen=True)
class ChunkMetadata:
    """Metadata carried by each chunk — stored alongside embeddings."""

    source_filename: str | None = None
    file_type: str | None = None  # MIME type, e.g. "application/pdf"
    chunk_index: int = 0
    total_chunks: int = 0
    original_size: int | None = None
    processed_at: str | None = None
    chunk_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> ChunkMetadata:
        """Build metadata from a stored payload, ignoring unknown keys."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass
class Chunk:
    """A single retrievable piece of a document.

    Attributes:
        text: Chunk text, including any overlap prefix.
        index: 1-based position within the source document.
        source_document_id: Identifier of the document the chunk came from.
        overlap_prefix_length: Characters borrowed from the preceding chunk
            (0 for the first chunk).
        metadata: Metadata propagated to the vector store.
    """

    text: str
    index: int
    source_document_id: str
    overlap_prefix_length: int = 0
    metadata: ChunkMetadata = field(default_factory=ChunkMetadata)

    @property
    def chunk_id(self) -> str:
        # Same-named documents produce the same ids; not deduplicated.
        return f"{self.source_document_id}_chunk_{self.index}"

    @property
    def core_text(self) -> str:
        """Chunk text without the borrowed overlap prefix and its separator."""
        if not self.overlap_prefix_length:
            return self.text
        return self.text[self.overlap_prefix_length + 2:]
