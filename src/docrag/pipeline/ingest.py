"""Ingestion pipeline — file → load → segment → embed → store, one chunk at a time.

Chunks are embedded and stored sequentially. There is no transaction
around a document: if a call fails partway, chunks already stored stay
stored and the rest are skipped.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from docrag.chunking.schemas import Chunk, ChunkMetadata
from docrag.chunking.segmenter import ParagraphChunker
from docrag.documents.loader import DocumentLoader
from docrag.documents.schemas import FileType, LoadResult
from docrag.embeddings.base import EmbeddingProvider
from docrag.errors import UpstreamServiceError
from docrag.pipeline.schemas import IngestResult
from docrag.vectorstore.base import VectorStore
from docrag.vectorstore.schemas import VectorRecord

logger = logging.getLogger(__name__)

UPLOAD_CHUNK_SIZE = 1500
UPLOAD_OVERLAP_SIZE = 150


class IngestPipeline:
    """Orchestrates document ingestion: load → segment → embed → store."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_store: VectorStore,
        loader: DocumentLoader | None = None,
        chunker: ParagraphChunker | None = None,
    ):
        self.embedding_provider = embedding_provider
        self.vector_store = vector_store
        self.loader = loader or DocumentLoader()
        self.chunker = chunker or ParagraphChunker(
            chunk_size=UPLOAD_CHUNK_SIZE, overlap_size=UPLOAD_OVERLAP_SIZE,
        )

    def ingest_file(self, path: str | Path) -> IngestResult:
        """Ingest a PDF, text or Markdown file from disk."""
        path = Path(path)
        loaded = self.loader.load_file(path)
        return self._ingest_loaded(loaded, path.name)

    def ingest_bytes(self, data: bytes, filename: str) -> IngestResult:
        """Ingest an uploaded file held in memory."""
        loaded = self.loader.load_bytes(data, filename)
        return self._ingest_loaded(loaded, filename)

    def ingest_text(self, text: str, source_name: str = "inline") -> IngestResult:
        """Ingest raw text directly (no file loading step)."""
        loaded = LoadResult(
            text=text,
            page_texts=[text],
            source_path=source_name,
            file_type=FileType.TEXT,
            page_count=1,
            char_count=len(text),
            original_size=len(text.encode("utf-8")),
        )
        return self._ingest_loaded(loaded, source_name)

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _ingest_loaded(self, loaded: LoadResult, source_name: str) -> IngestResult:
        meta = ChunkMetadata(
            source_filename=source_name,
            file_type=loaded.file_type.value if loaded.file_type else None,
            original_size=loaded.original_size,
            processed_at=datetime.now(UTC).isoformat(),
        )
        chunks = self.chunker.chunk(loaded.text, source_document_id=source_name, metadata=meta)
        warnings = list(loaded.warnings)

        if not chunks:
            warnings.append("Chunker produced zero chunks")
            return IngestResult(
                source=source_name, chunks_created=0, chunks_stored=0, warnings=warnings,
            )

        stored_ids: list[str] = []
        for chunk in chunks:
            stored_ids.append(self._store_chunk(chunk))

        logger.info(
            "Ingested %s: %d chunks stored",
            source_name, len(stored_ids),
        )
        return IngestResult(
            source=source_name,
            chunks_created=len(chunks),
            chunks_stored=len(stored_ids),
            chunk_ids=[c.chunk_id for c in chunks],
            record_ids=stored_ids,
            warnings=warnings,
        )

    def _store_chunk(self, chunk: Chunk) -> str:
        try:
            embedding = self.embedding_provider.embed_texts([chunk.text])[0]
        except Exception as exc:
            raise UpstreamServiceError(
                "embedding", f"chunk {chunk.chunk_id}: {exc}",
            ) from exc

        try:
            record_id = self.vector_store.insert(VectorRecord(
                text=chunk.text, embedding=embedding, metadata=chunk.metadata,
            ))
        except Exception as exc:
            raise UpstreamServiceError("store", f"chunk {chunk.chunk_id}: {exc}") from exc

        logger.debug("Stored %s as %s", chunk.chunk_id, record_id)
        return record_id
