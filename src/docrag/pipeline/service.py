"""RAG pipeline facade — the entry point callers and the CLI use.

Collaborators (embedding provider, vector store, LLM provider) are passed
in explicitly; ``from_settings`` builds them from configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path

from docrag.chunking.segmenter import ParagraphChunker, segment_text
from docrag.config import Settings, load_settings
from docrag.documents.loader import DocumentLoader
from docrag.embeddings.base import EmbeddingProvider
from docrag.llm.base import LLMProvider
from docrag.pipeline.ingest import IngestPipeline
from docrag.pipeline.schemas import IngestResult, RagAnswer
from docrag.pipeline.synthesizer import AnswerSynthesizer
from docrag.retrieval.retriever import Retriever
from docrag.retrieval.schemas import RetrievalConfig, RetrievalResult
from docrag.vectorstore.base import VectorStore
from docrag.vectorstore.schemas import StoredDocument, StoreStats

logger = logging.getLogger(__name__)


class RagPipeline:
    """Question answering and ingestion over one vector store."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_store: VectorStore,
        llm_provider: LLMProvider | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or Settings()
        self.embedding_provider = embedding_provider
        self.vector_store = vector_store
        self.llm_provider = llm_provider
        self.retriever = Retriever(embedding_provider, vector_store)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, with_llm: bool = True) -> RagPipeline:
        """Build providers and store from configuration."""
        from docrag.embeddings.factory import get_embedding_provider
        from docrag.llm.factory import get_llm_provider
        from docrag.vectorstore.factory import get_vector_store

        cfg = settings or load_settings()

        emb_kwargs: dict = {"model": cfg.embedding.model}
        if cfg.embedding.provider != "huggingface":
            emb_kwargs["dimension"] = cfg.embedding.dimension
        embedder = get_embedding_provider(cfg.embedding.provider, **emb_kwargs)

        vs = cfg.vectorstore
        store_kwargs: dict = {"dimension": embedder.dimension}
        if vs.backend == "faiss":
            store_kwargs["path"] = vs.path
        elif vs.backend == "qdrant":
            store_kwargs.update(collection=vs.collection, url=vs.url)
        elif vs.backend == "pgvector":
            store_kwargs.update(dsn=vs.dsn, table=vs.collection)
        store = get_vector_store(vs.backend, **store_kwargs)

        llm = get_llm_provider(cfg.llm.provider, model=cfg.llm.model) if with_llm else None
        return cls(embedder, store, llm, settings=cfg)

    # ------------------------------------------------------------------
    # Question answering
    # ------------------------------------------------------------------

    def synthesize_answer(self, question: str, max_sources: int | None = None) -> RagAnswer:
        """Answer a question from the stored documents."""
        if self.llm_provider is None:
            raise RuntimeError("RagPipeline was built without an LLM provider")

        cfg = self.settings
        synthesizer = AnswerSynthesizer(
            retriever=self.retriever,
            llm_provider=self.llm_provider,
            threshold=cfg.retrieval.similarity_threshold,
            temperature=cfg.llm.temperature,
            max_tokens=cfg.llm.max_tokens,
            min_question_length=cfg.validation.min_question_length,
            max_question_length=cfg.validation.max_question_length,
        )
        return synthesizer.synthesize(
            question,
            max_sources if max_sources is not None else cfg.retrieval.max_sources,
        )

    def search(self, query: str, limit: int = 5, threshold: float | None = None) -> list[RetrievalResult]:
        """Run retrieval only (with the same fallback as question answering)."""
        if threshold is None:
            threshold = self.settings.retrieval.similarity_threshold
        return self.retriever.retrieve(query, RetrievalConfig(limit=limit, threshold=threshold))

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def segment_document(
        self,
        text: str,
        chunk_size: int | None = None,
        overlap_size: int | None = None,
    ) -> list[str]:
        """Split document text into chunk texts using configured defaults."""
        return segment_text(
            text,
            chunk_size if chunk_size is not None else self.settings.chunking.chunk_size,
            overlap_size if overlap_size is not None else self.settings.chunking.overlap_size,
        )

    def ingest_file(self, path: str | Path) -> IngestResult:
        return self._ingest_pipeline().ingest_file(path)

    def ingest_bytes(self, data: bytes, filename: str) -> IngestResult:
        return self._ingest_pipeline().ingest_bytes(data, filename)

    def _ingest_pipeline(self) -> IngestPipeline:
        cfg = self.settings
        return IngestPipeline(
            embedding_provider=self.embedding_provider,
            vector_store=self.vector_store,
            loader=DocumentLoader(
                max_file_size_mb=cfg.ingestion.max_file_size_mb,
                supported_formats=cfg.ingestion.supported_formats,
            ),
            chunker=ParagraphChunker(
                chunk_size=cfg.chunking.chunk_size,
                overlap_size=cfg.chunking.overlap_size,
            ),
        )

    # ------------------------------------------------------------------
    # Store passthroughs
    # ------------------------------------------------------------------

    def list_documents(self, limit: int = 50, offset: int = 0) -> list[StoredDocument]:
        return self.vector_store.list_documents(limit=limit, offset=offset)

    def delete_documents(self, ids: list[str]) -> int:
        return self.vector_store.delete_many(ids)

    def stats(self) -> StoreStats:
        return self.vector_store.stats()
