"""Vector store backends — FAISS (local), Qdrant and PostgreSQL/pgvector."""

from docrag.vectorstore.base import VectorStore
from docrag.vectorstore.factory import available_stores, get_vector_store
from docrag.vectorstore.schemas import SearchResult, StoredDocument, StoreStats, VectorRecord

__all__ = [
    "SearchResult",
    "StoreStats",
    "StoredDocument",
    "VectorRecord",
    "VectorStore",
    "available_stores",
    "get_vector_store",
]
