"""Retrieval — similarity search with a best-effort fallback."""

from docrag.retrieval.retriever import Retriever
from docrag.retrieval.schemas import RetrievalConfig, RetrievalResult

__all__ = ["RetrievalConfig", "RetrievalResult", "Retriever"]
