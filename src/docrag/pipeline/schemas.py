"""Data models for the RAG pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class SourceAttribution:
    """A retrieved chunk as shown alongside an answer."""

    id: str
    score: float
    text: str
    preview: str


@dataclass
class RagAnswer:
    """Output of the answer synthesizer.

    ``sources`` keeps the retrieval order. ``response_time_ms`` is measured
    from the start of retrieval.
    """

    answer: str
    sources: list[SourceAttribution] = field(default_factory=list)
    response_time_ms: int = 0
    tokens_used: int | None = None
    question: str = ""
    model: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class IngestResult:
    """Result of document ingestion."""

    source: str
    chunks_created: int
    chunks_stored: int
    chunk_ids: list[str] = field(default_factory=list)
    record_ids: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
