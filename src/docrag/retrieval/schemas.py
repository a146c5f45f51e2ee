"""Data models for retrieval operations."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LIMIT = 3
DEFAULT_THRESHOLD = 0.3


@dataclass
class RetrievalConfig:
    """Parameters for one retrieval call."""

    limit: int = DEFAULT_LIMIT
    threshold: float = DEFAULT_THRESHOLD

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"limit must be >= 1, got {self.limit}")
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {self.threshold}")


@dataclass(frozen=True)
class RetrievalResult:
    """A ranked match for a query.

    ``score`` is cosine similarity; results are handed out highest first.
    """

    id: str
    text: str
    score: float
