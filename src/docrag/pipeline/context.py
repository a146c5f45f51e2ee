"""Context assembly — numbered, score-annotated blocks for the prompt."""

from __future__ import annotations

from collections.abc import Sequence

from docrag.retrieval.schemas import RetrievalResult

BLOCK_SEPARATOR = "\n\n---\n\n"


def format_source_block(position: int, result: RetrievalResult) -> str:
    """Render one result as ``[Source N] (relevance: xx.x%)`` plus its full text."""
    return f"[Source {position}] (relevance: {result.score * 100:.1f}%)\n{result.text}"


def assemble_context(results: Sequence[RetrievalResult]) -> str:
    """Join results, in order, into the context block the model sees.

    Chunk text is passed through untruncated.
    """
    return BLOCK_SEPARATOR.join(
        format_source_block(i, r) for i, r in enumerate(results, 1)
    )
