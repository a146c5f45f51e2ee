"""Paragraph-first, sentence-fallback segmenter with character overlap.

Text is split on blank lines into paragraphs, which are packed greedily into
chunks of at most ``chunk_size`` characters. A paragraph that cannot fit in
a chunk on its own is broken into sentences and packed the same way. After
packing, every chunk except the first is prefixed with the tail of the
chunk before it.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import replace

from docrag.chunking.base import BaseChunker
from docrag.chunking.schemas import Chunk, ChunkMetadata
from docrag.chunking.sentences import RegexSentenceSplitter, SentenceSplitter

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_OVERLAP_SIZE = 100

PARAGRAPH_SEPARATOR = "\n\n"
SENTENCE_SEPARATOR = " "

_PARAGRAPH_RE = re.compile(r"\n\s*\n")

_DEFAULT_SPLITTER = RegexSentenceSplitter()


def _check_sizes(chunk_size: int, overlap_size: int) -> None:
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if overlap_size < 0:
        raise ValueError(f"overlap_size must be non-negative, got {overlap_size}")


def pack_chunks(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    splitter: SentenceSplitter | None = None,
) -> list[str]:
    """Pack paragraphs (and, when needed, sentences) into bounded chunks.

    Returns the pre-overlap chunk texts. Only a single sentence longer than
    ``chunk_size`` yields a chunk over the limit; it is never cut.
    """
    if not text or not text.strip():
        return []

    splitter = splitter or _DEFAULT_SPLITTER
    paragraphs = [p.strip() for p in _PARAGRAPH_RE.split(text) if p.strip()]

    chunks: list[str] = []
    current = ""

    for para in paragraphs:
        # The separator is counted even when the buffer is still empty
        if len(current + PARAGRAPH_SEPARATOR + para) <= chunk_size:
            current = f"{current}{PARAGRAPH_SEPARATOR}{para}" if current else para
            continue

        if current.strip():
            chunks.append(current.strip())

        if len(para) <= chunk_size:
            current = para
            continue

        # Oversized paragraph — pack sentence by sentence
        pending = ""
        for sentence in splitter.split(para):
            if len(pending + SENTENCE_SEPARATOR + sentence) <= chunk_size:
                pending = f"{pending}{SENTENCE_SEPARATOR}{sentence}" if pending else sentence
                continue
            if pending.strip():
                chunks.append(pending.strip())
            pending = sentence

        # Leftover sentences seed the next chunk
        current = pending.strip()

    if current.strip():
        chunks.append(current.strip())

    return chunks


def overlap_prefix(previous: str, overlap_size: int) -> str:
    """Return the trailing ``overlap_size`` characters of ``previous``."""
    if overlap_size <= 0:
        return ""
    return previous[-overlap_size:]


def apply_overlap(chunks: list[str], overlap_size: int) -> list[str]:
    """Prefix each chunk after the first with the tail of its predecessor.

    The tail always comes from the predecessor's original text, so overlap
    never spans more than two adjacent chunks.
    """
    overlapped: list[str] = []
    for i, chunk in enumerate(chunks):
        if i == 0:
            overlapped.append(chunk)
            continue
        prefix = overlap_prefix(chunks[i - 1], overlap_size)
        overlapped.append(f"{prefix}{PARAGRAPH_SEPARATOR}{chunk}")
    return overlapped


def segment_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    overlap_size: int = DEFAULT_OVERLAP_SIZE,
    splitter: SentenceSplitter | None = None,
) -> list[str]:
    """Split raw document text into overlapping chunk texts.

    Args:
        text: Raw document text.
        chunk_size: Maximum characters per chunk before overlap is added.
        overlap_size: Characters borrowed from the previous chunk.
        splitter: Sentence-boundary detector for oversized paragraphs.

    Returns:
        Ordered chunk texts. Empty or whitespace-only input yields ``[]``.

    Raises:
        ValueError: If ``chunk_size <= 0`` or ``overlap_size < 0``.
    """
    _check_sizes(chunk_size, overlap_size)

    started = time.perf_counter()
    chunks = pack_chunks(text, chunk_size, splitter)

    if overlap_size > 0 and len(chunks) > 1:
        result = apply_overlap(chunks, overlap_size)
    else:
        result = [c for c in chunks if c.strip()]

    if chunks:
        logger.info(
            "Segmented %d chars into %d chunks (avg %d chars, %.1f ms)",
            len(text),
            len(result),
            sum(len(c) for c in chunks) // len(chunks),
            (time.perf_counter() - started) * 1000,
        )
    return result


class ParagraphChunker(BaseChunker):
    """Chunker that wraps ``segment_text`` and emits ``Chunk`` objects."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        overlap_size: int = DEFAULT_OVERLAP_SIZE,
        splitter: SentenceSplitter | None = None,
    ):
        _check_sizes(chunk_size, overlap_size)
        self.chunk_size = chunk_size
        self.overlap_size = overlap_size
        self.splitter = splitter or _DEFAULT_SPLITTER

    def chunk(
        self,
        text: str,
        source_document_id: str,
        metadata: ChunkMetadata | None = None,
    ) -> list[Chunk]:
        meta = metadata or ChunkMetadata()
        cores = pack_chunks(text, self.chunk_size, self.splitter)
        use_overlap = self.overlap_size > 0 and len(cores) > 1

        chunks: list[Chunk] = []
        total = len(cores)
        for i, core in enumerate(cores):
            index = i + 1
            prefix = overlap_prefix(cores[i - 1], self.overlap_size) if use_overlap and i else ""
            body = f"{prefix}{PARAGRAPH_SEPARATOR}{core}" if prefix else core
            chunks.append(Chunk(
                text=body,
                index=index,
                source_document_id=source_document_id,
                overlap_prefix_length=len(prefix),
                metadata=replace(
                    meta,
                    chunk_index=index,
                    total_chunks=total,
                    chunk_id=f"{source_document_id}_chunk_{index}",
                ),
            ))

        logger.info(
            "ParagraphChunker produced %d chunks from %d chars (%s)",
            len(chunks), len(text), source_document_id,
        )
        return chunks
