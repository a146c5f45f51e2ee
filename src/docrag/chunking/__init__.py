"""Document chunking — paragraph packing with sentence fallback and overlap."""

from docrag.chunking.base import BaseChunker
from docrag.chunking.schemas import Chunk, ChunkMetadata
from docrag.chunking.segmenter import ParagraphChunker, segment_text
from docrag.chunking.sentences import RegexSentenceSplitter, SentenceSplitter

__all__ = [
    "BaseChunker",
    "Chunk",
    "ChunkMetadata",
    "ParagraphChunker",
    "RegexSentenceSplitter",
    "SentenceSplitter",
    "segment_text",
]
