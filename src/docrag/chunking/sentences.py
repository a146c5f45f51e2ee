"""Sentence-boundary detection used when a paragraph is too long to keep whole.

The packing algorithm only depends on ``SentenceSplitter.split``; swap in a
tokenizer-backed splitter without touching the segmenter.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

# ASCII and full-width sentence terminals
SENTENCE_TERMINALS = ".!?。！？"

_SENTENCE_RE = re.compile(rf"[^{SENTENCE_TERMINALS}]*[{SENTENCE_TERMINALS}]+")


class SentenceSplitter(ABC):
    """Interface for sentence-boundary detection."""

    @abstractmethod
    def split(self, text: str) -> list[str]:
        """Split text into trimmed, non-empty sentences in reading order."""

    @classmethod
    def splitter_name(cls) -> str:
        """Return human-readable splitter name."""
        return cls.__name__


class RegexSentenceSplitter(SentenceSplitter):
    """Punctuation heuristic: a sentence ends at one or more terminals.

    Abbreviations and decimal numbers ("e.g.", "3.5") are split too. Any
    trailing fragment without a terminal is kept as the last sentence.
    """

    def split(self, text: str) -> list[str]:
        sentences: list[str] = []
        end = 0
        for match in _SENTENCE_RE.finditer(text):
            sentences.append(match.group())
            end = match.end()

        remainder = text[end:]
        if remainder.strip():
            sentences.append(remainder)

        return [s.strip() for s in sentences if s.strip()]
