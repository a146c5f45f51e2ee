"""Tests for the paragraph/sentence segmenter and sentence splitting."""

from __future__ import annotations

import pytest

from docrag.chunking.base import BaseChunker
from docrag.chunking.schemas import Chunk, ChunkMetadata
from docrag.chunking.segmenter import (
    PARAGRAPH_SEPARATOR,
    ParagraphChunker,
    apply_overlap,
    overlap_prefix,
    pack_chunks,
    segment_text,
)
from docrag.chunking.sentences import RegexSentenceSplitter, SentenceSplitter

CATS_AND_DOGS = (
    "Paragraph one about cats.\n\n"
    "Paragraph two about dogs that is quite long..."
)


# ---------------------------------------------------------------------------
# Sentence splitting
# ---------------------------------------------------------------------------


class TestRegexSentenceSplitter:
    @pytest.fixture
    def splitter(self) -> RegexSentenceSplitter:
        return RegexSentenceSplitter()

    def test_basic_split(self, splitter):
        assert splitter.split("Hello world. How are you? Fine!") == [
            "Hello world.", "How are you?", "Fine!",
        ]

    def test_repeated_terminals_stay_together(self, splitter):
        assert splitter.split("Really?! Yes.") == ["Really?!", "Yes."]

    def test_full_width_terminals(self, splitter):
        assert splitter.split("これはペンです。あれは本です！") == ["これはペンです。", "あれは本です！"]

    def test_trailing_fragment_kept(self, splitter):
        assert splitter.split("First sentence. trailing words") == [
            "First sentence.", "trailing words",
        ]

    def test_no_terminals(self, splitter):
        assert splitter.split("no punctuation at all") == ["no punctuation at all"]

    def test_whitespace_only(self, splitter):
        assert splitter.split("   ") == []

    def test_splitter_name(self):
        assert RegexSentenceSplitter.splitter_name() == "RegexSentenceSplitter"


# ---------------------------------------------------------------------------
# Packing
# ---------------------------------------------------------------------------


class TestPackChunks:
    def test_empty_text(self):
        assert pack_chunks("", 100) == []
        assert pack_chunks("  \n\n \t ", 100) == []

    def test_small_paragraphs_merge(self):
        text = "Alpha.\n\nBeta.\n\nGamma."
        assert pack_chunks(text, 100) == ["Alpha.\n\nBeta.\n\nGamma."]

    def test_blank_line_with_spaces_splits_paragraphs(self):
        chunks = pack_chunks("First paragraph.\n   \nSecond paragraph.", 20)
        assert chunks == ["First paragraph.", "Second paragraph."]

    def test_single_newline_does_not_split(self):
        assert pack_chunks("line one\nline two", 100) == ["line one\nline two"]

    def test_chunks_respect_size(self, long_paragraph: str):
        chunks = pack_chunks(long_paragraph, 100)
        assert len(chunks) > 1
        assert all(len(c) <= 100 for c in chunks)

    def test_oversized_paragraph_keeps_every_sentence(self, long_paragraph: str):
        chunks = pack_chunks(long_paragraph, 100)
        joined = " ".join(chunks)
        for i in range(40):
            assert f"Sentence number {i} describes step {i}." in joined

    def test_single_long_sentence_not_cut(self):
        sentence = "a" * 300
        chunks = pack_chunks(sentence, 100)
        assert chunks == [sentence]

    def test_sentence_residue_seeds_next_chunk(self):
        para = "One two three. Four five six. Seven eight."
        text = f"{para}\n\nTail."
        chunks = pack_chunks(text, 30)
        assert chunks[-1].endswith("Tail.")
        assert all(c.strip() == c for c in chunks)

    def test_chunks_reproduce_paragraphs(self):
        paras = [
            "Short opener.",
            "This paragraph is far too long. It has several sentences! Does it split? Yes it does.",
            "Tiny.",
            "Another long paragraph follows here. Its residue seeds the next chunk",
            "Closing words.",
        ]
        text = "\n\n".join(paras)
        chunks = pack_chunks(text, 30)

        assert len(chunks) > len(paras) // 2
        rebuilt = " ".join(c.replace("\n\n", " ") for c in chunks).split()
        assert rebuilt == " ".join(paras).split()

    def test_order_preserved(self):
        text = "\n\n".join(f"Paragraph {i} text here." for i in range(10))
        chunks = pack_chunks(text, 50)
        positions = [text.find(c.split("\n\n")[0]) for c in chunks]
        assert positions == sorted(positions)

    def test_pluggable_splitter(self):
        class SemicolonSplitter(SentenceSplitter):
            def split(self, text: str) -> list[str]:
                return [s.strip() for s in text.split(";") if s.strip()]

        text = "part one;part two;part three"
        chunks = pack_chunks(text, 20, splitter=SemicolonSplitter())
        assert chunks == ["part one part two", "part three"]


# ---------------------------------------------------------------------------
# Overlap
# ---------------------------------------------------------------------------


class TestOverlap:
    def test_overlap_prefix(self):
        assert overlap_prefix("abcdefghij", 3) == "hij"

    def test_overlap_prefix_longer_than_text(self):
        assert overlap_prefix("abc", 10) == "abc"

    def test_overlap_zero(self):
        assert overlap_prefix("abc", 0) == ""

    def test_apply_overlap_uses_original_predecessor(self):
        result = apply_overlap(["aaaa", "bbbb", "cccc"], 2)
        assert result[0] == "aaaa"
        assert result[1] == "aa\n\nbbbb"
        # Tail comes from "bbbb", not from the already-prefixed chunk
        assert result[2] == "bb\n\ncccc"


# ---------------------------------------------------------------------------
# segment_text
# ---------------------------------------------------------------------------


class TestSegmentText:
    def test_cats_and_dogs(self):
        chunks = segment_text(CATS_AND_DOGS, chunk_size=50, overlap_size=10)
        assert len(chunks) == 2
        assert chunks[0] == "Paragraph one about cats."
        assert chunks[1].startswith("bout cats." + PARAGRAPH_SEPARATOR)
        assert chunks[1].endswith("Paragraph two about dogs that is quite long...")

    def test_every_later_chunk_starts_with_previous_tail(self, long_paragraph: str):
        cores = pack_chunks(long_paragraph, 120)
        chunks = segment_text(long_paragraph, chunk_size=120, overlap_size=15)
        assert len(chunks) == len(cores)
        for i in range(1, len(chunks)):
            assert chunks[i].startswith(cores[i - 1][-15:] + PARAGRAPH_SEPARATOR)

    def test_no_overlap(self, long_paragraph: str):
        assert segment_text(long_paragraph, 120, 0) == pack_chunks(long_paragraph, 120)

    def test_single_chunk_has_no_overlap(self):
        assert segment_text("Just one short paragraph.", 100, 20) == ["Just one short paragraph."]

    def test_empty_input(self):
        assert segment_text("", 100, 10) == []
        assert segment_text("   \n\n  ", 100, 10) == []

    def test_deterministic(self, sample_txt_content: str):
        first = segment_text(sample_txt_content, 120, 20)
        second = segment_text(sample_txt_content, 120, 20)
        assert first == second

    def test_defaults(self, sample_txt_content: str):
        assert segment_text(sample_txt_content) == segment_text(sample_txt_content, 1000, 100)

    @pytest.mark.parametrize("chunk_size, overlap_size", [(0, 10), (-5, 10), (100, -1)])
    def test_invalid_sizes(self, chunk_size, overlap_size):
        with pytest.raises(ValueError):
            segment_text("Some text.", chunk_size, overlap_size)


# ---------------------------------------------------------------------------
# ParagraphChunker
# ---------------------------------------------------------------------------


class TestParagraphChunker:
    def test_is_base_chunker(self):
        assert isinstance(ParagraphChunker(), BaseChunker)

    def test_chunks_match_segment_text(self, sample_txt_content: str):
        chunker = ParagraphChunker(chunk_size=120, overlap_size=20)
        chunks = chunker.chunk(sample_txt_content, source_document_id="guide.txt")
        assert [c.text for c in chunks] == segment_text(sample_txt_content, 120, 20)

    def test_indices_and_metadata(self, sample_txt_content: str):
        chunker = ParagraphChunker(chunk_size=120, overlap_size=20)
        meta = ChunkMetadata(source_filename="guide.txt", file_type="text/plain")
        chunks = chunker.chunk(sample_txt_content, "guide.txt", meta)

        assert [c.index for c in chunks] == list(range(1, len(chunks) + 1))
        for c in chunks:
            assert isinstance(c, Chunk)
            assert c.chunk_id == f"guide.txt_chunk_{c.index}"
            assert c.metadata.chunk_id == c.chunk_id
            assert c.metadata.total_chunks == len(chunks)
            assert c.metadata.source_filename == "guide.txt"
            assert c.metadata.file_type == "text/plain"

    def test_core_text_strips_overlap(self, long_paragraph: str):
        chunker = ParagraphChunker(chunk_size=120, overlap_size=15)
        chunks = chunker.chunk(long_paragraph, "doc")
        cores = pack_chunks(long_paragraph, 120)

        assert chunks[0].overlap_prefix_length == 0
        assert [c.core_text for c in chunks] == cores
        assert all(c.overlap_prefix_length == 15 for c in chunks[1:])

    def test_empty_text(self):
        assert ParagraphChunker().chunk("", "empty") == []

    def test_invalid_sizes(self):
        with pytest.raises(ValueError):
            ParagraphChunker(chunk_size=0)
