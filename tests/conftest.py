"""Shared fixtures for tests — synthetic documents, fake providers, no network calls."""

from __future__ import annotations

import hashlib
import textwrap
from pathlib import Path

import numpy as np
import pytest

from docrag.embeddings.base import EmbeddingProvider
from docrag.llm.base import Completion, LLMProvider

DIM = 64  # Small dimension for fast tests


# ---------------------------------------------------------------------------
# Fake providers
# ---------------------------------------------------------------------------


class MockEmbedder(EmbeddingProvider):
    """Deterministic hash-based embeddings; identical text → identical vector."""

    def __init__(self, dim: int = DIM):
        self._dim = dim
        self.calls: list[list[str]] = []
        self.query_calls: list[str] = []

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        return [self._hash_embed(t) for t in texts]

    def embed_query(self, query: str) -> list[float]:
        self.query_calls.append(query)
        return self._hash_embed(query)

    @property
    def dimension(self) -> int:
        return self._dim

    def _hash_embed(self, text: str) -> list[float]:
        h = hashlib.sha256(text.encode()).digest()
        # Centre around zero so unrelated texts are not all highly similar
        vec = np.array([h[i % len(h)] / 255.0 - 0.5 for i in range(self._dim)], dtype=np.float32)
        vec /= np.linalg.norm(vec)
        return vec.tolist()


class MockLLM(LLMProvider):
    """Records every call and returns a canned completion."""

    def __init__(self, text: str = "According to source 1, the reset button is on the back.",
                 tokens_used: int | None = 42):
        self.model = "mock-llm"
        self.text = text
        self.tokens_used = tokens_used
        self.calls: list[dict] = []

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.2,
        max_tokens: int = 1500,
    ) -> Completion:
        self.calls.append({
            "system_prompt": system_prompt,
            "user_prompt": user_prompt,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        return Completion(text=self.text, tokens_used=self.tokens_used)


@pytest.fixture
def embedder() -> MockEmbedder:
    return MockEmbedder()


@pytest.fixture
def llm() -> MockLLM:
    return MockLLM()


# ---------------------------------------------------------------------------
# Synthetic document content
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_txt_content() -> str:
    return textwrap.dedent("""\
        Router X200 — Quick Start Guide

        Connect the power adapter to the port marked DC IN. The status light
        turns amber while the router boots and green once it is ready.

        To reset the router, press and hold the reset button on the back
        panel for ten seconds. All settings return to factory defaults.

        Troubleshooting

        If the status light blinks red, check the WAN cable. If the problem
        persists, restart the modem first and then the router.
    """)


@pytest.fixture
def sample_txt_file(tmp_path: Path, sample_txt_content: str) -> Path:
    p = tmp_path / "router_guide.txt"
    p.write_text(sample_txt_content, encoding="utf-8")
    return p


@pytest.fixture
def sample_md_file(tmp_path: Path) -> Path:
    p = tmp_path / "faq.md"
    p.write_text(
        "# FAQ\n\n"
        "## Warranty\n\n"
        "The router is covered by a two-year limited warranty.\n\n"
        "## Firmware\n\n"
        "Firmware updates are installed automatically every night.\n",
        encoding="utf-8",
    )
    return p


@pytest.fixture
def sample_pdf_file(tmp_path: Path) -> Path:
    """Create a minimal two-page PDF using fpdf2."""
    from fpdf import FPDF

    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=15)

    pdf.add_page()
    pdf.set_font("Helvetica", size=12)
    pdf.multi_cell(0, 10, text=(
        "Router X200 User Manual\n\n"
        "The X200 supports dual-band Wi-Fi on 2.4 GHz and 5 GHz. "
        "Up to 32 devices can be connected at the same time."
    ))

    pdf.add_page()
    pdf.multi_cell(0, 10, text=(
        "Safety\n\n"
        "Keep the router away from water and heat sources. "
        "Use only the supplied power adapter."
    ))

    p = tmp_path / "router_manual.pdf"
    pdf.output(str(p))
    return p


@pytest.fixture
def long_paragraph() -> str:
    """A single paragraph of many short sentences."""
    return " ".join(f"Sentence number {i} describes step {i}." for i in range(40))
