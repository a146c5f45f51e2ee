"""Data models for document loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class FileType(StrEnum):
    """Supported upload types, keyed by MIME type."""

    PDF = "application/pdf"
    TEXT = "text/plain"
    MARKDOWN = "text/markdown"


EXTENSION_TYPES: dict[str, FileType] = {
    ".pdf": FileType.PDF,
    ".txt": FileType.TEXT,
    ".md": FileType.MARKDOWN,
    ".markdown": FileType.MARKDOWN,
}


@dataclass
class LoadResult:
    """Result of loading a single document file.

    Attributes:
        text: Full extracted text.
        page_texts: Per-page text (for PDFs). Single entry for text formats.
        source_path: Filesystem path or upload filename.
        file_type: Detected ``FileType``.
        page_count: Number of pages (PDFs) or 1.
        char_count: Length of ``text``.
        original_size: Size of the raw input in bytes.
        warnings: Non-fatal issues encountered during loading.
    """

    text: str
    page_texts: list[str] = field(default_factory=list)
    source_path: str | None = None
    file_type: FileType | None = None
    page_count: int | None = None
    char_count: int = 0
    original_size: int = 0
    warnings: list[str] = field(default_factory=list)
