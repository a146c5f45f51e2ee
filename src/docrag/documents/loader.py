"""Document loader — PDF, plain text and Markdown.

Supports both filesystem paths and in-memory bytes for uploads.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from docrag.documents.schemas import EXTENSION_TYPES, FileType, LoadResult

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = set(EXTENSION_TYPES)


def is_supported_file_type(mime_type: str) -> bool:
    """Return True if ``mime_type`` is one of the accepted upload types."""
    return mime_type in {t.value for t in FileType}


def detect_file_type(filename: str) -> FileType:
    """Map a filename to its ``FileType`` by extension."""
    ext = Path(filename).suffix.lower()
    if ext not in EXTENSION_TYPES:
        raise ValueError(
            f"Unsupported format '{ext}'. Supported: {sorted(SUPPORTED_EXTENSIONS)}"
        )
    return EXTENSION_TYPES[ext]


class DocumentLoader:
    """Load documents into a structured ``LoadResult``."""

    def __init__(
        self,
        max_file_size_mb: int | None = None,
        supported_formats: list[str] | None = None,
    ):
        self.max_bytes = max_file_size_mb * 1024 * 1024 if max_file_size_mb else None
        self.supported_formats = (
            {f.lower() for f in supported_formats} if supported_formats is not None
            else set(SUPPORTED_EXTENSIONS)
        )

    def load_file(self, path: str | Path) -> LoadResult:
        """Load a document from a filesystem path."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        file_type = self._detect(path.name)
        data = path.read_bytes()
        result = self._dispatch(data, file_type)
        result.source_path = str(path)
        return result

    def load_bytes(self, data: bytes, filename: str) -> LoadResult:
        """Load a document from in-memory bytes."""
        file_type = self._detect(filename)
        result = self._dispatch(data, file_type)
        result.source_path = filename
        return result

    # ------------------------------------------------------------------
    # Private dispatch
    # ------------------------------------------------------------------

    def _detect(self, filename: str) -> FileType:
        ext = Path(filename).suffix.lower()
        if ext not in self.supported_formats:
            raise ValueError(
                f"Unsupported format '{ext}'. Supported: {sorted(self.supported_formats)}"
            )
        return detect_file_type(filename)

    def _dispatch(self, data: bytes, file_type: FileType) -> LoadResult:
        if not data:
            raise ValueError("File is empty")
        if self.max_bytes is not None and len(data) > self.max_bytes:
            raise ValueError(
                f"File is {len(data)} bytes, limit is {self.max_bytes} bytes"
            )

        if file_type == FileType.PDF:
            result = self._load_pdf(data)
        else:
            result = self._load_text(data)

        if not result.text.strip():
            raise ValueError("No text could be extracted from the file")

        result.file_type = file_type
        result.char_count = len(result.text)
        result.original_size = len(data)
        logger.info(
            "Loaded %s document: %d pages, %d chars",
            file_type.value, result.page_count or 0, result.char_count,
        )
        return result

    # ------------------------------------------------------------------
    # Format-specific loaders
    # ------------------------------------------------------------------

    @staticmethod
    def _load_text(data: bytes) -> LoadResult:
        try:
            text = data.decode("utf-8")
            return LoadResult(text=text, page_texts=[text], page_count=1)
        except UnicodeDecodeError:
            pass

        # latin-1 maps every byte, so this cannot fail
        text = data.decode("latin-1")
        return LoadResult(
            text=text,
            page_texts=[text],
            page_count=1,
            warnings=["File is not valid UTF-8; decoded as latin-1"],
        )

    @staticmethod
    def _load_pdf(data: bytes) -> LoadResult:
        import pdfplumber

        page_texts: list[str] = []
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                for page in pdf.pages:
                    page_texts.append(page.extract_text() or "")
        except Exception as exc:
            raise ValueError(f"PDF extraction failed: {exc}") from exc

        return LoadResult(
            text="\n\n".join(page_texts),
            page_texts=page_texts,
            page_count=len(page_texts),
        )
