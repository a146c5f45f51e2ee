"""Document loading — PDF, text and Markdown extraction."""

from docrag.documents.loader import DocumentLoader, detect_file_type, is_supported_file_type
from docrag.documents.schemas import FileType, LoadResult

__all__ = [
    "DocumentLoader",
    "FileType",
    "LoadResult",
    "detect_file_type",
    "is_supported_file_type",
]
