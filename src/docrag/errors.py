"""Exception types shared across the pipeline."""

from __future__ import annotations


class DocRagError(Exception):
    """Base class for all docrag errors."""


class ValidationError(DocRagError, ValueError):
    """User input rejected before any external call is made.

    ``message`` is safe to show to the end user as-is.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamServiceError(DocRagError):
    """An external collaborator (embedding, store, LLM) failed.

    Attributes:
        stage: Pipeline stage that failed: ``embedding``, ``search``,
            ``store`` or ``generation``.
    """

    def __init__(self, stage: str, message: str):
        super().__init__(f"{stage} failed: {message}")
        self.stage = stage
