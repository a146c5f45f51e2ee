"""Logging configuration for the CLI and scripts.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, once, by the entry point.
"""

from __future__ import annotations

import logging
import os

from rich.logging import RichHandler

_CONFIGURED = False


def configure_logging(level: str | int | None = None) -> None:
    """Install a rich console handler on the root logger.

    Args:
        level: Log level name or number. Defaults to ``DOCRAG_LOG_LEVEL``
            or ``WARNING``.
    """
    global _CONFIGURED

    resolved = level or os.getenv("DOCRAG_LOG_LEVEL", "WARNING")
    if isinstance(resolved, str):
        resolved = resolved.upper()

    root = logging.getLogger()
    if not _CONFIGURED:
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)
        _CONFIGURED = True

    root.setLevel(resolved)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
