"""Name → implementation registry with lazy import and a singleton cache.

Shared by the embedding, LLM and vector store factories. Implementations
are imported only when requested, so optional extras stay optional.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProviderRegistry(Generic[T]):
    """Registry of ``(key, module_path, class_name)`` entries.

    Instances created without constructor kwargs are cached per key;
    passing kwargs always builds a fresh instance.
    """

    def __init__(self, kind: str, entries: list[tuple[str, str, str]]):
        self.kind = kind
        self._entries = entries
        self._cache: dict[str, T] = {}

    def get(self, name: str, **kwargs: Any) -> T:
        key = name.lower()

        if not kwargs and key in self._cache:
            return self._cache[key]

        for reg_key, module_path, cls_name in self._entries:
            if reg_key == key:
                mod = importlib.import_module(module_path)
                cls = getattr(mod, cls_name)
                instance = cls(**kwargs)
                logger.debug("Created %s '%s' (%s)", self.kind, key, cls_name)
                if not kwargs:
                    self._cache[key] = instance
                return instance

        raise ValueError(f"Unknown {self.kind} '{name}'. Available: {self.names()}")

    def names(self) -> list[str]:
        return [k for k, _, _ in self._entries]

    def clear(self) -> None:
        self._cache.clear()
