"""LLM provider factory."""

from __future__ import annotations

from typing import Any

from docrag._registry import ProviderRegistry
from docrag.llm.base import LLMProvider

_REGISTRY: ProviderRegistry[LLMProvider] = ProviderRegistry(
    "LLM provider",
    [
        ("openai", "docrag.llm.openai_provider", "OpenAILLMProvider"),
        ("anthropic", "docrag.llm.anthropic_provider", "AnthropicLLMProvider"),
        ("ollama", "docrag.llm.ollama_provider", "OllamaLLMProvider"),
    ],
)


def get_llm_provider(provider: str = "openai", **kwargs: Any) -> LLMProvider:
    """Get an LLM provider by name.

    Args:
        provider: One of ``openai``, ``anthropic``, ``ollama``.
        **kwargs: Passed to the provider constructor.
    """
    return _REGISTRY.get(provider, **kwargs)


def available_providers() -> list[str]:
    """Return names of registered LLM providers."""
    return _REGISTRY.names()


def clear_cache() -> None:
    """Clear singleton cache (for testing)."""
    _REGISTRY.clear()
