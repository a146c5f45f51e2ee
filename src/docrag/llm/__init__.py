"""LLM providers — OpenAI, Anthropic, Ollama."""

from docrag.llm.base import Completion, LLMProvider
from docrag.llm.factory import available_providers, get_llm_provider

__all__ = ["Completion", "LLMProvider", "available_providers", "get_llm_provider"]
