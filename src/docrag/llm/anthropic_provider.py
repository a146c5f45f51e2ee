"""Anthropic Claude provider.

Requires the ``anthropic`` extra and ``ANTHROPIC_API_KEY``.
"""

from __future__ import annotations

import logging
from typing import Any

from docrag.llm.base import Completion, LLMProvider

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class AnthropicLLMProvider(LLMProvider):
    """Generate responses via the Anthropic Messages API."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
        client: Any = None,
    ):
        self.model = model

        if client is None:
            try:
                import anthropic
            except ImportError as exc:
                raise ImportError(
                    "anthropic package required: pip install docrag[anthropic]"
                ) from exc
            client = anthropic.Anthropic(api_key=api_key)
        self._client: Any = client

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.2,
        max_tokens: int = 1500,
    ) -> Completion:
        # The system turn is a top-level parameter, not a message
        response = self._client.messages.create(
            model=self.model,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        text = "".join(
            block.text for block in response.content if getattr(block, "type", "text") == "text"
        )
        usage = getattr(response, "usage", None)
        tokens = usage.input_tokens + usage.output_tokens if usage is not None else None
        return Completion(text=text, tokens_used=tokens)
