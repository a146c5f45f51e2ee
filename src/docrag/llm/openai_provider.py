"""OpenAI chat completion provider (GPT-4 family and compatible endpoints).

Requires the ``openai`` extra and ``OPENAI_API_KEY``.
"""

from __future__ import annotations

import logging
from typing import Any

from docrag.llm.base import Completion, LLMProvider

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4"


class OpenAILLMProvider(LLMProvider):
    """Generate responses via the OpenAI Chat Completions API."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
        base_url: str | None = None,
        client: Any = None,
    ):
        self.model = model

        if client is None:
            try:
                import openai
            except ImportError as exc:
                raise ImportError("openai package required: pip install docrag[openai]") from exc

            kwargs: dict[str, Any] = {}
            if api_key:
                kwargs["api_key"] = api_key
            if base_url:
                kwargs["base_url"] = base_url
            client = openai.OpenAI(**kwargs)
        self._client: Any = client

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.2,
        max_tokens: int = 1500,
    ) -> Completion:
        response = self._client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        usage = getattr(response, "usage", None)
        return Completion(
            text=response.choices[0].message.content or "",
            tokens_used=usage.total_tokens if usage is not None else None,
        )
