"""Ollama chat provider — local models, no API key."""

from __future__ import annotations

import logging

import httpx

from docrag.llm.base import Completion, LLMProvider

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "llama3.1:8b"
DEFAULT_BASE_URL = "http://localhost:11434"


class OllamaLLMProvider(LLMProvider):
    """Generate responses via a local Ollama server's ``/api/chat``."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 120.0,
        client: httpx.Client | None = None,
    ):
        self.model = model
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(base_url=self.base_url, timeout=timeout)

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.2,
        max_tokens: int = 1500,
    ) -> Completion:
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "stream": False,
            "options": {"temperature": temperature, "num_predict": max_tokens},
        }
        resp = self._client.post("/api/chat", json=payload)
        resp.raise_for_status()
        data = resp.json()

        tokens = None
        if "prompt_eval_count" in data or "eval_count" in data:
            tokens = data.get("prompt_eval_count", 0) + data.get("eval_count", 0)
        return Completion(
            text=data.get("message", {}).get("content", ""),
            tokens_used=tokens,
        )
