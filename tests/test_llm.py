"""Tests for LLM providers — mocked clients, no network calls."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest
from conftest import MockLLM

from docrag.llm.anthropic_provider import AnthropicLLMProvider
from docrag.llm.base import Completion, LLMProvider
from docrag.llm.factory import available_providers, clear_cache, get_llm_provider
from docrag.llm.ollama_provider import OllamaLLMProvider
from docrag.llm.openai_provider import OpenAILLMProvider


class TestLLMProviderABC:
    def test_cannot_instantiate_base(self):
        with pytest.raises(TypeError):
            LLMProvider()  # type: ignore[abstract]

    def test_provider_name(self):
        assert MockLLM.provider_name() == "MockLLM"

    def test_completion_defaults(self):
        assert Completion(text="hi").tokens_used is None


class TestOpenAILLMProvider:
    def test_messages_and_usage(self):
        client = MagicMock()
        client.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="An answer."))],
            usage=SimpleNamespace(total_tokens=321),
        )
        provider = OpenAILLMProvider(client=client)

        result = provider.complete("system text", "user text")

        assert result == Completion(text="An answer.", tokens_used=321)
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4"
        assert kwargs["messages"] == [
            {"role": "system", "content": "system text"},
            {"role": "user", "content": "user text"},
        ]
        assert kwargs["temperature"] == 0.2
        assert kwargs["max_tokens"] == 1500

    def test_empty_content_and_no_usage(self):
        client = MagicMock()
        client.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=None))],
            usage=None,
        )
        result = OpenAILLMProvider(client=client).complete("s", "u")
        assert result == Completion(text="", tokens_used=None)


class TestAnthropicLLMProvider:
    def test_system_is_top_level(self):
        client = MagicMock()
        client.messages.create.return_value = SimpleNamespace(
            content=[
                SimpleNamespace(type="text", text="Part one. "),
                SimpleNamespace(type="text", text="Part two."),
            ],
            usage=SimpleNamespace(input_tokens=100, output_tokens=20),
        )
        provider = AnthropicLLMProvider(model="claude-test", client=client)

        result = provider.complete("system text", "user text", temperature=0.5, max_tokens=50)

        assert result == Completion(text="Part one. Part two.", tokens_used=120)
        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["system"] == "system text"
        assert kwargs["messages"] == [{"role": "user", "content": "user text"}]
        assert kwargs["temperature"] == 0.5
        assert kwargs["max_tokens"] == 50


class TestOllamaLLMProvider:
    def _provider(self, payload: dict, seen: list) -> OllamaLLMProvider:
        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(json.loads(request.content))
            return httpx.Response(200, json=payload)

        client = httpx.Client(base_url="http://ollama.test", transport=httpx.MockTransport(handler))
        return OllamaLLMProvider(client=client)

    def test_chat_request(self):
        seen: list[dict] = []
        provider = self._provider(
            {"message": {"content": "Local answer."}, "prompt_eval_count": 30, "eval_count": 12},
            seen,
        )
        result = provider.complete("sys", "usr", temperature=0.1, max_tokens=99)

        assert result == Completion(text="Local answer.", tokens_used=42)
        body = seen[0]
        assert body["stream"] is False
        assert [m["role"] for m in body["messages"]] == ["system", "user"]
        assert body["options"] == {"temperature": 0.1, "num_predict": 99}

    def test_no_token_counts(self):
        provider = self._provider({"message": {"content": "x"}}, [])
        assert provider.complete("s", "u").tokens_used is None


class TestLLMFactory:
    def setup_method(self):
        clear_cache()

    def test_available_providers(self):
        assert available_providers() == ["openai", "anthropic", "ollama"]

    def test_build_ollama(self):
        provider = get_llm_provider("ollama", model="mistral")
        assert isinstance(provider, OllamaLLMProvider)
        assert provider.model == "mistral"

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            get_llm_provider("nope")
