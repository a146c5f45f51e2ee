"""Abstract base class for LLM providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Completion:
    """Text produced by a model plus the token usage it reported."""

    text: str
    tokens_used: int | None = None


class LLMProvider(ABC):
    """Interface for chat-style completion."""

    model: str = "unknown"

    @abstractmethod
    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.2,
        max_tokens: int = 1500,
    ) -> Completion:
        """Run one system + user exchange.

        Args:
            system_prompt: Instruction turn, sent first.
            user_prompt: User turn, sent second.
            temperature: Sampling temperature.
            max_tokens: Upper bound on generated tokens.

        Returns:
            A ``Completion``. ``text`` may be empty if the model produced
            no content.
        """

    @classmethod
    def provider_name(cls) -> str:
        """Return human-readable provider name."""
        return cls.__name__
