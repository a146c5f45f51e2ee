"""Answer synthesis — question → retrieve → prompt → LLM → attributed answer."""

from __future__ import annotations

import logging
import time

from docrag.errors import UpstreamServiceError
from docrag.llm.base import LLMProvider
from docrag.pipeline.context import assemble_context
from docrag.pipeline.prompts import (
    EMPTY_RESPONSE_ANSWER,
    NO_RESULTS_ANSWER,
    SYSTEM_PROMPT,
    build_user_prompt,
    make_preview,
)
from docrag.pipeline.schemas import RagAnswer, SourceAttribution
from docrag.pipeline.validation import (
    MAX_QUESTION_LENGTH,
    MIN_QUESTION_LENGTH,
    validate_question,
)
from docrag.retrieval.retriever import Retriever
from docrag.retrieval.schemas import DEFAULT_LIMIT, DEFAULT_THRESHOLD, RetrievalConfig

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.2
DEFAULT_MAX_TOKENS = 1500


def _elapsed_ms(started: float) -> int:
    return max(0, int((time.perf_counter() - started) * 1000))


class AnswerSynthesizer:
    """Builds a grounded answer for one question.

    Stateless between calls; the retriever and LLM provider are injected.
    """

    def __init__(
        self,
        retriever: Retriever,
        llm_provider: LLMProvider,
        threshold: float = DEFAULT_THRESHOLD,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        system_prompt: str = SYSTEM_PROMPT,
        min_question_length: int = MIN_QUESTION_LENGTH,
        max_question_length: int = MAX_QUESTION_LENGTH,
    ):
        self.retriever = retriever
        self.llm_provider = llm_provider
        self.threshold = threshold
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.system_prompt = system_prompt
        self.min_question_length = min_question_length
        self.max_question_length = max_question_length

    def synthesize(self, question: str, max_sources: int = DEFAULT_LIMIT) -> RagAnswer:
        """Answer ``question`` from at most ``max_sources`` retrieved chunks.

        Returns a fixed "nothing found" answer, without calling the LLM,
        when retrieval comes back empty.

        Raises:
            ValidationError: Question rejected; no external call was made.
            UpstreamServiceError: Embedding, search or generation failed.
        """
        validate_question(question, self.min_question_length, self.max_question_length)
        model = getattr(self.llm_provider, "model", "unknown")

        started = time.perf_counter()
        results = self.retriever.retrieve(
            question,
            RetrievalConfig(limit=max_sources, threshold=self.threshold),
        )

        if not results:
            logger.info("No documents to answer from; skipping generation")
            return RagAnswer(
                answer=NO_RESULTS_ANSWER,
                sources=[],
                response_time_ms=_elapsed_ms(started),
                question=question,
                model=model,
            )

        user_prompt = build_user_prompt(assemble_context(results), question)

        try:
            completion = self.llm_provider.complete(
                self.system_prompt,
                user_prompt,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as exc:
            raise UpstreamServiceError("generation", str(exc)) from exc

        sources = [
            SourceAttribution(id=r.id, score=r.score, text=r.text, preview=make_preview(r.text))
            for r in results
        ]
        elapsed = _elapsed_ms(started)

        logger.info(
            "Answered with %d sources in %d ms (tokens=%s, model=%s)",
            len(sources), elapsed, completion.tokens_used, model,
        )

        return RagAnswer(
            answer=completion.text or EMPTY_RESPONSE_ANSWER,
            sources=sources,
            response_time_ms=elapsed,
            tokens_used=completion.tokens_used,
            question=question,
            model=model,
        )
