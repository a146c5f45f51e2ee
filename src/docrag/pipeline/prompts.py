"""Prompt templates and fixed answer strings."""

from __future__ import annotations

PREVIEW_LENGTH = 150
TRUNCATION_MARKER = "..."

# ---------------------------------------------------------------------------
# Fixed answers
# ---------------------------------------------------------------------------

NO_RESULTS_ANSWER = (
    "Sorry, no relevant information was found. "
    "Please rephrase your question and try again."
)

EMPTY_RESPONSE_ANSWER = "The model returned an empty response."

# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

SYSTEM_PROMPT = """\
You are an expert assistant that answers questions based on the information provided.

Follow these rules:
1. Use the provided information first.
2. Where the provided information is insufficient, supplement it with your own \
knowledge so the answer is complete.
3. Make the origin of every claim clear:
   - for claims taken from the provided information, write "According to source N, ..."
   - for claims from your own knowledge, write "In general, ..." or "As commonly known, ..."
4. Avoid speculation and guesswork; answer based on facts.
5. Give a clear, well-structured answer that is easy to follow.
"""

USER_PROMPT_TEMPLATE = """\
Answer the question using the information below.
Use your own knowledge where needed to make the answer complete.

[Context]
{context}

[Question]
{question}

[Answer]"""


def build_user_prompt(context: str, question: str) -> str:
    """Place the assembled context and the verbatim question in the user turn."""
    return USER_PROMPT_TEMPLATE.format(context=context, question=question)


def make_preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Cap ``text`` at ``length`` characters, marking the cut."""
    if len(text) <= length:
        return text
    return text[:length] + TRUNCATION_MARKER
