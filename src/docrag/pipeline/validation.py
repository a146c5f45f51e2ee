"""Question validation, run before any external call."""

from __future__ import annotations

from docrag.errors import ValidationError

MIN_QUESTION_LENGTH = 5
MAX_QUESTION_LENGTH = 1000


def validate_question(
    question: str | None,
    min_length: int = MIN_QUESTION_LENGTH,
    max_length: int = MAX_QUESTION_LENGTH,
) -> str:
    """Return ``question`` unchanged if acceptable.

    The minimum applies to the trimmed text, the maximum to the raw text.

    Raises:
        ValidationError: With a message the user can act on.
    """
    if not question or not question.strip():
        raise ValidationError("No question was entered.")

    if len(question.strip()) < min_length:
        raise ValidationError(
            f"The question is too short (enter at least {min_length} characters)."
        )

    if len(question) > max_length:
        raise ValidationError(
            f"The question is too long (keep it within {max_length} characters)."
        )

    return question
