"""Error hierarchy for question prompts."""
from __future__ import annotations


class QuestionError(Exception):
    """Base error for a terminal operation that could not produce an Answer."""

    def __init__(
        self, message: str, *, question: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.question = question
        self.cause = cause


class InputExhaustedError(QuestionError):
    """The input source reached end of stream while a line was expected."""

    def __init__(self, question: str, *, cause: Exception | None = None) -> None:
        super().__init__(
            f"input ended before an answer was given to {question!r}",
            question=question,
            cause=cause,
        )


class AttemptLimitError(QuestionError):
    """No acceptable answer was given within the allowed number of attempts."""

    def __init__(self, question: str, attempts: int) -> None:
        super().__init__(
            f"no acceptable answer to {question!r} after {attempts} attempt(s)",
            question=question,
        )
        self.attempts = attempts
