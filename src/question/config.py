from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuestionConfig:
    delimiter: str = " "
    clarification: str = "Please enter an acceptable answer."
    yes_no_clarification: str = "Please answer 'yes' or 'no'."
    yes_tokens: tuple[str, ...] = ("y", "yes")
    no_tokens: tuple[str, ...] = ("n", "no")
    max_attempts: int = 3  # cap for accept() when neither it nor tries() sets one
