"""question -- ask a terminal user a question and get a structured answer."""
from __future__ import annotations

from question.answer import Answer, AnswerKind
from question.config import QuestionConfig
from question.errors import AttemptLimitError, InputExhaustedError, QuestionError
from question.ports import (
    CallbackSource,
    LineSource,
    RecordingSink,
    ScriptedSource,
    TextSink,
    console_ports,
)
from question.prompt import Question

__version__ = "0.3.0"

__all__ = [
    # answer
    "Answer",
    "AnswerKind",
    # prompt
    "Question",
    "QuestionConfig",
    # errors
    "QuestionError",
    "InputExhaustedError",
    "AttemptLimitError",
    # ports
    "LineSource",
    "TextSink",
    "ScriptedSource",
    "CallbackSource",
    "RecordingSink",
    "console_ports",
]
