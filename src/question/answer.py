"""Answer model: the result of asking a Question."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable


class AnswerKind(Enum):
    """Tag of an Answer."""

    YES = "YES"
    NO = "NO"
    RESPONSE = "RESPONSE"


@dataclass(frozen=True, eq=False)
class Answer:
    """A yes, a no, or an arbitrary textual response.

    Two answers are equal when their kinds match and, for responses,
    their text matches exactly, so ``answer == Answer.YES`` and
    ``answer == Answer.response("42")`` both read naturally. The text of
    a YES or NO is only a display label and takes no part in equality.
    """

    kind: AnswerKind
    text: str = ""

    YES: ClassVar[Answer]
    NO: ClassVar[Answer]

    @classmethod
    def response(cls, text: str) -> Answer:
        return cls(kind=AnswerKind.RESPONSE, text=text)

    @classmethod
    def parse(
        cls,
        value: str,
        yes_tokens: Iterable[str] = ("y", "yes"),
        no_tokens: Iterable[str] = ("n", "no"),
    ) -> Answer:
        """Map a yes token to YES, a no token to NO, anything else to a response.

        Tokens match case-insensitively.
        """
        key = value.strip().casefold()
        if key in {token.casefold() for token in yes_tokens}:
            return cls.YES
        if key in {token.casefold() for token in no_tokens}:
            return cls.NO
        return cls.response(value)

    def _key(self) -> tuple[AnswerKind, str]:
        return self.kind, self.text if self.kind is AnswerKind.RESPONSE else ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Answer):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def is_yes(self) -> bool:
        return self.kind is AnswerKind.YES

    @property
    def is_no(self) -> bool:
        return self.kind is AnswerKind.NO

    @property
    def is_response(self) -> bool:
        return self.kind is AnswerKind.RESPONSE

    def __str__(self) -> str:
        if self.text or self.kind is AnswerKind.RESPONSE:
            return self.text
        return self.kind.value.lower()


Answer.YES = Answer(kind=AnswerKind.YES, text="yes")
Answer.NO = Answer(kind=AnswerKind.NO, text="no")
