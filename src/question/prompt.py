"""Question: build a prompt, then drive it to an Answer.

A Question is configured with chained setters and consumed by exactly one
terminal operation:

- ``ask()``              one free-text answer (or the default on empty input)
- ``confirm()``          yes or no, re-asking until one is given
- ``until_acceptable()`` re-ask without limit until the input is acceptable
- ``accept()``           like ``until_acceptable`` but gives up after N attempts

Example::

    Question("Continue?").default(Answer.YES).show_defaults().confirm()
"""

from __future__ import annotations

import logging
from typing import Iterable

from question.answer import Answer
from question.config import QuestionConfig
from question.errors import AttemptLimitError, InputExhaustedError
from question.ports import LineSource, TextSink, console_ports

logger = logging.getLogger("question")


class Question:
    """A question to put to the user, and the rules for accepting a reply."""

    def __init__(
        self,
        text: str,
        *,
        source: LineSource | None = None,
        sink: TextSink | None = None,
        config: QuestionConfig | None = None,
    ) -> None:
        self.text = text
        self._source = source
        self._sink = sink
        self._config = config or QuestionConfig()
        self._default: Answer | None = None
        self._acceptable: list[str] | None = None
        self._clarification: str | None = None
        self._tries: int | None = None
        self._show_defaults = False
        self._yes_no = False

    # --- configuration --------------------------------------------------------

    def default(self, answer: Answer | str) -> Question:
        """Answer returned when the user submits an empty line.

        A plain string is taken as a textual response.
        """
        if isinstance(answer, str):
            answer = Answer.response(answer)
        self._default = answer
        return self

    def acceptable(self, answers: Iterable[str]) -> Question:
        """Add answers to the acceptable list, matched case-insensitively."""
        if self._acceptable is None:
            self._acceptable = []
        self._acceptable.extend(answers)
        return self

    def allow(self, answer: str) -> Question:
        """Add a single acceptable answer."""
        return self.acceptable([answer])

    def clarification(self, text: str) -> Question:
        """Text shown after an unacceptable reply, before asking again."""
        self._clarification = text
        return self

    def show_defaults(self) -> Question:
        """Append a hint such as ``(Y/n)`` to the prompt."""
        self._show_defaults = True
        return self

    def yes_no(self) -> Question:
        """Accept yes/no tokens as YES and NO in ``until_acceptable``/``accept``."""
        self._yes_no = True
        return self

    def tries(self, attempts: int) -> Question:
        """Set the number of attempts ``accept()`` allows by default."""
        if attempts < 1:
            raise ValueError(f"tries must be at least 1, got {attempts}")
        self._tries = attempts
        return self

    @property
    def default_answer(self) -> Answer | None:
        return self._default

    @property
    def acceptable_answers(self) -> tuple[str, ...] | None:
        return None if self._acceptable is None else tuple(self._acceptable)

    @property
    def clarification_text(self) -> str | None:
        return self._clarification

    @property
    def max_tries(self) -> int | None:
        return self._tries

    @property
    def shows_defaults(self) -> bool:
        return self._show_defaults

    @property
    def is_yes_no(self) -> bool:
        return self._yes_no

    # --- terminal operations --------------------------------------------------

    def ask(self) -> Answer:
        """Return whatever the user typed, or the default on an empty line.

        The acceptable list is not enforced. An empty line with no default
        is not an answer, so the question is asked again.
        """
        return self._run(yes_no=False, constrained=False, use_acceptable=False)

    def confirm(self) -> Answer:
        """Ask until the user answers yes or no; return YES or NO."""
        return self._run(yes_no=True, constrained=True, use_acceptable=False)

    def until_acceptable(self) -> Answer:
        """Ask, without limit, until the reply is acceptable.

        Only end of input stops the loop early. With neither an acceptable
        list nor yes/no mode configured, any non-empty reply is acceptable.
        """
        return self._run(yes_no=self._yes_no, constrained=self._is_constrained())

    def accept(self, max_attempts: int | None = None) -> Answer:
        """Like ``until_acceptable`` but raise AttemptLimitError after N misses.

        N comes from ``max_attempts``, else ``tries()``, else the config.
        """
        limit = max_attempts
        if limit is None:
            limit = self._tries if self._tries is not None else self._config.max_attempts
        if limit < 1:
            raise ValueError(f"max_attempts must be at least 1, got {limit}")
        return self._run(
            yes_no=self._yes_no,
            constrained=self._is_constrained(),
            max_attempts=limit,
        )

    # --- prompt loop ----------------------------------------------------------

    def _is_constrained(self) -> bool:
        return self._yes_no or self._acceptable is not None

    def _run(
        self,
        *,
        yes_no: bool,
        constrained: bool,
        use_acceptable: bool = True,
        max_attempts: int | None = None,
    ) -> Answer:
        source, sink = self._ports()
        prompt = self.render_prompt(yes_no=yes_no)
        attempts = 0
        while True:
            response = self._read_response(prompt, source, sink)
            attempts += 1
            answer = self._match(
                response,
                yes_no=yes_no,
                constrained=constrained,
                use_acceptable=use_acceptable,
            )
            if answer is not None:
                logger.debug(
                    "Answered %r with %s after %d attempt(s)",
                    self.text,
                    answer.kind.value,
                    attempts,
                )
                return answer

            if max_attempts is not None and attempts >= max_attempts:
                logger.info("Giving up on %r after %d attempt(s)", self.text, attempts)
                raise AttemptLimitError(self.text, attempts)

            logger.debug("Unacceptable reply %r to %r; asking again", response, self.text)
            if response or constrained:
                sink.write(self._clarification_line(yes_no) + "\n")

    def _match(
        self,
        response: str,
        *,
        yes_no: bool,
        constrained: bool,
        use_acceptable: bool,
    ) -> Answer | None:
        """Decide what a trimmed reply means, or None to ask again."""
        key = response.casefold()

        if yes_no and response:
            parsed = self._parse_yes_no(response)
            if not parsed.is_response:
                return parsed

        if use_acceptable and self._acceptable is not None:
            for candidate in self._acceptable:
                if candidate.strip().casefold() == key:
                    # The user's own text, not the configured casing.
                    return Answer.response(response)

        if not response:
            default = self._effective_default(yes_no)
            if default is not None:
                return default

        if response and not constrained:
            return Answer.response(response)

        return None

    def _parse_yes_no(self, text: str) -> Answer:
        return Answer.parse(text, self._config.yes_tokens, self._config.no_tokens)

    def _effective_default(self, yes_no: bool) -> Answer | None:
        """The default an empty line produces, or None if there is none.

        A yes/no question reads a text default as a yes/no token and never
        returns a free-text default.
        """
        default = self._default
        if default is None or not yes_no or not default.is_response:
            return default
        parsed = self._parse_yes_no(default.text)
        return None if parsed.is_response else parsed

    def _read_response(self, prompt: str, source: LineSource, sink: TextSink) -> str:
        sink.write(prompt)
        sink.flush()
        try:
            line = source.readline()
        except EOFError as exc:
            logger.info("Input ended while waiting for an answer to %r", self.text)
            raise InputExhaustedError(self.text, cause=exc) from exc
        if not line:
            logger.info("Input ended while waiting for an answer to %r", self.text)
            raise InputExhaustedError(self.text)
        return line.rstrip("\r\n").strip()

    def _ports(self) -> tuple[LineSource, TextSink]:
        console_in, console_out = console_ports()
        return self._source or console_in, self._sink or console_out

    # --- rendering ------------------------------------------------------------

    def render_prompt(self, *, yes_no: bool | None = None) -> str:
        """The prompt as written before each read, delimiter included.

        ``yes_no`` defaults to whether ``yes_no()`` was called.
        """
        prompt = self.text
        hint = self._hint(self._yes_no if yes_no is None else yes_no)
        if hint:
            prompt += f" {hint}"
        return prompt + self._config.delimiter

    def _hint(self, yes_no: bool) -> str:
        if not self._show_defaults:
            return ""
        default = self._effective_default(yes_no)
        if default is None:
            return "(y/n)" if yes_no else ""
        if default.is_yes:
            return "(Y/n)"
        if default.is_no:
            return "(y/N)"
        return f"({default.text})"

    def _clarification_line(self, yes_no: bool) -> str:
        if self._clarification is not None:
            return self._clarification.rstrip("\n")
        if yes_no:
            return self._config.yes_no_clarification
        return self._config.clarification

    def __repr__(self) -> str:
        return f"Question({self.text!r})"
