"""Input/output ports the prompt loop reads from and writes to.

Any text file object already satisfies both protocols, so ``sys.stdin``,
``sys.stdout`` and ``io.StringIO`` can be passed straight to a Question.
The classes here cover the cases a plain stream does not: scripted input
for tests, input pulled from a callable, and output capture.
"""

from __future__ import annotations

import sys
from collections import deque
from typing import Callable, Iterable, Protocol


class LineSource(Protocol):
    """Produces one line per call; an empty string means end of stream."""

    def readline(self) -> str: ...


class TextSink(Protocol):
    """Consumes prompt text."""

    def write(self, text: str) -> object: ...

    def flush(self) -> None: ...


def console_ports() -> tuple[LineSource, TextSink]:
    """Return the process's current stdin and stdout."""
    return sys.stdin, sys.stdout


class ScriptedSource:
    """LineSource that replays pre-loaded lines, then reports end of stream."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: deque[str] = deque(lines)

    def readline(self) -> str:
        if not self._lines:
            return ""
        line = self._lines.popleft()
        return line if line.endswith("\n") else line + "\n"

    def feed(self, line: str) -> None:
        """Queue another line to be read."""
        self._lines.append(line)

    @property
    def remaining(self) -> int:
        return len(self._lines)


class CallbackSource:
    """LineSource that delegates to a callable.

    The callable returns the next line, or None once input is over.
    """

    def __init__(self, callback: Callable[[], str | None]) -> None:
        self._callback = callback

    def readline(self) -> str:
        line = self._callback()
        if line is None:
            return ""
        return line if line.endswith("\n") else line + "\n"


class RecordingSink:
    """TextSink that records everything written to it.

    Wraps an optional inner sink; every write is forwarded to it as well.
    """

    def __init__(self, inner: TextSink | None = None) -> None:
        self._inner = inner
        self._chunks: list[str] = []
        self.flushes = 0

    def write(self, text: str) -> int:
        self._chunks.append(text)
        if self._inner is not None:
            self._inner.write(text)
        return len(text)

    def flush(self) -> None:
        self.flushes += 1
        if self._inner is not None:
            self._inner.flush()

    def transcript(self) -> str:
        """Return everything written so far."""
        return "".join(self._chunks)

    def clear(self) -> None:
        self._chunks.clear()
