"""Tests for the input/output ports."""
from __future__ import annotations

import io
import sys

from question.ports import CallbackSource, RecordingSink, ScriptedSource, console_ports


# ===========================================================================
# ScriptedSource
# ===========================================================================


class TestScriptedSource:
    def test_replays_lines_with_terminator(self) -> None:
        source = ScriptedSource(["a", "b\n"])
        assert source.readline() == "a\n"
        assert source.readline() == "b\n"

    def test_empty_string_at_end(self) -> None:
        source = ScriptedSource(["a"])
        source.readline()
        assert source.readline() == ""
        assert source.readline() == ""

    def test_blank_line_is_not_end_of_stream(self) -> None:
        source = ScriptedSource([""])
        assert source.readline() == "\n"

    def test_feed_and_remaining(self) -> None:
        source = ScriptedSource()
        assert source.remaining == 0
        source.feed("later")
        assert source.remaining == 1
        assert source.readline() == "later\n"
        assert source.remaining == 0


# ===========================================================================
# CallbackSource
# ===========================================================================


class TestCallbackSource:
    def test_delegates_to_callback(self) -> None:
        lines = iter(["first", "second"])
        source = CallbackSource(lambda: next(lines, None))
        assert source.readline() == "first\n"
        assert source.readline() == "second\n"

    def test_none_means_end_of_stream(self) -> None:
        source = CallbackSource(lambda: None)
        assert source.readline() == ""


# ===========================================================================
# RecordingSink
# ===========================================================================


class TestRecordingSink:
    def test_records_writes(self) -> None:
        sink = RecordingSink()
        sink.write("Continue? ")
        sink.write("(Y/n) ")
        assert sink.transcript() == "Continue? (Y/n) "

    def test_counts_flushes(self) -> None:
        sink = RecordingSink()
        sink.flush()
        sink.flush()
        assert sink.flushes == 2

    def test_forwards_to_inner(self) -> None:
        inner = io.StringIO()
        sink = RecordingSink(inner)
        sink.write("hello")
        sink.flush()
        assert inner.getvalue() == "hello"
        assert sink.transcript() == "hello"

    def test_clear(self) -> None:
        sink = RecordingSink()
        sink.write("x")
        sink.clear()
        assert sink.transcript() == ""


class TestConsolePorts:
    def test_returns_current_std_streams(self, monkeypatch) -> None:
        fake_in, fake_out = io.StringIO(), io.StringIO()
        monkeypatch.setattr(sys, "stdin", fake_in)
        monkeypatch.setattr(sys, "stdout", fake_out)
        assert console_ports() == (fake_in, fake_out)
