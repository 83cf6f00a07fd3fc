"""Tests for question.answer."""
from __future__ import annotations

import pytest

from question.answer import Answer, AnswerKind


class TestAnswerEquality:
    def test_yes_equals_yes(self) -> None:
        assert Answer.YES == Answer(kind=AnswerKind.YES, text="yes")

    def test_yes_is_not_no(self) -> None:
        assert Answer.YES != Answer.NO

    def test_response_equality_by_text(self) -> None:
        assert Answer.response("42") == Answer.response("42")
        assert Answer.response("42") != Answer.response("43")

    def test_response_text_is_case_sensitive(self) -> None:
        assert Answer.response("Yes") != Answer.response("yes")

    def test_response_yes_is_not_yes(self) -> None:
        assert Answer.response("yes") != Answer.YES

    def test_hashable(self) -> None:
        answers = {Answer.YES, Answer.NO, Answer.response("a"), Answer.response("a")}
        assert len(answers) == 3

    @pytest.mark.parametrize("text", ["", "YES", "sure", "y"])
    def test_yes_equality_ignores_text(self, text: str) -> None:
        assert Answer(kind=AnswerKind.YES, text=text) == Answer.YES
        assert hash(Answer(kind=AnswerKind.YES, text=text)) == hash(Answer.YES)

    @pytest.mark.parametrize("text", ["", "NO", "nope"])
    def test_no_equality_ignores_text(self, text: str) -> None:
        assert Answer(kind=AnswerKind.NO, text=text) == Answer.NO
        assert Answer(kind=AnswerKind.NO, text=text) != Answer.YES

    def test_not_equal_to_other_types(self) -> None:
        assert Answer.response("yes") != "yes"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Answer.YES.text = "nope"  # type: ignore[misc]


class TestAnswerPredicates:
    def test_is_yes(self) -> None:
        assert Answer.YES.is_yes
        assert not Answer.YES.is_no
        assert not Answer.YES.is_response

    def test_is_no(self) -> None:
        assert Answer.NO.is_no
        assert not Answer.NO.is_yes

    def test_is_response(self) -> None:
        assert Answer.response("blue").is_response

    def test_str_is_text(self) -> None:
        assert str(Answer.response("blue")) == "blue"

    def test_str_of_yes_no_without_text(self) -> None:
        assert str(Answer(kind=AnswerKind.YES)) == "yes"
        assert str(Answer.NO) == "no"


class TestAnswerParse:
    @pytest.mark.parametrize("value", ["y", "yes", "Y", "YES", " yes "])
    def test_yes_tokens(self, value: str) -> None:
        assert Answer.parse(value) == Answer.YES

    @pytest.mark.parametrize("value", ["n", "no", "N", "No"])
    def test_no_tokens(self, value: str) -> None:
        assert Answer.parse(value) == Answer.NO

    def test_other_text_is_response(self) -> None:
        assert Answer.parse("maybe") == Answer.response("maybe")

    def test_custom_tokens(self) -> None:
        assert Answer.parse("JA", yes_tokens=("Ja",), no_tokens=("Nein",)) == Answer.YES
        assert Answer.parse("nein", yes_tokens=("Ja",), no_tokens=("Nein",)) == Answer.NO
        assert Answer.parse("yes", yes_tokens=("Ja",), no_tokens=("Nein",)) == Answer.response("yes")

    def test_casefolds(self) -> None:
        assert Answer.parse("STRASSE", yes_tokens=("straße",)) == Answer.YES
