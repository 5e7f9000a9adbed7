"""Tests for question construction and validation."""

import pytest

from quizzer.core.errors import ValidationError
from quizzer.core.models import Question


class TestQuestion:
    def test_answers_are_lowercased(self):
        question = Question("Capital of France?", ["Paris", "PARIS, France"])
        assert question.answers == ("paris", "paris, france")

    def test_text_is_kept_as_given(self):
        question = Question("What is *this*?", ("that",))
        assert question.text == "What is *this*?"

    def test_best_answer_is_first_answer(self):
        question = Question("Spider legs?", ("Eight", "8"))
        assert question.best_answer == "eight"

    def test_is_hashable_and_compares_by_value(self):
        first = Question("Spider legs?", ["eight"])
        second = Question("Spider legs?", ("EIGHT",))
        assert first == second
        assert len({first, second}) == 1

    def test_is_immutable(self):
        question = Question("Spider legs?", ("eight",))
        with pytest.raises(AttributeError):
            question.text = "Other"

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_text_is_rejected(self, text):
        with pytest.raises(ValidationError):
            Question(text, ("answer",))

    def test_separator_in_text_is_rejected(self):
        with pytest.raises(ValidationError):
            Question("Left|Right?", ("left",))

    def test_separator_in_answer_is_rejected(self):
        with pytest.raises(ValidationError):
            Question("Left or right?", ("left", "le|ft"))

    def test_empty_answer_list_is_rejected(self):
        with pytest.raises(ValidationError):
            Question("Anything?", ())

    def test_empty_answer_is_allowed(self):
        question = Question("Spider legs?", ("", "eight"))
        assert question.answers == ("", "eight")

    def test_validation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            Question("", ("answer",))
