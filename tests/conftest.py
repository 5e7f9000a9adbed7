"""Shared fixtures for the quiz core tests."""

import pytest

from quizzer.core.models import Question


@pytest.fixture
def questions():
    return [
        Question("What is the largest organ of the human body?", ("skin", "the skin")),
        Question("What is the capital of France?", ("Paris",)),
        Question("How many legs does a spider have?", ("8", "eight")),
    ]


@pytest.fixture
def write_question_file(tmp_path):
    """Write the given lines to a question file and return its path."""

    def _write(lines, name="quiz.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
