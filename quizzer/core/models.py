"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass

from quizzer.constants.quiz_constants import ANSWER_SEPARATOR
from quizzer.core.answer_matcher import is_accepted
from quizzer.core.errors import ValidationError


@dataclass(frozen=True, slots=True)
class Question:
    """Free-text quiz question with one or more accepted answers.

    Answers are lowercased on construction. The first answer is the canonical
    one shown to the player when they miss the question.
    """

    text: str
    answers: tuple[str, ...]

    def __post_init__(self) -> None:
        _validate_text(self.text)
        answers = tuple(answer.lower() for answer in _validate_answers(self.answers))
        object.__setattr__(self, "answers", answers)

    @property
    def best_answer(self) -> str:
        return self.answers[0]

    def is_accepted_answer(self, given_answer: str) -> bool:
        """Return True when the given answer fuzzy-matches any accepted answer."""
        return is_accepted(self, given_answer)


def _validate_text(text: str) -> None:
    if text is None or not text.strip():
        raise ValidationError("Question text must not be empty.")
    if ANSWER_SEPARATOR in text:
        raise ValidationError(
            f"Question text cannot contain the answer separator ('{ANSWER_SEPARATOR}')."
        )


def _validate_answers(answers) -> list[str]:
    if answers is None or isinstance(answers, str):
        raise ValidationError("Answers must be provided as a sequence of strings.")
    cleaned = list(answers)
    if not cleaned:
        raise ValidationError("A question must have at least one answer.")
    for answer in cleaned:
        if ANSWER_SEPARATOR in answer:
            raise ValidationError(
                f"An answer cannot contain the answer separator ('{ANSWER_SEPARATOR}')."
            )
    return cleaned
