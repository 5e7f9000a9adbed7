"""Quiz session state: question order, recorded answers and scoring."""

from __future__ import annotations

import logging
from pathlib import Path
import random
from typing import Callable, Iterable

from quizzer.core.errors import NotOnQuizError
from quizzer.core.models import Question
from quizzer.core.question_codec import decode_question, read_encoded_lines

logger = logging.getLogger(__name__)


class Quiz:
    """A fixed set of questions asked in order, with the answers given to them.

    The question set never changes after construction. ``reset`` clears the
    recorded answers and starts asking from the first question again.
    """

    def __init__(self, questions: Iterable[Question]) -> None:
        ordered = list(dict.fromkeys(questions or ()))
        if not ordered:
            raise ValueError("A quiz must have at least one question.")

        self._questions: list[Question] = ordered
        self._members: frozenset[Question] = frozenset(ordered)
        self._answers: dict[Question, str] = {}
        self._results: dict[Question, bool] = {}
        self._position: int = 0

    @classmethod
    def from_questions_file(
        cls,
        file_path: Path,
        max_questions: int,
        shuffle: bool,
        rng: random.Random | None = None,
    ) -> "Quiz":
        """Create a quiz from a file containing one encoded question per line.

        When ``shuffle`` is set, the whole file is shuffled before it is cut
        down to ``max_questions`` so every subset is equally likely.
        """
        if max_questions < 1:
            raise ValueError("A quiz must load at least one question.")

        encoded_questions = read_encoded_lines(file_path)
        if shuffle:
            (rng or random.Random()).shuffle(encoded_questions)

        questions = [decode_question(line) for line in encoded_questions[:max_questions]]
        logger.info(
            "Loaded %d question(s) from %s (shuffle=%s)", len(questions), file_path, shuffle
        )
        return cls(questions)

    def get_next_question(self) -> Question | None:
        """Advance the quiz and return the next question, or None when finished."""
        if self._position >= len(self._questions):
            return None
        question = self._questions[self._position]
        self._position += 1
        return question

    def reset(self) -> None:
        """Clear every recorded answer and move back to the first question."""
        self._position = 0
        self._answers.clear()
        self._results.clear()

    def answer_question(self, question: Question, answer: str) -> bool:
        """Record ``answer`` for ``question`` and return whether it was accepted.

        Answering the same question again replaces the earlier answer.
        """
        self._require_member(question, "it cannot be answered")
        result = question.is_accepted_answer(answer)
        self._answers[question] = answer
        self._results[question] = result
        return result

    def get_recorded_answer_for(self, question: Question) -> str | None:
        self._require_member(question, "it cannot have an answer")
        return self._answers.get(question)

    def get_recorded_result_for(self, question: Question) -> bool:
        """Return the recorded result, treating an unanswered question as wrong."""
        self._require_member(question, "it cannot have an answer")
        return self._results.get(question, False)

    def get_question_count(self) -> int:
        return len(self._questions)

    def get_answered_count(self) -> int:
        return len(self._answers)

    def get_correct_answered_count(self) -> int:
        return sum(1 for result in self._results.values() if result)

    def get_remaining_question_count(self) -> int:
        return len(self._questions) - self._position

    def is_complete(self) -> bool:
        return self._position >= len(self._questions)

    def get_questions(self) -> list[Question]:
        """Return a copy of all questions in asking order."""
        return list(self._questions)

    def for_each_question(self, visitor: Callable[[Question], None]) -> None:
        for question in self._questions:
            visitor(question)

    def _require_member(self, question: Question, consequence: str) -> None:
        if question not in self._members:
            text = getattr(question, "text", question)
            raise NotOnQuizError(
                f"The question '{text}' is not on this quiz, so {consequence}."
            )
