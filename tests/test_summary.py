"""Tests for the end-of-game summary."""

import pytest

from quizzer.core.quiz import Quiz
from quizzer.core.summary import MissedQuestion, format_grade, summarize_quiz


class TestSummarizeQuiz:
    def test_counts_and_grade(self, questions):
        quiz = Quiz(questions)
        quiz.answer_question(questions[0], "skin")
        quiz.answer_question(questions[1], "paris")

        summary = summarize_quiz(quiz)

        assert summary.correct_count == 2
        assert summary.question_count == 3
        assert summary.grade == pytest.approx(2 / 3)
        assert summary.grade_text() == "66.67%"
        assert summary.score_line() == "2/3 Correctly Answered"

    def test_missed_questions_follow_quiz_order(self, questions):
        quiz = Quiz(questions)
        quiz.answer_question(questions[2], "six")
        quiz.answer_question(questions[1], "paris")

        summary = summarize_quiz(quiz)

        assert summary.missed == [
            MissedQuestion(
                question_text=questions[0].text,
                given_answer=None,
                correct_answer="skin",
            ),
            MissedQuestion(
                question_text=questions[2].text,
                given_answer="six",
                correct_answer="8",
            ),
        ]

    def test_missed_report(self, questions):
        quiz = Quiz(questions)
        quiz.answer_question(questions[0], "skin")
        quiz.answer_question(questions[1], "rome")

        report = summarize_quiz(quiz).missed_report()

        assert report == (
            "Missed Questions:\n"
            "\n"
            "Question: What is the capital of France?\n"
            "Your Answer: rome\n"
            "Correct Answer: paris\n"
            "\n"
            "Question: How many legs does a spider have?\n"
            "Correct Answer: 8"
        )

    def test_perfect_game_has_no_missed_questions(self, questions):
        quiz = Quiz(questions)
        for question in questions:
            quiz.answer_question(question, question.best_answer)

        summary = summarize_quiz(quiz)
        assert summary.missed == []
        assert summary.grade_text() == "100%"
        assert summary.missed_report() == "Missed Questions:"


@pytest.mark.parametrize(
    "fraction, expected",
    [
        (0.0, "0%"),
        (0.5, "50%"),
        (0.125, "12.5%"),
        (1 / 3, "33.33%"),
        (1.0, "100%"),
    ],
)
def test_format_grade(fraction, expected):
    assert format_grade(fraction) == expected
