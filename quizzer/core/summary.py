"""End-of-game results derived from a played quiz."""

from __future__ import annotations

from dataclasses import dataclass, field

from quizzer.core.quiz import Quiz


@dataclass(slots=True)
class MissedQuestion:
    """A question the player got wrong or never answered."""

    question_text: str
    given_answer: str | None
    correct_answer: str


@dataclass(slots=True)
class QuizSummary:
    """Snapshot of a played quiz for the summary view."""

    correct_count: int
    question_count: int
    missed: list[MissedQuestion] = field(default_factory=list)

    @property
    def grade(self) -> float:
        if self.question_count == 0:
            return 0.0
        return self.correct_count / self.question_count

    def grade_text(self) -> str:
        return format_grade(self.grade)

    def score_line(self) -> str:
        return f"{self.correct_count}/{self.question_count} Correctly Answered"

    def missed_report(self) -> str:
        lines = ["Missed Questions:"]
        for entry in self.missed:
            lines.append("")
            lines.append(f"Question: {entry.question_text}")
            if entry.given_answer is not None:
                lines.append(f"Your Answer: {entry.given_answer}")
            lines.append(f"Correct Answer: {entry.correct_answer}")
        return "\n".join(lines)


def summarize_quiz(quiz: Quiz) -> QuizSummary:
    missed: list[MissedQuestion] = []

    def collect(question) -> None:
        if quiz.get_recorded_result_for(question):
            return
        missed.append(
            MissedQuestion(
                question_text=question.text,
                given_answer=quiz.get_recorded_answer_for(question),
                correct_answer=question.best_answer,
            )
        )

    quiz.for_each_question(collect)
    return QuizSummary(
        correct_count=quiz.get_correct_answered_count(),
        question_count=quiz.get_question_count(),
        missed=missed,
    )


def format_grade(fraction: float) -> str:
    """Format a 0..1 fraction as a percentage with at most two decimals."""
    text = f"{fraction * 100:.2f}".rstrip("0").rstrip(".")
    return f"{text}%"
