"""Component for the end-of-game results."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quizzer.constants.ui_constants import ELEMENT_SPACING, SUMMARY_EXIT_BUTTON
from quizzer.core.quiz import Quiz
from quizzer.core.summary import summarize_quiz
from quizzer.styling.styles import Styles

_PASSING_GRADE = 0.5


class SummaryPanel(QWidget):
    """Shows the grade and every question the player missed."""

    def __init__(
        self,
        played_quiz: Quiz,
        on_exit: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.summary = summarize_quiz(played_quiz)
        self.on_exit = on_exit
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        layout.setSpacing(ELEMENT_SPACING)
        layout.setContentsMargins(ELEMENT_SPACING, ELEMENT_SPACING, ELEMENT_SPACING, ELEMENT_SPACING)
        self.setLayout(layout)

        summary_box = QVBoxLayout()
        summary_box.setSpacing(ELEMENT_SPACING)
        summary_box.setAlignment(Qt.AlignCenter)

        self.grade_label = QLabel(self.summary.grade_text(), self)
        self.grade_label.setAlignment(Qt.AlignCenter)
        self.grade_label.setStyleSheet(
            Styles.get_grade_style(passed=self.summary.grade >= _PASSING_GRADE)
        )
        summary_box.addWidget(self.grade_label)

        self.question_count_label = QLabel(self.summary.score_line(), self)
        self.question_count_label.setAlignment(Qt.AlignCenter)
        summary_box.addWidget(self.question_count_label)

        self.exit_button = QPushButton(SUMMARY_EXIT_BUTTON, self)
        self.exit_button.clicked.connect(self.on_exit)
        summary_box.addWidget(self.exit_button)

        layout.addLayout(summary_box, stretch=1)

        self.missed_questions_text = QPlainTextEdit(self)
        self.missed_questions_text.setReadOnly(True)
        self.missed_questions_text.setFocusPolicy(Qt.NoFocus)
        self.missed_questions_text.setPlainText(self.summary.missed_report())
        layout.addWidget(self.missed_questions_text, stretch=1)
