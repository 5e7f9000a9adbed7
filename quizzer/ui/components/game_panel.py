"""Component for playing through a quiz against the clock."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quizzer.constants.quiz_constants import MILLIS_PER_QUESTION, TIMER_TICK_INTERVAL_MS
from quizzer.constants.ui_constants import (
    ANSWER_PLACEHOLDER,
    ELEMENT_SPACING,
    FINISH_BUTTON,
    REMAINING_TIME_TEMPLATE,
    RUNNING_SCORE_TEMPLATE,
    SUBMIT_BUTTON,
    TIMER_DANGER_COLOR,
    TIMER_SAFE_COLOR,
)
from quizzer.core.markdown_renderer import renderer
from quizzer.core.models import Question
from quizzer.core.quiz import Quiz
from quizzer.core.services.countdown_timer import CountdownTimer
from quizzer.styling.color_palette import interpolate_color
from quizzer.styling.styles import Styles
from quizzer.ui.dispatch import QtDispatcher


class GamePanel(QWidget):
    """Shows one question at a time and records the typed answers.

    The first question is displayed and its timer started as soon as the
    panel is built. Call ``teardown`` before discarding the panel.
    """

    def __init__(
        self,
        quiz: Quiz,
        on_complete: Callable[[Quiz], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz = quiz
        self.on_complete = on_complete
        self._current_question: Question | None = None

        self._dispatcher = QtDispatcher(self)
        self.question_timer = CountdownTimer(
            MILLIS_PER_QUESTION,
            on_tick=self._set_millis_remaining,
            on_expire=self._lock_in_answer,
            tick_interval_ms=TIMER_TICK_INTERVAL_MS,
            dispatcher=self._dispatcher,
        )

        self._build_ui()
        self._update_running_score()
        self._next_question()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setSpacing(ELEMENT_SPACING)
        layout.setContentsMargins(ELEMENT_SPACING, ELEMENT_SPACING, ELEMENT_SPACING, ELEMENT_SPACING)
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.question_label = QLabel(self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        self.question_label.setAlignment(Qt.AlignCenter)
        self.question_label.setStyleSheet(Styles.get_question_style())
        layout.addWidget(self.question_label)

        status_row = QHBoxLayout()
        status_row.setSpacing(ELEMENT_SPACING)
        status_row.setAlignment(Qt.AlignCenter)
        self.running_score_label = QLabel(self)
        status_row.addWidget(self.running_score_label)
        self.timer_label = QLabel(self)
        status_row.addWidget(self.timer_label)
        layout.addLayout(status_row)

        answer_row = QHBoxLayout()
        self.answer_input = QLineEdit(self)
        self.answer_input.setPlaceholderText(ANSWER_PLACEHOLDER)
        self.answer_input.returnPressed.connect(self._handle_submit)
        answer_row.addWidget(self.answer_input, stretch=1)

        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(self._handle_submit)
        answer_row.addWidget(self.submit_button)
        layout.addLayout(answer_row)

        self.finish_button = QPushButton(FINISH_BUTTON, self)
        self.finish_button.clicked.connect(self._finish_game)
        layout.addWidget(self.finish_button)

    def teardown(self) -> None:
        self.question_timer.cancel()

    def _handle_submit(self) -> None:
        if self._current_question is None:
            return
        self._submit_answer()
        self._next_question()

    def _next_question(self) -> None:
        self._current_question = self.quiz.get_next_question()
        if self._current_question is None:
            self._finish_game()
            return

        self.question_label.setText(renderer.render_fragment(self._current_question.text))
        self._toggle_inputs(True)
        self.answer_input.setFocus()
        self.question_timer.restart()

    def _submit_answer(self) -> None:
        """Record the typed answer for the current question without advancing."""
        self.question_timer.cancel()
        self._toggle_inputs(False)

        answer = self.answer_input.text()
        self.answer_input.clear()

        self.quiz.answer_question(self._current_question, answer)
        self._update_running_score()

    def _lock_in_answer(self) -> None:
        # Time is up: no more typing, but the player can still submit.
        self.answer_input.setEnabled(False)

    def _set_millis_remaining(self, millis: int) -> None:
        elapsed_fraction = 1 - millis / MILLIS_PER_QUESTION
        color = interpolate_color(TIMER_SAFE_COLOR, TIMER_DANGER_COLOR, elapsed_fraction)
        self.timer_label.setStyleSheet(Styles.get_timer_style(color))
        self.timer_label.setText(REMAINING_TIME_TEMPLATE.format(seconds=millis / 1000))

    def _update_running_score(self) -> None:
        self.running_score_label.setText(
            RUNNING_SCORE_TEMPLATE.format(score=self.quiz.get_correct_answered_count())
        )

    def _finish_game(self) -> None:
        self.question_timer.cancel()
        self._toggle_inputs(False)
        self._current_question = None
        self.on_complete(self.quiz)

    def _toggle_inputs(self, enabled: bool) -> None:
        self.answer_input.setEnabled(enabled)
        self.submit_button.setEnabled(enabled)
        self.finish_button.setEnabled(enabled)
