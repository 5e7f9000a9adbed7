"""Qt main window switching between the home, game and summary panels."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QWidget

from quizzer.constants.quiz_constants import QUESTIONS_FILE, QUESTIONS_PER_GAME
from quizzer.constants.ui_constants import (
    LOAD_FAILED_TITLE,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from quizzer.core.errors import QuizError
from quizzer.core.quiz import Quiz
from quizzer.styling.styles import Styles
from quizzer.ui.components.game_panel import GamePanel
from quizzer.ui.components.home_panel import HomePanel
from quizzer.ui.components.summary_panel import SummaryPanel
from quizzer.ui.dialog_helpers import show_warning

logger = logging.getLogger(__name__)


class QuizMainWindow(QMainWindow):
    """Main Qt window; each screen is a fresh panel replacing the previous one."""

    def __init__(
        self,
        questions_file: Path = QUESTIONS_FILE,
        questions_per_game: int = QUESTIONS_PER_GAME,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setFixedSize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self._questions_file = Path(questions_file)
        self._questions_per_game = questions_per_game

        self.panel_stack = QStackedWidget(self)
        self.setCentralWidget(self.panel_stack)
        self.setStyleSheet(Styles.get_main_window_style())

        self._show_home()

    def _show_home(self) -> None:
        self._load_panel(HomePanel(on_start=self._start_game, parent=self))

    def _start_game(self) -> None:
        try:
            quiz = Quiz.from_questions_file(
                self._questions_file, self._questions_per_game, shuffle=True
            )
        except (OSError, QuizError) as exc:
            logger.error("Failed to load questions from %s: %s", self._questions_file, exc)
            show_warning(self, LOAD_FAILED_TITLE, str(exc))
            return
        self._load_panel(GamePanel(quiz, on_complete=self._summarize_game, parent=self))

    def _summarize_game(self, played_quiz: Quiz) -> None:
        logger.info(
            "Game finished: %d/%d correct",
            played_quiz.get_correct_answered_count(),
            played_quiz.get_question_count(),
        )
        self._load_panel(SummaryPanel(played_quiz, on_exit=self._show_home, parent=self))

    def _load_panel(self, panel: QWidget) -> None:
        previous = self.panel_stack.currentWidget()
        self.panel_stack.addWidget(panel)
        self.panel_stack.setCurrentWidget(panel)
        if previous is not None:
            self._discard_panel(previous)

    def _discard_panel(self, panel: QWidget) -> None:
        if isinstance(panel, GamePanel):
            panel.teardown()
        self.panel_stack.removeWidget(panel)
        panel.deleteLater()

    def closeEvent(self, event: QCloseEvent) -> None:
        current = self.panel_stack.currentWidget()
        if isinstance(current, GamePanel):
            current.teardown()
        super().closeEvent(event)
