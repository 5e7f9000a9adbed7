"""Application entry point for the Quizzer desktop game."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quizzer.constants.about import APP_NAME, APP_VERSION
from quizzer.constants.quiz_constants import QUESTIONS_FILE, QUESTIONS_PER_GAME
from quizzer.ui.main_window import QuizMainWindow
from quizzer.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)
    logger.info("Reading questions from %s", QUESTIONS_FILE.resolve())

    app = QApplication(sys.argv)
    window = QuizMainWindow(questions_file=QUESTIONS_FILE, questions_per_game=QUESTIONS_PER_GAME)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
