"""Component for the start screen."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from quizzer.constants.about import APP_NAME, HELP_TEXT
from quizzer.constants.ui_constants import (
    ELEMENT_SPACING,
    HOME_HELP_BUTTON,
    HOME_START_BUTTON,
    HOME_TITLE,
)
from quizzer.styling.styles import Styles
from quizzer.ui.dialog_helpers import show_info


class HomePanel(QWidget):
    """UI component shown before a game starts."""

    def __init__(self, on_start: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setSpacing(ELEMENT_SPACING)
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(HOME_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style())
        layout.addWidget(self.title_label)

        self.start_button = QPushButton(HOME_START_BUTTON, self)
        self.start_button.clicked.connect(self.on_start)
        layout.addWidget(self.start_button)

        self.help_button = QPushButton(HOME_HELP_BUTTON, self)
        self.help_button.clicked.connect(self._handle_help)
        layout.addWidget(self.help_button)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} help", HELP_TEXT)
