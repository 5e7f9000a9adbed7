"""Qt UI components for the quiz game."""

from .dialog_helpers import show_info, show_warning
from .dispatch import QtDispatcher
from .main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "QtDispatcher",
    "show_info",
    "show_warning",
]
