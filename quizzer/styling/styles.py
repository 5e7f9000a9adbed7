"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette

class Styles:
    """Helper class to generate Qt stylesheets from the color palette."""

    @staticmethod
    def get_main_window_style() -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG};
                color: {ColorPalette.TEXT_PRIMARY};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_SECONDARY};
            }}
            QLineEdit, QPlainTextEdit {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 4px;
                padding: 4px;
            }}
        """

    @staticmethod
    def get_title_style() -> str:
        return "font-size: 28pt; font-weight: bold;"

    @staticmethod
    def get_question_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_timer_style(color: str) -> str:
        return f"font-size: 12pt; color: {color};"

    @staticmethod
    def get_grade_style(passed: bool) -> str:
        color = ColorPalette.SUCCESS if passed else ColorPalette.ERROR
        return f"font-size: 32pt; font-weight: bold; color: {color};"
