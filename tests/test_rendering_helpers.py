"""Tests for the presentation helpers that do not need a running Qt app."""

import pytest

from quizzer.core.markdown_renderer import MarkdownRenderer
from quizzer.styling.color_palette import ColorPalette, interpolate_color
from quizzer.styling.styles import Styles


class TestMarkdownRenderer:
    def test_renders_inline_markdown(self):
        html = MarkdownRenderer().render_fragment("Who wrote *Romeo and Juliet*?")
        assert "<em>Romeo and Juliet</em>" in html

    def test_escapes_raw_html(self):
        html = MarkdownRenderer().render_fragment("<b>bold</b>?")
        assert "<b>" not in html
        assert "&lt;b&gt;" in html

    def test_blank_text_has_placeholder(self):
        assert "No content provided" in MarkdownRenderer().render_fragment("   ")


class TestInterpolateColor:
    def test_endpoints(self):
        assert interpolate_color("#90EE90", "#FF0000", 0.0) == "#90EE90"
        assert interpolate_color("#90EE90", "#FF0000", 1.0) == "#FF0000"

    def test_midpoint(self):
        assert interpolate_color("#000000", "#FFFFFF", 0.5) == "#808080"

    def test_fraction_is_clamped(self):
        assert interpolate_color("#000000", "#FFFFFF", -1.0) == "#000000"
        assert interpolate_color("#000000", "#FFFFFF", 2.0) == "#FFFFFF"

    def test_rejects_malformed_color(self):
        with pytest.raises(ValueError):
            interpolate_color("#FFF", "#000000", 0.5)


class TestStyles:
    def test_grade_style_uses_palette_colors(self):
        assert ColorPalette.SUCCESS in Styles.get_grade_style(passed=True)
        assert ColorPalette.ERROR in Styles.get_grade_style(passed=False)

    def test_main_window_style_uses_palette_colors(self):
        style = Styles.get_main_window_style()
        assert ColorPalette.BACKGROUND_PRIMARY in style
        assert ColorPalette.BORDER_PRIMARY in style
