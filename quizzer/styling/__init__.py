"""Styling module for Quizzer."""

from .color_palette import ColorPalette, interpolate_color

__all__ = ["ColorPalette", "interpolate_color"]
