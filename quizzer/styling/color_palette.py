"""Color palette for Quizzer."""

from __future__ import annotations


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = "#000000"        # Black
    TEXT_SECONDARY = "#666666"      # Dark Gray
    BACKGROUND_PRIMARY = "#FFFFFF"  # White
    BORDER_PRIMARY = "#D1D1D1"      # Gray
    BUTTON_SECONDARY_BG = "#F5F5F5" # WhiteSmoke
    BUTTON_HOVER_BG = "#E8E8E8"     # Light Gray
    SUCCESS = "#107C10"             # Green
    ERROR = "#D13438"               # Red


def interpolate_color(start: str, end: str, fraction: float) -> str:
    """Blend two ``#RRGGBB`` colors; ``fraction`` 0 gives ``start``, 1 gives ``end``."""
    fraction = max(0.0, min(1.0, fraction))
    start_rgb = _parse_hex(start)
    end_rgb = _parse_hex(end)
    blended = (
        round(low + (high - low) * fraction) for low, high in zip(start_rgb, end_rgb)
    )
    return "#" + "".join(f"{channel:02X}" for channel in blended)


def _parse_hex(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a #RRGGBB color, got '{color}'.")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
