"""Color palette for rendered quizzes supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Theme(Enum):
    """Page theme options."""
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for quiz pages."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#1F2933",      # Charcoal
        dark="#F5F7FF"        # Ghost White
    )

    TEXT_SECONDARY = ThemeColors(
        light="#52606D",      # Slate
        dark="#94A3B8"        # Light Slate
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#0B1120"        # Night
    )

    BACKGROUND_CARD = ThemeColors(
        light="#F5F5F5",      # WhiteSmoke
        dark="#111A30"        # Card Navy
    )

    # Verdict colors
    CORRECT = ThemeColors(
        light="#107C10",      # Green
        dark="#6FCF6F"        # Light Green
    )

    INCORRECT = ThemeColors(
        light="#D13438",      # Red
        dark="#FF6B6B"        # Light Red
    )

    # Button colors
    BUTTON_PRIMARY_BG = ThemeColors(
        light="#0078D4",      # Blue
        dark="#1F9AA5"        # Teal
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",      # White
        dark="#FFFFFF"        # White
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",      # Gray
        dark="#334155"        # Dark Slate
    )
