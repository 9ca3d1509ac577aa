"""Styling module for rendered quizzes."""

from .color_palette import ColorPalette, Theme
from .styles import QuizStyles

__all__ = ["ColorPalette", "QuizStyles", "Theme"]
