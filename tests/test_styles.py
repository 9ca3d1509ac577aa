from __future__ import annotations

from quiz_engine.core.control_tree import Element
from quiz_engine.styling import ColorPalette, QuizStyles, Theme


def test_verdict_colors_follow_theme() -> None:
    light = QuizStyles()
    dark = QuizStyles(Theme.DARK)
    assert light.verdict_color(True) == ColorPalette.CORRECT.light
    assert dark.verdict_color(False) == ColorPalette.INCORRECT.dark


def test_try_again_and_error_styles() -> None:
    styles = QuizStyles()
    button = Element("button", "Try Again")
    styles.apply_try_again_button_styles(button)
    assert button.style == {"margin-left": "10px"}

    error = Element("p", "Unknown quiz type")
    styles.apply_error_styles(error)
    assert error.style["color"] == ColorPalette.INCORRECT.light


def test_page_style_mentions_quiz_container() -> None:
    css = QuizStyles(Theme.DARK).get_page_style()
    assert ".quiz-container {" in css
    assert ColorPalette.BACKGROUND_CARD.dark in css
