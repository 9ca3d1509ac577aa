"""Style hooks applied to quiz elements and the page stylesheet."""

from __future__ import annotations

from quiz_engine.core.control_tree import Element

from .color_palette import ColorPalette, Theme


class QuizStyles:
    """Applies presentation to elements created while checking a quiz.

    The controller and strategies call these hooks after creating verdict,
    retry, explanation and error elements. They only touch inline style.
    """

    def __init__(self, theme: Theme = Theme.LIGHT) -> None:
        self.theme = theme

    def verdict_color(self, is_correct: bool) -> str:
        palette = ColorPalette.CORRECT if is_correct else ColorPalette.INCORRECT
        return palette.get(self.theme)

    def apply_answer_container_styles(self, element: Element) -> None:
        element.style["margin-bottom"] = "10px"

    def apply_message_styles(self, container: Element) -> None:
        container.style["display"] = "flex"
        container.style["align-items"] = "center"
        container.style["margin-top"] = "10px"

    def apply_result_styles(self, element: Element, is_correct: bool) -> None:
        element.style["color"] = self.verdict_color(is_correct)
        element.style["margin"] = "0"

    def apply_try_again_button_styles(self, button: Element) -> None:
        button.style["margin-left"] = "10px"

    def apply_explanation_styles(self, element: Element, is_correct: bool) -> None:
        element.style["margin-top"] = "5px"
        element.style["font-style"] = "italic"
        element.style["color"] = self.verdict_color(is_correct)

    def apply_error_styles(self, element: Element) -> None:
        element.style["color"] = ColorPalette.INCORRECT.get(self.theme)

    def get_page_style(self) -> str:
        theme = self.theme
        return f"""
      :root {{ font-family: 'Inter', system-ui, sans-serif; background: {ColorPalette.BACKGROUND_PRIMARY.get(theme)}; color: {ColorPalette.TEXT_PRIMARY.get(theme)}; }}
      body {{ margin: 0 auto; padding: 1.5rem; max-width: 48rem; line-height: 1.5; }}
      .quiz-container {{ background: {ColorPalette.BACKGROUND_CARD.get(theme)}; border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)}; border-radius: 0.75rem; padding: 1rem 1.5rem; margin: 1rem 0; }}
      .quiz-container h2 {{ font-size: 1.2rem; margin-top: 0; }}
      .quiz-container button {{ border: none; border-radius: 0.5rem; padding: 0.5rem 1rem; font-size: 1rem; background: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)}; color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)}; cursor: pointer; }}
      .quiz-container input[type="text"] {{ padding: 0.4rem; font-size: 1rem; border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)}; border-radius: 0.4rem; margin-bottom: 10px; }}
      .quiz-container label {{ color: {ColorPalette.TEXT_PRIMARY.get(theme)}; }}
      .quiz-footer {{ color: {ColorPalette.TEXT_SECONDARY.get(theme)}; font-size: 0.85rem; }}
"""
