"""Free-text quizzes compared against a (possibly translated) answer key."""

from __future__ import annotations

from quiz_engine.core.control_tree import Element
from quiz_engine.core.element_ids import answer_group_name, text_input_id
from quiz_engine.core.explanations import render_field_explanation
from quiz_engine.core.i18n import UiStrings, get_translated
from quiz_engine.core.models import QuizDefinition, QuizKind

from .base import QuizType


class InputFieldQuiz(QuizType):
    kind = QuizKind.INPUT_FIELD

    def render(
        self,
        form: Element,
        definition: QuizDefinition,
        lang: str,
        ui: UiStrings,
        instance_id: int,
    ) -> None:
        form.append_child(
            Element(
                "input",
                type="text",
                id=text_input_id(instance_id),
                name=answer_group_name(instance_id),
                autocomplete="off",
            )
        )

    def evaluate(
        self,
        form: Element,
        definition: QuizDefinition,
        lang: str,
        instance_id: int,
    ) -> bool:
        field = form.get_element_by_id(text_input_id(instance_id))
        submitted = field.value.strip() if field is not None else ""
        expected = get_translated(definition.answer_key, lang, self.default_lang)
        is_correct = bool(submitted) and answers_match(
            submitted, expected, definition.config.case_sensitive
        )

        if not is_correct and definition.config.show_explanation_on_error:
            render_field_explanation(
                form, definition, lang, instance_id, self.styles, self.default_lang
            )
        return is_correct


def answers_match(submitted: str, expected: str, case_sensitive: bool = True) -> bool:
    """Compare a trimmed submission with the answer key.

    The key is trimmed too. ``submitted`` is expected to arrive stripped.
    """
    expected = expected.strip()
    if case_sensitive:
        return submitted == expected
    return submitted.casefold() == expected.casefold()
