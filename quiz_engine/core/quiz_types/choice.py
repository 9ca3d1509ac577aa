"""Shared rendering for the choice-based quiz kinds."""

from __future__ import annotations

from quiz_engine.core.control_tree import Element
from quiz_engine.core.element_ids import (
    answer_container_id,
    answer_group_name,
    answer_input_id,
)
from quiz_engine.core.i18n import UiStrings, get_translated
from quiz_engine.core.models import QuizDefinition

from .base import QuizType


class ChoiceQuizType(QuizType):
    """Renders one input per answer option; subclasses pick the input type."""

    input_type: str

    def render(
        self,
        form: Element,
        definition: QuizDefinition,
        lang: str,
        ui: UiStrings,
        instance_id: int,
    ) -> None:
        group = answer_group_name(instance_id)
        for index, answer in enumerate(definition.answers):
            input_id = answer_input_id(instance_id, index)
            answer_container = form.append_child(
                Element("div", id=answer_container_id(instance_id, index))
            )
            self.styles.apply_answer_container_styles(answer_container)
            answer_container.append_child(
                Element("input", type=self.input_type, id=input_id, name=group, value=index)
            )
            label_text = f" {get_translated(answer.text, lang, self.default_lang)}"
            answer_container.append_child(Element("label", label_text, for_=input_id))

    def selected_indices(self, form: Element, instance_id: int) -> list[int]:
        """Indices of the checked inputs in this instance's answer group."""
        indices = []
        for element in form.query_inputs(answer_group_name(instance_id)):
            if not element.checked:
                continue
            try:
                indices.append(int(element.value))
            except ValueError:
                continue
        return indices
