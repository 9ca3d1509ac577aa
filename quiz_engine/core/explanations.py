"""Decides which explanations to reveal after a check and renders them."""

from __future__ import annotations

from collections.abc import Iterable

from quiz_engine.constants.engine_constants import DEFAULT_LANGUAGE
from quiz_engine.core.control_tree import Element
from quiz_engine.core.i18n import get_translated
from quiz_engine.core.models import ExplanationPolicy, QuizDefinition
from quiz_engine.core.element_ids import answer_container_id, explanation_id
from quiz_engine.styling.styles import QuizStyles


def should_reveal(policy: ExplanationPolicy, index: int, selected: Iterable[int]) -> bool:
    """Whether the description of answer ``index`` is shown under ``policy``."""
    if policy is ExplanationPolicy.ALL:
        return True
    if policy is ExplanationPolicy.SELECTED:
        return index in set(selected)
    return False


def reveal_answer_descriptions(
    form: Element,
    definition: QuizDefinition,
    selected: Iterable[int],
    lang: str,
    instance_id: int,
    styles: QuizStyles,
    default_lang: str = DEFAULT_LANGUAGE,
) -> list[int]:
    """Append descriptions per the explanation policy; return the revealed indices."""
    selected = set(selected)
    policy = definition.config.explanation_policy
    revealed = []
    for index, answer in enumerate(definition.answers):
        if not should_reveal(policy, index, selected):
            continue
        text = get_translated(answer.description, lang, default_lang)
        if not text:
            continue
        container = form.get_element_by_id(answer_container_id(instance_id, index))
        if container is None:
            continue
        description = container.append_child(Element("p", text))
        styles.apply_explanation_styles(description, answer.is_correct)
        revealed.append(index)
    return revealed


def render_field_explanation(
    form: Element,
    definition: QuizDefinition,
    lang: str,
    instance_id: int,
    styles: QuizStyles,
    default_lang: str = DEFAULT_LANGUAGE,
) -> Element | None:
    """Append the whole-field explanation of an input quiz, if it has any text."""
    text = get_translated(definition.explanation, lang, default_lang)
    if not text:
        return None
    element = form.append_child(Element("p", text, id=explanation_id(instance_id)))
    # Rendered in the correct-answer color.
    styles.apply_explanation_styles(element, True)
    element.style["font-style"] = "normal"
    element.style["margin-top"] = "10px"
    return element
