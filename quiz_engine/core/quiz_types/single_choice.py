"""Single-choice quizzes: exactly one radio button may be selected."""

from __future__ import annotations

import logging

from quiz_engine.core.control_tree import Element
from quiz_engine.core.explanations import reveal_answer_descriptions
from quiz_engine.core.models import QuizDefinition, QuizKind

from .choice import ChoiceQuizType

logger = logging.getLogger(__name__)


class SingleChoiceQuiz(ChoiceQuizType):
    kind = QuizKind.SINGLE_CHOICE
    input_type = "radio"

    def evaluate(
        self,
        form: Element,
        definition: QuizDefinition,
        lang: str,
        instance_id: int,
    ) -> bool:
        selected = self.selected_indices(form, instance_id)[:1]
        if not selected or not 0 <= selected[0] < len(definition.answers):
            logger.debug("Quiz %s checked without a selection", instance_id)
            return False

        reveal_answer_descriptions(
            form, definition, selected, lang, instance_id, self.styles, self.default_lang
        )
        return definition.answers[selected[0]].is_correct
