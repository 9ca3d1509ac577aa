"""Multiple-choice quizzes: any subset of checkboxes may be selected."""

from __future__ import annotations

from quiz_engine.core.control_tree import Element
from quiz_engine.core.explanations import reveal_answer_descriptions
from quiz_engine.core.models import QuizDefinition, QuizKind

from .choice import ChoiceQuizType


class MultipleChoiceQuiz(ChoiceQuizType):
    kind = QuizKind.MULTIPLE_CHOICE
    input_type = "checkbox"

    def evaluate(
        self,
        form: Element,
        definition: QuizDefinition,
        lang: str,
        instance_id: int,
    ) -> bool:
        selected = self.selected_indices(form, instance_id)
        # Order-independent; a question without correct options is answered by selecting none.
        is_correct = set(selected) == definition.correct_indices

        reveal_answer_descriptions(
            form, definition, selected, lang, instance_id, self.styles, self.default_lang
        )
        return is_correct
