"""Answer-kind strategies and their selection by quiz kind."""

from __future__ import annotations

from quiz_engine.constants.engine_constants import DEFAULT_LANGUAGE
from quiz_engine.core.models import QuizKind
from quiz_engine.styling.styles import QuizStyles

from .base import QuizType
from .input_field import InputFieldQuiz
from .multiple_choice import MultipleChoiceQuiz
from .single_choice import SingleChoiceQuiz

QUIZ_TYPES: dict[QuizKind, type[QuizType]] = {
    QuizKind.SINGLE_CHOICE: SingleChoiceQuiz,
    QuizKind.MULTIPLE_CHOICE: MultipleChoiceQuiz,
    QuizKind.INPUT_FIELD: InputFieldQuiz,
}


def create_quiz_type(
    kind: QuizKind | str | None,
    styles: QuizStyles,
    default_lang: str = DEFAULT_LANGUAGE,
) -> QuizType | None:
    """Instantiate the strategy for ``kind``; ``None`` for unknown kinds."""
    if not isinstance(kind, QuizKind):
        kind = QuizKind.from_value(kind)
    quiz_type_cls = QUIZ_TYPES.get(kind) if kind is not None else None
    if quiz_type_cls is None:
        return None
    return quiz_type_cls(styles, default_lang)


__all__ = [
    "InputFieldQuiz",
    "MultipleChoiceQuiz",
    "QUIZ_TYPES",
    "QuizType",
    "SingleChoiceQuiz",
    "create_quiz_type",
]
