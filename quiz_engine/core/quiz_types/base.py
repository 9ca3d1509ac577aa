"""Common contract for the per-kind render/evaluate strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod

from quiz_engine.constants.engine_constants import DEFAULT_LANGUAGE
from quiz_engine.core.control_tree import Element
from quiz_engine.core.i18n import UiStrings
from quiz_engine.core.models import QuizDefinition, QuizKind
from quiz_engine.styling.styles import QuizStyles


class QuizType(ABC):
    """Renders one answer kind's controls and evaluates what the user set in them.

    Strategies keep no selection state of their own; ``evaluate`` reads the
    rendered controls inside ``form``.
    """

    kind: QuizKind

    def __init__(self, styles: QuizStyles, default_lang: str = DEFAULT_LANGUAGE) -> None:
        self.styles = styles
        self.default_lang = default_lang

    @abstractmethod
    def render(
        self,
        form: Element,
        definition: QuizDefinition,
        lang: str,
        ui: UiStrings,
        instance_id: int,
    ) -> None:
        """Append the answer controls for ``definition`` to ``form``."""

    @abstractmethod
    def evaluate(
        self,
        form: Element,
        definition: QuizDefinition,
        lang: str,
        instance_id: int,
    ) -> bool:
        """Return whether the current submission is correct and reveal explanations."""
