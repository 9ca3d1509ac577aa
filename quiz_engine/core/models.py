"""Domain models for quiz definitions and instance state."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

MultilingualText = Union[str, Mapping[str, str], None]


class QuizKind(str, Enum):
    """Answer kinds the engine knows how to render and evaluate."""

    SINGLE_CHOICE = "single-choice"
    MULTIPLE_CHOICE = "multiple-choice"
    INPUT_FIELD = "input-field"

    @classmethod
    def from_value(cls, value: str | None) -> QuizKind | None:
        for kind in cls:
            if kind.value == value:
                return kind
        return None


class ExplanationPolicy(str, Enum):
    """Which per-answer descriptions a choice quiz reveals after checking."""

    NONE = "none"
    SELECTED = "selected"
    ALL = "all"


class InstanceState(Enum):
    """Lifecycle states of a rendered quiz instance."""

    UNBUILT = auto()
    ANSWERING = auto()
    CHECKED = auto()


@dataclass(frozen=True, slots=True)
class AnswerOption:
    """One selectable answer; its position in the answer list is its identity."""

    text: MultilingualText
    is_correct: bool = False
    description: MultilingualText = None


@dataclass(frozen=True, slots=True)
class DisplayConfig:
    """Per-quiz display and evaluation settings."""

    kind: str | None  # raw ``config.type`` so unknown values reach the controller
    explanation_policy: ExplanationPolicy = ExplanationPolicy.NONE
    show_explanation_on_error: bool = False
    case_sensitive: bool = True
    show_check_control: bool = True
    show_retry_on_incorrect: bool = False

    @property
    def quiz_kind(self) -> QuizKind | None:
        return QuizKind.from_value(self.kind)


@dataclass(frozen=True, slots=True)
class QuizDefinition:
    """Immutable quiz content loaded once per instance."""

    question: MultilingualText
    config: DisplayConfig
    answers: tuple[AnswerOption, ...] = field(default_factory=tuple)
    answer_key: MultilingualText = None
    explanation: MultilingualText = None

    @property
    def correct_indices(self) -> frozenset[int]:
        return frozenset(index for index, answer in enumerate(self.answers) if answer.is_correct)
