"""Loading quiz definitions from their JSON documents.

Document format::

    {
      "question": "text" | {"en": "...", "ru": "..."},
      "config": {
        "type": "single-choice" | "multiple-choice" | "input-field",
        "explanationPolicy": "none" | "selected" | "all",   (alias: showExplanation)
        "caseSensitive": true,
        "showExplanationOnError": false,
        "showCheckControl": true,                          (alias: showCheckButton)
        "showRetryOnIncorrect": false                      (alias: showTryAgainButton)
      },
      "answers": [{"text": ..., "correct": true, "description": ...}],
      "answer": ...,          (input-field answer key)
      "explanation": ...      (input-field explanation)
    }

An unknown ``type`` is not a load error: it is carried into the definition and
reported by the quiz instance inside its container.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from quiz_engine.core.models import (
    AnswerOption,
    DisplayConfig,
    ExplanationPolicy,
    QuizDefinition,
)

logger = logging.getLogger(__name__)

TextDocument = Union[str, dict[str, str], None]


class QuizLoadError(Exception):
    """Raised when a quiz definition cannot be read or parsed."""


class AnswerDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: TextDocument = None
    correct: bool = False
    description: TextDocument = None


class ConfigDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str | None = None
    explanation_policy: ExplanationPolicy = Field(
        default=ExplanationPolicy.NONE,
        validation_alias=AliasChoices("explanationPolicy", "showExplanation", "explanation_policy"),
    )
    case_sensitive: bool = Field(
        default=True,
        validation_alias=AliasChoices("caseSensitive", "case_sensitive"),
    )
    show_explanation_on_error: bool = Field(
        default=False,
        validation_alias=AliasChoices("showExplanationOnError", "show_explanation_on_error"),
    )
    show_check_control: bool = Field(
        default=True,
        validation_alias=AliasChoices("showCheckControl", "showCheckButton", "show_check_control"),
    )
    show_retry_on_incorrect: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "showRetryOnIncorrect", "showTryAgainButton", "show_retry_on_incorrect"
        ),
    )

    @field_validator("explanation_policy", mode="before")
    @classmethod
    def _normalize_policy(cls, value: Any) -> Any:
        if value is None or value is False:
            return ExplanationPolicy.NONE
        if isinstance(value, str):
            return value.strip().lower()
        return value


class QuizDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    question: TextDocument = None
    config: ConfigDocument = Field(default_factory=ConfigDocument)
    answers: list[AnswerDocument] = Field(default_factory=list)
    answer: TextDocument = None
    explanation: TextDocument = None

    @field_validator("config", mode="before")
    @classmethod
    def _missing_config(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("answers", mode="before")
    @classmethod
    def _missing_answers(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_definition(self) -> QuizDefinition:
        config = self.config
        return QuizDefinition(
            question=self.question,
            config=DisplayConfig(
                kind=config.type,
                explanation_policy=config.explanation_policy,
                show_explanation_on_error=config.show_explanation_on_error,
                case_sensitive=config.case_sensitive,
                show_check_control=config.show_check_control,
                show_retry_on_incorrect=config.show_retry_on_incorrect,
            ),
            answers=tuple(
                AnswerOption(text=item.text, is_correct=item.correct, description=item.description)
                for item in self.answers
            ),
            answer_key=self.answer,
            explanation=self.explanation,
        )


def parse_quiz_definition(data: Any) -> QuizDefinition:
    """Validate an already-parsed JSON value and convert it to a definition."""
    if not isinstance(data, dict):
        raise QuizLoadError("Quiz document must be a JSON object.")
    try:
        document = QuizDocument.model_validate(data)
    except ValidationError as exc:
        raise QuizLoadError(f"Quiz document is malformed: {exc}") from exc
    return document.to_definition()


def load_quiz_from_file(file_path: Path) -> QuizDefinition:
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise QuizLoadError(f"Failed to load file: {file_path}") from exc
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise QuizLoadError(f"Quiz file {file_path} is not valid JSON: {exc}") from exc
    return parse_quiz_definition(data)


@dataclass(slots=True)
class QuizDirectoryLoader:
    """Resolves ``data-quiz-src`` values to quiz files inside ``base_dir``."""

    base_dir: Path

    def resolve(self, src: str) -> Path:
        base = Path(self.base_dir).resolve()
        candidate = (base / src.lstrip("/")).resolve()
        if candidate != base and base not in candidate.parents:
            raise QuizLoadError(f"Quiz source '{src}' is outside of {base}.")
        return candidate

    def __call__(self, src: str) -> QuizDefinition:
        path = self.resolve(src)
        logger.debug("Loading quiz %s from %s", src, path)
        return load_quiz_from_file(path)
