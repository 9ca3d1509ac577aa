"""Language detection, UI string loading and multilingual text resolution."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from quiz_engine.constants.engine_constants import (
    DEFAULT_LANGUAGE,
    LOCALES_DIR,
    SUPPORTED_LANGUAGES,
)
from quiz_engine.core.models import MultilingualText


class TranslationLoadError(Exception):
    """Raised when a locale file cannot be read or parsed."""


class UiStrings(BaseModel):
    """Localized labels used by the quiz controls and error messages."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    check_answer: str = Field(default="Check Answer", alias="checkAnswer")
    correct: str = "Correct!"
    incorrect: str = "Incorrect."
    try_again: str = Field(default="Try Again", alias="tryAgain")
    error_no_src: str = Field(default="Quiz source is not specified.", alias="errorNoSrc")
    error_loading: str = Field(default="Failed to load the quiz.", alias="errorLoading")
    error_unknown_type: str = Field(default="Unknown quiz type:", alias="errorUnknownType")


def get_translated(
    content: MultilingualText,
    lang: str,
    default_lang: str = DEFAULT_LANGUAGE,
) -> str:
    """Resolve multilingual text to the best available string.

    Plain strings are language agnostic and returned as-is. Mappings fall back
    from ``lang`` to ``default_lang``; an empty translation counts as missing.
    Anything else resolves to an empty string, which callers treat as
    "nothing to render".
    """
    if isinstance(content, str):
        return content
    if isinstance(content, Mapping):
        for key in (lang, default_lang):
            value = content.get(key)
            if isinstance(value, str) and value:
                return value
    return ""


def detect_language(
    requested: str | None,
    accept_language: str | None = None,
    supported: Iterable[str] = SUPPORTED_LANGUAGES,
    default: str = DEFAULT_LANGUAGE,
) -> str:
    """Pick the page language: explicit request, then the browser's, then the default."""
    supported = tuple(supported)
    if requested and requested in supported:
        return requested
    if accept_language:
        first = accept_language.split(",", 1)[0].split(";", 1)[0].strip()
        browser_lang = first.split("-", 1)[0].lower()
        if browser_lang in supported:
            return browser_lang
    return default


def load_translations(lang: str, locales_dir: Path = LOCALES_DIR) -> UiStrings:
    """Read ``{locales_dir}/{lang}.json`` into :class:`UiStrings`."""
    locale_path = Path(locales_dir) / f"{lang}.json"
    try:
        raw = json.loads(locale_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise TranslationLoadError(f"Could not load translation file for {lang}") from exc
    if not isinstance(raw, dict):
        raise TranslationLoadError(f"Translation file for {lang} must contain a JSON object")
    try:
        return UiStrings.model_validate(raw)
    except ValidationError as exc:
        raise TranslationLoadError(f"Translation file for {lang} is malformed: {exc}") from exc
