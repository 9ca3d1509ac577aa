"""Runtime settings for the quiz engine host, overridable through the environment."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from quiz_engine.constants.engine_constants import (
    DEFAULT_LANGUAGE,
    LOCALES_DIR,
    MAX_SESSIONS,
    PACKAGE_ROOT,
    SUPPORTED_LANGUAGES,
)
from quiz_engine.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT

_EXAMPLES_DIR = PACKAGE_ROOT.parent / "quiz-examples"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="QUIZ_ENGINE_", env_file=".env", extra="ignore")

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    default_language: str = DEFAULT_LANGUAGE
    supported_languages: Annotated[tuple[str, ...], NoDecode] = Field(default=SUPPORTED_LANGUAGES)

    page_path: Path = _EXAMPLES_DIR / "index.md"
    quiz_dir: Path = _EXAMPLES_DIR
    locales_dir: Path = LOCALES_DIR
    max_sessions: int = Field(default=MAX_SESSIONS, gt=0)

    log_level: str = "INFO"
    theme: str = "light"

    @field_validator("supported_languages", mode="before")
    @classmethod
    def _split_languages(cls, value: object) -> object:
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    @field_validator("theme")
    @classmethod
    def _normalize_theme(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"light", "dark"}:
            raise ValueError("theme must be 'light' or 'dark'")
        return normalized

    @model_validator(mode="after")
    def _default_is_supported(self) -> "Settings":
        if self.default_language not in self.supported_languages:
            raise ValueError(
                f"default_language '{self.default_language}' is not one of {self.supported_languages}"
            )
        return self


settings = Settings()
