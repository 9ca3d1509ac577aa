from __future__ import annotations

from pydantic import ValidationError
import pytest

from quiz_engine.config import Settings
from quiz_engine.utils.logging_config import configure_logging


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.default_language == "en"
    assert settings.supported_languages == ("en", "ru")
    assert settings.theme == "light"


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("QUIZ_ENGINE_PORT", "9100")
    monkeypatch.setenv("QUIZ_ENGINE_SUPPORTED_LANGUAGES", "ru, en")
    monkeypatch.setenv("QUIZ_ENGINE_DEFAULT_LANGUAGE", "ru")
    monkeypatch.setenv("QUIZ_ENGINE_THEME", "Dark")
    settings = Settings(_env_file=None)
    assert settings.port == 9100
    assert settings.supported_languages == ("ru", "en")
    assert settings.default_language == "ru"
    assert settings.theme == "dark"


def test_default_language_must_be_supported(monkeypatch) -> None:
    monkeypatch.setenv("QUIZ_ENGINE_DEFAULT_LANGUAGE", "de")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_configure_logging_returns_package_logger() -> None:
    logger = configure_logging("debug")
    assert logger.name == "quiz_engine"


def test_max_sessions_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("QUIZ_ENGINE_MAX_SESSIONS", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
