"""Quiz engine constants shared across core, bootstrap and server layers."""

from pathlib import Path

SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "ru")
DEFAULT_LANGUAGE: str = "en"

PACKAGE_ROOT: Path = Path(__file__).resolve().parent.parent
LOCALES_DIR: Path = PACKAGE_ROOT / "data" / "locales"

QUIZ_CONTAINER_CLASS: str = "quiz-container"
QUIZ_SRC_ATTRIBUTE: str = "data-quiz-src"
QUIZ_ID_ATTRIBUTE: str = "data-quiz-id"

TRANSLATIONS_FAILED_MESSAGE: str = "Failed to load UI translations."

SESSION_COOKIE: str = "quiz_engine_session"
MAX_SESSIONS: int = 500
