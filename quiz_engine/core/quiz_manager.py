"""Facade over the per-session quiz pages shared between HTTP handlers."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterable
from dataclasses import dataclass
import logging
from pathlib import Path
from threading import Lock
from uuid import uuid4

from quiz_engine.constants.engine_constants import (
    DEFAULT_LANGUAGE,
    LOCALES_DIR,
    MAX_SESSIONS,
    SUPPORTED_LANGUAGES,
    TRANSLATIONS_FAILED_MESSAGE,
)
from quiz_engine.core.i18n import TranslationLoadError, load_translations
from quiz_engine.core.instance_ids import InstanceIdAllocator, allocator as default_allocator
from quiz_engine.core.markdown_math_renderer import renderer
from quiz_engine.core.models import InstanceState
from quiz_engine.core.page import QuizLoader, QuizPage, fail_all_containers, initialize_quizzes
from quiz_engine.core.quiz_instance import QuizInstance
from quiz_engine.core.quiz_loader import QuizDirectoryLoader
from quiz_engine.styling.styles import QuizStyles

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class InstanceSummary:
    """Snapshot of one instance for API responses."""

    instance_id: int
    kind: str | None
    state: InstanceState
    correct: bool | None
    can_retry: bool
    html: str


def read_page_source(page_path: Path) -> str:
    """Read a page file; markdown pages are rendered, ``.html`` pages used as-is."""
    text = Path(page_path).read_text(encoding="utf-8")
    if Path(page_path).suffix.lower() in {".html", ".htm"}:
        return text
    return renderer.render_fragment(text)


class QuizPageManager:
    """Owns one :class:`QuizPage` per visitor session and serialises access to them.

    Each session sees its own language and instances. Instance ids still come
    from one allocator, so ids never repeat across sessions or reloads. The
    least recently used session is dropped once ``max_sessions`` is exceeded.
    """

    def __init__(
        self,
        page_source: str,
        loader: QuizLoader,
        locales_dir: Path = LOCALES_DIR,
        supported_languages: Iterable[str] = SUPPORTED_LANGUAGES,
        default_language: str = DEFAULT_LANGUAGE,
        styles: QuizStyles | None = None,
        allocator: InstanceIdAllocator = default_allocator,
        max_sessions: int = MAX_SESSIONS,
    ) -> None:
        self._lock = Lock()
        self._page_source = page_source
        self._loader = loader
        self._locales_dir = locales_dir
        self._supported_languages = tuple(supported_languages)
        self._default_language = default_language
        self._styles = styles or QuizStyles()
        self._allocator = allocator
        self._max_sessions = max_sessions
        self._pages: OrderedDict[str, QuizPage] = OrderedDict()

    @classmethod
    def from_paths(cls, page_path: Path, quiz_dir: Path, **kwargs) -> "QuizPageManager":
        return cls(read_page_source(page_path), QuizDirectoryLoader(Path(quiz_dir)), **kwargs)

    # --- Sessions ---

    @staticmethod
    def new_session_id() -> str:
        return uuid4().hex

    def has_page(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._pages

    def session_count(self) -> int:
        with self._lock:
            return len(self._pages)

    # --- Page lifecycle ---

    def load_page(self, session_id: str, lang: str | None = None) -> QuizPage:
        """Scan the page again for ``session_id`` in ``lang``, allocating fresh instance ids."""
        with self._lock:
            return self._load_page_locked(session_id, lang)

    def ensure_page(self, session_id: str, lang: str | None = None) -> QuizPage:
        """Return the session's page, loading it first or when the language changes."""
        with self._lock:
            page = self._pages.get(session_id)
            if page is None or (lang is not None and lang != page.lang):
                return self._load_page_locked(session_id, lang)
            self._pages.move_to_end(session_id)
            return page

    def get_language(self, session_id: str) -> str:
        with self._lock:
            page = self._pages.get(session_id)
            return page.lang if page else self._default_language

    def get_supported_languages(self) -> tuple[str, ...]:
        return self._supported_languages

    def get_page_html(self, session_id: str) -> str:
        with self._lock:
            return self._require_page(session_id).render_html()

    # --- Instance delegation ---

    def list_instances(self, session_id: str) -> list[InstanceSummary]:
        with self._lock:
            page = self._require_page(session_id)
            return [self._summarize(instance) for instance in page.instances.values()]

    def get_instance_summary(self, session_id: str, instance_id: int) -> InstanceSummary:
        with self._lock:
            return self._summarize(self._require_page(session_id).get_instance(instance_id))

    def check_answer(
        self,
        session_id: str,
        instance_id: int,
        selected: Iterable[int] = (),
        text: str | None = None,
    ) -> InstanceSummary:
        with self._lock:
            instance = self._require_page(session_id).get_instance(instance_id)
            instance.apply_submission(selected, text)
            instance.check()
            return self._summarize(instance)

    def retry(self, session_id: str, instance_id: int) -> InstanceSummary:
        with self._lock:
            instance = self._require_page(session_id).get_instance(instance_id)
            instance.retry()
            return self._summarize(instance)

    # --- Internals ---

    def _load_page_locked(self, session_id: str, lang: str | None) -> QuizPage:
        lang = lang if lang in self._supported_languages else self._default_language
        try:
            ui = load_translations(lang, self._locales_dir)
        except TranslationLoadError:
            logger.exception("Failed to initialize quizzes")
            page = fail_all_containers(self._page_source, lang, TRANSLATIONS_FAILED_MESSAGE, self._styles)
        else:
            page = initialize_quizzes(
                self._page_source,
                self._loader,
                lang,
                ui,
                allocator=self._allocator,
                styles=self._styles,
                default_lang=self._default_language,
            )
        self._pages[session_id] = page
        self._pages.move_to_end(session_id)
        while len(self._pages) > self._max_sessions:
            evicted, _ = self._pages.popitem(last=False)
            logger.info("Dropped quiz page of session %s", evicted)
        return page

    def _require_page(self, session_id: str) -> QuizPage:
        try:
            page = self._pages[session_id]
        except KeyError:
            raise KeyError("No quiz page for this session.") from None
        self._pages.move_to_end(session_id)
        return page

    @staticmethod
    def _summarize(instance: QuizInstance) -> InstanceSummary:
        return InstanceSummary(
            instance_id=instance.instance_id,
            kind=instance.definition.config.kind,
            state=instance.state,
            correct=instance.last_result,
            can_retry=instance.can_retry,
            html=instance.container.to_html(),
        )
