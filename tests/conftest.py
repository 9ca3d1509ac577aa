"""Shared fixtures for the quiz engine tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from quiz_engine.core.control_tree import Element
from quiz_engine.core.i18n import UiStrings, load_translations
from quiz_engine.core.instance_ids import InstanceIdAllocator
from quiz_engine.core.quiz_instance import QuizInstance
from quiz_engine.core.quiz_loader import parse_quiz_definition

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "quiz-examples"


@pytest.fixture
def examples_dir() -> Path:
    return EXAMPLES_DIR


@pytest.fixture
def ui_en() -> UiStrings:
    return load_translations("en")


@pytest.fixture
def ui_ru() -> UiStrings:
    return load_translations("ru")


@pytest.fixture
def allocator() -> InstanceIdAllocator:
    return InstanceIdAllocator()


@pytest.fixture
def page() -> Element:
    """Stand-in for a document body holding quiz containers."""
    return Element("body")


@pytest.fixture
def make_quiz(page: Element, ui_en: UiStrings, allocator: InstanceIdAllocator):
    """Build a quiz from a JSON-like dict into a fresh container on ``page``."""

    def factory(data: dict, lang: str = "en", ui: UiStrings | None = None) -> QuizInstance:
        container = page.append_child(Element("div", class_="quiz-container"))
        instance = QuizInstance(
            container,
            parse_quiz_definition(data),
            lang,
            ui or ui_en,
            allocator.next_id(),
        )
        instance.build()
        return instance

    return factory
