from __future__ import annotations

import pytest

from quiz_engine.core.instance_ids import InstanceIdAllocator
from quiz_engine.core.models import InstanceState
from quiz_engine.core.quiz_instance import QuizStateError
from quiz_engine.core.quiz_loader import QuizDirectoryLoader
from quiz_engine.core.quiz_manager import QuizPageManager, read_page_source

PAGE = (
    '<div class="quiz-container" data-quiz-src="sc-base.json"></div>'
    '<div class="quiz-container" data-quiz-src="if-mod-extension.json"></div>'
)


@pytest.fixture
def manager(examples_dir) -> QuizPageManager:
    return QuizPageManager(PAGE, QuizDirectoryLoader(examples_dir), allocator=InstanceIdAllocator())


def test_sessions_have_separate_pages(manager) -> None:
    manager.ensure_page("a")
    manager.ensure_page("b", "ru")
    assert [s.instance_id for s in manager.list_instances("a")] == [1, 2]
    assert [s.instance_id for s in manager.list_instances("b")] == [3, 4]
    assert manager.get_language("a") == "en"
    assert manager.get_language("b") == "ru"

    summary = manager.check_answer("a", 1, [0])
    assert summary.state is InstanceState.CHECKED
    assert manager.get_instance_summary("b", 3).state is InstanceState.ANSWERING

    with pytest.raises(KeyError):
        manager.check_answer("b", 1, [0])


def test_language_change_rebuilds_only_that_session(manager) -> None:
    manager.ensure_page("a")
    manager.ensure_page("b")
    manager.ensure_page("b", "ru")
    assert manager.get_instance_summary("a", 1).state is InstanceState.ANSWERING
    assert [s.instance_id for s in manager.list_instances("b")] == [5, 6]
    # same language keeps the live page
    assert manager.ensure_page("b", "ru") is manager.ensure_page("b")


def test_unsupported_language_falls_back_to_default(manager) -> None:
    assert manager.load_page("a", "de").lang == "en"


def test_unknown_session_is_a_key_error(manager) -> None:
    assert manager.get_language("missing") == "en"
    assert not manager.has_page("missing")
    with pytest.raises(KeyError):
        manager.get_page_html("missing")
    with pytest.raises(KeyError):
        manager.retry("missing", 1)


def test_least_recently_used_session_is_dropped(examples_dir) -> None:
    manager = QuizPageManager(
        PAGE, QuizDirectoryLoader(examples_dir), allocator=InstanceIdAllocator(), max_sessions=2
    )
    manager.ensure_page("a")
    manager.ensure_page("b")
    manager.list_instances("a")
    manager.ensure_page("c")
    assert manager.session_count() == 2
    assert manager.has_page("a")
    assert not manager.has_page("b")


def test_retry_after_correct_answer_conflicts(manager) -> None:
    manager.ensure_page("a")
    manager.check_answer("a", 1, [0])
    with pytest.raises(QuizStateError):
        manager.retry("a", 1)


def test_new_session_ids_are_unique() -> None:
    assert QuizPageManager.new_session_id() != QuizPageManager.new_session_id()


def test_read_page_source_renders_markdown(examples_dir, tmp_path) -> None:
    html_page = tmp_path / "page.html"
    html_page.write_text("<p>raw</p>", encoding="utf-8")
    assert read_page_source(html_page) == "<p>raw</p>"
    assert "<h1>HTML basics</h1>" in read_page_source(examples_dir / "index.md")
