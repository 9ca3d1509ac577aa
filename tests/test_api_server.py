from __future__ import annotations

from fastapi.testclient import TestClient
import pytest

from quiz_engine.core.instance_ids import InstanceIdAllocator
from quiz_engine.core.quiz_loader import QuizDirectoryLoader
from quiz_engine.core.quiz_manager import QuizPageManager
from quiz_engine.server.api_server import create_api_app

PAGE = (
    "<h1>Page</h1>"
    '<div class="quiz-container" data-quiz-src="sc-base.json"></div>'
    '<div class="quiz-container" data-quiz-src="mc-base.json"></div>'
    '<div class="quiz-container" data-quiz-src="if-mod-extension.json"></div>'
)


@pytest.fixture
def manager(examples_dir) -> QuizPageManager:
    return QuizPageManager(
        PAGE,
        QuizDirectoryLoader(examples_dir),
        allocator=InstanceIdAllocator(),
    )


@pytest.fixture
def client(manager) -> TestClient:
    client = TestClient(create_api_app(manager))
    client.get("/")
    return client


def test_page_is_served_in_default_language(client) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert '<html lang="en">' in response.text
    assert 'data-quiz-id="1"' in response.text
    assert "Check Answer" in response.text
    assert "data-quiz-action" in response.text


def test_language_switch_rebuilds_page(client) -> None:
    response = client.get("/", params={"lang": "ru"})
    assert "Проверить ответ" in response.text
    assert 'data-quiz-id="4"' in response.text
    # unsupported language keeps the current one
    response = client.get("/", params={"lang": "xx"})
    assert "Проверить ответ" in response.text


def test_list_quizzes(client) -> None:
    data = client.get("/api/quizzes").json()
    assert [item["instance_id"] for item in data] == [1, 2, 3]
    assert [item["kind"] for item in data] == ["single-choice", "multiple-choice", "input-field"]
    assert all(item["state"] == "answering" for item in data)


def test_check_correct_answer(client) -> None:
    response = client.post("/api/quizzes/1/check", json={"selected": [0]})
    assert response.status_code == 200
    data = response.json()
    assert data["correct"] is True
    assert data["state"] == "checked"
    assert data["can_retry"] is False
    assert "Correct!" in data["html"]


def test_check_multiple_choice_and_retry(client) -> None:
    data = client.post("/api/quizzes/2/check", json={"selected": [0]}).json()
    assert data["correct"] is False
    assert data["can_retry"] is True

    data = client.post("/api/quizzes/2/retry").json()
    assert data["state"] == "answering"
    assert data["correct"] is None

    data = client.post("/api/quizzes/2/check", json={"selected": [2, 0]}).json()
    assert data["correct"] is True


def test_check_input_field_shows_explanation(client) -> None:
    data = client.post("/api/quizzes/3/check", json={"text": "css"}).json()
    assert data["correct"] is False
    assert "The correct answer is CSS." in data["html"]


def test_check_twice_conflicts(client) -> None:
    client.post("/api/quizzes/1/check", json={"selected": [0]})
    response = client.post("/api/quizzes/1/check", json={"selected": [1]})
    assert response.status_code == 409


def test_retry_without_retry_control_conflicts(client) -> None:
    assert client.post("/api/quizzes/1/retry").status_code == 409


def test_unknown_instance_is_404(client) -> None:
    assert client.get("/api/quizzes/99").status_code == 404
    assert client.post("/api/quizzes/99/check", json={}).status_code == 404


def test_out_of_range_selection_is_422(client) -> None:
    response = client.post("/api/quizzes/1/check", json={"selected": [9]})
    assert response.status_code == 422


def test_reload_allocates_fresh_ids(client) -> None:
    data = client.post("/reload", params={"lang": "ru"}).json()
    assert data["lang"] == "ru"
    assert [item["instance_id"] for item in data["instances"]] == [4, 5, 6]


def test_translation_failure_shows_message_everywhere(examples_dir, tmp_path) -> None:
    manager = QuizPageManager(
        PAGE,
        QuizDirectoryLoader(examples_dir),
        locales_dir=tmp_path,
        allocator=InstanceIdAllocator(),
    )
    client = TestClient(create_api_app(manager))
    response = client.get("/")
    assert response.text.count("Failed to load UI translations.") == 3
    assert client.get("/api/quizzes").json() == []


def test_visitors_get_independent_pages(manager) -> None:
    app = create_api_app(manager)
    alice = TestClient(app)
    bob = TestClient(app)
    alice.get("/")
    bob.get("/")
    assert [item["instance_id"] for item in bob.get("/api/quizzes").json()] == [4, 5, 6]

    data = alice.post("/api/quizzes/1/check", json={"selected": [1]}).json()
    assert data["correct"] is False

    bob_page = bob.get("/").text
    assert "quiz-4-verdict" not in bob_page
    assert all(item["state"] == "answering" for item in bob.get("/api/quizzes").json())
    assert bob.post("/api/quizzes/1/check", json={"selected": [0]}).status_code == 404
    assert bob.post("/api/quizzes/4/check", json={"selected": [0]}).json()["correct"] is True

    assert "Проверить ответ" in bob.get("/", params={"lang": "ru"}).text
    response = alice.post("/api/quizzes/2/check", json={"selected": [0, 2]})
    assert response.status_code == 200
    assert response.json()["correct"] is True
    assert '<html lang="en">' in alice.get("/").text


def test_new_visitor_language_follows_browser(manager) -> None:
    client = TestClient(create_api_app(manager))
    response = client.get("/", headers={"Accept-Language": "ru-RU,ru;q=0.9,en;q=0.8"})
    assert '<html lang="ru">' in response.text
    # an existing session keeps its language regardless of the header
    response = client.get("/", headers={"Accept-Language": "en"})
    assert '<html lang="ru">' in response.text


def test_actions_without_session_are_404(manager) -> None:
    client = TestClient(create_api_app(manager))
    assert client.post("/api/quizzes/1/check", json={"selected": [0]}).status_code == 404
    assert client.post("/api/quizzes/1/retry").status_code == 404
