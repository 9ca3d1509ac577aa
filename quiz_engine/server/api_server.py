"""FastAPI server that hosts the quiz page and its check/retry endpoints.

Every visitor gets its own copy of the page, keyed by a session cookie, so
checking or retrying a quiz in one browser never shows up in another.
"""

from __future__ import annotations

from fastapi import Depends, FastAPI, Header, HTTPException, Query, Request, Response
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field
import uvicorn

from quiz_engine.constants.about import APP_NAME, APP_VERSION
from quiz_engine.constants.engine_constants import SESSION_COOKIE
from quiz_engine.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from quiz_engine.core.i18n import detect_language
from quiz_engine.core.markdown_math_renderer import renderer
from quiz_engine.core.quiz_instance import QuizStateError
from quiz_engine.core.quiz_manager import InstanceSummary, QuizPageManager
from quiz_engine.styling.styles import QuizStyles

_CLIENT_SCRIPT = """
      document.addEventListener('submit', (event) => {
        if (event.target.closest('.quiz-container')) {
          event.preventDefault();
        }
      });

      document.addEventListener('click', async (event) => {
        const button = event.target.closest('[data-quiz-action]');
        if (!button) return;
        const container = button.closest('.quiz-container');
        if (!container || !container.dataset.quizId) return;

        const action = button.dataset.quizAction;
        let payload = {};
        if (action === 'check') {
          const form = container.querySelector('form');
          const selected = Array.from(form.querySelectorAll('input:checked'))
            .map((input) => parseInt(input.value, 10));
          const textInput = form.querySelector('input[type="text"]');
          payload = { selected, text: textInput ? textInput.value : null };
        }

        button.disabled = true;
        try {
          const response = await fetch(`/api/quizzes/${container.dataset.quizId}/${action}`, {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(payload),
          });
          if (!response.ok) {
            console.error(`Quiz ${action} failed`, await response.text());
            button.disabled = false;
            return;
          }
          const data = await response.json();
          container.outerHTML = data.html;
          if (window.MathJax && window.MathJax.typesetPromise) {
            window.MathJax.typesetPromise();
          }
        } catch (error) {
          console.error(`Quiz ${action} failed`, error);
          button.disabled = false;
        }
      });
"""


class CheckPayload(BaseModel):
    """Payload schema for a submitted answer."""

    selected: list[int] = Field(default_factory=list)
    text: str | None = None


def _summary_to_dict(summary: InstanceSummary) -> dict[str, object]:
    return {
        "instance_id": summary.instance_id,
        "kind": summary.kind,
        "state": summary.state.name.lower(),
        "correct": summary.correct,
        "can_retry": summary.can_retry,
        "html": summary.html,
    }


def _language_links(manager: QuizPageManager, session_id: str) -> str:
    current = manager.get_language(session_id)
    links = []
    for lang in manager.get_supported_languages():
        if lang == current:
            links.append(f"<strong>{lang}</strong>")
        else:
            links.append(f'<a href="/?lang={lang}">{lang}</a>')
    return " | ".join(links)


def _ensure_session(request: Request, response: Response, manager: QuizPageManager) -> str:
    session_id = request.cookies.get(SESSION_COOKIE)
    if session_id and manager.has_page(session_id):
        return session_id
    session_id = manager.new_session_id()
    response.set_cookie(
        key=SESSION_COOKIE,
        value=session_id,
        max_age=60 * 60 * 24,
        samesite="lax",
        httponly=True,
    )
    return session_id


def _get_page_manager_dependency(page_manager: QuizPageManager):
    def dependency() -> QuizPageManager:
        return page_manager

    return dependency


def create_api_app(page_manager: QuizPageManager, styles: QuizStyles | None = None) -> FastAPI:
    """Create a FastAPI application wired to the provided page manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    manager_dep = _get_page_manager_dependency(page_manager)
    styles = styles or QuizStyles()

    @app.get("/", response_class=HTMLResponse)
    def serve_page(
        request: Request,
        response: Response,
        lang: str | None = Query(default=None),
        accept_language: str | None = Header(default=None),
        manager: QuizPageManager = Depends(manager_dep),
    ) -> str:
        session_id = _ensure_session(request, response, manager)
        if lang is not None or not manager.has_page(session_id):
            requested = detect_language(
                lang,
                accept_language,
                supported=manager.get_supported_languages(),
                default=manager.get_language(session_id),
            )
            manager.ensure_page(session_id, requested)
        body = (
            f"    <main>\n{manager.get_page_html(session_id)}\n    </main>\n"
            f'    <footer class="quiz-footer">{_language_links(manager, session_id)}</footer>'
        )
        return renderer.wrap_with_mathjax(
            body,
            title=APP_NAME,
            lang=manager.get_language(session_id),
            style_css=styles.get_page_style(),
            script=_CLIENT_SCRIPT,
        )

    @app.post("/reload")
    def reload_page(
        request: Request,
        response: Response,
        lang: str | None = Query(default=None),
        manager: QuizPageManager = Depends(manager_dep),
    ) -> dict[str, object]:
        session_id = _ensure_session(request, response, manager)
        page = manager.load_page(session_id, lang or manager.get_language(session_id))
        return {
            "lang": page.lang,
            "instances": [_summary_to_dict(summary) for summary in manager.list_instances(session_id)],
        }

    @app.get("/api/quizzes")
    def list_quizzes(
        request: Request,
        response: Response,
        manager: QuizPageManager = Depends(manager_dep),
    ) -> list[dict[str, object]]:
        session_id = _ensure_session(request, response, manager)
        manager.ensure_page(session_id)
        return [_summary_to_dict(summary) for summary in manager.list_instances(session_id)]

    @app.get("/api/quizzes/{instance_id}")
    def get_quiz(
        instance_id: int,
        request: Request,
        manager: QuizPageManager = Depends(manager_dep),
    ) -> dict[str, object]:
        session_id = request.cookies.get(SESSION_COOKIE, "")
        try:
            summary = manager.get_instance_summary(session_id, instance_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc
        return _summary_to_dict(summary)

    @app.post("/api/quizzes/{instance_id}/check")
    def check_quiz(
        instance_id: int,
        payload: CheckPayload,
        request: Request,
        manager: QuizPageManager = Depends(manager_dep),
    ) -> dict[str, object]:
        session_id = request.cookies.get(SESSION_COOKIE, "")
        try:
            summary = manager.check_answer(session_id, instance_id, payload.selected, payload.text)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except QuizStateError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return _summary_to_dict(summary)

    @app.post("/api/quizzes/{instance_id}/retry")
    def retry_quiz(
        instance_id: int,
        request: Request,
        manager: QuizPageManager = Depends(manager_dep),
    ) -> dict[str, object]:
        session_id = request.cookies.get(SESSION_COOKIE, "")
        try:
            summary = manager.retry(session_id, instance_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc
        except QuizStateError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return _summary_to_dict(summary)

    return app


def run_api_server(
    page_manager: QuizPageManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    styles: QuizStyles | None = None,
    log_level: str = "info",
) -> None:
    """Serve the quiz page with uvicorn until interrupted."""
    app = create_api_app(page_manager, styles=styles)
    config = uvicorn.Config(app=app, host=host, port=port, log_level=log_level.lower())
    server = uvicorn.Server(config)
    server.run()
