"""Application entry point for the Quiz Engine page server."""

from __future__ import annotations

import argparse
from pathlib import Path

from quiz_engine.config import settings
from quiz_engine.core.quiz_manager import QuizPageManager
from quiz_engine.server.api_server import run_api_server
from quiz_engine.styling import QuizStyles, Theme
from quiz_engine.utils.logging_config import configure_logging


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve a page of interactive quizzes.")
    parser.add_argument("--page", type=Path, default=settings.page_path, help="Markdown or HTML page with quiz containers")
    parser.add_argument("--quiz-dir", type=Path, default=settings.quiz_dir, help="Directory that data-quiz-src paths resolve against")
    parser.add_argument("--lang", default=settings.default_language, help="Default page language")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--log-level", default=settings.log_level)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Initialize logging, prepare the quiz page manager, and start the API server."""
    args = _parse_args(argv)
    logger = configure_logging(args.log_level)
    logger.info("Starting Quiz Engine…")

    styles = QuizStyles(Theme(settings.theme))
    manager = QuizPageManager.from_paths(
        args.page,
        args.quiz_dir,
        locales_dir=settings.locales_dir,
        supported_languages=settings.supported_languages,
        default_language=args.lang,
        styles=styles,
        max_sessions=settings.max_sessions,
    )
    logger.info("Quiz page available at http://%s:%s/", args.host, args.port)

    run_api_server(manager, host=args.host, port=args.port, styles=styles, log_level=args.log_level)


if __name__ == "__main__":
    main()
