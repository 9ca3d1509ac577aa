"""Static metadata describing Quiz Engine."""

APP_NAME = "Quiz Engine"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Quiz Engine renders single-choice, multiple-choice and free-text quiz widgets "
    "from JSON definitions, checks answers and shows explanations in several languages."
)

HELP_TEXT = (
    "Embed a quiz in a page with a container element:\n\n"
    '<div class="quiz-container" data-quiz-src="sc-base.json"></div>\n\n'
    "A quiz file looks like:\n\n"
    '{"question": {"en": "Which tag is a heading?", "ru": "Какой тег является заголовком?"},\n'
    ' "config": {"type": "single-choice", "explanationPolicy": "selected"},\n'
    ' "answers": [{"text": "<h1>", "correct": true}, {"text": "<p>", "correct": false}]}'
)
