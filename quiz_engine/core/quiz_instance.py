"""Lifecycle of one rendered quiz: build, check, retry."""

from __future__ import annotations

from collections.abc import Iterable
import logging

from quiz_engine.constants.engine_constants import DEFAULT_LANGUAGE
from quiz_engine.core.control_tree import Element
from quiz_engine.core.element_ids import (
    answer_group_name,
    check_button_id,
    form_id,
    messages_id,
    retry_button_id,
    text_input_id,
    verdict_id,
)
from quiz_engine.core.i18n import UiStrings, get_translated
from quiz_engine.core.models import InstanceState, QuizDefinition, QuizKind
from quiz_engine.core.quiz_types import QuizType, create_quiz_type
from quiz_engine.styling.styles import QuizStyles

logger = logging.getLogger(__name__)


class QuizStateError(RuntimeError):
    """Raised when a lifecycle action is requested in the wrong state."""


class QuizInstance:
    """Controller for a single quiz rendered into ``container``.

    States move ``UNBUILT -> ANSWERING -> CHECKED`` and back to ``ANSWERING``
    through :meth:`retry`. Everything the instance creates lives under
    ``container`` and is namespaced by ``instance_id``.
    """

    def __init__(
        self,
        container: Element,
        definition: QuizDefinition,
        lang: str,
        ui: UiStrings,
        instance_id: int,
        styles: QuizStyles | None = None,
        default_lang: str = DEFAULT_LANGUAGE,
    ) -> None:
        if instance_id <= 0:
            raise ValueError("Instance id must be a positive integer.")
        self.container = container
        self.definition = definition
        self.lang = lang
        self.ui = ui
        self.instance_id = instance_id
        self.styles = styles or QuizStyles()
        self.default_lang = default_lang

        self._state = InstanceState.UNBUILT
        self._quiz_type: QuizType | None = None
        self._form: Element | None = None
        self._check_button: Element | None = None
        self._messages: Element | None = None
        self._last_result: bool | None = None
        self._error: str | None = None

    # --- Introspection ---

    @property
    def state(self) -> InstanceState:
        return self._state

    @property
    def kind(self) -> QuizKind | None:
        return self.definition.config.quiz_kind

    @property
    def last_result(self) -> bool | None:
        """Verdict of the latest check; ``None`` while answering."""
        return self._last_result

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def form(self) -> Element | None:
        return self._form

    @property
    def results(self) -> Element | None:
        return self._messages

    @property
    def check_button(self) -> Element | None:
        return self._check_button

    @property
    def retry_button(self) -> Element | None:
        if self._messages is None:
            return None
        return self._messages.get_element_by_id(retry_button_id(self.instance_id))

    # --- Lifecycle ---

    def build(self) -> InstanceState:
        """Render the quiz from scratch, discarding any selection and verdict."""
        self.container.clear()
        self._reset_references()

        config = self.definition.config
        quiz_type = create_quiz_type(config.kind, self.styles, self.default_lang)
        if quiz_type is None:
            self._render_configuration_error(config.kind)
            return self._state

        question = get_translated(self.definition.question, self.lang, self.default_lang)
        self.container.append_child(Element("h2", question))

        form = self.container.append_child(Element("form", id=form_id(self.instance_id)))
        quiz_type.render(form, self.definition, self.lang, self.ui, self.instance_id)

        check_button = self.container.append_child(
            Element("button", self.ui.check_answer, type="button", id=check_button_id(self.instance_id))
        )
        check_button.set("data-quiz-action", "check")
        if not config.show_check_control:
            check_button.hidden = True
        check_button.add_event_listener("click", lambda _element: self.check())

        messages = self.container.append_child(Element("div", id=messages_id(self.instance_id)))

        self._quiz_type = quiz_type
        self._form = form
        self._check_button = check_button
        self._messages = messages
        self._state = InstanceState.ANSWERING
        logger.debug("Built quiz %s (%s)", self.instance_id, quiz_type.kind.value)
        return self._state

    def check(self) -> bool:
        """Evaluate the current submission and render the verdict."""
        if self._state is not InstanceState.ANSWERING:
            raise QuizStateError(f"Quiz {self.instance_id} is not awaiting an answer.")
        if any(part is None for part in (self._quiz_type, self._form, self._messages, self._check_button)):
            raise QuizStateError(f"Quiz {self.instance_id} has no rendered controls.")

        is_correct = self._quiz_type.evaluate(self._form, self.definition, self.lang, self.instance_id)

        for element in self._form.query_inputs():
            element.disabled = True
        self._check_button.hidden = True
        self._check_button.disabled = True

        self._messages.clear()
        verdict_text = self.ui.correct if is_correct else self.ui.incorrect
        verdict = self._messages.append_child(Element("p", verdict_text, id=verdict_id(self.instance_id)))
        self.styles.apply_result_styles(verdict, is_correct)
        self.styles.apply_message_styles(self._messages)

        if not is_correct and self.definition.config.show_retry_on_incorrect:
            retry_button = self._messages.append_child(
                Element("button", self.ui.try_again, type="button", id=retry_button_id(self.instance_id))
            )
            retry_button.set("data-quiz-action", "retry")
            self.styles.apply_try_again_button_styles(retry_button)
            retry_button.add_event_listener("click", lambda _element: self.retry())

        self._last_result = is_correct
        self._state = InstanceState.CHECKED
        logger.debug("Quiz %s checked: %s", self.instance_id, "correct" if is_correct else "incorrect")
        return is_correct

    def retry(self) -> InstanceState:
        """Rebuild the quiz after an incorrect answer when retry is enabled."""
        if self._state is not InstanceState.CHECKED or self.retry_button is None:
            raise QuizStateError(f"Quiz {self.instance_id} cannot be retried now.")
        logger.debug("Retrying quiz %s", self.instance_id)
        return self.build()

    @property
    def can_retry(self) -> bool:
        return self._state is InstanceState.CHECKED and self.retry_button is not None

    # --- Submission helpers ---

    def select(self, *indices: int) -> None:
        """Click the answer inputs at ``indices`` as a user would."""
        inputs = self._answer_inputs()
        for index in indices:
            if not 0 <= index < len(inputs):
                raise ValueError(f"Answer index {index} out of range for quiz {self.instance_id}.")
            inputs[index].click()

    def enter_text(self, text: str) -> None:
        """Type ``text`` into the free-text input."""
        field = self._form.get_element_by_id(text_input_id(self.instance_id)) if self._form else None
        if field is None:
            raise ValueError(f"Quiz {self.instance_id} has no text input.")
        if field.disabled:
            raise QuizStateError(f"Quiz {self.instance_id} input is disabled.")
        field.value = text

    def apply_submission(self, selected: Iterable[int] = (), text: str | None = None) -> None:
        """Make the rendered controls reflect a full submission from a client."""
        if self._state is not InstanceState.ANSWERING:
            raise QuizStateError(f"Quiz {self.instance_id} is not awaiting an answer.")
        if self.kind is QuizKind.INPUT_FIELD:
            self.enter_text(text or "")
            return
        wanted = list(dict.fromkeys(selected))
        inputs = self._answer_inputs()
        for index in wanted:
            if not 0 <= index < len(inputs):
                raise ValueError(f"Answer index {index} out of range for quiz {self.instance_id}.")
        if self.kind is QuizKind.SINGLE_CHOICE:
            if len(wanted) > 1:
                raise ValueError("A single-choice quiz accepts at most one selected answer.")
            if wanted:
                inputs[wanted[0]].click()
            else:
                for element in inputs:
                    element.checked = False
            return
        for index, element in enumerate(inputs):
            if element.checked != (index in wanted):
                element.click()

    # --- Internals ---

    def _answer_inputs(self) -> list[Element]:
        if self._form is None:
            return []
        return self._form.query_inputs(answer_group_name(self.instance_id))

    def _reset_references(self) -> None:
        self._quiz_type = None
        self._form = None
        self._check_button = None
        self._messages = None
        self._last_result = None
        self._error = None
        self._state = InstanceState.UNBUILT

    def _render_configuration_error(self, kind: str | None) -> None:
        message = f'{self.ui.error_unknown_type} "{kind}".'
        error = self.container.append_child(Element("p", message))
        self.styles.apply_error_styles(error)
        self._error = message
        logger.warning("Quiz %s has unknown type %r", self.instance_id, kind)
