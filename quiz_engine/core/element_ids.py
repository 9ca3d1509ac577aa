"""Instance-namespaced element ids and input group names."""

from __future__ import annotations


def container_id(instance_id: int) -> str:
    return f"quiz-{instance_id}"


def form_id(instance_id: int) -> str:
    return f"quiz-{instance_id}-form"


def answer_group_name(instance_id: int) -> str:
    return f"answer-group-{instance_id}"


def answer_input_id(instance_id: int, index: int) -> str:
    return f"quiz-{instance_id}-answer-{index}"


def answer_container_id(instance_id: int, index: int) -> str:
    return f"quiz-{instance_id}-answer-container-{index}"


def text_input_id(instance_id: int) -> str:
    return f"quiz-{instance_id}-answer-input"


def explanation_id(instance_id: int) -> str:
    return f"quiz-{instance_id}-explanation"


def check_button_id(instance_id: int) -> str:
    return f"quiz-{instance_id}-check"


def messages_id(instance_id: int) -> str:
    return f"quiz-{instance_id}-messages"


def verdict_id(instance_id: int) -> str:
    return f"quiz-{instance_id}-verdict"


def retry_button_id(instance_id: int) -> str:
    return f"quiz-{instance_id}-retry"


def belongs_to(element_id: str | None, instance_id: int) -> bool:
    """Whether ``element_id`` is namespaced under ``instance_id``."""
    if not element_id:
        return False
    prefix = container_id(instance_id)
    return element_id == prefix or element_id.startswith(f"{prefix}-")
