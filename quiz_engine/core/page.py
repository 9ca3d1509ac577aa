"""Page scan: finds quiz containers in a page and builds one instance per container."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from html.parser import HTMLParser
import logging
import re

from quiz_engine.constants.engine_constants import (
    DEFAULT_LANGUAGE,
    QUIZ_CONTAINER_CLASS,
    QUIZ_ID_ATTRIBUTE,
    QUIZ_SRC_ATTRIBUTE,
)
from quiz_engine.core.control_tree import Element
from quiz_engine.core.element_ids import container_id
from quiz_engine.core.i18n import UiStrings
from quiz_engine.core.instance_ids import InstanceIdAllocator, allocator as default_allocator
from quiz_engine.core.models import QuizDefinition
from quiz_engine.core.quiz_instance import QuizInstance
from quiz_engine.core.quiz_loader import QuizLoadError
from quiz_engine.styling.styles import QuizStyles

logger = logging.getLogger(__name__)

QuizLoader = Callable[[str], QuizDefinition]

# Containers are placeholders: anything up to their first closing tag is replaced.
_OPEN_DIV = re.compile(r"<div\b[^>]*>", re.IGNORECASE)
_CLOSE_DIV = re.compile(r"</div\s*>", re.IGNORECASE)


class _OpeningTagParser(HTMLParser):
    """Collects the attributes of the first start tag fed to it."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.attributes: dict[str, str] | None = None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if self.attributes is None:
            self.attributes = {name: value or "" for name, value in attrs}


def _container_attributes(tag_html: str) -> dict[str, str] | None:
    parser = _OpeningTagParser()
    parser.feed(tag_html)
    parser.close()
    attributes = parser.attributes or {}
    if QUIZ_CONTAINER_CLASS not in attributes.get("class", "").split():
        return None
    return attributes


@dataclass(slots=True)
class QuizPage:
    """A scanned page: static HTML segments interleaved with live quiz containers."""

    lang: str
    ui: UiStrings | None
    segments: list[str | Element] = field(default_factory=list)
    instances: dict[int, QuizInstance] = field(default_factory=dict)

    @property
    def containers(self) -> list[Element]:
        return [segment for segment in self.segments if isinstance(segment, Element)]

    def get_instance(self, instance_id: int) -> QuizInstance:
        try:
            return self.instances[instance_id]
        except KeyError:
            raise KeyError(f"No quiz instance with id {instance_id}.") from None

    def render_html(self) -> str:
        return "".join(
            segment.to_html() if isinstance(segment, Element) else segment
            for segment in self.segments
        )


def split_page(page_html: str) -> list[str | Element]:
    """Split page HTML into static text and empty quiz container elements."""
    segments: list[str | Element] = []
    position = 0
    search_from = 0
    while True:
        match = _OPEN_DIV.search(page_html, search_from)
        if match is None:
            break
        search_from = match.end()
        attributes = _container_attributes(match.group(0))
        if attributes is None:
            continue
        closing = _CLOSE_DIV.search(page_html, match.end())
        end = closing.end() if closing is not None else match.end()
        segments.append(page_html[position:match.start()])
        container = Element("div")
        for name, value in attributes.items():
            container.set(name, value)
        segments.append(container)
        position = search_from = end
    segments.append(page_html[position:])
    return [segment for segment in segments if not isinstance(segment, str) or segment]


def initialize_quizzes(
    page_html: str,
    loader: QuizLoader,
    lang: str,
    ui: UiStrings,
    allocator: InstanceIdAllocator = default_allocator,
    styles: QuizStyles | None = None,
    default_lang: str = DEFAULT_LANGUAGE,
) -> QuizPage:
    """Build every quiz container found in ``page_html``.

    One instance id is allocated per container that names a quiz source.
    Containers without a source or whose quiz fails to load show an error
    message in place and do not become instances.
    """
    styles = styles or QuizStyles()
    page = QuizPage(lang=lang, ui=ui, segments=split_page(page_html))

    for container in page.containers:
        src = container.get(QUIZ_SRC_ATTRIBUTE)
        if not src:
            _show_error(container, ui.error_no_src, styles)
            logger.warning("Quiz container without %s attribute", QUIZ_SRC_ATTRIBUTE)
            continue

        instance_id = allocator.next_id()
        container.id = container_id(instance_id)
        container.set(QUIZ_ID_ATTRIBUTE, instance_id)
        try:
            definition = loader(str(src))
        except QuizLoadError:
            logger.exception("Error loading or processing quiz data from %s", src)
            _show_error(container, ui.error_loading, styles)
            continue

        instance = QuizInstance(
            container, definition, lang, ui, instance_id, styles=styles, default_lang=default_lang
        )
        instance.build()
        page.instances[instance_id] = instance

    logger.info("Initialized %d quiz instance(s) in %s", len(page.instances), lang)
    return page


def fail_all_containers(page_html: str, lang: str, message: str, styles: QuizStyles | None = None) -> QuizPage:
    """Render ``message`` into every container; used when UI strings cannot load."""
    styles = styles or QuizStyles()
    page = QuizPage(lang=lang, ui=None, segments=split_page(page_html))
    for container in page.containers:
        _show_error(container, message, styles)
    return page


def _show_error(container: Element, message: str, styles: QuizStyles) -> None:
    container.clear()
    error = container.append_child(Element("p", message))
    styles.apply_error_styles(error)
