"""Lightweight element tree that quiz instances render into.

The tree plays the role of the browser DOM: it holds the rendered controls and
the user's current selection (``checked``/``value`` on inputs), dispatches
click handlers, and serializes to HTML for the page.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from html import escape

EventHandler = Callable[["Element"], None]

_VOID_TAGS = frozenset({"br", "hr", "img", "input", "link", "meta"})
_KWARG_RENAMES = {"class_": "class", "for_": "for"}


class Element:
    """A node of the control tree with attributes, inline style and children."""

    def __init__(self, tag: str, text: str = "", **attributes: str | bool | int) -> None:
        self.tag = tag.lower()
        self.text = text
        self.attributes: dict[str, str | bool] = {}
        self.style: dict[str, str] = {}
        self.children: list[Element] = []
        self.parent: Element | None = None
        self._listeners: dict[str, list[EventHandler]] = {}
        for key, value in attributes.items():
            name = _KWARG_RENAMES.get(key, key.replace("_", "-"))
            self.set(name, value)

    def __repr__(self) -> str:
        identifier = f" id={self.id!r}" if self.id else ""
        return f"<Element {self.tag}{identifier} children={len(self.children)}>"

    # --- Attributes ---

    def get(self, name: str, default: str | bool | None = None) -> str | bool | None:
        return self.attributes.get(name, default)

    def set(self, name: str, value: str | bool | int) -> None:
        if isinstance(value, bool):
            self.attributes[name] = value
        else:
            self.attributes[name] = str(value)

    def has_class(self, class_name: str) -> bool:
        classes = self.get("class") or ""
        return isinstance(classes, str) and class_name in classes.split()

    @property
    def id(self) -> str | None:
        value = self.attributes.get("id")
        return value if isinstance(value, str) else None

    @id.setter
    def id(self, value: str) -> None:
        self.set("id", value)

    @property
    def name(self) -> str | None:
        value = self.attributes.get("name")
        return value if isinstance(value, str) else None

    @property
    def type(self) -> str | None:
        value = self.attributes.get("type")
        return value if isinstance(value, str) else None

    @property
    def value(self) -> str:
        value = self.attributes.get("value")
        return value if isinstance(value, str) else ""

    @value.setter
    def value(self, value: str) -> None:
        self.set("value", value)

    @property
    def checked(self) -> bool:
        return self.attributes.get("checked") is True

    @checked.setter
    def checked(self, value: bool) -> None:
        self.attributes["checked"] = bool(value)

    @property
    def disabled(self) -> bool:
        return self.attributes.get("disabled") is True

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self.attributes["disabled"] = bool(value)

    @property
    def hidden(self) -> bool:
        return self.style.get("display") == "none"

    @hidden.setter
    def hidden(self, value: bool) -> None:
        if value:
            self.style["display"] = "none"
        else:
            self.style.pop("display", None)

    # --- Structure ---

    def append_child(self, child: Element) -> Element:
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: Element) -> None:
        self.children.remove(child)
        child.parent = None

    def clear(self) -> None:
        """Drop all children and text, like assigning an empty ``innerHTML``."""
        for child in self.children:
            child.parent = None
        self.children = []
        self.text = ""

    def iter(self) -> Iterator[Element]:
        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, tag: str | None = None, predicate: Callable[[Element], bool] | None = None) -> list[Element]:
        matches = []
        for element in self.iter():
            if element is self:
                continue
            if tag is not None and element.tag != tag:
                continue
            if predicate is not None and not predicate(element):
                continue
            matches.append(element)
        return matches

    def get_element_by_id(self, element_id: str) -> Element | None:
        for element in self.iter():
            if element.id == element_id:
                return element
        return None

    def query_inputs(self, name: str | None = None) -> list[Element]:
        return self.find_all("input", lambda element: name is None or element.name == name)

    def closest(self, tag: str) -> Element | None:
        node = self.parent
        while node is not None:
            if node.tag == tag:
                return node
            node = node.parent
        return None

    @property
    def root(self) -> Element:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def text_content(self) -> str:
        return self.text + "".join(child.text_content for child in self.children)

    # --- Events ---

    def add_event_listener(self, event: str, handler: EventHandler) -> None:
        self._listeners.setdefault(event, []).append(handler)

    def dispatch(self, event: str) -> None:
        for handler in list(self._listeners.get(event, ())):
            handler(self)

    def click(self) -> None:
        """Activate the element the way a user click would."""
        if self.disabled:
            return
        if self.tag == "input" and self.type == "radio":
            scope = self.closest("form") or self.root
            for other in scope.query_inputs(self.name):
                if other is not self and other.type == "radio":
                    other.checked = False
            self.checked = True
        elif self.tag == "input" and self.type == "checkbox":
            self.checked = not self.checked
        self.dispatch("click")

    # --- Serialization ---

    def to_html(self) -> str:
        parts = [f"<{self.tag}"]
        for name, value in self.attributes.items():
            if value is True:
                parts.append(f" {name}")
            elif value is not False:
                parts.append(f' {name}="{escape(value)}"')
        if self.style:
            css = "; ".join(f"{prop}: {val}" for prop, val in self.style.items())
            parts.append(f' style="{escape(css)}"')
        parts.append(">")
        if self.tag in _VOID_TAGS:
            return "".join(parts)
        parts.append(escape(self.text, quote=False))
        parts.extend(child.to_html() for child in self.children)
        parts.append(f"</{self.tag}>")
        return "".join(parts)
