"""Element factory shared by the HTML and form builders."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .attrs import AttrInput
from .collaborators import Collaborators
from .dom_model import Element, element
from .models import HtmlSettings

NATIVE_FORM_METHODS = ("GET", "POST")


def _option_pairs(options: Any) -> Iterable[tuple[Any, Any]]:
    if options is None:
        return ()
    if isinstance(options, Mapping):
        return options.items()
    return ((item, item) for item in options)


def _is_group(label: Any) -> bool:
    return isinstance(label, (Mapping, list, tuple))


def selection(selected: Any) -> frozenset[str]:
    """Normalize a selected value, or a collection of them, to strings."""

    if selected is None or selected is False:
        return frozenset()
    if isinstance(selected, (str, int, float)):
        return frozenset({str(selected)})
    if isinstance(selected, Iterable):
        return frozenset(str(item) for item in selected)
    return frozenset({str(selected)})


class Html:
    """Creates the elements the builders are composed from."""

    def __init__(
        self,
        collaborators: Collaborators | None = None,
        settings: HtmlSettings | None = None,
    ) -> None:
        self.collaborators = collaborators or Collaborators()
        self.settings = settings or HtmlSettings()

    def element(self, tag: str, attributes: AttrInput = None) -> Element:
        return element(tag, attributes)

    def a(self, href: str | None = None, contents: Any = None) -> Element:
        node = element("a", {"href": href})
        return node.html(contents) if contents is not None else node

    def img(self, src: str | None = None, alt: str | None = None) -> Element:
        return element("img", {"src": src, "alt": alt})

    def input(self, type: str | None = None, name: str | None = None, value: Any = None) -> Element:
        return element("input", {"type": type, "name": name, "value": value})

    def hidden(self, name: str | None = None, value: Any = None) -> Element:
        return self.input("hidden", name, value)

    def token(self) -> Element:
        return self.hidden(self.settings.token_field, self.collaborators.current_csrf_token())

    def label(self, contents: Any = None, for_: str | None = None, escape: bool = True) -> Element:
        node = element("label", {"for": for_})
        return node.html(contents, escape=escape) if contents is not None else node

    def textarea(self, name: str | None = None, value: Any = None) -> Element:
        node = element("textarea", {"name": name})
        return node.text(value) if value is not None else node

    def checkbox(self, name: str | None = None, checked: Any = None, value: Any = "1") -> Element:
        return self.input("checkbox", name, value).attribute("checked", bool(checked))

    def radio(self, name: str | None = None, checked: Any = None, value: Any = None) -> Element:
        return self.input("radio", name, value).attribute("checked", bool(checked))

    def button(self, contents: Any = None, type: str | None = None) -> Element:
        node = element("button", {"type": type})
        return node.html(contents) if contents is not None else node

    def option(self, value: Any, text: Any, selected: bool = False) -> Element:
        value = "" if value is None else value
        return element("option", {"value": value, "selected": selected}).text(text)

    def options(self, options: Any, selected: Any = None) -> list[Element]:
        """Build ``<option>`` elements; nested groups become ``<optgroup>``."""

        chosen = selection(selected)
        nodes: list[Element] = []
        for value, label in _option_pairs(options):
            if _is_group(label):
                group = element("optgroup", {"label": str(value)})
                nodes.append(group.add_children(self.options(label, chosen)))
            else:
                nodes.append(self.option(value, label, str(value) in chosen))
        return nodes

    def select(
        self,
        name: str | None = None,
        options: Any = None,
        selected: Any = None,
        placeholder: Any = None,
    ) -> Element:
        node = element("select", {"name": name})
        if placeholder:
            node = node.add_child(self.option("", placeholder, not selection(selected)))
        return node.add_children(self.options(options, selected))

    def form(self, method: str | None = None, action: str | None = None) -> Element:
        """Create a form; non-native verbs are tunneled through a hidden field."""

        verb = (method or self.settings.default_form_method).upper()
        node = element(
            "form",
            {
                "method": verb if verb in NATIVE_FORM_METHODS else "POST",
                "action": action,
            },
        )
        if verb not in NATIVE_FORM_METHODS:
            node = node.add_child(self.hidden(self.settings.method_field, verb))
        if verb != "GET":
            node = node.add_child(self.token())
        return node


__all__ = ["Html", "NATIVE_FORM_METHODS", "selection"]
