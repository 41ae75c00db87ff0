"""Immutable DOM model for HTML serialization."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Sequence, Union

from .attrs import AttrInput, AttributeBag, compose
from .errors import InvalidTagError
from .escaping import escape_text
from .io_utils import warn

VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

TAG_RE = re.compile(r"^[a-z][a-z0-9-]*$")


@dataclass(frozen=True)
class TextContent:
    text: str
    escaped: bool = True

    def __html__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class RawHtml:
    """Markup emitted verbatim. Safety is the caller's responsibility."""

    html: str

    def __html__(self) -> str:
        return self.html

    def __str__(self) -> str:
        return self.html


def _coerce_child(child: Any) -> "Node | None":
    if child is None:
        return None
    if isinstance(child, (Element, TextContent, RawHtml)):
        return child
    if hasattr(child, "__html__"):
        return RawHtml(child.__html__())
    return TextContent(str(child))


def _coerce_children(children: Iterable[Any]) -> tuple["Node", ...]:
    nodes = (_coerce_child(child) for child in children)
    return tuple(node for node in nodes if node is not None)


@dataclass(frozen=True)
class Element:
    tag: str
    attrs: AttributeBag = field(default_factory=AttributeBag)
    children: tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        if not self.tag or not TAG_RE.match(self.tag):
            raise InvalidTagError(f"invalid tag name: {self.tag!r}")
        if not isinstance(self.attrs, AttributeBag):
            object.__setattr__(self, "attrs", AttributeBag(self.attrs))
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", _coerce_children(self.children))

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_TAGS

    def attributes(self, attributes: AttrInput) -> "Element":
        """Merge ``attributes`` into a copy; None/False values remove keys."""

        return replace(self, attrs=compose(self.attrs, attributes))

    def attribute(self, name: str, value: Any = True) -> "Element":
        return self.attributes({name: value})

    def attribute_if(self, condition: Any, name: str, value: Any = True) -> "Element":
        return self.attribute(name, value) if condition else self

    def forget_attribute(self, name: str) -> "Element":
        return replace(self, attrs=self.attrs.except_(name))

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self.attrs.get(name, default)

    def add_class(self, *names: str) -> "Element":
        return replace(self, attrs=self.attrs.with_class(*names))

    def add_child(self, child: Any) -> "Element":
        return self.add_children([child])

    def add_children(self, children: Iterable[Any]) -> "Element":
        nodes = _coerce_children(children)
        if nodes and self.is_void:
            warn(f"<{self.tag}> is a void element; its children will not be rendered")
        return replace(self, children=self.children + nodes)

    def prepend_child(self, child: Any) -> "Element":
        return replace(self, children=_coerce_children([child]) + self.children)

    def html(self, content: Any, escape: bool = False) -> "Element":
        """Replace the children with a single text node."""

        if isinstance(content, Element):
            return replace(self, children=(content,))
        text = "" if content is None else str(content)
        return replace(self, children=(TextContent(text, escaped=escape),))

    def text(self, content: Any) -> "Element":
        return self.html(content, escape=True)

    def open(self) -> str:
        return render_open(self)

    def close(self) -> str:
        return render_close(self)

    def render(self) -> str:
        return render(self)

    def __html__(self) -> str:
        return render(self)

    def __str__(self) -> str:
        return render(self)


Node = Union[Element, TextContent, RawHtml]
DomContent = Union[Node, str]


def element(tag: str, attributes: AttrInput = None, children: Iterable[Any] = ()) -> Element:
    """Create an element, normalizing the tag name to lower case."""

    if not isinstance(tag, str) or not tag.strip():
        raise InvalidTagError("tag name must be a non-empty string")
    node = Element(tag.strip().lower(), AttributeBag(attributes))
    return node.add_children(children) if children else node


def _render_children(children: Sequence[Node]) -> str:
    return "".join(render(child) for child in children)


def render_open(node: Element) -> str:
    """Render the opening tag followed by the children, without closing."""

    start = f"<{node.tag}{node.attrs.render()}>"
    if node.is_void:
        return start
    return start + _render_children(node.children)


def render_close(node: Element) -> str:
    if node.is_void:
        return ""
    return f"</{node.tag}>"


def render(node: DomContent) -> str:
    if isinstance(node, Element):
        return render_open(node) + render_close(node)
    if isinstance(node, TextContent):
        return escape_text(node.text) if node.escaped else node.text
    if isinstance(node, RawHtml):
        return node.html
    return escape_text(str(node))


def dom_to_html(dom: Iterable[DomContent]) -> str:
    return "".join(render(node) for node in dom)


__all__ = [
    "DomContent",
    "Element",
    "Node",
    "RawHtml",
    "TAG_RE",
    "TextContent",
    "VOID_TAGS",
    "dom_to_html",
    "element",
    "render",
    "render_close",
    "render_open",
]
