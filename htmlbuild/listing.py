"""Recursive conversion of nested data into ``<ol>``/``<ul>`` trees."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from .attrs import AttrInput
from .dom_model import Element, element
from .errors import UnsupportedListTypeError

LIST_TYPES = ("ol", "ul")


@dataclass(frozen=True)
class Positional:
    index: int


@dataclass(frozen=True)
class Named:
    name: str


ListKey = Union[Positional, Named]


@dataclass(frozen=True)
class Leaf:
    value: Any


@dataclass(frozen=True)
class Sublist:
    spec: "ListSpec"


ListEntry = Union[Leaf, Sublist]


@dataclass(frozen=True)
class ListSpec:
    """Ordered ``(key, entry)`` pairs describing one list level."""

    entries: tuple[tuple[ListKey, ListEntry], ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def from_data(cls, data: Any) -> "ListSpec":
        """Build a list description from dicts, lists and tuples.

        Sequence items and ``int`` dict keys are positional, every other key
        is named. Nested dicts, lists and tuples become sub-lists.
        """

        if isinstance(data, ListSpec):
            return data
        if isinstance(data, Mapping):
            pairs = list(data.items())
        elif isinstance(data, (list, tuple)):
            pairs = list(enumerate(data))
        else:
            raise TypeError(f"cannot build a list from {type(data).__name__}")

        entries: list[tuple[ListKey, ListEntry]] = []
        for key, value in pairs:
            list_key: ListKey
            if isinstance(key, int) and not isinstance(key, bool):
                list_key = Positional(key)
            else:
                list_key = Named(str(key))
            entries.append((list_key, _entry(value)))
        return cls(tuple(entries))


def _entry(value: Any) -> ListEntry:
    if isinstance(value, ListSpec):
        return Sublist(value)
    if isinstance(value, (Mapping, list, tuple)):
        return Sublist(ListSpec.from_data(value))
    return Leaf(value)


def listing(list_type: str, spec: Any, attributes: AttrInput = None) -> Element:
    """Create a listing element of ``list_type`` from ``spec``."""

    if list_type not in LIST_TYPES:
        raise UnsupportedListTypeError(f"unsupported list type: {list_type!r}")

    container = element(list_type).attributes(attributes)
    spec = ListSpec.from_data(spec)
    if not spec.entries:
        return container

    items: list[Element] = []
    for key, entry in spec.entries:
        items.extend(_listing_items(list_type, key, entry))
    return container.add_children(items)


def _listing_items(list_type: str, key: ListKey, entry: ListEntry) -> list[Element]:
    if isinstance(entry, Leaf):
        if isinstance(entry.value, Element):
            return [element("li").add_child(entry.value)]
        return [element("li").html(entry.value)]

    nested = listing(list_type, entry.spec)
    if isinstance(key, Positional):
        # Positional sub-lists merge into the current level.
        return list(nested.children)
    return [element("li").text(key.name).add_child(nested)]


__all__ = [
    "LIST_TYPES",
    "Leaf",
    "ListEntry",
    "ListKey",
    "ListSpec",
    "Named",
    "Positional",
    "Sublist",
    "listing",
]
