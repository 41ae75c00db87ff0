"""Attribute composition and rendering."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

from .escaping import escape_text

# str is escaped on render, True renders as a bare boolean attribute, and
# objects implementing ``__html__`` are emitted verbatim. None and False never
# reach the bag: they remove the key instead.
AttrValue = Union[str, bool, Any]

AttrInput = Union[Mapping[str, Any], Iterable[tuple[str, Any]], None]


def _is_absent(value: Any) -> bool:
    return value is None or value is False


def _normalize(value: Any) -> AttrValue:
    if value is True or isinstance(value, str) or hasattr(value, "__html__"):
        return value
    return str(value)


class AttributeBag(Mapping[str, AttrValue]):
    """Ordered, immutable mapping of attribute name to raw value."""

    __slots__ = ("_items",)

    def __init__(self, items: AttrInput = None) -> None:
        self._items: dict[str, AttrValue] = {}
        for key, value in _pairs(items):
            if _is_absent(value):
                self._items.pop(key, None)
            else:
                self._items[key] = _normalize(value)

    def __getitem__(self, key: str) -> AttrValue:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return list(self.items()) == list(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple((key, str(value)) for key, value in self._items.items()))

    def __repr__(self) -> str:
        return f"AttributeBag({self._items!r})"

    def except_(self, *keys: str) -> "AttributeBag":
        """Return a copy without ``keys``."""

        dropped = set(keys)
        return AttributeBag((k, v) for k, v in self._items.items() if k not in dropped)

    def with_class(self, *names: str) -> "AttributeBag":
        current = self._items.get("class")
        classes = str(current).split() if isinstance(current, str) else []
        for name in names:
            for part in name.split():
                if part not in classes:
                    classes.append(part)
        return compose(self, {"class": " ".join(classes) or None})

    @classmethod
    def merge(cls, defaults: AttrInput, overrides: AttrInput) -> "AttributeBag":
        """Merge two attribute sets, ``overrides`` winning on collisions."""

        return compose(cls(defaults), overrides)

    def render(self) -> str:
        """Render as `` name="value" ...`` with a leading space, or ``""``."""

        if not self._items:
            return ""
        parts: list[str] = []
        for name, value in self._items.items():
            if value is True:
                parts.append(name)
            elif hasattr(value, "__html__"):
                parts.append(f'{name}="{value.__html__()}"')
            else:
                parts.append(f'{name}="{escape_text(value)}"')
        return " " + " ".join(parts)


def _pairs(items: AttrInput) -> Iterable[tuple[str, Any]]:
    if items is None:
        return ()
    if isinstance(items, Mapping):
        return items.items()
    return items


def compose(
    existing: AttrInput,
    incoming: AttrInput,
    exclude: Iterable[str] = (),
) -> AttributeBag:
    """Overlay ``incoming`` on ``existing``.

    Keys listed in ``exclude`` are skipped. ``None`` and ``False`` in
    ``incoming`` delete the key from the result.
    """

    excluded = set(exclude)
    merged: dict[str, Any] = dict(_pairs(existing))
    for key, value in _pairs(incoming):
        if key in excluded:
            continue
        if _is_absent(value):
            merged.pop(key, None)
        else:
            merged[key] = value
    return AttributeBag(merged)


__all__ = ["AttrInput", "AttrValue", "AttributeBag", "compose"]
