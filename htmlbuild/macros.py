"""Named extension functions for the builders."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator

from .errors import UnknownMacroError
from .io_utils import warn

Macro = Callable[..., Any]


class MacroRegistry:
    """Mapping of name to callable, extended by applications at startup.

    A macro receives the owning builder as its first argument.
    """

    def __init__(self) -> None:
        self._macros: Dict[str, Macro] = {}

    def register(self, name: str, fn: Macro) -> Macro:
        if not callable(fn):
            raise TypeError(f"macro {name!r} must be callable")
        if name in self._macros:
            warn(f"macro {name!r} is being replaced")
        self._macros[name] = fn
        return fn

    def has(self, name: str) -> bool:
        return name in self._macros

    def call(self, name: str, builder: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            fn = self._macros[name]
        except KeyError:
            raise UnknownMacroError(name) from None
        return fn(builder, *args, **kwargs)

    def __contains__(self, name: object) -> bool:
        return name in self._macros

    def __iter__(self) -> Iterator[str]:
        return iter(self._macros)


class MacroMixin:
    """Gives a builder its own registry plus ``macro``/``call_macro``."""

    macros: MacroRegistry

    def macro(self, name: str, fn: Macro | None = None):
        """Register ``fn`` under ``name``; usable as a decorator when ``fn`` is omitted."""

        if fn is None:
            return lambda func: self.macros.register(name, func)
        return self.macros.register(name, fn)

    def call_macro(self, name: str, *args: Any, **kwargs: Any) -> Any:
        return self.macros.call(name, self, *args, **kwargs)


__all__ = ["Macro", "MacroMixin", "MacroRegistry"]
