"""Builder for forms and form controls."""

from __future__ import annotations

import datetime as dt
import string
from typing import Any, Callable, Mapping

from markupsafe import Markup

from .attrs import AttrInput, AttributeBag
from .collaborators import Collaborators
from .dom_model import Element
from .elements import Html
from .macros import MacroMixin, MacroRegistry
from .models import ROUTING_KEYS, FormOptions, HtmlSettings, NamedTarget

DateValue = Any


def _format_date(value: DateValue) -> Any:
    return value.strftime("%Y-%m-%d") if isinstance(value, dt.date) else value


def _as_datetime(value: DateValue) -> Any:
    """Promote a plain date to midnight of that day."""

    if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
        return dt.datetime.combine(value, dt.time())
    return value


def _format_datetime(value: DateValue) -> Any:
    # RFC 3339 needs an offset; naive values are taken as UTC.
    value = _as_datetime(value)
    if isinstance(value, dt.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=dt.timezone.utc)
        return value.replace(microsecond=0).isoformat()
    return value


def _format_datetime_local(value: DateValue) -> Any:
    value = _as_datetime(value)
    return value.strftime("%Y-%m-%dT%H:%M") if isinstance(value, dt.datetime) else value


def _format_time(value: DateValue) -> Any:
    value = _as_datetime(value)
    if isinstance(value, (dt.datetime, dt.time)):
        return value.strftime("%H:%M")
    return value


def _format_month(value: DateValue) -> Any:
    return value.strftime("%Y-%m") if isinstance(value, dt.date) else value


def _format_week(value: DateValue) -> Any:
    if isinstance(value, dt.date):
        year, week, _ = value.isocalendar()
        return f"{year:04d}-W{week:02d}"
    return value


DATE_FORMATTERS: dict[str, Callable[[DateValue], Any]] = {
    "date": _format_date,
    "datetime": _format_datetime,
    "datetime-local": _format_datetime_local,
    "time": _format_time,
    "month": _format_month,
    "week": _format_week,
}


def _range(begin: Any, end: Any) -> list[Any]:
    """Inclusive range over integers or single letters, in either direction."""

    if isinstance(begin, str) and isinstance(end, str):
        single = len(begin) == 1 and len(end) == 1
        if not single or begin not in string.ascii_letters or end not in string.ascii_letters:
            raise ValueError("character ranges need single letters")
        start, stop = ord(begin), ord(end)
        step = 1 if stop >= start else -1
        return [chr(code) for code in range(start, stop + step, step)]
    start, stop = int(begin), int(end)
    step = 1 if stop >= start else -1
    return list(range(start, stop + step, step))


class FormBuilder(MacroMixin):
    def __init__(self, html: Html | None = None) -> None:
        self.html = html or Html()
        self.macros = MacroRegistry()

    @classmethod
    def create(
        cls,
        collaborators: Collaborators | None = None,
        settings: HtmlSettings | None = None,
    ) -> "FormBuilder":
        return cls(Html(collaborators, settings))

    @property
    def collaborators(self) -> Collaborators:
        return self.html.collaborators

    def _action(self, options: FormOptions) -> str | None:
        if options.url is not None:
            return self.collaborators.resolve_url(options.url, None)
        if options.route is not None:
            name, params = self._named_target(options.route)
            return self.collaborators.resolve_route(name, params)
        if options.action is not None:
            name, params = self._named_target(options.action)
            return self.collaborators.resolve_action(name, params)
        return None

    @staticmethod
    def _named_target(target: NamedTarget) -> tuple[str, Mapping[str, Any]]:
        if isinstance(target, str):
            return target, {}
        return target[0], target[1]

    def element(self, options: Mapping[str, Any] | FormOptions | None = None) -> Element:
        """Create the ``<form>`` element described by ``options``.

        Routing keys (method, url, route, action, files) are consumed here and
        never rendered as attributes.
        """

        if not isinstance(options, FormOptions):
            options = FormOptions.model_validate(dict(options or {}))
        attributes = AttributeBag(options.attributes).except_(*ROUTING_KEYS)
        if options.files:
            attributes = AttributeBag.merge(attributes, {"enctype": "multipart/form-data"})
        form = self.html.form(options.method, self._action(options))
        return form.attributes(attributes)

    def open(self, options: Mapping[str, Any] | FormOptions | None = None) -> Markup:
        return Markup(self.element(options).open())

    def close(self, options: Mapping[str, Any] | FormOptions | None = None) -> Markup:
        return Markup(self.element(options).close())

    def token(self) -> Element:
        """Generate a hidden field with the current CSRF token."""

        return self.html.token()

    def label(self, name: str, value: Any = None, attributes: AttrInput = None, escape_html: bool = True) -> Element:
        return self.html.label(value, name, escape=escape_html).attributes(attributes)

    def input(self, type: str, name: str | None, value: Any = None, options: AttrInput = None) -> Element:
        formatter = DATE_FORMATTERS.get(type)
        if formatter is not None:
            value = formatter(value)
        return self.html.input(type, name, value).attributes(options)

    def text(self, name: str, value: Any = None, options: AttrInput = None) -> Element:
        return self.input("text", name, value, options)

    def password(self, name: str, options: AttrInput = None) -> Element:
        return self.input("password", name, "", options)

    def range(self, name: str, value: Any = None, options: AttrInput = None) -> Element:
        return self.input("range", name, value, options)

    def hidden(self, name: str, value: Any = None, options: AttrInput = None) -> Element:
        return self.input("hidden", name, value, options)

    def search(self, name: str, value: Any = None, options: AttrInput = None) -> Element:
        return self.input("search", name, value, options)

    def email(self, name: str, value: Any = None, options: AttrInput = None) -> Element:
        return self.input("email", name, value, options)

    def tel(self, name: str, value: Any = None, options: AttrInput = None) -> Element:
        return self.input("tel", name, value, options)

    def number(self, name: str, value: Any = None, options: AttrInput = None) -> Element:
        return self.input("number", name, value, options)

    def date(self, name: str, value: DateValue = None, options: AttrInput = None) -> Element:
        return self.input("date", name, value, options)

    def datetime(self, name: str, value: DateValue = None, options: AttrInput = None) -> Element:
        return self.input("datetime", name, value, options)

    def datetime_local(self, name: str, value: DateValue = None, options: AttrInput = None) -> Element:
        return self.input("datetime-local", name, value, options)

    def time(self, name: str, value: DateValue = None, options: AttrInput = None) -> Element:
        return self.input("time", name, value, options)

    def url(self, name: str, value: Any = None, options: AttrInput = None) -> Element:
        return self.input("url", name, value, options)

    def week(self, name: str, value: DateValue = None, options: AttrInput = None) -> Element:
        return self.input("week", name, value, options)

    def month(self, name: str, value: DateValue = None, options: AttrInput = None) -> Element:
        return self.input("month", name, value, options)

    def color(self, name: str, value: Any = None, options: AttrInput = None) -> Element:
        return self.input("color", name, value, options)

    def file(self, name: str, options: AttrInput = None) -> Element:
        return self.input("file", name, None, options)

    def textarea(self, name: str, value: Any = None, options: AttrInput = None) -> Element:
        return self.html.textarea(name, value).attributes(options)

    def select(
        self,
        name: str,
        options: Any = None,
        selected: Any = None,
        attributes: AttrInput = None,
    ) -> Element:
        """Create a select box.

        A ``placeholder`` attribute becomes a leading ``<option value="">``
        instead of an attribute on the ``<select>`` tag.
        """

        attributes = AttributeBag(attributes)
        placeholder = attributes.get("placeholder")
        node = self.html.select(name, options, selected, placeholder)
        return node.attributes(attributes.except_("placeholder"))

    def select_range(
        self,
        name: str,
        begin: Any,
        end: Any,
        selected: Any = None,
        options: AttrInput = None,
    ) -> Element:
        values = _range(begin, end)
        return self.select(name, dict(zip(values, values)), selected, options)

    def checkbox(self, name: str, value: Any = 1, checked: Any = None, options: AttrInput = None) -> Element:
        return self.html.checkbox(name, checked, value).attributes(options)

    def radio(self, name: str, value: Any = None, checked: Any = None, options: AttrInput = None) -> Element:
        if value is None:
            value = name
        return self.html.radio(name, checked, value).attributes(options)

    def image(self, url: str, name: str | None = None, attributes: AttrInput = None) -> Element:
        attrs = AttributeBag.merge(attributes, {"src": self.collaborators.resolve_asset(url, None)})
        return self.html.input("image", name).attributes(attrs)

    def submit(self, value: Any = None, options: AttrInput = None) -> Element:
        return self.input("submit", None, value, options)

    def button(self, value: Any = None, options: AttrInput = None) -> Element:
        options = AttributeBag(options)
        button_type = options.get("type", "button")
        return self.html.button(value, button_type).attributes(options.except_("type"))


__all__ = ["DATE_FORMATTERS", "FormBuilder"]
