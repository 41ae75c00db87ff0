"""Builder for links, asset tags and lists."""

from __future__ import annotations

import random
from typing import Any, Mapping

from . import escaping
from .attrs import AttrInput, AttributeBag
from .collaborators import Collaborators
from .dom_model import Element, RawHtml
from .elements import Html
from .errors import UnimplementedFeatureError
from .listing import listing
from .macros import MacroMixin, MacroRegistry
from .models import HtmlSettings


class HtmlBuilder(MacroMixin):
    """Generates common HTML elements.

    URLs are resolved through the injected collaborators, never through
    global state. Every method returns a fresh element.
    """

    def __init__(
        self,
        html: Html | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.html = html or Html()
        self.rng = rng or random.Random()
        self.macros = MacroRegistry()

    @classmethod
    def create(
        cls,
        collaborators: Collaborators | None = None,
        settings: HtmlSettings | None = None,
        **kwargs: Any,
    ) -> "HtmlBuilder":
        return cls(Html(collaborators, settings), **kwargs)

    @property
    def collaborators(self) -> Collaborators:
        return self.html.collaborators

    @property
    def settings(self) -> HtmlSettings:
        return self.html.settings

    def entities(self, value: Any) -> str:
        """Convert a string to HTML entities without re-encoding existing ones."""

        return escaping.entities(str(value), double_encode=False)

    def decode(self, value: str) -> str:
        return escaping.decode(value)

    def script(self, url: str, attributes: AttrInput = None, secure: bool | None = None) -> Element:
        attrs = AttributeBag.merge(attributes, {"src": self.collaborators.resolve_asset(url, secure)})
        return self.html.element("script").attributes(attrs)

    def style(self, url: str, attributes: AttrInput = None, secure: bool | None = None) -> Element:
        defaults = {"media": "all", "type": "text/css", "rel": "stylesheet"}
        attrs = AttributeBag.merge(defaults, attributes)
        attrs = AttributeBag.merge(attrs, {"href": self.collaborators.resolve_asset(url, secure)})
        return self.html.element("link").attributes(attrs)

    def image(
        self,
        url: str,
        alt: str | None = None,
        attributes: AttrInput = None,
        secure: bool | None = None,
    ) -> Element:
        node = self.html.img(self.collaborators.resolve_asset(url, secure), alt)
        return node.attributes(attributes)

    def favicon(self, url: str, attributes: AttrInput = None, secure: bool | None = None) -> Element:
        defaults = {"rel": "shortcut icon", "type": "image/x-icon"}
        attrs = AttributeBag.merge(defaults, attributes)
        attrs = AttributeBag.merge(attrs, {"href": self.collaborators.resolve_asset(url, secure)})
        return self.html.element("link").attributes(attrs)

    def link(
        self,
        url: str,
        title: Any = None,
        attributes: AttrInput = None,
        secure: bool | None = None,
        escape: bool = True,
    ) -> Element:
        url = self.collaborators.resolve_url(url, secure)
        if title is None or title is False:
            title = url
        title = self.entities(title) if escape else str(title)
        return self.html.a(url, title).attributes(attributes)

    def secure_link(self, url: str, title: Any = None, attributes: AttrInput = None, escape: bool = True) -> Element:
        return self.link(url, title, attributes, True, escape)

    def link_asset(
        self,
        url: str,
        title: Any = None,
        attributes: AttrInput = None,
        secure: bool | None = None,
        escape: bool = True,
    ) -> Element:
        url = self.collaborators.resolve_asset(url, secure)
        return self.link(url, title or url, attributes, secure, escape)

    def link_secure_asset(self, url: str, title: Any = None, attributes: AttrInput = None, escape: bool = True) -> Element:
        return self.link_asset(url, title, attributes, True, escape)

    def link_route(
        self,
        name: str,
        title: Any = None,
        parameters: Mapping[str, Any] | None = None,
        attributes: AttrInput = None,
        secure: bool | None = None,
        escape: bool = True,
    ) -> Element:
        url = self.collaborators.resolve_route(name, parameters or {})
        return self.link(url, title, attributes, secure, escape)

    def link_action(
        self,
        action: str,
        title: Any = None,
        parameters: Mapping[str, Any] | None = None,
        attributes: AttrInput = None,
        secure: bool | None = None,
        escape: bool = True,
    ) -> Element:
        url = self.collaborators.resolve_action(action, parameters or {})
        return self.link(url, title, attributes, secure, escape)

    def mailto(self, email: str, title: Any = None, attributes: AttrInput = None, escape: bool = True) -> Element:
        email = self.email(email)
        title = title or email
        if escape:
            title = self.entities(title)
        href = RawHtml(self.obfuscate("mailto:") + email)
        return self.html.a(contents=title).attributes({"href": href}).attributes(attributes)

    def email(self, email: str) -> str:
        """Obfuscate an e-mail address to keep it away from spam-bots."""

        return self.obfuscate(email).replace("@", "&#64;")

    def obfuscate(self, value: str) -> str:
        if not self.settings.obfuscate_emails:
            return value
        return escaping.obfuscate(value, self.rng)

    def nbsp(self, num: int = 1) -> str:
        return "&nbsp;" * num

    def ol(self, items: Any, attributes: AttrInput = None) -> Element:
        return self.listing("ol", items, attributes)

    def ul(self, items: Any, attributes: AttrInput = None) -> Element:
        return self.listing("ul", items, attributes)

    def dl(self, items: Any, attributes: AttrInput = None) -> Element:
        raise UnimplementedFeatureError("description lists are not supported")

    def listing(self, list_type: str, items: Any, attributes: AttrInput = None) -> Element:
        return listing(list_type, items, attributes)


__all__ = ["HtmlBuilder"]
