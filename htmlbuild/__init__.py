"""Programmatic HTML rendering: element trees, forms and lists."""

from .attrs import AttributeBag, compose
from .collaborators import Collaborators
from .config import load_settings, settings_from_mapping
from .dom_model import (
    VOID_TAGS,
    Element,
    RawHtml,
    TextContent,
    dom_to_html,
    element,
    render,
)
from .elements import Html
from .errors import (
    ConfigurationError,
    InvalidTagError,
    UnimplementedFeatureError,
    UnknownMacroError,
    UnsupportedListTypeError,
)
from .escaping import decode, entities, escape_text
from .form_builder import FormBuilder
from .html_builder import HtmlBuilder
from .listing import Leaf, ListSpec, Named, Positional, Sublist, listing
from .macros import MacroRegistry
from .models import FormOptions, HtmlSettings

__all__ = [
    "AttributeBag",
    "Collaborators",
    "ConfigurationError",
    "Element",
    "FormBuilder",
    "FormOptions",
    "Html",
    "HtmlBuilder",
    "HtmlSettings",
    "InvalidTagError",
    "Leaf",
    "ListSpec",
    "MacroRegistry",
    "Named",
    "Positional",
    "RawHtml",
    "Sublist",
    "TextContent",
    "UnimplementedFeatureError",
    "UnknownMacroError",
    "UnsupportedListTypeError",
    "VOID_TAGS",
    "compose",
    "decode",
    "dom_to_html",
    "element",
    "entities",
    "escape_text",
    "listing",
    "load_settings",
    "render",
    "settings_from_mapping",
]
