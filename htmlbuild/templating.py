"""Jinja2 integration.

Elements implement ``__html__``, so autoescaping templates insert them as
markup while plain strings are still escaped.
"""

from __future__ import annotations

from jinja2 import BaseLoader, Environment, StrictUndefined, select_autoescape
from markupsafe import Markup

from .escaping import entities
from .form_builder import FormBuilder
from .html_builder import HtmlBuilder


def environment(loader: BaseLoader | None = None) -> Environment:
    """Create an autoescaping environment that rejects undefined names."""

    return Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "jinja"], default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def entities_filter(value: object) -> Markup:
    return Markup(entities(str(value)))


def register_builders(
    env: Environment,
    html: HtmlBuilder | None = None,
    form: FormBuilder | None = None,
) -> Environment:
    """Expose the builders as ``html``/``form`` globals and ``entities`` as a filter."""

    if html is not None:
        env.globals["html"] = html
    if form is not None:
        env.globals["form"] = form
    env.filters["entities"] = entities_filter
    return env


__all__ = ["entities_filter", "environment", "register_builders"]
