"""Pydantic models for builder settings and form options."""

from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

NamedTarget = Union[str, Tuple[str, Dict[str, Any]]]

# Keys consumed by the form builder and never rendered as attributes.
ROUTING_KEYS = ("method", "url", "route", "action", "files")


class HtmlSettings(BaseModel):
    """Conventions shared by the HTML and form builders."""

    token_field: str = Field(
        "_token", description="Name of the hidden input carrying the CSRF token."
    )
    method_field: str = Field(
        "_method",
        description="Name of the hidden input used to tunnel non-native form methods.",
    )
    default_form_method: str = Field(
        "POST", description="Form method used when the options do not name one."
    )
    obfuscate_emails: bool = Field(
        True,
        description="Whether mailto links and email() encode characters as entities.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("default_form_method")
    @classmethod
    def _upper_method(cls, value: str) -> str:
        return value.upper()


class FormOptions(BaseModel):
    """Options accepted by FormBuilder.element/open/close.

    The declared fields drive routing and encoding; any extra key is an HTML
    attribute rendered on the ``<form>`` tag in the order given.
    """

    method: Optional[str] = Field(None, description="HTTP verb, tunneled when not GET/POST.")
    url: Optional[str] = Field(None, description="Path resolved through the URL collaborator.")
    route: Optional[NamedTarget] = Field(
        None, description="Route name, or (name, params), for the route collaborator."
    )
    action: Optional[NamedTarget] = Field(
        None, description="Controller action, or (action, params), for the action collaborator."
    )
    files: bool = Field(False, description="Sets enctype=multipart/form-data when true.")

    model_config = ConfigDict(extra="allow")

    @property
    def attributes(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


__all__ = ["FormOptions", "HtmlSettings", "NamedTarget", "ROUTING_KEYS"]
