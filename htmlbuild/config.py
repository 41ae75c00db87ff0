"""Loading of builder settings from YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ConfigurationError
from .io_utils import read_yaml
from .models import HtmlSettings


def settings_from_mapping(data: Any) -> HtmlSettings:
    if data is None:
        return HtmlSettings()
    if not isinstance(data, dict):
        raise ConfigurationError("settings must be a mapping of option names to values.")
    try:
        return HtmlSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings: {exc}") from exc


def load_settings(path: Path) -> HtmlSettings:
    """Read a YAML settings file; a top-level ``htmlbuild`` key is optional."""

    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")
    try:
        data = read_yaml(path)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if isinstance(data, dict) and "htmlbuild" in data:
        data = data["htmlbuild"]
    try:
        return settings_from_mapping(data)
    except ConfigurationError as exc:
        raise ConfigurationError(f"{path}: {exc}") from exc


__all__ = ["load_settings", "settings_from_mapping"]
