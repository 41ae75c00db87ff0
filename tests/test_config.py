from pathlib import Path

import pytest

from htmlbuild.collaborators import Collaborators
from htmlbuild.config import load_settings, settings_from_mapping
from htmlbuild.errors import ConfigurationError
from htmlbuild.form_builder import FormBuilder
from htmlbuild.models import HtmlSettings


def test_defaults() -> None:
    settings = HtmlSettings()
    assert settings.token_field == "_token"
    assert settings.method_field == "_method"
    assert settings.default_form_method == "POST"
    assert settings.obfuscate_emails is True


def test_load_settings_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "html.yaml"
    path.write_text(
        "htmlbuild:\n  token_field: csrf\n  method_field: _verb\n  default_form_method: get\n",
        encoding="utf-8",
    )
    settings = load_settings(path)
    assert settings.token_field == "csrf"
    assert settings.default_form_method == "GET"


def test_settings_drive_form_field_names(tmp_path: Path) -> None:
    path = tmp_path / "html.yaml"
    path.write_text("token_field: csrf\nmethod_field: _verb\n", encoding="utf-8")
    form = FormBuilder.create(Collaborators.static(token="t"), load_settings(path))
    markup = form.open({"method": "DELETE"})
    assert '<input type="hidden" name="_verb" value="DELETE">' in markup
    assert '<input type="hidden" name="csrf" value="t">' in markup


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == HtmlSettings()


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("token_field: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ConfigurationError):
        settings_from_mapping({"tokenfield": "x"})


def test_non_mapping_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        settings_from_mapping(["token_field"])
