import random

import pytest

from htmlbuild.collaborators import Collaborators
from htmlbuild.form_builder import FormBuilder
from htmlbuild.html_builder import HtmlBuilder


@pytest.fixture
def collaborators() -> Collaborators:
    return Collaborators.static(
        "http://example.test",
        secure_base_url="https://example.test",
        asset_base_url="http://cdn.example.test",
        routes={"users.show": "/users/{id}"},
        actions={"UserController@store": "/users"},
        token="abc123",
    )


@pytest.fixture
def html_builder(collaborators: Collaborators) -> HtmlBuilder:
    return HtmlBuilder.create(collaborators, rng=random.Random(42))


@pytest.fixture
def form_builder(collaborators: Collaborators) -> FormBuilder:
    return FormBuilder.create(collaborators)
