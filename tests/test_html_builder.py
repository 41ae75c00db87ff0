import pytest
from bs4 import BeautifulSoup

from htmlbuild.collaborators import Collaborators
from htmlbuild.errors import UnimplementedFeatureError
from htmlbuild.escaping import decode
from htmlbuild.html_builder import HtmlBuilder
from htmlbuild.models import HtmlSettings


def test_script_uses_asset_url(html_builder: HtmlBuilder):
    assert str(html_builder.script("js/app.js", {"defer": True})) == (
        '<script defer src="http://cdn.example.test/js/app.js"></script>'
    )


def test_style_defaults_can_be_overridden(html_builder: HtmlBuilder):
    markup = str(html_builder.style("css/site.css", {"media": "print"}))
    assert markup == (
        '<link media="print" type="text/css" rel="stylesheet" '
        'href="http://cdn.example.test/css/site.css">'
    )


def test_favicon(html_builder: HtmlBuilder):
    assert str(html_builder.favicon("favicon.ico")) == (
        '<link rel="shortcut icon" type="image/x-icon" href="http://cdn.example.test/favicon.ico">'
    )


def test_image(html_builder: HtmlBuilder):
    markup = str(html_builder.image("img/logo.png", "Logo", {"class": "logo"}))
    assert markup == '<img src="http://cdn.example.test/img/logo.png" alt="Logo" class="logo">'


def test_link_defaults_title_to_url(html_builder: HtmlBuilder):
    assert str(html_builder.link("about")) == (
        '<a href="http://example.test/about">http://example.test/about</a>'
    )


def test_link_escapes_title_unless_disabled(html_builder: HtmlBuilder):
    assert str(html_builder.link("/x", "<b>X</b>")) == (
        '<a href="http://example.test/x">&lt;b&gt;X&lt;/b&gt;</a>'
    )
    assert str(html_builder.link("/x", "<b>X</b>", escape=False)) == (
        '<a href="http://example.test/x"><b>X</b></a>'
    )


def test_secure_link(html_builder: HtmlBuilder):
    soup = BeautifulSoup(str(html_builder.secure_link("login", "Log in")), "html.parser")
    assert soup.a["href"] == "https://example.test/login"


def test_link_asset(html_builder: HtmlBuilder):
    soup = BeautifulSoup(str(html_builder.link_asset("docs/manual.pdf")), "html.parser")
    assert soup.a["href"] == "http://cdn.example.test/docs/manual.pdf"
    assert soup.a.get_text() == "http://cdn.example.test/docs/manual.pdf"


def test_link_route_and_action(html_builder: HtmlBuilder):
    route = BeautifulSoup(str(html_builder.link_route("users.show", "Ann", {"id": 7, "tab": "bio"})), "html.parser")
    assert route.a["href"] == "http://example.test/users/7?tab=bio"
    action = BeautifulSoup(str(html_builder.link_action("UserController@store", "Save")), "html.parser")
    assert action.a["href"] == "http://example.test/users"


def test_mailto_is_obfuscated_but_decodes(html_builder: HtmlBuilder):
    markup = str(html_builder.mailto("ann@example.test"))
    assert "ann@example.test" not in markup
    soup = BeautifulSoup(markup, "html.parser")
    assert soup.a["href"] == "mailto:ann@example.test"
    assert soup.a.get_text() == "ann@example.test"


def test_mailto_without_obfuscation():
    builder = HtmlBuilder.create(Collaborators.static(), HtmlSettings(obfuscate_emails=False))
    assert str(builder.mailto("ann@example.test", "Ann")) == (
        '<a href="mailto:ann&#64;example.test">Ann</a>'
    )
    assert builder.email("a@b.c") == "a&#64;b.c"


def test_email_round_trips(html_builder: HtmlBuilder):
    assert decode(html_builder.email("ann@example.test")) == "ann@example.test"


def test_entities_and_nbsp(html_builder: HtmlBuilder):
    assert html_builder.entities("<a & b>") == "&lt;a &amp; b&gt;"
    assert html_builder.decode("&lt;p&gt;") == "<p>"
    assert html_builder.nbsp(3) == "&nbsp;&nbsp;&nbsp;"


def test_ol_and_ul(html_builder: HtmlBuilder):
    assert str(html_builder.ul(["a", "b"], {"id": "nav"})) == '<ul id="nav"><li>a</li><li>b</li></ul>'
    assert str(html_builder.ol({"x": "1"})) == "<ol><li>1</li></ol>"


def test_dl_fails_loudly(html_builder: HtmlBuilder):
    with pytest.raises(UnimplementedFeatureError):
        html_builder.dl({"term": "definition"})


def test_missing_collaborator_raises():
    builder = HtmlBuilder()
    with pytest.raises(LookupError):
        builder.link("/x")
