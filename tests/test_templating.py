"""Tests for TemplateRenderer."""

import pytest

from mdpress.errors import NotFoundError, ParseError, TemplateParseError
from mdpress.templating import BUILTIN_TEMPLATE_DIR, TemplateRenderer


def test_builtin_directory_searched_last(template_dir):
    renderer = TemplateRenderer([template_dir])
    assert renderer.directories == [template_dir, BUILTIN_TEMPLATE_DIR]


def test_builtin_can_be_excluded(template_dir):
    assert TemplateRenderer([template_dir], include_builtin=False).directories == [template_dir]


def test_find_file_prefers_user_directory(renderer, template_dir):
    assert renderer.find_file("style.css") == BUILTIN_TEMPLATE_DIR / "style.css"
    (template_dir / "style.css").write_text("p {}")
    assert renderer.find_file("style.css") == template_dir / "style.css"


def test_has_template(renderer, template_dir):
    assert not renderer.has_template("pdf.xml")
    (template_dir / "pdf.xml").write_text("<page/>")
    assert renderer.has_template("pdf.xml")


def test_render_named_template(renderer, template_dir):
    (template_dir / "greet.html").write_text("Hello {{ name }}")
    assert renderer.render("greet.html", {"name": "<b>you</b>"}) == "Hello &lt;b&gt;you&lt;/b&gt;"


def test_token_replacement_does_not_escape(renderer):
    raw = renderer.for_token_replacement()
    assert raw.render_string("<p>{{ x }}</p>", {"x": "<em>y</em>"}) == "<p><em>y</em></p>"
    assert raw.directories == renderer.directories


def test_missing_template(renderer):
    with pytest.raises(NotFoundError, match="nope.html"):
        renderer.render("nope.html")


def test_syntax_error_in_template(renderer, template_dir):
    (template_dir / "broken.html").write_text("line one\n{% for %}\n")
    with pytest.raises(TemplateParseError) as exc_info:
        renderer.render("broken.html")
    assert isinstance(exc_info.value, ParseError)
    assert exc_info.value.template == "broken.html"
    assert exc_info.value.lineno == 2


def test_syntax_error_in_string_uses_name(renderer):
    with pytest.raises(TemplateParseError, match="notes.md"):
        renderer.render_string("{{ unclosed", name="notes.md")


def test_undefined_attribute_raises_parse_error(renderer, template_dir):
    (template_dir / "links.html").write_text("{{ site.link }}")
    with pytest.raises(TemplateParseError, match="undefined"):
        renderer.render("links.html")
