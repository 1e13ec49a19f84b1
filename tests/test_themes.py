"""Tests for the theme registry and HTML rendering."""

import pytest

from resume_manager.models import ApplicationData
from resume_manager.templates.renderer import load_stylesheet, md_inline, render_document
from resume_manager.themes import DEFAULT_THEME, THEMES
from resume_manager.themes.sections import get_visible_sections


def test_registry():
    assert list(THEMES) == ["modern", "classic"]
    assert DEFAULT_THEME in THEMES
    for name, theme in THEMES.items():
        assert theme.name == name
        assert theme.components.resume is not None
        assert theme.components.cover_letter is not None
        assert load_stylesheet(theme.stylesheet)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        THEMES["new"] = THEMES["modern"]


def test_for_doc_type():
    components = THEMES["modern"].components
    assert components.for_doc_type("resume") is components.resume
    assert components.for_doc_type("cover-letter") is components.cover_letter


def test_md_inline():
    assert md_inline("**bold** text") == "<strong>bold</strong> text"
    assert md_inline("plain") == "plain"


class TestModernResume:
    def test_columns(self, application_data):
        sections = THEMES["modern"].components.resume.sections
        columns = {s.id: s.column for s in sections}
        assert columns["header"] == "header"
        assert columns["contact"] == "left"
        assert columns["experience"] == "right"

    def test_languages_hidden_without_data(self, application_data):
        resume = application_data.resume.model_copy(update={"languages": []})
        sections = THEMES["modern"].components.resume.sections
        assert "languages" not in [s.id for s in get_visible_sections(sections, resume)]

    def test_render_html(self, application_data):
        html = THEMES["modern"].components.resume.render_html(
            application_data, "modern.css", title="resume-acme"
        )
        assert "<title>resume-acme</title>" in html
        assert "Jane Doe" in html
        assert "<strong>eight years</strong>" in html
        assert "Cut p95 latency by 40%" in html
        assert 'class="column left"' in html
        # profile_picture is "none"
        assert '<img class="profile-picture"' not in html


class TestClassicResume:
    def test_render_html(self, application_data):
        html = THEMES["classic"].components.resume.render_html(application_data, "classic.css")
        assert "single-column" in html
        assert "TU Berlin" in html
        assert "https://github.com/janedoe" in html

    def test_section_order(self, application_data):
        sections = THEMES["classic"].components.resume.sections
        ids = [s.id for s in get_visible_sections(sections, application_data.resume)]
        assert ids == ["header", "summary", "education", "experience", "additional"]

    def test_profile_picture_element(self, application_data):
        resume = application_data.resume.model_copy(update={"profile_picture": "me.png"})
        data = application_data.model_copy(update={"resume": resume})
        html = THEMES["classic"].components.resume.render_html(data, "classic.css")
        assert 'src="me.png"' in html


class TestCoverLetter:
    def test_render_html(self, application_data):
        html = THEMES["modern"].components.cover_letter.render_html(
            application_data, "modern.css"
        )
        assert "Application for Senior Engineer" in html
        assert "Dear Acme hiring team," in html
        assert "January 15, 2025" in html

    def test_missing_data(self, application_data):
        data = application_data.model_copy(update={"cover_letter": None})
        component = THEMES["modern"].components.cover_letter
        with pytest.raises(ValueError, match="No cover_letter data to render"):
            render_document(component, data, "modern.css")


def test_stylesheet_missing_file():
    assert load_stylesheet("nope.css") == ""


def test_application_data_fixture_is_complete(application_data):
    assert isinstance(application_data, ApplicationData)
