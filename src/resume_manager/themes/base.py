"""Theme and document component definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from resume_manager.themes.sections import SectionConfig

DocType = Literal["resume", "cover-letter"]


@dataclass(frozen=True)
class DocumentComponent:
    """Renderable document: a page template plus the sections it lays out.

    ``data_key`` is the ApplicationData attribute the document is rendered from.
    """

    doc_type: DocType
    template: str
    data_key: str
    sections: tuple[SectionConfig, ...]

    def render_html(self, application_data: Any, stylesheet: str, title: str = "") -> str:
        from resume_manager.templates.renderer import render_document

        return render_document(self, application_data, stylesheet, title=title)


@dataclass(frozen=True)
class ThemeComponents:
    resume: DocumentComponent | None = None
    cover_letter: DocumentComponent | None = None

    def for_doc_type(self, doc_type: str) -> DocumentComponent | None:
        return self.resume if doc_type == "resume" else self.cover_letter


@dataclass(frozen=True)
class Theme:
    name: str
    stylesheet: str  # file in templates/css_themes
    components: ThemeComponents = field(default_factory=ThemeComponents)
    description: str = ""
