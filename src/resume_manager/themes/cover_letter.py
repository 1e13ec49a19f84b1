"""Cover-letter sections shared by every theme."""

from __future__ import annotations

from resume_manager.models import CoverLetter
from resume_manager.themes.base import DocumentComponent
from resume_manager.themes.sections import SectionConfig, always, section_registry


def _has_title(data: CoverLetter) -> bool:
    return bool(data.position) or bool(data.content.letter_title)


COVER_LETTER_SECTIONS = section_registry(
    SectionConfig(
        id="header",
        component="sections/cover_letter/header.html",
        is_visible=always,
        order=10,
        description="Contact information and company name",
    ),
    SectionConfig(
        id="date",
        component="sections/cover_letter/date.html",
        is_visible=always,
        order=20,
        description="Letter date",
    ),
    SectionConfig(
        id="title",
        component="sections/cover_letter/title.html",
        is_visible=_has_title,
        order=30,
        description="Cover letter title with position",
    ),
    SectionConfig(
        id="body",
        component="sections/cover_letter/body.html",
        is_visible=always,
        order=40,
        description="Letter opening and body paragraphs",
    ),
    SectionConfig(
        id="signature",
        component="sections/cover_letter/signature.html",
        is_visible=always,
        order=50,
        description="Closing signature",
    ),
)

COVER_LETTER_COMPONENT = DocumentComponent(
    doc_type="cover-letter",
    template="cover_letter.html",
    data_key="cover_letter",
    sections=COVER_LETTER_SECTIONS,
)
