"""Classic theme: single-column serif resume."""

from __future__ import annotations

from resume_manager.models import Resume
from resume_manager.themes.base import DocumentComponent, Theme, ThemeComponents
from resume_manager.themes.cover_letter import COVER_LETTER_COMPONENT
from resume_manager.themes.sections import (
    ElementConfig,
    SectionConfig,
    always,
    section_registry,
)


def _has_summary(data: Resume) -> bool:
    return bool(data.summary.strip())


def _has_education(data: Resume) -> bool:
    return bool(data.education)


def _has_experience(data: Resume) -> bool:
    return bool(data.professional_experience) or bool(data.independent_projects)


def _has_additional(data: Resume) -> bool:
    return bool(data.technical_expertise) or bool(data.skills) or bool(data.languages)


def _has_profile_picture(data: Resume) -> bool:
    # "none" is how resumes without a photo spell it
    return data.profile_picture.strip().lower() not in ("", "none")


RESUME_SECTIONS = section_registry(
    SectionConfig(
        id="header",
        component="sections/resume/header_classic.html",
        is_visible=always,
        order=10,
        elements=(
            ElementConfig("profile-picture", _has_profile_picture),
            ElementConfig("social-links", always),
        ),
        description="Name and contact information",
    ),
    SectionConfig(
        id="summary",
        component="sections/resume/summary.html",
        is_visible=_has_summary,
        order=20,
        description="Professional summary",
    ),
    SectionConfig(
        id="education",
        component="sections/resume/education.html",
        is_visible=_has_education,
        order=30,
        description="Educational background",
    ),
    SectionConfig(
        id="experience",
        component="sections/resume/experience.html",
        is_visible=_has_experience,
        order=40,
        description="Professional experience and independent projects",
    ),
    SectionConfig(
        id="additional",
        component="sections/resume/additional.html",
        is_visible=_has_additional,
        order=50,
        description="Technical expertise, soft skills, and languages",
    ),
)

CLASSIC_THEME = Theme(
    name="classic",
    stylesheet="classic.css",
    components=ThemeComponents(
        resume=DocumentComponent(
            doc_type="resume",
            template="resume_single_column.html",
            data_key="resume",
            sections=RESUME_SECTIONS,
        ),
        cover_letter=COVER_LETTER_COMPONENT,
    ),
    description="Single-column serif layout",
)
