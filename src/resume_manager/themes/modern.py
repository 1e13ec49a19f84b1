"""Modern theme: two-column resume with a full-width header."""

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


def _has_skills(data: Resume) -> bool:
    return bool(data.technical_expertise) or bool(data.skills)


def _has_languages(data: Resume) -> bool:
    return bool(data.languages)


def _has_profile_picture(data: Resume) -> bool:
    return data.profile_picture.strip().lower() not in ("", "none")


def _has_experience(data: Resume) -> bool:
    return bool(data.professional_experience) or bool(data.independent_projects)


RESUME_SECTIONS = section_registry(
    SectionConfig(
        id="header",
        component="sections/resume/header.html",
        is_visible=always,
        order=0,
        column="header",
        elements=(
            ElementConfig("profile-picture", _has_profile_picture),
            ElementConfig("summary", always),
        ),
        description="Name, title, profile picture, and summary",
    ),
    SectionConfig(
        id="contact",
        component="sections/resume/contact.html",
        is_visible=always,
        order=10,
        column="left",
        description="Contact information (phone, email, address, social links)",
    ),
    SectionConfig(
        id="skills",
        component="sections/resume/skills.html",
        is_visible=_has_skills,
        order=20,
        column="left",
        description="Technical expertise and soft skills",
    ),
    SectionConfig(
        id="languages",
        component="sections/resume/languages.html",
        is_visible=_has_languages,
        order=30,
        column="left",
        description="Language proficiencies",
    ),
    SectionConfig(
        id="experience",
        component="sections/resume/experience.html",
        is_visible=_has_experience,
        order=10,
        column="right",
        description="Professional experience and independent projects",
    ),
    SectionConfig(
        id="education",
        component="sections/resume/education.html",
        is_visible=always,
        order=20,
        column="right",
        description="Educational background",
    ),
)

MODERN_THEME = Theme(
    name="modern",
    stylesheet="modern.css",
    components=ThemeComponents(
        resume=DocumentComponent(
            doc_type="resume",
            template="resume_two_column.html",
            data_key="resume",
            sections=RESUME_SECTIONS,
        ),
        cover_letter=COVER_LETTER_COMPONENT,
    ),
    description="Two-column layout with accent colour",
)
