from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

import markdown
from jinja2 import Environment, FileSystemLoader, StrictUndefined
from markupsafe import Markup

from resume_manager.themes.sections import (
    get_element_visibility,
    get_visible_sections,
    get_visible_sections_by_column,
)

if TYPE_CHECKING:
    from resume_manager.themes.base import DocumentComponent

HTML_TEMPLATES_DIR = Path(__file__).parent / "html"
CSS_THEMES_DIR = Path(__file__).parent / "css_themes"


def md_inline(text: str) -> Markup:
    """Render a free-text field as inline Markdown (bold, italics, links)."""
    html = markdown.markdown(text)
    if html.startswith("<p>") and html.endswith("</p>") and html.count("<p>") == 1:
        html = html[3:-4]
    return Markup(html)


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(HTML_TEMPLATES_DIR)),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["md"] = md_inline
    return env


def load_stylesheet(name: str) -> str:
    css_path = CSS_THEMES_DIR / name
    return css_path.read_text(encoding="utf-8") if css_path.exists() else ""


def render_document(
    component: DocumentComponent,
    application_data: Any,
    stylesheet: str,
    title: str = "",
) -> str:
    """Render one document of a theme to a standalone HTML page."""
    data = getattr(application_data, component.data_key, None)
    if data is None:
        raise ValueError(f"No {component.data_key} data to render")

    template = get_environment().get_template(component.template)
    return template.render(
        title=title or component.doc_type,
        css=Markup(load_stylesheet(stylesheet)),
        data=data,
        sections=get_visible_sections(component.sections, data),
        sections_in=lambda column: get_visible_sections_by_column(
            component.sections, data, column
        ),
        element_visible=lambda section, element_id: get_element_visibility(
            section, element_id, data
        ),
    )
