"""Section registries and visibility resolution for document templates.

A document is a list of :class:`SectionConfig` records. Each record names the
Jinja2 partial that renders it and a predicate deciding, from the document data
alone, whether the section appears. Sections render in ascending ``order``;
equal orders keep registration order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Literal

Column = Literal["left", "right", "header"]
Predicate = Callable[[Any], bool]


def always(_data: Any) -> bool:
    return True


@dataclass(frozen=True)
class ElementConfig:
    """A piece of a section that can be hidden on its own."""

    id: str
    is_visible: Predicate


@dataclass(frozen=True)
class SectionConfig:
    id: str
    component: str  # partial template name
    is_visible: Predicate
    order: int
    column: Column | None = None
    elements: tuple[ElementConfig, ...] | None = None
    description: str = ""


def section_registry(*sections: SectionConfig) -> tuple[SectionConfig, ...]:
    """Freeze a section list, rejecting duplicate ids."""
    seen: set[str] = set()
    for section in sections:
        if section.id in seen:
            raise ValueError(f"Duplicate section id: {section.id}")
        seen.add(section.id)
    return tuple(sections)


def get_visible_sections(
    sections: Iterable[SectionConfig], data: Any
) -> list[SectionConfig]:
    return sorted(
        (section for section in sections if section.is_visible(data)),
        key=lambda section: section.order,
    )


def get_visible_sections_by_column(
    sections: Iterable[SectionConfig], data: Any, column: Column
) -> list[SectionConfig]:
    return [s for s in get_visible_sections(sections, data) if s.column == column]


def is_section_visible(
    sections: Iterable[SectionConfig], section_id: str, data: Any
) -> bool:
    """Unknown ids are hidden."""
    for section in sections:
        if section.id == section_id:
            return section.is_visible(data)
    return False


def get_element_visibility(section: SectionConfig, element_id: str, data: Any) -> bool:
    """Elements without configuration are shown."""
    if section.elements is None:
        return True
    for element in section.elements:
        if element.id == element_id:
            return element.is_visible(data)
    return True
