"""Theme selection and concurrent PDF generation for one company."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Iterable, Mapping

from resume_manager.export.pdf_renderer import render_to_file
from resume_manager.models import ApplicationData
from resume_manager.themes import DEFAULT_THEME, THEMES, DocumentComponent, Theme
from resume_manager.themes.base import DocType
from resume_manager.utils.result import Err, Ok, Result, try_catch_async

logger = logging.getLogger(__name__)

Renderer = Callable[[DocumentComponent, Any, Path, str], Awaitable[Any]]

# Labels used when reporting missing theme components
COMPONENT_LABELS: dict[str, str] = {
    "resume": "resume",
    "cover-letter": "coverLetter",
}


@dataclass(frozen=True)
class GeneratedDocument:
    file_path: Path
    doc_type: DocType


@dataclass(frozen=True)
class ThemeSelectionContext:
    application_data: ApplicationData
    theme: Theme
    theme_name: str


@dataclass(frozen=True)
class OutputDirectoryContext:
    application_data: ApplicationData
    theme: Theme
    theme_name: str
    output_dir: Path


def output_file_name(doc_type: str, company_name: str) -> str:
    return f"{doc_type}-{company_name}.pdf"


def select_theme_from_metadata(
    application_data: ApplicationData,
    themes: Mapping[str, Theme] = THEMES,
) -> Result[ThemeSelectionContext]:
    """Look up ``metadata.active_template``, falling back to the default theme."""
    metadata = application_data.metadata
    theme_name = (metadata.active_template if metadata else None) or DEFAULT_THEME
    theme = themes.get(theme_name)
    if theme is None:
        return Err(
            error=f"Theme '{theme_name}' not found",
            details=f"Available themes: {', '.join(themes)}",
        )
    logger.debug("Selected theme %s", theme_name)
    return Ok(
        ThemeSelectionContext(
            application_data=application_data, theme=theme, theme_name=theme_name
        )
    )


async def ensure_output_directory(
    context: ThemeSelectionContext, output_dir: str | Path
) -> Result[OutputDirectoryContext]:
    path = Path(output_dir).resolve()

    async def _mkdir() -> OutputDirectoryContext:
        await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
        return OutputDirectoryContext(
            application_data=context.application_data,
            theme=context.theme,
            theme_name=context.theme_name,
            output_dir=path,
        )

    return await try_catch_async(_mkdir, "Failed to create output directory")


def find_missing_components(theme: Theme, doc_types: Iterable[str]) -> list[str]:
    return [
        COMPONENT_LABELS.get(doc_type, doc_type)
        for doc_type in doc_types
        if theme.components.for_doc_type(doc_type) is None
    ]


async def generate_document(
    doc_types: list[DocType],
    theme: Theme,
    application_data: ApplicationData,
    output_dir: str | Path,
    company_name: str,
    renderer: Renderer = render_to_file,
) -> Result[list[GeneratedDocument]]:
    """Render every requested document concurrently.

    All components are checked before anything renders. If any render raises,
    the batch waits for the others to settle and then fails. Files they wrote
    are left in place.
    """
    missing = find_missing_components(theme, doc_types)
    if missing:
        return Err(
            error="Required theme components not found",
            details=f"Missing components: {', '.join(missing)}",
        )

    output_dir = Path(output_dir)

    async def _render(doc_type: DocType) -> GeneratedDocument:
        component = theme.components.for_doc_type(doc_type)
        file_path = output_dir / output_file_name(doc_type, company_name)
        logger.debug("Rendering %s to %s", doc_type, file_path)
        await renderer(component, application_data, file_path, theme.stylesheet)
        return GeneratedDocument(file_path=file_path, doc_type=doc_type)

    async def _render_all() -> list[GeneratedDocument]:
        results = await asyncio.gather(
            *(_render(d) for d in doc_types), return_exceptions=True
        )
        for r in results:
            if isinstance(r, BaseException):
                raise r
        return list(results)

    return await try_catch_async(_render_all, "Failed to generate PDF documents")
