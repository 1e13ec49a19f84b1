from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from resume_manager.themes.base import DocumentComponent

logger = logging.getLogger(__name__)


def render_html_preview(
    component: DocumentComponent,
    application_data: Any,
    stylesheet: str,
    title: str = "",
) -> str:
    """Themed HTML for one document (for preview)."""
    return component.render_html(application_data, stylesheet, title=title)


def render_pdf(
    component: DocumentComponent,
    application_data: Any,
    stylesheet: str,
    title: str = "",
) -> bytes:
    """Render one document of a theme to PDF bytes."""
    html = render_html_preview(component, application_data, stylesheet, title=title)
    return html_to_pdf(html)


async def render_to_file(
    component: DocumentComponent,
    application_data: Any,
    file_path: str | Path,
    stylesheet: str,
) -> Path:
    """Render to PDF and write it to ``file_path``.

    Conversion runs in a worker thread so several documents can render at once.
    """
    path = Path(file_path)
    pdf_bytes = await asyncio.to_thread(
        render_pdf, component, application_data, stylesheet, path.stem
    )
    await asyncio.to_thread(path.write_bytes, pdf_bytes)
    logger.info("Wrote %s (%d bytes)", path, len(pdf_bytes))
    return path


def html_to_pdf(html: str) -> bytes:
    """Convert HTML string to PDF bytes using WeasyPrint, with fpdf2 fallback."""
    try:
        from weasyprint import HTML
        return HTML(string=html).write_pdf()
    except (ImportError, OSError):
        logger.warning("WeasyPrint not available, using fpdf2 fallback")
        from resume_manager.export.pdf_fallback import html_to_pdf_fpdf2
        return html_to_pdf_fpdf2(html)
