"""PDF export module for resume-manager."""
from resume_manager.export.pdf_renderer import (
    html_to_pdf,
    render_html_preview,
    render_pdf,
    render_to_file,
)

__all__ = ["html_to_pdf", "render_html_preview", "render_pdf", "render_to_file"]
