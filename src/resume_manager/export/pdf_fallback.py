"""Fallback PDF renderer using fpdf2 (pure Python, no system deps).

Layout is flattened to a single text column: headings, paragraphs and list
items in document order. Styling from the theme stylesheet is ignored.
"""

from __future__ import annotations

import logging
from html.parser import HTMLParser
from io import BytesIO
from pathlib import Path

from fpdf import FPDF

logger = logging.getLogger(__name__)

# Unicode-capable fonts (Linux, macOS, Windows)
_UNICODE_FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    "/System/Library/Fonts/Supplemental/Arial Unicode.ttf",
    "C:/Windows/Fonts/arial.ttf",
]

_HEADING_SIZES = {"h1": 16, "h2": 13, "h3": 11, "h4": 10}
_BLOCK_TAGS = {"p", "li", "div", "section", "article", "header", "aside", "main"}
_SKIPPED_TAGS = {"head", "style", "script", "title"}


def _find_unicode_font() -> str | None:
    for path in _UNICODE_FONT_PATHS:
        if Path(path).exists():
            return path
    return None


class _BlockCollector(HTMLParser):
    """Collect ``(kind, text)`` blocks where kind is h1-h4, bullet, text or break."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.blocks: list[tuple[str, str]] = []
        self._kind = "text"
        self._buffer: list[str] = []
        self._skip_depth = 0

    def _flush(self) -> None:
        text = " ".join("".join(self._buffer).split())
        if text:
            self.blocks.append((self._kind, text))
        self._buffer = []

    def handle_starttag(self, tag, attrs):
        if tag in _SKIPPED_TAGS:
            self._skip_depth += 1
        elif tag in _HEADING_SIZES:
            self._flush()
            self._kind = tag
        elif tag == "li":
            self._flush()
            self._kind = "bullet"
        elif tag == "br":
            self._buffer.append(" ")
        elif tag in _BLOCK_TAGS:
            self._flush()
            self._kind = "text"

    def handle_endtag(self, tag):
        if tag in _SKIPPED_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
        elif tag in _HEADING_SIZES or tag in _BLOCK_TAGS:
            self._flush()
            self._kind = "text"
        elif tag in ("ul", "ol"):
            self._flush()
            self.blocks.append(("break", ""))

    def handle_data(self, data):
        if not self._skip_depth:
            self._buffer.append(data)

    def close(self) -> None:
        super().close()
        self._flush()


def parse_html_blocks(html_content: str) -> list[tuple[str, str]]:
    parser = _BlockCollector()
    parser.feed(html_content)
    parser.close()
    return parser.blocks


def html_to_pdf_fpdf2(html_content: str) -> bytes:
    """Fallback PDF generation using fpdf2 when WeasyPrint is unavailable."""
    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=20)
    pdf.add_page()

    font_name = "Helvetica"
    unicode_font = _find_unicode_font()
    if unicode_font:
        try:
            pdf.add_font("UnicodeFont", "", unicode_font)
            font_name = "UnicodeFont"
        except (OSError, RuntimeError):
            logger.debug("Failed to load font %s", unicode_font)

    pdf.set_font(font_name, size=10)

    for kind, text in parse_html_blocks(html_content):
        safe_text = _safe_text(text, pdf)
        if kind in _HEADING_SIZES:
            pdf.ln(2)
            pdf.set_font_size(_HEADING_SIZES[kind])
            pdf.multi_cell(0, 8, safe_text, new_x="LMARGIN", new_y="NEXT")
            if kind == "h1":
                pdf.line(pdf.l_margin, pdf.get_y(), pdf.w - pdf.r_margin, pdf.get_y())
                pdf.ln(2)
            pdf.set_font_size(10)
        elif kind == "bullet":
            pdf.multi_cell(0, 6, f"  - {safe_text}", new_x="LMARGIN", new_y="NEXT")
        elif kind == "break":
            pdf.ln(3)
        else:
            pdf.multi_cell(0, 6, safe_text, new_x="LMARGIN", new_y="NEXT")

    buf = BytesIO()
    pdf.output(buf)
    return buf.getvalue()


def _safe_text(text: str, pdf: FPDF) -> str:
    """Core fonts are latin-1 only; replace what they cannot encode."""
    if pdf.is_ttf_font:
        return text
    return text.encode("latin-1", errors="replace").decode("latin-1")
