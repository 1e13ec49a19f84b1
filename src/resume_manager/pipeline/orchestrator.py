"""End-to-end PDF generation pipeline for one company."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping

from resume_manager.config import COMPANY_FILES, PathsConfig
from resume_manager.data.application_data import (
    generate_application_data,
    generate_application_data_in_memory,
)
from resume_manager.models import ApplicationData
from resume_manager.document.generation import (
    GeneratedDocument,
    Renderer,
    ensure_output_directory,
    generate_document,
    select_theme_from_metadata,
)
from resume_manager.export.pdf_renderer import render_to_file
from resume_manager.themes import THEMES, Theme
from resume_manager.utils.paths import get_company_path
from resume_manager.utils.result import Err, Ok, Result, chain, chain_pipe
from resume_manager.validation.company_validation import validate_company_path
from resume_manager.validation.pipeline import validate_yaml_files_against_schemas_pipeline

logger = logging.getLogger(__name__)

ALL_DOC_TYPES = ("resume", "cover-letter")


def resolve_doc_types(doc_type: str) -> Result[list[str]]:
    """'both' -> ['resume', 'cover-letter']"""
    if doc_type == "both":
        return Ok(list(ALL_DOC_TYPES))
    if doc_type in ALL_DOC_TYPES:
        return Ok([doc_type])
    return Err(
        error=f"Invalid document type: {doc_type}",
        details="Expected one of: resume, cover-letter, both",
    )


@dataclass
class PdfGenerationResult:
    """Files written by one pipeline run."""

    company: str
    theme: str
    files: list[GeneratedDocument] = field(default_factory=list)
    elapsed_seconds: float = 0.0


async def execute_pdf_generation(
    company_name: str,
    doc_type: str = "both",
    *,
    base_dir: str | Path | None = None,
    output_dir: str | Path | None = None,
    themes: Mapping[str, Theme] = THEMES,
    renderer: Renderer = render_to_file,
    on_phase: Callable[[str, str], None] | None = None,
) -> Result[PdfGenerationResult]:
    """Validate a company's files and render the requested documents.

    Args:
        company_name: Folder name under the tailor base.
        doc_type: "resume", "cover-letter" or "both".
        base_dir: Tailor base directory (defaults to resume-data/tailor).
        output_dir: Where PDFs are written (defaults to tmp/).
        themes: Theme registry to select from.
        renderer: Async callable writing one PDF; injected in tests.
        on_phase: Optional callback(phase_name, detail) for progress.
    """
    start = time.monotonic()
    output_dir = output_dir if output_dir is not None else PathsConfig().output_dir

    def _notify(phase: str, detail: str = "") -> None:
        if on_phase:
            on_phase(phase, detail)

    company_path = get_company_path(company_name, base_dir)
    _notify("validate", f"Validating {company_path}")

    prepared = chain_pipe(
        company_path,
        lambda path: validate_company_path(path, base_dir),
        lambda path: validate_yaml_files_against_schemas_pipeline(path, COMPANY_FILES),
        generate_application_data_in_memory,
        lambda application_data: select_theme_from_metadata(application_data, themes),
    )
    if isinstance(prepared, Err):
        return prepared
    theme_context = prepared.data
    _notify("theme", theme_context.theme_name)

    doc_types = resolve_doc_types(doc_type)
    if isinstance(doc_types, Err):
        return doc_types

    directory = await ensure_output_directory(theme_context, output_dir)
    if isinstance(directory, Err):
        return directory
    context = directory.data

    _notify("render", ", ".join(doc_types.data))
    generated = await generate_document(
        doc_types.data,
        context.theme,
        context.application_data,
        context.output_dir,
        company_name,
        renderer=renderer,
    )

    def _finish(files: list[GeneratedDocument]) -> Result[PdfGenerationResult]:
        elapsed = time.monotonic() - start
        _notify("done", f"{len(files)} file(s) in {elapsed:.1f}s")
        logger.info("Generated %d document(s) for %s", len(files), company_name)
        return Ok(
            PdfGenerationResult(
                company=company_name,
                theme=context.theme_name,
                files=files,
                elapsed_seconds=elapsed,
            )
        )

    return chain(generated, _finish)


def execute_data_generation(
    company_name: str,
    *,
    base_dir: str | Path | None = None,
    output_path: str | Path | None = None,
) -> Result[ApplicationData]:
    """Validate a company's files and write the application data snapshot."""
    output_path = output_path if output_path is not None else PathsConfig().generated_data
    return chain_pipe(
        get_company_path(company_name, base_dir),
        lambda path: validate_company_path(path, base_dir),
        lambda path: validate_yaml_files_against_schemas_pipeline(path, COMPANY_FILES),
        lambda files: generate_application_data(company_name, files, output_path),
    )
