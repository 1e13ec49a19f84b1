"""Assemble validated YAML payloads into one ApplicationData record."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from resume_manager.models import ApplicationData
from resume_manager.utils.result import Err, Ok, Result, chain_pipe, tap, try_catch
from resume_manager.validation.types import FileToValidateWithYamlData
from resume_manager.validation.yaml_operations import format_validation_error

logger = logging.getLogger(__name__)


def file_name_to_data_key(file_name: str) -> str:
    """'job_analysis.yaml' -> 'job_analysis'"""
    return file_name.removesuffix(".yaml")


def transform_files_to_application_data(
    files: list[FileToValidateWithYamlData],
) -> Result[dict]:
    """Map every file's data key to its payload (``None`` for absent files)."""
    logger.debug("Building application data from %d file(s)", len(files))
    return Ok({file_name_to_data_key(f.file_name): f.data for f in files})


def validate_application_data_schema(data: dict) -> Result[ApplicationData]:
    """Re-check the assembled record as a whole, including cross-file rules."""
    try:
        application_data = ApplicationData.model_validate(data)
    except ValidationError as e:
        return Err(
            error="Application data validation failed",
            details=format_validation_error(e),
            original_error=e,
        )
    logger.debug("Application data validation passed")
    return Ok(application_data)


def generate_application_data_in_memory(
    files: list[FileToValidateWithYamlData],
) -> Result[ApplicationData]:
    return chain_pipe(
        files,
        transform_files_to_application_data,
        validate_application_data_schema,
    )


def render_data_module(application_data: ApplicationData, company_name: str) -> str:
    """JSON snapshot of the assembled data, stamped with company and time."""
    module = {
        "company": company_name,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "data": application_data.model_dump(mode="json"),
    }
    return json.dumps(module, ensure_ascii=False, indent=2) + "\n"


def write_data_module(content: str, output_path: str | Path) -> Result[Path]:
    path = Path(output_path)

    def _write() -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return tap(
        try_catch(_write, "Failed to write application data"),
        lambda written: logger.info("Application data written to %s", written),
    )


def generate_application_data(
    company_name: str,
    files: list[FileToValidateWithYamlData],
    output_path: str | Path,
) -> Result[ApplicationData]:
    """Assemble, validate and persist the data snapshot; returns the record."""
    return chain_pipe(
        files,
        generate_application_data_in_memory,
        lambda application_data: chain_pipe(
            render_data_module(application_data, company_name),
            lambda content: write_data_module(content, output_path),
            lambda _: Ok(application_data),
        ),
    )
