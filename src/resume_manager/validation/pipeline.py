"""Validation pipelines over a company folder."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Iterable, Literal

from resume_manager.config import COMPANY_FILES, CompanyFile
from resume_manager.utils.result import Err, Ok, Result, chain, chain_pipe
from resume_manager.validation.company_validation import validate_file_paths_exists
from resume_manager.validation.path_resolution import resolve_and_validate_path
from resume_manager.validation.types import (
    FileToValidate,
    FileToValidateWithYamlData,
    PathResolutionInput,
    ResolvedPath,
    ValidatedFile,
    ValidationReport,
)
from resume_manager.validation.yaml_operations import (
    load_yaml_files_from_path,
    validate_yaml_files_against_schema,
)

logger = logging.getLogger(__name__)

ValidationType = Literal["all", "metadata", "resume", "job-analysis", "cover-letter"]

VALIDATION_TYPE_KEYS: dict[str, tuple[str, ...] | None] = {
    "all": None,
    "metadata": ("METADATA",),
    "resume": ("RESUME",),
    "job-analysis": ("JOB_ANALYSIS",),
    "cover-letter": ("COVER_LETTER",),
}


def validate_yaml_files_against_schemas_pipeline(
    company_dir: str | Path,
    company_files: Iterable[CompanyFile] = COMPANY_FILES,
) -> Result[list[FileToValidateWithYamlData]]:
    """Check, load and validate the company's YAML files.

    Optional files that are not on disk come back with a ``None`` payload. Every
    other file must exist (all missing names are reported at once); content
    validation stops at the first invalid file.
    """
    company_dir = Path(company_dir)
    company_files = list(company_files)
    to_check: list[FileToValidate] = []
    absent: dict[str, FileToValidateWithYamlData] = {}

    for company_file in company_files:
        file = FileToValidate(
            file_name=company_file.file_name,
            path=company_dir / company_file.file_name,
            schema=company_file.schema,
            wrapper_key=company_file.wrapper_key,
        )
        if not company_file.required and not file.path.exists():
            logger.debug("Optional file %s not present, skipping", file.file_name)
            absent[file.file_name] = FileToValidateWithYamlData(
                file_name=file.file_name,
                path=file.path,
                schema=file.schema,
                wrapper_key=file.wrapper_key,
                data=None,
            )
        else:
            to_check.append(file)

    def _in_configured_order(
        validated: list[FileToValidateWithYamlData],
    ) -> Result[list[FileToValidateWithYamlData]]:
        by_name = {f.file_name: f for f in validated}
        by_name.update(absent)
        return Ok([by_name[f.file_name] for f in company_files])

    return chain(
        chain_pipe(
            to_check,
            validate_file_paths_exists,
            load_yaml_files_from_path,
            validate_yaml_files_against_schema,
        ),
        _in_configured_order,
    )


def select_files_for_validation_type(
    validation_type: str,
    company_files: Iterable[CompanyFile] = COMPANY_FILES,
) -> Result[list[CompanyFile]]:
    """Pick the files for a validation type; a single selected file is required."""
    if validation_type not in VALIDATION_TYPE_KEYS:
        return Err(
            error="Schema selection failed",
            details=f"Invalid validation type: {validation_type}",
        )
    keys = VALIDATION_TYPE_KEYS[validation_type]
    company_files = list(company_files)
    if keys is None:
        return Ok(company_files)
    selected = [dataclasses.replace(f, required=True) for f in company_files if f.key in keys]
    if not selected:
        return Err(
            error="Schema selection failed",
            details=f"Invalid validation type: {validation_type}",
        )
    return Ok(selected)


def _build_report(
    resolved: ResolvedPath,
    validated: list[FileToValidateWithYamlData],
    company_files: list[CompanyFile],
) -> ValidationReport:
    display_names = {f.file_name: f.display_name for f in company_files}
    return ValidationReport(
        path=resolved.path,
        validated_files=[
            ValidatedFile(
                file_name=f.file_name,
                display_name=display_names.get(f.file_name, f.file_name),
            )
            for f in validated
            if f.data is not None
        ],
    )


def validate_tailor_files_pipeline(
    path_input: PathResolutionInput,
    validation_type: str = "all",
    base_dir: str | Path | None = None,
) -> Result[ValidationReport]:
    """Validation-only run: resolve the folder, pick files, validate, report."""

    def _validate(resolved: ResolvedPath) -> Result[ValidationReport]:
        return chain(
            select_files_for_validation_type(validation_type),
            lambda files: chain(
                validate_yaml_files_against_schemas_pipeline(resolved.path, files),
                lambda validated: Ok(_build_report(resolved, validated, files)),
            ),
        )

    return chain(resolve_and_validate_path(path_input, base_dir), _validate)
