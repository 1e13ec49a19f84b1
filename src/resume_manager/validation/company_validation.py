"""Existence checks for a company folder and its YAML files."""

from __future__ import annotations

import logging
from pathlib import Path

from resume_manager.utils.paths import list_companies
from resume_manager.utils.result import Err, Ok, Result
from resume_manager.validation.types import FileToValidate

logger = logging.getLogger(__name__)


def validate_company_path(
    company_path: str | Path, base_dir: str | Path | None = None
) -> Result[Path]:
    """Succeed with the folder path, or list the companies that do exist."""
    path = Path(company_path)
    if path.exists():
        return Ok(path)
    available = list_companies(base_dir if base_dir is not None else path.parent)
    return Err(
        error=f"Company folder not found: {path}",
        details=f"Available companies: {', '.join(available) or 'none'}",
    )


def validate_file_paths_exists(
    paths_to_validate: list[FileToValidate],
) -> Result[list[FileToValidate]]:
    """Check every file up front so all missing ones are reported together."""
    missing = [f for f in paths_to_validate if not f.path.exists()]
    if not missing:
        return Ok(paths_to_validate)

    expected = [f.file_name for f in paths_to_validate]
    found = [f.file_name for f in paths_to_validate if f not in missing]
    logger.debug("Missing company files: %s", [f.file_name for f in missing])

    detail_lines = [f"  - {f.file_name}" for f in missing]
    detail_lines.append(f"Expected files: {', '.join(expected)}")
    detail_lines.append(f"Found files: {', '.join(found) if found else 'none'}")
    return Err(
        error=f"Missing {len(missing)} required file(s):",
        details="\n".join(detail_lines),
    )
