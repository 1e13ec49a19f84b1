"""Resolve a company name or custom path into a checked company folder."""

from __future__ import annotations

import logging
from pathlib import Path

from resume_manager.utils.paths import get_company_path
from resume_manager.utils.result import Err, Ok, Result, chain_pipe, try_catch
from resume_manager.validation.types import PathResolutionInput, ResolvedPath

logger = logging.getLogger(__name__)

UNKNOWN_COMPANY = "unknown"


def validate_mutually_exclusive_options(
    options: PathResolutionInput,
) -> Result[PathResolutionInput]:
    """Exactly one of ``company_name`` / ``custom_path`` (-C / -P) may be given."""
    if not options.company_name and not options.custom_path:
        return Err(
            error="Path option validation failed",
            details="Either -C (company name) or -P (path) must be provided",
        )
    if options.company_name and options.custom_path:
        return Err(
            error="Path option validation failed",
            details="Cannot use both -C and -P options together",
        )
    return Ok(options)


def resolve_path_string(
    options: PathResolutionInput, base_dir: str | Path | None = None
) -> Result[ResolvedPath]:
    """Build the company folder path.

    A company name is joined onto the tailor base. A custom path loses its trailing
    separators and its last segment becomes the company name.
    """

    def _resolve() -> ResolvedPath:
        if options.company_name:
            return ResolvedPath(
                path=get_company_path(options.company_name, base_dir),
                company_name=options.company_name,
            )
        normalized = options.custom_path.rstrip("/\\")
        company = normalized.replace("\\", "/").split("/")[-1] or UNKNOWN_COMPANY
        return ResolvedPath(path=Path(normalized or options.custom_path), company_name=company)

    return try_catch(_resolve, "Path resolution failed")


def validate_path_exists(resolved: ResolvedPath) -> Result[ResolvedPath]:
    if resolved.path.exists():
        return Ok(resolved)
    return Err(
        error=f"Path does not exist: {resolved.path}",
        details="Ensure the company folder or custom path exists",
    )


def resolve_and_validate_path(
    options: PathResolutionInput, base_dir: str | Path | None = None
) -> Result[ResolvedPath]:
    logger.debug("Resolving company path from %s", options)
    return chain_pipe(
        options,
        validate_mutually_exclusive_options,
        lambda checked: resolve_path_string(checked, base_dir),
        validate_path_exists,
    )
