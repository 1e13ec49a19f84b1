"""Write the active tailor context for a company."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

import yaml
from pydantic import ValidationError

from resume_manager.config import COMPANY_FILES, PathsConfig
from resume_manager.data.application_data import generate_application_data
from resume_manager.models import ApplicationData, JobAnalysis, JobDetails, TailorContext
from resume_manager.themes import DEFAULT_THEME
from resume_manager.utils.paths import get_company_path
from resume_manager.utils.result import Err, Ok, Result, chain, chain_pipe, tap, try_catch
from resume_manager.validation.company_validation import validate_company_path
from resume_manager.validation.pipeline import validate_yaml_files_against_schemas_pipeline
from resume_manager.validation.types import FileToValidateWithYamlData
from resume_manager.validation.yaml_operations import format_validation_error

logger = logging.getLogger(__name__)

JOB_SUMMARY_MAX = 100


def _primary_focus(job_analysis: JobAnalysis) -> str:
    """'engineer + [react, typescript]' for the heaviest job focus entry."""
    top = max(job_analysis.job_focus, key=lambda item: item.weight)
    return f"{top.primary_area} + [{', '.join(top.specialties)}]"


def _job_summary(job_analysis: JobAnalysis) -> str:
    summary = job_analysis.responsibilities.primary[0]
    if len(summary) > JOB_SUMMARY_MAX:
        summary = summary[: JOB_SUMMARY_MAX - 3].rstrip() + "..."
    return summary


def _job_details(job_analysis: JobAnalysis) -> JobDetails:
    role = job_analysis.role_context
    return JobDetails(
        company=job_analysis.company,
        location=job_analysis.location,
        experience_level=job_analysis.experience_level,
        employment_type=job_analysis.employment_type,
        must_have_skills=[s.skill for s in job_analysis.requirements.must_have_skills],
        nice_to_have_skills=[s.skill for s in job_analysis.requirements.nice_to_have_skills],
        team_context=f"{role.department}, {role.team_size}",
    )


def build_tailor_context(
    company_name: str,
    company_path: Path,
    application_data: ApplicationData,
    available_files: list[str],
) -> Result[TailorContext]:
    metadata = application_data.metadata
    if metadata is None:
        return Err(error="Metadata not found", details="metadata.yaml has no content")

    job_analysis = application_data.job_analysis
    fields = {
        "active_company": company_name,
        "company": metadata.company,
        "active_template": metadata.active_template or DEFAULT_THEME,
        "folder_path": str(company_path),
        "available_files": available_files,
        "position": metadata.position,
        "primary_focus": metadata.job_focus_used,
        "last_updated": datetime.now(timezone.utc),
    }
    if job_analysis is not None:
        fields["primary_focus"] = _primary_focus(job_analysis)
        fields["job_summary"] = _job_summary(job_analysis)
        fields["job_details"] = _job_details(job_analysis)

    try:
        return Ok(TailorContext.model_validate(fields))
    except ValidationError as e:
        return Err(
            error="Tailor context validation failed",
            details=format_validation_error(e),
            original_error=e,
        )


def write_tailor_context(context: TailorContext, context_path: str | Path) -> Result[Path]:
    path = Path(context_path)

    def _write() -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        content = yaml.safe_dump(
            context.model_dump(mode="json", exclude_none=True),
            sort_keys=False,
            allow_unicode=True,
        )
        path.write_text(content, encoding="utf-8")
        return path

    return tap(
        try_catch(_write, "Failed to write tailor context"),
        lambda written: logger.info("Tailor context written to %s", written),
    )


def validate_and_set_tailor_env_pipeline(
    company_name: str,
    *,
    base_dir: str | Path | None = None,
    context_path: str | Path | None = None,
    data_path: str | Path | None = None,
) -> Result[TailorContext]:
    """Validate a company, write its data snapshot, then write the tailor context."""
    paths = PathsConfig()
    context_path = context_path if context_path is not None else paths.context_file
    data_path = data_path if data_path is not None else paths.generated_data
    company_path = get_company_path(company_name, base_dir)

    def _from_files(files: list[FileToValidateWithYamlData]) -> Result[TailorContext]:
        available = [f.file_name for f in files if f.data is not None]
        return chain_pipe(
            files,
            lambda validated: generate_application_data(company_name, validated, data_path),
            lambda application_data: build_tailor_context(
                company_name, company_path, application_data, available
            ),
            lambda context: chain(
                write_tailor_context(context, context_path), lambda _: Ok(context)
            ),
        )

    return chain_pipe(
        company_path,
        lambda path: validate_company_path(path, base_dir),
        lambda path: validate_yaml_files_against_schemas_pipeline(path, COMPANY_FILES),
        _from_files,
    )
