"""Pydantic model for the tailor context file written by ``set-env``."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from resume_manager.models.fields import NonEmptyStr


class JobDetails(BaseModel):
    company: str
    location: str
    experience_level: str
    employment_type: str
    must_have_skills: list[str]
    nice_to_have_skills: list[str]
    team_context: str


class TailorContext(BaseModel):
    active_company: NonEmptyStr
    company: NonEmptyStr
    active_template: NonEmptyStr
    folder_path: NonEmptyStr
    available_files: list[NonEmptyStr]
    position: NonEmptyStr
    primary_focus: NonEmptyStr
    job_summary: str | None = Field(default=None, max_length=100)
    job_details: JobDetails | None = None
    last_updated: datetime
