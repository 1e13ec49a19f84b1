"""Pydantic model for metadata.yaml."""

from __future__ import annotations

from pydantic import BaseModel

from resume_manager.models.fields import NonEmptyStr


class Metadata(BaseModel):
    company: NonEmptyStr
    position: NonEmptyStr
    last_updated: NonEmptyStr
    transformation_decisions: NonEmptyStr
    job_focus_used: NonEmptyStr
    active_template: NonEmptyStr | None = None  # theme name; "modern" when unset
