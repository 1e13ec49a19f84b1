"""Whole-document model combining every per-file payload."""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from resume_manager.models.cover_letter import CoverLetter
from resume_manager.models.job import JobAnalysis
from resume_manager.models.metadata import Metadata
from resume_manager.models.resume import Resume


def _company_key(name: str) -> str:
    return " ".join(name.split()).lower()


class ApplicationData(BaseModel):
    """Keys match the company file names without their ``.yaml`` suffix."""

    metadata: Metadata | None = None
    resume: Resume | None = None
    job_analysis: JobAnalysis | None = None
    cover_letter: CoverLetter | None = None

    @model_validator(mode="after")
    def check_same_company(self) -> ApplicationData:
        named = {
            key: doc.company
            for key, doc in (
                ("metadata", self.metadata),
                ("job_analysis", self.job_analysis),
                ("cover_letter", self.cover_letter),
            )
            if doc is not None
        }
        if len({_company_key(name) for name in named.values()}) > 1:
            listed = ", ".join(f"{key}={name!r}" for key, name in named.items())
            raise ValueError(f"Documents disagree on the company name: {listed}")
        return self
