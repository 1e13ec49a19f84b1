"""Schemas for the per-company YAML documents."""

from resume_manager.models.application import ApplicationData
from resume_manager.models.cover_letter import CoverLetter, CoverLetterContent
from resume_manager.models.job import JobAnalysis, JobFocusItem
from resume_manager.models.metadata import Metadata
from resume_manager.models.resume import (
    ContactDetails,
    Education,
    Expertise,
    IndependentProject,
    Language,
    ProfessionalExperience,
    Resume,
)
from resume_manager.models.tailor_context import JobDetails, TailorContext

__all__ = [
    "ApplicationData",
    "ContactDetails",
    "CoverLetter",
    "CoverLetterContent",
    "Education",
    "Expertise",
    "IndependentProject",
    "JobAnalysis",
    "JobDetails",
    "JobFocusItem",
    "Language",
    "Metadata",
    "ProfessionalExperience",
    "Resume",
    "TailorContext",
]
