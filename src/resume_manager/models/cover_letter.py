"""Pydantic models for cover_letter.yaml."""

from __future__ import annotations

from pydantic import BaseModel, Field

from resume_manager.models.fields import NonEmptyStr
from resume_manager.models.job import JobFocus
from resume_manager.models.resume import ContactDetails


class CoverLetterContent(BaseModel):
    letter_title: NonEmptyStr
    opening_line: NonEmptyStr
    body: list[NonEmptyStr] = Field(min_length=1)
    signature: NonEmptyStr


class CoverLetter(BaseModel):
    company: NonEmptyStr
    position: NonEmptyStr
    job_focus: JobFocus
    primary_focus: NonEmptyStr
    date: NonEmptyStr
    personal_info: ContactDetails
    content: CoverLetterContent
