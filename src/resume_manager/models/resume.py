"""Pydantic models for resume.yaml."""

from __future__ import annotations

from pydantic import BaseModel, Field

from resume_manager.models.fields import Email, NonEmptyStr, Url


class Expertise(BaseModel):
    resume_title: NonEmptyStr
    skills: list[NonEmptyStr] = Field(min_length=1)


class Language(BaseModel):
    language: NonEmptyStr
    proficiency: NonEmptyStr


class Education(BaseModel):
    institution: NonEmptyStr
    program: NonEmptyStr
    location: NonEmptyStr
    duration: NonEmptyStr


class ContactDetails(BaseModel):
    name: NonEmptyStr | None = None
    phone: NonEmptyStr
    email: Email
    address: NonEmptyStr
    linkedin: Url
    github: Url


class ProfessionalExperience(BaseModel):
    company: NonEmptyStr
    position: NonEmptyStr
    location: NonEmptyStr
    duration: NonEmptyStr
    company_description: NonEmptyStr
    linkedin: Url | None
    achievements: list[NonEmptyStr] = Field(min_length=1)


class IndependentProject(BaseModel):
    name: NonEmptyStr
    description: NonEmptyStr
    location: NonEmptyStr
    duration: NonEmptyStr
    url: Url | None = None
    achievements: list[NonEmptyStr] = Field(min_length=1)
    impact: str | None = None


class Resume(BaseModel):
    name: NonEmptyStr
    profile_picture: NonEmptyStr
    title: NonEmptyStr
    summary: NonEmptyStr
    contact: ContactDetails
    technical_expertise: list[Expertise] = Field(min_length=1)
    skills: list[NonEmptyStr]
    languages: list[Language]
    professional_experience: list[ProfessionalExperience]
    independent_projects: list[IndependentProject]
    education: list[Education] = Field(min_length=1)
