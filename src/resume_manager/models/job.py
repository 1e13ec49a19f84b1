"""Pydantic models for job_analysis.yaml."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, Field

from resume_manager.models.fields import NonEmptyStr, Url

PrimaryArea = Literal[
    "junior_engineer",
    "engineer",
    "senior_engineer",
    "staff_engineer",
    "principal_engineer",
    "tech_lead",
    "engineering_manager",
]

Specialty = Literal[
    "ai", "ml", "data",
    "react", "typescript", "node", "python",
    "aws", "testing", "architecture", "devops",
    "frontend", "backend", "mobile", "security",
]

# Allowed drift when summing float weights.
WEIGHT_TOLERANCE = 0.001


class JobFocusItem(BaseModel):
    primary_area: PrimaryArea
    specialties: list[Specialty]
    weight: float = Field(ge=0, le=1)


def check_job_focus_weights(items: list[JobFocusItem]) -> list[JobFocusItem]:
    """Job focus weights must add up to one."""
    total = sum(item.weight for item in items)
    if abs(total - 1.0) >= WEIGHT_TOLERANCE:
        raise ValueError("Job focus weights must sum to 1.0")
    return items


JobFocus = Annotated[
    list[JobFocusItem],
    Field(min_length=1),
    AfterValidator(check_job_focus_weights),
]


class SkillWithPriority(BaseModel):
    skill: NonEmptyStr
    priority: float = Field(ge=1)


class Requirements(BaseModel):
    must_have_skills: list[SkillWithPriority]
    nice_to_have_skills: list[SkillWithPriority]
    soft_skills: list[NonEmptyStr]
    experience_years: float = Field(ge=0)
    education: NonEmptyStr


class Responsibilities(BaseModel):
    primary: list[NonEmptyStr] = Field(min_length=1)
    secondary: list[NonEmptyStr]


class RoleContext(BaseModel):
    department: NonEmptyStr
    team_size: NonEmptyStr
    key_points: list[NonEmptyStr]


class CandidateAlignment(BaseModel):
    strong_matches: list[NonEmptyStr]
    gaps_to_address: list[NonEmptyStr]
    transferable_skills: list[NonEmptyStr]
    emphasis_strategy: NonEmptyStr


class SectionPriorities(BaseModel):
    technical_expertise: list[NonEmptyStr]
    experience_focus: NonEmptyStr
    project_relevance: NonEmptyStr


class OptimizationActions(BaseModel):
    LEAD_WITH: list[NonEmptyStr]
    EMPHASIZE: list[NonEmptyStr]
    QUANTIFY: list[NonEmptyStr]
    DOWNPLAY: list[NonEmptyStr]


class ApplicationInfo(BaseModel):
    posting_url: Url
    posting_date: NonEmptyStr
    deadline: NonEmptyStr


class ATSAnalysis(BaseModel):
    title_variations: list[NonEmptyStr]
    critical_phrases: list[NonEmptyStr]


class JobAnalysis(BaseModel):
    company: NonEmptyStr
    position: NonEmptyStr
    job_focus: JobFocus
    location: NonEmptyStr
    employment_type: NonEmptyStr
    experience_level: NonEmptyStr
    requirements: Requirements
    responsibilities: Responsibilities
    role_context: RoleContext
    application_info: ApplicationInfo
    candidate_alignment: CandidateAlignment
    section_priorities: SectionPriorities
    optimization_actions: OptimizationActions
    ats_analysis: ATSAnalysis
