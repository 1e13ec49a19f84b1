"""Shared test fixtures."""

from __future__ import annotations

import copy
from pathlib import Path

import pytest
import yaml

METADATA = {
    "company": "Acme",
    "position": "Senior Engineer",
    "last_updated": "2025-01-15",
    "transformation_decisions": "Led with platform work, trimmed older roles",
    "job_focus_used": "senior_engineer + [python, aws]",
}

RESUME = {
    "name": "Jane Doe",
    "profile_picture": "none",
    "title": "Senior Software Engineer",
    "summary": "Backend engineer with **eight years** of Python experience.",
    "contact": {
        "phone": "+1 555 0100",
        "email": "jane@example.com",
        "address": "Berlin, Germany",
        "linkedin": "https://linkedin.com/in/janedoe",
        "github": "https://github.com/janedoe",
    },
    "technical_expertise": [
        {"resume_title": "Backend", "skills": ["Python", "PostgreSQL"]},
    ],
    "skills": ["Mentoring"],
    "languages": [{"language": "English", "proficiency": "Native"}],
    "professional_experience": [
        {
            "company": "Globex",
            "position": "Software Engineer",
            "location": "Remote",
            "duration": "2019 - 2024",
            "company_description": "Logistics platform",
            "linkedin": None,
            "achievements": ["Cut p95 latency by 40%"],
        }
    ],
    "independent_projects": [],
    "education": [
        {
            "institution": "TU Berlin",
            "program": "BSc Computer Science",
            "location": "Berlin",
            "duration": "2012 - 2016",
        }
    ],
}

JOB_ANALYSIS = {
    "company": "Acme",
    "position": "Senior Engineer",
    "job_focus": [
        {"primary_area": "senior_engineer", "specialties": ["python", "aws"], "weight": 0.7},
        {"primary_area": "tech_lead", "specialties": ["architecture"], "weight": 0.3},
    ],
    "location": "Remote",
    "employment_type": "Full-time",
    "experience_level": "Senior",
    "requirements": {
        "must_have_skills": [{"skill": "Python", "priority": 1}],
        "nice_to_have_skills": [{"skill": "Terraform", "priority": 2}],
        "soft_skills": ["Communication"],
        "experience_years": 5,
        "education": "BSc or equivalent",
    },
    "responsibilities": {
        "primary": ["Own the order service"],
        "secondary": ["Mentor engineers"],
    },
    "role_context": {
        "department": "Platform",
        "team_size": "6 engineers",
        "key_points": ["Greenfield rewrite"],
    },
    "application_info": {
        "posting_url": "https://acme.example.com/jobs/42",
        "posting_date": "2025-01-10",
        "deadline": "2025-02-10",
    },
    "candidate_alignment": {
        "strong_matches": ["Python"],
        "gaps_to_address": ["Terraform"],
        "transferable_skills": ["Kubernetes"],
        "emphasis_strategy": "Lead with backend scale",
    },
    "section_priorities": {
        "technical_expertise": ["Backend"],
        "experience_focus": "Latency work",
        "project_relevance": "Low",
    },
    "optimization_actions": {
        "LEAD_WITH": ["Python"],
        "EMPHASIZE": ["Scale"],
        "QUANTIFY": ["Latency"],
        "DOWNPLAY": ["Frontend"],
    },
    "ats_analysis": {
        "title_variations": ["Senior Backend Engineer"],
        "critical_phrases": ["distributed systems"],
    },
}

COVER_LETTER = {
    "company": "Acme",
    "position": "Senior Engineer",
    "job_focus": [
        {"primary_area": "senior_engineer", "specialties": ["python"], "weight": 1.0},
    ],
    "primary_focus": "Backend scale",
    "date": "January 15, 2025",
    "personal_info": RESUME["contact"],
    "content": {
        "letter_title": "Application for Senior Engineer",
        "opening_line": "Dear Acme hiring team,",
        "body": ["I build reliable backend systems."],
        "signature": "Jane Doe",
    },
}


def write_yaml(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def metadata_data() -> dict:
    return copy.deepcopy(METADATA)


@pytest.fixture
def resume_data() -> dict:
    return copy.deepcopy(RESUME)


@pytest.fixture
def job_analysis_data() -> dict:
    return copy.deepcopy(JOB_ANALYSIS)


@pytest.fixture
def cover_letter_data() -> dict:
    return copy.deepcopy(COVER_LETTER)


@pytest.fixture
def tailor_base(tmp_path) -> Path:
    base = tmp_path / "resume-data" / "tailor"
    base.mkdir(parents=True)
    return base


@pytest.fixture
def acme_dir(tailor_base, metadata_data, resume_data) -> Path:
    """Company folder with only the required files."""
    company = tailor_base / "acme"
    write_yaml(company / "metadata.yaml", metadata_data)
    write_yaml(company / "resume.yaml", {"resume": resume_data})
    return company


@pytest.fixture
def acme_full_dir(acme_dir, job_analysis_data, cover_letter_data) -> Path:
    """Company folder with every file present."""
    write_yaml(acme_dir / "job_analysis.yaml", {"job_analysis": job_analysis_data})
    write_yaml(acme_dir / "cover_letter.yaml", {"cover_letter": cover_letter_data})
    return acme_dir


@pytest.fixture
def application_data(metadata_data, resume_data, job_analysis_data, cover_letter_data):
    from resume_manager.models import ApplicationData

    return ApplicationData.model_validate(
        {
            "metadata": metadata_data,
            "resume": resume_data,
            "job_analysis": job_analysis_data,
            "cover_letter": cover_letter_data,
        }
    )
