"""Tests for the document schemas."""

import pytest
from pydantic import ValidationError

from resume_manager.models import (
    ApplicationData,
    CoverLetter,
    JobAnalysis,
    Metadata,
    Resume,
    TailorContext,
)


class TestResume:
    def test_valid(self, resume_data):
        resume = Resume.model_validate(resume_data)
        assert resume.contact.email == "jane@example.com"
        assert resume.professional_experience[0].linkedin is None

    def test_bad_email(self, resume_data):
        resume_data["contact"]["email"] = "not-an-email"
        with pytest.raises(ValidationError, match="contact.email"):
            Resume.model_validate(resume_data)

    def test_bad_url(self, resume_data):
        resume_data["contact"]["github"] = "github.com/janedoe"
        with pytest.raises(ValidationError, match="contact.github"):
            Resume.model_validate(resume_data)

    def test_education_required(self, resume_data):
        resume_data["education"] = []
        with pytest.raises(ValidationError):
            Resume.model_validate(resume_data)

    def test_empty_string_rejected(self, resume_data):
        resume_data["title"] = ""
        with pytest.raises(ValidationError):
            Resume.model_validate(resume_data)


class TestJobAnalysis:
    def test_valid(self, job_analysis_data):
        job = JobAnalysis.model_validate(job_analysis_data)
        assert job.requirements.must_have_skills[0].skill == "Python"

    def test_weights_must_sum_to_one(self, job_analysis_data):
        job_analysis_data["job_focus"][1]["weight"] = 0.2
        with pytest.raises(ValidationError, match="sum to 1.0"):
            JobAnalysis.model_validate(job_analysis_data)

    def test_weights_within_tolerance(self, job_analysis_data):
        job_analysis_data["job_focus"][0]["weight"] = 0.7004
        JobAnalysis.model_validate(job_analysis_data)

    def test_unknown_specialty(self, job_analysis_data):
        job_analysis_data["job_focus"][0]["specialties"] = ["cobol"]
        with pytest.raises(ValidationError):
            JobAnalysis.model_validate(job_analysis_data)

    def test_job_focus_not_empty(self, job_analysis_data):
        job_analysis_data["job_focus"] = []
        with pytest.raises(ValidationError):
            JobAnalysis.model_validate(job_analysis_data)


class TestCoverLetter:
    def test_valid(self, cover_letter_data):
        letter = CoverLetter.model_validate(cover_letter_data)
        assert letter.content.body == ["I build reliable backend systems."]

    def test_body_required(self, cover_letter_data):
        cover_letter_data["content"]["body"] = []
        with pytest.raises(ValidationError):
            CoverLetter.model_validate(cover_letter_data)


class TestMetadata:
    def test_active_template_optional(self, metadata_data):
        assert Metadata.model_validate(metadata_data).active_template is None

    def test_active_template_not_empty(self, metadata_data):
        metadata_data["active_template"] = ""
        with pytest.raises(ValidationError):
            Metadata.model_validate(metadata_data)


class TestApplicationData:
    def test_all_optional(self):
        data = ApplicationData()
        assert data.metadata is None and data.resume is None

    def test_company_mismatch(self, metadata_data, job_analysis_data):
        job_analysis_data["company"] = "Globex"
        with pytest.raises(ValidationError, match="disagree on the company name"):
            ApplicationData.model_validate(
                {"metadata": metadata_data, "job_analysis": job_analysis_data}
            )


def test_tailor_context_summary_length():
    with pytest.raises(ValidationError):
        TailorContext(
            active_company="acme",
            company="Acme",
            active_template="modern",
            folder_path="resume-data/tailor/acme",
            available_files=[],
            position="Engineer",
            primary_focus="engineer",
            job_summary="x" * 101,
            last_updated="2025-01-01T00:00:00Z",
        )
