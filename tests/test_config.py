"""Tests for config loading and the company file set."""

import pytest

from resume_manager.config import (
    COMPANY_FILES,
    AppConfig,
    HistoryConfig,
    PathsConfig,
    load_config,
)
from resume_manager.models import CoverLetter, Resume


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.paths.tailor_base == "resume-data/tailor"
        assert config.paths.output_dir == "tmp"
        assert config.render.default_doc_type == "both"
        assert config.logging.level == "INFO"
        assert config.history.enabled is True

    def test_load_config_defaults(self, tmp_path, monkeypatch):
        """Loading from non-existent path returns defaults."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config == AppConfig()

    def test_load_config_from_yaml(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            "paths:\n  output_dir: build/pdf\nrender:\n  default_doc_type: resume\n"
        )
        config = load_config(yaml_path)
        assert config.paths.output_dir == "build/pdf"
        assert config.render.default_doc_type == "resume"
        # Defaults for unspecified
        assert config.paths.tailor_base == "resume-data/tailor"

    def test_log_level_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("logging:\n  level: WARNING\n")
        assert load_config(yaml_path).logging.level == "DEBUG"

    def test_history_resolved_path(self):
        history = HistoryConfig(db_path="~/test.db")
        assert "~" not in str(history.resolved_db_path)

    def test_frozen_config(self):
        config = PathsConfig()
        with pytest.raises(AttributeError):
            config.output_dir = "changed"


class TestConfigValidation:
    def test_invalid_doc_type(self, tmp_path):
        yaml_path = tmp_path / "bad.yaml"
        yaml_path.write_text("render:\n  default_doc_type: portfolio\n")
        with pytest.raises(ValueError, match="default_doc_type"):
            load_config(yaml_path)

    def test_invalid_log_level(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        yaml_path = tmp_path / "bad.yaml"
        yaml_path.write_text("logging:\n  level: LOUD\n")
        with pytest.raises(ValueError, match="logging.level"):
            load_config(yaml_path)

    def test_empty_path(self, tmp_path):
        yaml_path = tmp_path / "bad.yaml"
        yaml_path.write_text("paths:\n  tailor_base: '  '\n")
        with pytest.raises(ValueError, match="paths.tailor_base"):
            load_config(yaml_path)


class TestCompanyFiles:
    def test_file_set(self):
        assert [f.file_name for f in COMPANY_FILES] == [
            "metadata.yaml",
            "job_analysis.yaml",
            "resume.yaml",
            "cover_letter.yaml",
        ]

    def test_required_and_wrappers(self):
        by_key = {f.key: f for f in COMPANY_FILES}
        assert by_key["METADATA"].wrapper_key is None
        assert by_key["METADATA"].required
        assert by_key["RESUME"].wrapper_key == "resume"
        assert by_key["RESUME"].schema is Resume
        assert not by_key["JOB_ANALYSIS"].required
        assert not by_key["COVER_LETTER"].required
        assert by_key["COVER_LETTER"].schema is CoverLetter
