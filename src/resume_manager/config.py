"""Application configuration loaded from config.yaml, plus the company file set."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from pydantic import BaseModel

from resume_manager.models import CoverLetter, JobAnalysis, Metadata, Resume

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DOCUMENT_TYPES = ("resume", "cover-letter", "both")


@dataclass(frozen=True)
class PathsConfig:
    tailor_base: str = "resume-data/tailor"
    output_dir: str = "tmp"
    context_file: str = ".claude/tailor-context.yaml"
    generated_data: str = "generated/application.json"

    def __post_init__(self) -> None:
        for name in ("tailor_base", "output_dir", "context_file", "generated_data"):
            if not getattr(self, name).strip():
                raise ValueError(f"paths.{name} must not be empty")


@dataclass(frozen=True)
class RenderConfig:
    default_doc_type: str = "both"

    def __post_init__(self) -> None:
        if self.default_doc_type not in DOCUMENT_TYPES:
            raise ValueError(
                f"render.default_doc_type must be one of {', '.join(DOCUMENT_TYPES)}"
            )


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"

    def __post_init__(self) -> None:
        if self.level.upper() not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")


@dataclass(frozen=True)
class HistoryConfig:
    enabled: bool = True
    db_path: str = "~/.resume-manager/history.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    paths: PathsConfig = field(default_factory=PathsConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults.

    ``LOG_LEVEL`` in the environment overrides ``logging.level``.
    """
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    logging_raw = dict(raw.get("logging", {}))
    if os.environ.get("LOG_LEVEL"):
        logging_raw["level"] = os.environ["LOG_LEVEL"]

    return AppConfig(
        paths=PathsConfig(**raw.get("paths", {})),
        render=RenderConfig(**raw.get("render", {})),
        logging=LoggingConfig(**logging_raw),
        history=HistoryConfig(**raw.get("history", {})),
    )


# --- Company folder structure ---


@dataclass(frozen=True)
class CompanyFile:
    """One YAML document expected in a company folder."""

    key: str
    file_name: str
    schema: type[BaseModel]
    wrapper_key: str | None
    display_name: str
    required: bool = True


COMPANY_FILES: tuple[CompanyFile, ...] = (
    CompanyFile("METADATA", "metadata.yaml", Metadata, None, "Metadata"),
    CompanyFile("JOB_ANALYSIS", "job_analysis.yaml", JobAnalysis, "job_analysis", "Job analysis", required=False),
    CompanyFile("RESUME", "resume.yaml", Resume, "resume", "Resume"),
    CompanyFile("COVER_LETTER", "cover_letter.yaml", CoverLetter, "cover_letter", "Cover letter", required=False),
)
