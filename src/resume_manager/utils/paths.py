"""Path helpers for company folders."""

from __future__ import annotations

import re
from pathlib import Path

from resume_manager.config import PathsConfig

DEFAULT_TAILOR_BASE = Path(PathsConfig().tailor_base)

_VALID_COMPANY_NAME = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def get_company_path(company_name: str, base_dir: str | Path | None = None) -> Path:
    """resume-data/tailor/<company>"""
    base = Path(base_dir) if base_dir is not None else DEFAULT_TAILOR_BASE
    return base / company_name


def is_valid_company_name(name: str) -> bool:
    """Company folders are lower-case kebab-case, e.g. ``tech-corp``."""
    return bool(_VALID_COMPANY_NAME.match(name))


def normalize_company_name(name: str) -> str:
    """'Tech  Corp' -> 'tech-corp'"""
    return re.sub(r"\s+", "-", name.strip().lower())


def list_companies(base_dir: str | Path | None = None) -> list[str]:
    """Names of the company directories under the tailor base, sorted."""
    base = Path(base_dir) if base_dir is not None else DEFAULT_TAILOR_BASE
    if not base.is_dir():
        return []
    try:
        return sorted(p.name for p in base.iterdir() if p.is_dir())
    except OSError:
        return []
