"""Data carried between the validation pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel


@dataclass(frozen=True)
class FileToValidate:
    """A YAML file to load and check against ``schema``.

    ``wrapper_key`` names the top-level key holding the payload; ``None`` means the
    whole document is the payload.
    """

    file_name: str
    path: Path
    schema: type[BaseModel]
    wrapper_key: str | None


@dataclass(frozen=True)
class FileToValidateWithYamlData(FileToValidate):
    data: Any


@dataclass(frozen=True)
class PathResolutionInput:
    """Company identification: exactly one of the two must be set."""

    company_name: str | None = None
    custom_path: str | None = None


@dataclass(frozen=True)
class ResolvedPath:
    path: Path
    company_name: str


@dataclass(frozen=True)
class ValidatedFile:
    file_name: str
    display_name: str


@dataclass(frozen=True)
class ValidationReport:
    path: Path
    validated_files: list[ValidatedFile]
