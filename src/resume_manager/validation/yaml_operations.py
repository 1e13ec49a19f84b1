"""Load company YAML files and validate them against their pydantic schemas."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from resume_manager.utils.result import Err, Ok, Result, chain, map_results, try_catch
from resume_manager.validation.types import FileToValidate, FileToValidateWithYamlData

logger = logging.getLogger(__name__)

_MAX_RECEIVED_LENGTH = 60


def format_validation_error(error: ValidationError) -> str:
    """One ``  - field.path: message (received: value)`` line per issue."""
    lines = []
    for issue in error.errors():
        path = ".".join(str(part) for part in issue["loc"]) or "root"
        line = f"  - {path}: {issue['msg']}"
        if issue["type"] != "missing" and "input" in issue:
            received = repr(issue["input"])
            if len(received) > _MAX_RECEIVED_LENGTH:
                received = received[: _MAX_RECEIVED_LENGTH - 3] + "..."
            line += f" (received: {received})"
        lines.append(line)
    return "\n".join(lines)


def read_yaml(path: Path) -> Result[Any]:
    """Read and parse one YAML file; errors carry the file path."""
    result = chain(
        try_catch(lambda: path.read_text(encoding="utf-8"), f"Failed to read {path}"),
        lambda content: try_catch(lambda: yaml.safe_load(content), "Invalid YAML"),
    )
    if isinstance(result, Err):
        return dataclasses.replace(result, file_path=str(path))
    return result


def validate_schema(
    schema: type[BaseModel], data: Any, name: str, file_path: Path
) -> Result[BaseModel]:
    try:
        return Ok(schema.model_validate(data))
    except ValidationError as e:
        return Err(
            error=f"{name} validation failed",
            details=format_validation_error(e),
            original_error=e,
            file_path=str(file_path),
        )


def extract_payload(raw: Any, wrapper_key: str | None) -> Any:
    """Unwrap ``{wrapper_key: payload}``; documents without the key are used whole."""
    if wrapper_key and isinstance(raw, dict) and raw.get(wrapper_key) is not None:
        return raw[wrapper_key]
    return raw


def load_yaml_files_from_path(
    paths_to_validate: list[FileToValidate],
) -> Result[list[FileToValidateWithYamlData]]:
    def _load(file: FileToValidate) -> Result[FileToValidateWithYamlData]:
        logger.debug("Loading %s", file.path)
        return chain(
            read_yaml(file.path),
            lambda raw: Ok(
                FileToValidateWithYamlData(
                    **_fields(file), data=extract_payload(raw, file.wrapper_key)
                )
            ),
        )

    return map_results(paths_to_validate, _load)


def validate_yaml_files_against_schema(
    files_to_validate: list[FileToValidateWithYamlData],
) -> Result[list[FileToValidateWithYamlData]]:
    """Validate each payload in turn; the first invalid file stops the run."""

    def _validate(file: FileToValidateWithYamlData) -> Result[FileToValidateWithYamlData]:
        return chain(
            validate_schema(file.schema, file.data, file.file_name, file.path),
            lambda model: Ok(dataclasses.replace(file, data=model)),
        )

    return map_results(files_to_validate, _validate)


def _fields(file: FileToValidate) -> dict[str, Any]:
    return {f.name: getattr(file, f.name) for f in dataclasses.fields(FileToValidate)}
