"""Company folder, file and schema validation."""

from resume_manager.validation.company_validation import (
    validate_company_path,
    validate_file_paths_exists,
)
from resume_manager.validation.path_resolution import (
    resolve_and_validate_path,
    resolve_path_string,
    validate_mutually_exclusive_options,
    validate_path_exists,
)
from resume_manager.validation.pipeline import (
    validate_tailor_files_pipeline,
    validate_yaml_files_against_schemas_pipeline,
)
from resume_manager.validation.types import (
    FileToValidate,
    FileToValidateWithYamlData,
    PathResolutionInput,
    ResolvedPath,
)

__all__ = [
    "FileToValidate",
    "FileToValidateWithYamlData",
    "PathResolutionInput",
    "ResolvedPath",
    "resolve_and_validate_path",
    "resolve_path_string",
    "validate_company_path",
    "validate_file_paths_exists",
    "validate_mutually_exclusive_options",
    "validate_path_exists",
    "validate_tailor_files_pipeline",
    "validate_yaml_files_against_schemas_pipeline",
]
