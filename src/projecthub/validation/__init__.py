"""Project draft validation."""

from projecthub.validation.engine import validate, validate_for_create, validate_for_edit
from projecthub.validation.schemas import (
    ErrorCode,
    FieldError,
    NormalizedProject,
    ProjectDraft,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)

__all__ = [
    "ErrorCode",
    "FieldError",
    "NormalizedProject",
    "ProjectDraft",
    "ValidationFailure",
    "ValidationResult",
    "ValidationSuccess",
    "validate",
    "validate_for_create",
    "validate_for_edit",
]
