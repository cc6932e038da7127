"""Input, error and result shapes of the project validation engine."""

from enum import StrEnum
from typing import Literal

from pydantic import Field

from projecthub.models.common import CamelModel
from projecthub.models.governance import GovernanceSplit
from projecthub.models.project import ProjectMember, ProjectMemberInput
from projecthub.models.tag import NormalizedTag, ProjectTag


class ErrorCode(StrEnum):
    REQUIRED_FIELD_EMPTY = "RequiredFieldEmpty"
    FIELD_TOO_LONG = "FieldTooLong"
    INVALID_URL = "InvalidUrl"
    INVALID_ENUM_VALUE = "InvalidEnumValue"
    TOO_MANY_CATEGORY_TAGS = "TooManyCategoryTags"
    GOVERNANCE_SUM_INVALID = "GovernanceSumInvalid"
    SHARE_OUT_OF_RANGE = "ShareOutOfRange"


class FieldError(CamelModel):
    """One violation, addressed to the form field (or subfield) it belongs to."""

    path: str
    code: ErrorCode
    message: str


class ProjectDraft(CamelModel):
    """Unvalidated project record built from form input at request time."""

    name: str = ""
    tagline: str = ""
    description: str = ""
    contribution_needs: str = ""
    photo_url: str | None = None
    tags: list[ProjectTag] = Field(default_factory=list)
    team: list[ProjectMemberInput] = Field(default_factory=list)
    governance: GovernanceSplit | None = None
    timeline: str | None = None
    id: str | None = None


class NormalizedProject(CamelModel):
    """A draft that passed validation, with every string field trimmed."""

    name: str
    tagline: str
    description: str
    contribution_needs: str
    photo_url: str | None = None
    tags: list[NormalizedTag] = Field(default_factory=list)
    team: list[ProjectMember] = Field(default_factory=list)
    governance: GovernanceSplit | None = None
    timeline: str | None = None
    id: str | None = None


class ValidationSuccess(CamelModel):
    ok: Literal[True] = True
    value: NormalizedProject


class ValidationFailure(CamelModel):
    ok: Literal[False] = False
    errors: list[FieldError]

    def error_details(self) -> list[dict]:
        return [error.to_api() for error in self.errors]


ValidationResult = ValidationSuccess | ValidationFailure
