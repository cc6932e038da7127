"""Field and cross-field rules for project drafts.

Every rule is a pure function returning a (possibly empty) list of
``FieldError``; rules never raise for bad user input and never stop at the
first violation.
"""

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from projecthub.models.enums import MemberRole, TagRole
from projecthub.models.governance import GOVERNANCE_TOTAL, GovernanceSplit
from projecthub.models.project import ProjectMemberInput
from projecthub.models.tag import MAX_CATEGORY_TAGS, MAX_TAG_LENGTH, ProjectTag
from projecthub.validation.schemas import ErrorCode, FieldError, ProjectDraft

TOO_MANY_CATEGORY_TAGS_MESSAGE = f"A project can have a maximum of {MAX_CATEGORY_TAGS} category tags."
GOVERNANCE_SUM_MESSAGE = f"The sum of all governance shares must be exactly {GOVERNANCE_TOTAL}%."

REQUIRED_TEXT_FIELDS = (
    ("name", "Project name is required."),
    ("tagline", "Tagline is required."),
    ("description", "Description is required."),
    ("contribution_needs", "Contribution needs are required."),
)

_TAG_ROLES = frozenset(role.value for role in TagRole)
_MEMBER_ROLES = frozenset(role.value for role in MemberRole)
_TAG_ROLE_CHOICES = ", ".join(TagRole)
_MEMBER_ROLE_CHOICES = ", ".join(MemberRole)
_url_adapter = TypeAdapter(AnyUrl)


def field_path(*parts: str | int) -> str:
    """Join path segments the way the web client names its form fields."""
    return ".".join(to_camel(part) if isinstance(part, str) else str(part) for part in parts)


def is_absolute_url(value: str) -> bool:
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return True


# --- Structural rules ---

def check_required_text(draft: ProjectDraft) -> list[FieldError]:
    errors = []
    for name, message in REQUIRED_TEXT_FIELDS:
        if not getattr(draft, name).strip():
            errors.append(FieldError(path=field_path(name), code=ErrorCode.REQUIRED_FIELD_EMPTY, message=message))
    return errors


def check_photo_url(photo_url: str | None) -> list[FieldError]:
    value = (photo_url or "").strip()
    if value and not is_absolute_url(value):
        return [
            FieldError(
                path=field_path("photo_url"),
                code=ErrorCode.INVALID_URL,
                message="Photo URL must be a valid URL.",
            )
        ]
    return []


def _check_tag_text(value: str, path: str, label: str) -> list[FieldError]:
    if not value.strip():
        return [FieldError(path=path, code=ErrorCode.REQUIRED_FIELD_EMPTY, message=f"{label} is required.")]
    if len(value) > MAX_TAG_LENGTH:
        return [
            FieldError(
                path=path,
                code=ErrorCode.FIELD_TOO_LONG,
                message=f"{label} must be at most {MAX_TAG_LENGTH} characters.",
            )
        ]
    return []


def check_tags(tags: list[ProjectTag]) -> list[FieldError]:
    errors = []
    for index, tag in enumerate(tags):
        # ids pass through unchanged, labels are trimmed on success
        errors += _check_tag_text(tag.id, field_path("tags", index, "id"), "Tag id")
        errors += _check_tag_text(tag.display.strip(), field_path("tags", index, "display"), "Tag label")
        if tag.role not in _TAG_ROLES:
            errors.append(
                FieldError(
                    path=field_path("tags", index, "role"),
                    code=ErrorCode.INVALID_ENUM_VALUE,
                    message=f"Tag role must be one of: {_TAG_ROLE_CHOICES}.",
                )
            )
    return errors


def check_team(team: list[ProjectMemberInput]) -> list[FieldError]:
    errors = []
    for index, member in enumerate(team):
        if not member.user_id.strip():
            errors.append(
                FieldError(
                    path=field_path("team", index, "user_id"),
                    code=ErrorCode.REQUIRED_FIELD_EMPTY,
                    message="Member user id is required.",
                )
            )
        if member.role not in _MEMBER_ROLES:
            errors.append(
                FieldError(
                    path=field_path("team", index, "role"),
                    code=ErrorCode.INVALID_ENUM_VALUE,
                    message=f"Member role must be one of: {_MEMBER_ROLE_CHOICES}.",
                )
            )
    return errors


def check_project_id(project_id: str | None) -> list[FieldError]:
    if not (project_id or "").strip():
        return [FieldError(path=field_path("id"), code=ErrorCode.REQUIRED_FIELD_EMPTY, message="Project id is required.")]
    return []


def check_timeline(timeline: str | None) -> list[FieldError]:
    """An omitted timeline keeps the stored one; a submitted one must not be blank."""
    if timeline is not None and not timeline.strip():
        return [FieldError(path=field_path("timeline"), code=ErrorCode.REQUIRED_FIELD_EMPTY, message="Timeline is required.")]
    return []


def check_governance_shares(governance: GovernanceSplit | None) -> list[FieldError]:
    if governance is None:
        return []
    return [
        FieldError(
            path=field_path("governance", name),
            code=ErrorCode.SHARE_OUT_OF_RANGE,
            message=f"Each governance share must be between 0 and {GOVERNANCE_TOTAL}.",
        )
        for name, share in governance.model_dump().items()
        if not 0 <= share <= GOVERNANCE_TOTAL
    ]


# --- Cross-field rules ---

def check_category_tag_limit(tags: list[ProjectTag]) -> list[FieldError]:
    category_count = sum(1 for tag in tags if tag.role == TagRole.CATEGORY)
    if category_count > MAX_CATEGORY_TAGS:
        return [
            FieldError(
                path=field_path("tags"),
                code=ErrorCode.TOO_MANY_CATEGORY_TAGS,
                message=TOO_MANY_CATEGORY_TAGS_MESSAGE,
            )
        ]
    return []


def check_governance_sum(governance: GovernanceSplit | None) -> list[FieldError]:
    """An absent split is "not yet defined" and is never an error."""
    if governance is None or governance.total() == GOVERNANCE_TOTAL:
        return []
    return [
        FieldError(
            path=field_path("governance"),
            code=ErrorCode.GOVERNANCE_SUM_INVALID,
            message=GOVERNANCE_SUM_MESSAGE,
        )
    ]


def cross_field_errors(draft: ProjectDraft, *, include_governance: bool) -> list[FieldError]:
    """Cross-field rules shared by the create and edit validators."""
    errors = check_category_tag_limit(draft.tags)
    if include_governance:
        errors += check_governance_sum(draft.governance)
    return errors
