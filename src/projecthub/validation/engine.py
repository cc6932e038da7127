"""Project validation engine.

``validate_for_create`` and ``validate_for_edit`` check a ``ProjectDraft``
and return either a ``ValidationSuccess`` carrying the normalized project or a
``ValidationFailure`` listing every violation found. Both are pure: no I/O,
no shared state, and the draft is never mutated.
"""

import logging

from projecthub.models.enums import MemberRole, TagRole, ValidationMode
from projecthub.models.project import ProjectMember
from projecthub.models.tag import NormalizedTag
from projecthub.validation import rules
from projecthub.validation.schemas import (
    FieldError,
    NormalizedProject,
    ProjectDraft,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)

logger = logging.getLogger(__name__)


def _structural_errors(draft: ProjectDraft, mode: ValidationMode) -> list[FieldError]:
    errors = rules.check_required_text(draft)
    errors += rules.check_photo_url(draft.photo_url)
    errors += rules.check_tags(draft.tags)
    errors += rules.check_team(draft.team)
    if mode == ValidationMode.EDIT:
        errors += rules.check_project_id(draft.id)
        errors += rules.check_timeline(draft.timeline)
        errors += rules.check_governance_shares(draft.governance)
    return errors


def _normalize(draft: ProjectDraft, mode: ValidationMode) -> NormalizedProject:
    is_edit = mode == ValidationMode.EDIT
    return NormalizedProject(
        name=draft.name.strip(),
        tagline=draft.tagline.strip(),
        description=draft.description.strip(),
        contribution_needs=draft.contribution_needs.strip(),
        photo_url=(draft.photo_url or "").strip() or None,
        tags=[
            NormalizedTag(id=tag.id, display=tag.display.strip(), role=TagRole(tag.role))
            for tag in draft.tags
        ],
        team=[
            ProjectMember(user_id=member.user_id.strip(), role=MemberRole(member.role))
            for member in draft.team
        ],
        governance=draft.governance.model_copy() if is_edit and draft.governance else None,
        timeline=draft.timeline.strip() if is_edit and draft.timeline is not None else None,
        id=draft.id.strip() if is_edit and draft.id else None,
    )


def validate(draft: ProjectDraft, mode: ValidationMode) -> ValidationResult:
    errors = _structural_errors(draft, mode)
    errors += rules.cross_field_errors(draft, include_governance=mode == ValidationMode.EDIT)
    if errors:
        logger.debug("Project draft rejected (%s): %d error(s)", mode, len(errors))
        return ValidationFailure(errors=errors)
    return ValidationSuccess(value=_normalize(draft, mode))


def validate_for_create(draft: ProjectDraft) -> ValidationResult:
    """Validate a draft submitted by the create form (no id, no governance)."""
    return validate(draft, ValidationMode.CREATE)


def validate_for_edit(draft: ProjectDraft) -> ValidationResult:
    """Validate a draft submitted by the edit form; requires ``id``."""
    return validate(draft, ValidationMode.EDIT)
