"""String enums shared across ProjectHub models."""

from enum import StrEnum


class TagRole(StrEnum):
    CATEGORY = "category"
    RELATIONAL = "relational"
    CUSTOM = "custom"


class MemberRole(StrEnum):
    LEAD = "lead"
    CONTRIBUTOR = "contributor"
    PARTICIPANT = "participant"


class ProjectStatus(StrEnum):
    DRAFT = "draft"
    PUBLISHED = "published"


class ActivityType(StrEnum):
    PROJECT_CREATED = "project-created"
    PROJECT_UPDATED = "project-updated"
    ROLE_APPLIED = "role-applied"
    ROLE_APPROVED = "role-approved"
    MODULE_COMPLETED = "module-completed"
    PROFILE_UPDATED = "profile-updated"


class ValidationMode(StrEnum):
    CREATE = "create"
    EDIT = "edit"
