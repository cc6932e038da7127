"""Pydantic models for persisted projects and their team members."""

from datetime import datetime

from pydantic import Field

from projecthub.models.common import CamelModel
from projecthub.models.enums import MemberRole, ProjectStatus
from projecthub.models.governance import GovernanceSplit
from projecthub.models.tag import NormalizedTag
from projecthub.models.user import User


class ProjectMemberInput(CamelModel):
    """A team member as submitted with a draft; ``role`` is checked by the engine."""

    user_id: str
    role: str


class ProjectMember(CamelModel):
    user_id: str
    role: MemberRole
    pending_role: MemberRole | None = None


class HydratedProjectMember(ProjectMember):
    user: User


class Project(CamelModel):
    id: str
    name: str
    tagline: str
    description: str
    contribution_needs: str
    photo_url: str | None = None
    status: ProjectStatus = ProjectStatus.DRAFT
    timeline: str = "TBD"
    progress: int = 0
    votes: int = 0
    tags: list[NormalizedTag] = Field(default_factory=list)
    team: list[ProjectMember] = Field(default_factory=list)
    governance: GovernanceSplit | None = None
    owner_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class HydratedProject(Project):
    team: list[HydratedProjectMember] = Field(default_factory=list)


class RoleApplication(CamelModel):
    role: MemberRole


class RoleDecision(CamelModel):
    user_id: str
