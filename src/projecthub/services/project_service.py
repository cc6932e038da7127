"""Project creation, editing, hydration and role applications.

Request handlers pass raw drafts here; drafts go through the validation
engine first, then their tags through the tag service, and only then is
anything written.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.db.models.project import ProjectRow
from projecthub.errors.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from projecthub.models.enums import ActivityType, MemberRole, ProjectStatus
from projecthub.models.project import HydratedProject, HydratedProjectMember, Project, ProjectMember
from projecthub.models.user import User
from projecthub.repositories.project_repo import ProjectRepository
from projecthub.repositories.user_repo import UserRepository
from projecthub.services.activity_feed import record_activity
from projecthub.services.id_generator import generate_id
from projecthub.services.tag_service import TagService
from projecthub.validation import (
    ProjectDraft,
    ValidationFailure,
    validate_for_create,
    validate_for_edit,
)

logger = logging.getLogger(__name__)


def project_from_row(row: ProjectRow) -> Project:
    return Project(
        id=row.id,
        name=row.name,
        tagline=row.tagline,
        description=row.description,
        contribution_needs=row.contribution_needs,
        photo_url=row.photo_url,
        status=row.status,
        timeline=row.timeline,
        progress=row.progress,
        votes=row.votes,
        tags=row.tags or [],
        team=row.team or [],
        governance=row.governance,
        owner_id=row.owner_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _dump_list(items) -> list[dict]:
    return [item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in items]


def _is_lead(team: list[ProjectMember], user_id: str) -> bool:
    return any(member.user_id == user_id and member.role == MemberRole.LEAD for member in team)


async def hydrate_project(session: AsyncSession, project: Project) -> HydratedProject:
    """Attach user records to team members.

    Duplicate entries for the same user collapse into one (the last entry
    wins, at the first entry's position); members whose user no longer
    exists get a placeholder user.
    """
    unique: dict[str, ProjectMember] = {}
    for member in project.team:
        unique[member.user_id] = member

    rows = await UserRepository(session).get_many(list(unique))
    users = {row.id: User.model_validate(row) for row in rows}

    team = [
        HydratedProjectMember(
            **member.model_dump(),
            user=users.get(user_id) or User.placeholder(user_id),
        )
        for user_id, member in unique.items()
    ]
    return HydratedProject(**project.model_dump(exclude={"team"}), team=team)


def _raise_if_invalid(result) -> None:
    if isinstance(result, ValidationFailure):
        raise ValidationError("Project draft failed validation", details=result.error_details())


class ProjectService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = ProjectRepository(session)
        self.tags = TagService(session)

    async def get_row(self, project_id: str) -> ProjectRow:
        row = await self.repo.get(project_id)
        if row is None:
            raise NotFoundError("Project", project_id)
        return row

    async def get(self, project_id: str) -> HydratedProject:
        row = await self.get_row(project_id)
        return await hydrate_project(self.session, project_from_row(row))

    async def list_published(self) -> list[Project]:
        rows = await self.repo.list_by_status(ProjectStatus.PUBLISHED)
        return [project_from_row(row) for row in rows]

    async def list_drafts(self, owner_id: str) -> list[Project]:
        rows = await self.repo.list_drafts_for_owner(owner_id)
        return [project_from_row(row) for row in rows]

    async def create(self, draft: ProjectDraft, owner_id: str, status: ProjectStatus) -> Project:
        result = validate_for_create(draft)
        _raise_if_invalid(result)
        value = result.value

        tags = await self.tags.normalize_project_tags(value.tags, created_by=owner_id)
        # The creator always leads, whatever role the draft gave them
        team = [member for member in value.team if member.user_id != owner_id]
        team.insert(0, ProjectMember(user_id=owner_id, role=MemberRole.LEAD))

        row = await self.repo.create(
            id=generate_id("proj_"),
            name=value.name,
            tagline=value.tagline,
            description=value.description,
            contribution_needs=value.contribution_needs,
            photo_url=value.photo_url,
            status=status,
            tags=_dump_list(tags),
            team=_dump_list(team),
            governance=None,
            owner_id=owner_id,
        )
        await self.tags.record_usage([tag.id for tag in tags])
        await record_activity(
            self.session, owner_id, ActivityType.PROJECT_CREATED, project_id=row.id, context={"status": status}
        )
        logger.info("Project %s created (%s) by %s", row.id, status, owner_id)
        return project_from_row(row)

    async def update(self, project_id: str, draft: ProjectDraft, editor_id: str) -> Project:
        if not (draft.id or "").strip():
            draft = draft.model_copy(update={"id": project_id})
        elif draft.id.strip() != project_id:
            raise ValidationError(
                "Project id does not match the URL",
                details={"id": draft.id, "expected": project_id},
            )

        row = await self.get_row(project_id)
        current = project_from_row(row)
        if not _is_lead(current.team, editor_id):
            raise AuthorizationError("Only project leads can edit a project")

        result = validate_for_edit(draft)
        _raise_if_invalid(result)
        value = result.value

        # Pending role applications survive an edit of the team list
        pending = {member.user_id: member.pending_role for member in current.team}
        team = [
            member.model_copy(update={"pending_role": pending.get(member.user_id)})
            for member in value.team
        ] or current.team
        if not any(member.role == MemberRole.LEAD for member in team):
            raise ValidationError(
                "A project must keep at least one lead",
                details=[{"path": "team", "message": "A project must keep at least one lead."}],
            )

        previous_tag_ids = {tag.id for tag in current.tags}
        tags = await self.tags.normalize_project_tags(value.tags, created_by=editor_id)

        await self.repo.update(
            row,
            name=value.name,
            tagline=value.tagline,
            description=value.description,
            contribution_needs=value.contribution_needs,
            photo_url=value.photo_url,
            tags=_dump_list(tags),
            team=_dump_list(team),
            governance=value.governance.model_dump(by_alias=True) if value.governance else None,
            timeline=value.timeline or row.timeline,
        )
        await self.tags.record_usage([tag.id for tag in tags if tag.id not in previous_tag_ids])
        await record_activity(self.session, editor_id, ActivityType.PROJECT_UPDATED, project_id=project_id)
        logger.info("Project %s updated by %s", project_id, editor_id)
        return project_from_row(row)

    # --- Role applications ---

    async def _save_team(self, row: ProjectRow, team: list[ProjectMember]) -> Project:
        await self.repo.update(row, team=_dump_list(team))
        return project_from_row(row)

    async def apply_for_role(self, project_id: str, user_id: str, role: MemberRole) -> Project:
        """Mark ``role`` as pending for the user, joining as participant if not yet a member."""
        row = await self.get_row(project_id)
        team = project_from_row(row).team
        for index, member in enumerate(team):
            if member.user_id == user_id:
                if member.role == role:
                    raise ConflictError(f"You already hold the {role} role in this project")
                team[index] = member.model_copy(update={"pending_role": role})
                break
        else:
            team.append(ProjectMember(user_id=user_id, role=MemberRole.PARTICIPANT, pending_role=role))

        project = await self._save_team(row, team)
        await record_activity(
            self.session, user_id, ActivityType.ROLE_APPLIED, project_id=project_id, context={"role": role}
        )
        return project

    async def _decide(self, project_id: str, lead_id: str, user_id: str, approve: bool) -> Project:
        row = await self.get_row(project_id)
        team = project_from_row(row).team
        if not _is_lead(team, lead_id):
            verb = "approve" if approve else "deny"
            raise AuthorizationError(f"Only project leads can {verb} applications")

        for index, member in enumerate(team):
            if member.user_id == user_id and member.pending_role is not None:
                role = member.pending_role if approve else member.role
                team[index] = member.model_copy(update={"role": role, "pending_role": None})
                break
        else:
            raise NotFoundError("Role application", f"{project_id}/{user_id}")

        project = await self._save_team(row, team)
        if approve:
            await record_activity(
                self.session,
                lead_id,
                ActivityType.ROLE_APPROVED,
                project_id=project_id,
                context={"userId": user_id, "role": team[index].role},
            )
        return project

    async def approve_role(self, project_id: str, lead_id: str, user_id: str) -> Project:
        return await self._decide(project_id, lead_id, user_id, approve=True)

    async def deny_role(self, project_id: str, lead_id: str, user_id: str) -> Project:
        return await self._decide(project_id, lead_id, user_id, approve=False)
