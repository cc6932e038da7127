"""Project API routes: validation, create/edit, listing and role applications."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.dependencies import get_current_user_id, get_db
from projecthub.models.enums import ProjectStatus, ValidationMode
from projecthub.models.project import RoleApplication, RoleDecision
from projecthub.services.project_service import ProjectService
from projecthub.validation import ProjectDraft, validate

router = APIRouter(tags=["Projects"])


@router.post("/projects/validate")
async def validate_project_draft(
    draft: ProjectDraft,
    mode: ValidationMode = Query(ValidationMode.CREATE),
) -> dict:
    """Validate a draft for form feedback. Nothing is stored and no tags are created."""
    return validate(draft, mode).to_api()


@router.post("/projects", status_code=201)
async def create_project(
    draft: ProjectDraft,
    status: ProjectStatus = Query(ProjectStatus.DRAFT),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> dict:
    project = await ProjectService(db).create(draft, owner_id=user_id, status=status)
    await db.commit()
    return project.to_api()


@router.get("/projects")
async def list_projects(db: AsyncSession = Depends(get_db)) -> list[dict]:
    projects = await ProjectService(db).list_published()
    return [project.to_api() for project in projects]


@router.get("/projects/drafts")
async def list_drafts(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> list[dict]:
    projects = await ProjectService(db).list_drafts(user_id)
    return [project.to_api() for project in projects]


@router.get("/projects/{project_id}")
async def get_project(project_id: str, db: AsyncSession = Depends(get_db)) -> dict:
    project = await ProjectService(db).get(project_id)
    return project.to_api()


@router.put("/projects/{project_id}")
async def update_project(
    project_id: str,
    draft: ProjectDraft,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> dict:
    project = await ProjectService(db).update(project_id, draft, editor_id=user_id)
    await db.commit()
    return project.to_api()


@router.post("/projects/{project_id}/roles/apply")
async def apply_for_role(
    project_id: str,
    body: RoleApplication,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> dict:
    project = await ProjectService(db).apply_for_role(project_id, user_id, body.role)
    await db.commit()
    return {
        "message": "Your application has been submitted and is pending approval.",
        "project": project.to_api(),
    }


@router.post("/projects/{project_id}/roles/approve")
async def approve_role_application(
    project_id: str,
    body: RoleDecision,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> dict:
    project = await ProjectService(db).approve_role(project_id, lead_id=user_id, user_id=body.user_id)
    await db.commit()
    return {"message": "Role application approved.", "project": project.to_api()}


@router.post("/projects/{project_id}/roles/deny")
async def deny_role_application(
    project_id: str,
    body: RoleDecision,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> dict:
    project = await ProjectService(db).deny_role(project_id, lead_id=user_id, user_id=body.user_id)
    await db.commit()
    return {"message": "Role application denied.", "project": project.to_api()}
