"""Global tag routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.dependencies import get_current_user_id, get_db
from projecthub.models.tag import GlobalTag, TagUpsert
from projecthub.repositories.tag_repo import TagRepository
from projecthub.services.tag_service import TagService

router = APIRouter(tags=["Tags"])


@router.get("/tags")
async def list_tags(db: AsyncSession = Depends(get_db)) -> list[dict]:
    rows = await TagRepository(db).list_ordered()
    return [GlobalTag.model_validate(row).to_api() for row in rows]


@router.post("/tags")
async def upsert_tag(
    body: TagUpsert,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> dict:
    row = await TagService(db).upsert(body.id, body.display, created_by=user_id)
    await db.commit()
    return GlobalTag.model_validate(row).to_api()
