"""Activity feed route."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.dependencies import get_current_user_id, get_db
from projecthub.services.activity_feed import get_activity_feed

router = APIRouter(tags=["Activity"])


@router.get("/activity")
async def activity_feed(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> dict:
    items = await get_activity_feed(db, user_id)
    return {"activity": [item.to_api() for item in items]}
