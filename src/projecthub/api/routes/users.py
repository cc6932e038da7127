"""User lookup and profile settings routes."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.dependencies import get_current_user_id, get_db
from projecthub.models.user import User, UserSettingsUpdate
from projecthub.services.user_service import UserService

router = APIRouter(tags=["Users"])


@router.get("/users")
async def list_users(
    search: str = Query(""),
    ids: list[str] | None = Query(None),
    db: AsyncSession = Depends(get_db),
) -> list[dict]:
    """Find users by name (``search``) or by id (repeated ``ids``)."""
    service = UserService(db)
    rows = await service.get_many(ids) if ids else await service.search(search)
    return [User.model_validate(row).to_api() for row in rows]


@router.patch("/users/me")
async def update_my_settings(
    body: UserSettingsUpdate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> dict:
    row = await UserService(db).update_settings(user_id, body)
    await db.commit()
    return User.model_validate(row).to_api()


@router.get("/users/{user_id}")
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)) -> dict:
    row = await UserService(db).get(user_id)
    return User.model_validate(row).to_api()
