"""Session exchange routes: sign in with an ID token, sign out, who am I."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.config import settings
from projecthub.dependencies import get_current_user_id, get_db
from projecthub.errors.exceptions import NotFoundError
from projecthub.models.user import SessionCreate, User
from projecthub.repositories.user_repo import UserRepository
from projecthub.services.session_service import create_session

router = APIRouter(tags=["Auth"])


def _clear_session_cookie(response: Response) -> None:
    response.delete_cookie(settings.session_cookie_name, path="/")


@router.post("/auth/session")
async def start_session(
    body: SessionCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> dict:
    user, token = await create_session(db, body.id_token)
    await db.commit()

    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )
    return {"status": "success", "user": User.model_validate(user).to_api()}


@router.delete("/auth/session")
async def end_session(response: Response) -> dict:
    _clear_session_cookie(response)
    return {"status": "success"}


@router.post("/auth/logout")
async def logout(response: Response) -> dict:
    _clear_session_cookie(response)
    return {"status": "success"}


@router.get("/auth/me")
async def current_user(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> dict:
    row = await UserRepository(db).get(user_id)
    if row is None:
        raise NotFoundError("User", user_id)
    return User.model_validate(row).to_api()
