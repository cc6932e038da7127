"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from projecthub.errors.exceptions import AuthenticationError


async def get_db(request: Request) -> AsyncGenerator:
    """Yield a database session from the app's session factory."""
    session_factory = request.app.state.db_session_factory
    async with session_factory() as session:
        yield session


async def get_current_user(request: Request) -> dict:
    """Return the session user dict or raise 401."""
    user = getattr(request.state, "user", None) or {}
    if not user.get("sub"):
        raise AuthenticationError("Authentication required")
    return user


def get_current_user_id(user: dict = Depends(get_current_user)) -> str:
    return user["sub"]
