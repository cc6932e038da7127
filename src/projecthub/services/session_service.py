"""Session cookie exchange.

The identity provider signs users in on the client and hands us a short-lived
ID token. We verify it, make sure a user record exists, and issue our own
long-lived session token which travels in an httpOnly cookie.
"""

import logging
import time
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.config import settings
from projecthub.db.models.user import UserRow
from projecthub.errors.exceptions import AuthenticationError
from projecthub.models.user import GUEST_USER_NAME
from projecthub.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

SESSION_TOKEN_TYPE = "session"


def verify_id_token(id_token: str) -> dict:
    """Decode and verify an identity provider ID token, or raise AuthenticationError."""
    try:
        claims = jwt.decode(
            id_token,
            settings.identity_token_secret,
            algorithms=[settings.identity_token_algorithm],
            audience=settings.identity_token_audience,
            issuer=settings.identity_token_issuer,
        )
    except JWTError as exc:
        logger.debug("ID token verification failed: %s", exc)
        raise AuthenticationError(f"Invalid ID token: {exc}") from exc

    if not claims.get("sub"):
        raise AuthenticationError("Invalid ID token: missing subject")
    return claims


def check_recent_sign_in(claims: dict, now: float | None = None) -> None:
    """Only exchange tokens from a sign-in that happened in the last few minutes."""
    now = time.time() if now is None else now
    auth_time = claims.get("auth_time")
    if auth_time is None or now - float(auth_time) > settings.max_sign_in_age_seconds:
        raise AuthenticationError("Recent sign-in required")


def issue_session_token(user_id: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "iat": now,
        "exp": now + timedelta(seconds=settings.session_max_age_seconds),
        "type": SESSION_TOKEN_TYPE,
    }
    return jwt.encode(payload, settings.session_secret, algorithm=settings.session_algorithm)


def decode_session_token(token: str) -> dict | None:
    """Return the session claims, or None if the token is invalid, expired or not a session token."""
    try:
        payload = jwt.decode(token, settings.session_secret, algorithms=[settings.session_algorithm])
    except JWTError as exc:
        logger.debug("Session token rejected: %s", exc)
        return None
    if payload.get("type") != SESSION_TOKEN_TYPE or not payload.get("sub"):
        return None
    return payload


async def get_or_create_user(session: AsyncSession, user_id: str, claims: dict | None = None) -> UserRow:
    """Return the user, creating a guest record on first sign-in."""
    repo = UserRepository(session)
    user = await repo.get(user_id)
    if user is not None:
        return user

    claims = claims or {}
    logger.info("No user record for %s, creating guest user", user_id)
    return await repo.create(
        id=user_id,
        name=GUEST_USER_NAME,
        email=claims.get("email") or f"{user_id}@example.com",
        avatar_url=claims.get("picture", ""),
        interests=[],
        onboarded=False,
    )


async def create_session(session: AsyncSession, id_token: str) -> tuple[UserRow, str]:
    """Exchange an ID token for (user, session token)."""
    claims = verify_id_token(id_token)
    check_recent_sign_in(claims)

    user = await get_or_create_user(session, claims["sub"], claims)
    await UserRepository(session).update_last_login(user)
    return user, issue_session_token(user.id)
