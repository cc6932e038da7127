"""Pydantic models for users and session exchange."""

from datetime import datetime

from pydantic import Field

from projecthub.models.common import CamelModel

GUEST_USER_NAME = "Guest User"
UNKNOWN_USER_NAME = "Unknown User"


# ── Request models ─────────────────────────────────────────────────────────────

class SessionCreate(CamelModel):
    id_token: str = Field(min_length=1)


class UserSettingsUpdate(CamelModel):
    """Profile fields a user may change from the settings page; ``None`` leaves a field as is."""

    name: str
    bio: str | None = None
    avatar_url: str | None = None
    interests: list[str] | None = None


# ── Response models ────────────────────────────────────────────────────────────

class User(CamelModel):
    id: str
    name: str
    email: str | None = None
    avatar_url: str = ""
    bio: str | None = None
    interests: list[str] = Field(default_factory=list)
    onboarded: bool = False
    last_login: datetime | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}

    @classmethod
    def placeholder(cls, user_id: str) -> "User":
        """Stand-in for a team member whose user record no longer exists."""
        return cls(id=user_id, name=UNKNOWN_USER_NAME, email="")
