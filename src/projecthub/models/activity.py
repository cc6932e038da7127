"""Pydantic models for the activity log and the hydrated activity feed."""

from datetime import datetime
from typing import Any

from pydantic import Field

from projecthub.models.common import CamelModel
from projecthub.models.enums import ActivityType
from projecthub.models.project import Project
from projecthub.models.user import User


class Activity(CamelModel):
    """A raw activity record as stored: ids only."""

    id: str
    actor_id: str
    type: ActivityType
    project_id: str | None = None
    context: dict[str, Any] = Field(default_factory=dict)
    timestamp: Any = None


class HydratedActivityItem(CamelModel):
    """An activity with its actor and project resolved, ready for display."""

    id: str
    actor: User
    type: ActivityType
    timestamp: datetime
    project: Project | None = None
    context: dict[str, Any] = Field(default_factory=dict)
