"""Activity recording and feed hydration."""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.db.models.activity import ActivityRow
from projecthub.models.activity import Activity, HydratedActivityItem
from projecthub.models.enums import ActivityType
from projecthub.models.project import Project
from projecthub.models.user import User
from projecthub.repositories.activity_repo import ActivityRepository
from projecthub.repositories.project_repo import ProjectRepository
from projecthub.repositories.user_repo import UserRepository
from projecthub.services.id_generator import generate_id

logger = logging.getLogger(__name__)


def to_safe_datetime(value: Any) -> datetime:
    """Coerce a stored timestamp of unknown shape into an aware datetime.

    Accepts datetimes (naive ones are taken as UTC), ISO-8601 strings and
    epoch seconds. Anything else is logged and replaced by the current time so
    a bad record never breaks the feed.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
        else:
            return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    logger.warning("Could not parse activity timestamp %r", value)
    return datetime.now(timezone.utc)


def hydrate_activity_item(
    item: Activity,
    users: dict[str, User],
    projects: dict[str, Project],
) -> HydratedActivityItem | None:
    """Resolve an activity's actor and project; ``None`` if the actor is unknown."""
    actor = users.get(item.actor_id)
    if actor is None:
        return None
    project = projects.get(item.project_id) if item.project_id else None
    return HydratedActivityItem(
        id=item.id,
        actor=actor,
        type=item.type,
        timestamp=to_safe_datetime(item.timestamp),
        project=project,
        context=item.context,
    )


def activity_from_row(row: ActivityRow) -> Activity:
    return Activity(
        id=row.id,
        actor_id=row.actor_id,
        type=row.type,
        project_id=row.project_id,
        context=row.context or {},
        timestamp=row.timestamp,
    )


async def record_activity(
    session: AsyncSession,
    actor_id: str,
    activity_type: ActivityType,
    project_id: str | None = None,
    context: dict | None = None,
) -> ActivityRow:
    repo = ActivityRepository(session)
    return await repo.create(
        id=generate_id("act_"),
        actor_id=actor_id,
        type=activity_type,
        project_id=project_id,
        context=context or {},
        timestamp=datetime.now(timezone.utc),
    )


async def get_activity_feed(session: AsyncSession, user_id: str) -> list[HydratedActivityItem]:
    """Return the user's feed, newest first, dropping items that cannot be resolved."""
    from projecthub.services.project_service import project_from_row

    rows = await ActivityRepository(session).list_for_actor(user_id)
    activities = [activity_from_row(row) for row in rows]

    user_rows = await UserRepository(session).get_many([a.actor_id for a in activities])
    project_rows = await ProjectRepository(session).get_many(
        [a.project_id for a in activities if a.project_id]
    )
    users = {row.id: User.model_validate(row) for row in user_rows}
    projects = {row.id: project_from_row(row) for row in project_rows}

    hydrated = [hydrate_activity_item(item, users, projects) for item in activities]
    return [item for item in hydrated if item is not None]
