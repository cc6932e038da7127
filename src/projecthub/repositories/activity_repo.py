"""Repository for activity log records."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.db.models.activity import ActivityRow
from projecthub.repositories.base import BaseRepository


class ActivityRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ActivityRow)

    async def list_for_actor(self, actor_id: str, limit: int = 50) -> list[ActivityRow]:
        stmt = (
            select(ActivityRow)
            .where(ActivityRow.actor_id == actor_id)
            .order_by(ActivityRow.timestamp.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
