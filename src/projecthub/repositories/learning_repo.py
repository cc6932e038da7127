"""Repositories for learning paths and per-user progress."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.db.models.learning import LearningPathRow, LearningProgressRow
from projecthub.repositories.base import BaseRepository


class LearningPathRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, LearningPathRow)

    async def get(self, path_id: str) -> LearningPathRow | None:
        return await self.get_by_id("path_id", path_id)


class LearningProgressRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, LearningProgressRow)

    async def get(self, user_id: str, path_id: str) -> LearningProgressRow | None:
        stmt = select(LearningProgressRow).where(
            LearningProgressRow.user_id == user_id,
            LearningProgressRow.path_id == path_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: str) -> list[LearningProgressRow]:
        return await self.list_by_field("user_id", user_id)
