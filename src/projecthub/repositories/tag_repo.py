"""Repository for global tag records."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.db.models.tag import TagRow
from projecthub.repositories.base import BaseRepository


class TagRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, TagRow)

    async def get(self, tag_id: str) -> TagRow | None:
        return await self.get_by_id("id", tag_id)

    async def list_ordered(self) -> list[TagRow]:
        stmt = select(TagRow).order_by(TagRow.usage_count.desc(), TagRow.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def increment_usage(self, tag_ids: list[str]) -> None:
        if not tag_ids:
            return
        stmt = (
            update(TagRow)
            .where(TagRow.id.in_(sorted(set(tag_ids))))
            .values(usage_count=TagRow.usage_count + 1)
        )
        await self.session.execute(stmt)
