"""Repository for User records."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.db.models.user import UserRow
from projecthub.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, UserRow)

    async def get(self, user_id: str) -> UserRow | None:
        return await self.get_by_id("id", user_id)

    async def get_many(self, user_ids: list[str]) -> list[UserRow]:
        ids = {user_id for user_id in user_ids if user_id}
        if not ids:
            return []
        stmt = select(UserRow).where(UserRow.id.in_(sorted(ids)))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update_last_login(self, user: UserRow) -> None:
        user.last_login = datetime.now(timezone.utc)
        await self.session.flush()

    async def search_by_name(self, term: str, limit: int = 20) -> list[UserRow]:
        stmt = (
            select(UserRow)
            .where(UserRow.name.icontains(term, autoescape=True))
            .order_by(UserRow.name)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
