"""Project repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.db.models.project import ProjectRow
from projecthub.repositories.base import BaseRepository


class ProjectRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ProjectRow)

    async def get(self, project_id: str) -> ProjectRow | None:
        return await self.get_by_id("id", project_id)

    async def list_by_status(self, status: str) -> list[ProjectRow]:
        stmt = (
            select(ProjectRow)
            .where(ProjectRow.status == status)
            .order_by(ProjectRow.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_drafts_for_owner(self, owner_id: str) -> list[ProjectRow]:
        stmt = (
            select(ProjectRow)
            .where(ProjectRow.status == "draft", ProjectRow.owner_id == owner_id)
            .order_by(ProjectRow.updated_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_many(self, project_ids: list[str]) -> list[ProjectRow]:
        if not project_ids:
            return []
        stmt = select(ProjectRow).where(ProjectRow.id.in_(sorted(set(project_ids))))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
