"""User profiles: settings updates and lookup for team pickers."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.db.models.user import UserRow
from projecthub.errors.exceptions import NotFoundError, ValidationError
from projecthub.models.enums import ActivityType
from projecthub.models.user import UserSettingsUpdate
from projecthub.repositories.user_repo import UserRepository
from projecthub.services.activity_feed import record_activity

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = UserRepository(session)

    async def get(self, user_id: str) -> UserRow:
        row = await self.repo.get(user_id)
        if row is None:
            raise NotFoundError("User", user_id)
        return row

    async def search(self, term: str) -> list[UserRow]:
        term = term.strip()
        if not term:
            return []
        return await self.repo.search_by_name(term)

    async def get_many(self, user_ids: list[str]) -> list[UserRow]:
        rows = {row.id: row for row in await self.repo.get_many(user_ids)}
        return [rows[user_id] for user_id in dict.fromkeys(user_ids) if user_id in rows]

    async def update_settings(self, user_id: str, changes: UserSettingsUpdate) -> UserRow:
        name = changes.name.strip()
        if not name:
            raise ValidationError(
                "Invalid data provided",
                details=[{"path": "name", "message": "Name is required."}],
            )

        fields = {"name": name}
        if changes.bio is not None:
            fields["bio"] = changes.bio.strip()
        if changes.avatar_url:
            fields["avatar_url"] = changes.avatar_url.strip()
        if changes.interests is not None:
            fields["interests"] = [item.strip() for item in changes.interests if item.strip()]

        row = await self.get(user_id)
        await self.repo.update(row, **fields)
        await record_activity(
            self.session,
            user_id,
            ActivityType.PROFILE_UPDATED,
            context={"updatedFields": sorted(fields)},
        )
        logger.info("Profile of %s updated (%s)", user_id, ", ".join(sorted(fields)))
        return row
