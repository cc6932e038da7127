"""Learning paths and per-user module completion."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.db.models.learning import LearningPathRow
from projecthub.errors.exceptions import NotFoundError, ValidationError
from projecthub.models.enums import ActivityType
from projecthub.models.learning import LearningPath, LearningProgress, ModuleCompletion
from projecthub.repositories.learning_repo import LearningPathRepository, LearningProgressRepository
from projecthub.services.activity_feed import record_activity

logger = logging.getLogger(__name__)


def path_from_row(row: LearningPathRow) -> LearningPath:
    return LearningPath.model_validate(row).with_module_ids()


class LearningService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.paths = LearningPathRepository(session)
        self.progress = LearningProgressRepository(session)

    async def list_paths(self) -> list[LearningPath]:
        rows = await self.paths.list_all()
        return [path_from_row(row) for row in sorted(rows, key=lambda r: r.created_at, reverse=True)]

    async def get_path(self, path_id: str) -> LearningPath:
        row = await self.paths.get(path_id)
        if row is None:
            raise NotFoundError("Learning path", path_id)
        return path_from_row(row)

    async def get_progress(self, user_id: str, path_id: str) -> LearningProgress:
        row = await self.progress.get(user_id, path_id)
        completed = list(row.completed_modules) if row else []
        return LearningProgress(user_id=user_id, path_id=path_id, completed_modules=completed)

    async def list_progress(self, user_id: str) -> list[LearningProgress]:
        rows = await self.progress.list_for_user(user_id)
        return [
            LearningProgress(user_id=user_id, path_id=row.path_id, completed_modules=list(row.completed_modules))
            for row in rows
        ]

    async def set_module_completion(self, user_id: str, completion: ModuleCompletion) -> LearningProgress:
        """Mark a module complete or incomplete. Repeating the same call changes nothing."""
        path = await self.get_path(completion.path_id)
        module_ids = {module.module_id for module in path.modules}
        if completion.module_id not in module_ids:
            raise ValidationError(
                f"Module '{completion.module_id}' is not part of learning path '{completion.path_id}'"
            )

        row = await self.progress.get(user_id, completion.path_id)
        if row is None:
            row = await self.progress.create(user_id=user_id, path_id=completion.path_id, completed_modules=[])

        completed = list(row.completed_modules)
        changed = False
        if completion.completed and completion.module_id not in completed:
            completed.append(completion.module_id)
            changed = True
        elif not completion.completed and completion.module_id in completed:
            completed.remove(completion.module_id)
            changed = True

        if changed:
            await self.progress.update(row, completed_modules=completed)
            if completion.completed:
                await record_activity(
                    self.session,
                    user_id,
                    ActivityType.MODULE_COMPLETED,
                    context={"pathId": completion.path_id, "moduleId": completion.module_id},
                )
            logger.info(
                "Module %s/%s marked %s for %s",
                completion.path_id,
                completion.module_id,
                "complete" if completion.completed else "incomplete",
                user_id,
            )

        return LearningProgress(user_id=user_id, path_id=completion.path_id, completed_modules=completed)
