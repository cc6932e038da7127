"""Learning path and progress routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.dependencies import get_current_user_id, get_db
from projecthub.models.learning import ModuleCompletion
from projecthub.services.learning_service import LearningService

router = APIRouter(tags=["Learning"])


@router.get("/learning/paths")
async def list_learning_paths(db: AsyncSession = Depends(get_db)) -> list[dict]:
    paths = await LearningService(db).list_paths()
    return [path.to_api() for path in paths]


@router.get("/learning/paths/{path_id}")
async def get_learning_path(path_id: str, db: AsyncSession = Depends(get_db)) -> dict:
    path = await LearningService(db).get_path(path_id)
    return path.to_api()


@router.get("/learning/progress")
async def list_learning_progress(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> list[dict]:
    progress = await LearningService(db).list_progress(user_id)
    return [record.to_api() for record in progress]


@router.get("/learning/progress/{path_id}")
async def get_learning_progress(
    path_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> dict:
    progress = await LearningService(db).get_progress(user_id, path_id)
    return progress.to_api()


@router.post("/learning/progress")
async def set_module_completion(
    body: ModuleCompletion,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> dict:
    progress = await LearningService(db).set_module_completion(user_id, body)
    await db.commit()
    return progress.to_api()
