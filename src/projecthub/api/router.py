"""Master API router mounted at /api/v1."""

from fastapi import APIRouter

from projecthub.api.routes import activity, auth, health, learning, projects, tags, users

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(auth.router)
api_router.include_router(projects.router)
api_router.include_router(tags.router)
api_router.include_router(users.router)
api_router.include_router(activity.router)
api_router.include_router(learning.router)
