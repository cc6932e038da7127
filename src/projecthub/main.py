"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from projecthub import __version__
from projecthub.config import settings
from projecthub.db.engine import create_db_engine, create_session_factory
from projecthub.logging_config import configure_logging

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=not settings.local_mode)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown resources."""
    db_url = settings.effective_database_url
    engine = create_db_engine(db_url)
    session_factory = create_session_factory(engine)

    # Auto-create tables for SQLite (local dev, no migrations)
    if "sqlite" in db_url:
        from projecthub.db.base import Base
        import projecthub.db.models  # noqa: F401 (registers all ORM models)

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("SQLite tables created (local mode)")

        from projecthub.services.default_learning_paths import seed_default_learning_paths

        async with session_factory() as seed_session:
            created = await seed_default_learning_paths(seed_session)
            await seed_session.commit()
            if created:
                logger.info("Seeded %d default learning paths", created)

    app.state.db_engine = engine
    app.state.db_session_factory = session_factory

    logger.info("ProjectHub API started (db=%s)", "sqlite" if "sqlite" in db_url else "postgresql")
    yield

    await engine.dispose()
    logger.info("ProjectHub API shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="ProjectHub API",
        version=__version__,
        description="Discover, publish and track collaborative projects and learning paths.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Order matters: last added = first executed
    from projecthub.api.middleware.session import SessionMiddleware
    from projecthub.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(SessionMiddleware)
    app.add_middleware(TraceIdMiddleware)

    from projecthub.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from projecthub.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
