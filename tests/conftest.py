"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from projecthub.config import settings
from projecthub.db.base import Base
from projecthub.db.models.user import UserRow
# Import all models to register with Base.metadata
import projecthub.db.models  # noqa: F401
from projecthub.services.session_service import issue_session_token


def session_headers(user_id: str) -> dict:
    """Request headers carrying a valid session cookie for ``user_id``."""
    return {"Cookie": f"{settings.session_cookie_name}={issue_session_token(user_id)}"}


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Seed default learning paths (mirrors main.py lifespan)
    from projecthub.services.default_learning_paths import seed_default_learning_paths

    async with async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)() as seed_session:
        await seed_default_learning_paths(seed_session)
        await seed_session.commit()

    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Create a test database session."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(db_engine):
    """Create a test application instance with in-memory DB."""
    from projecthub.main import create_app

    _app = create_app()
    _app.state.db_engine = db_engine
    _app.state.db_session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _create_user(session: AsyncSession, user_id: str, name: str) -> UserRow:
    row = UserRow(id=user_id, name=name, email=f"{user_id}@example.com", interests=[], onboarded=True)
    session.add(row)
    await session.commit()
    return row


@pytest.fixture
async def alice(db_session) -> UserRow:
    return await _create_user(db_session, "usr_alice", "Alice")


@pytest.fixture
async def bob(db_session) -> UserRow:
    return await _create_user(db_session, "usr_bob", "Bob")


@pytest.fixture
def alice_headers(alice) -> dict:
    return session_headers(alice.id)


@pytest.fixture
def bob_headers(bob) -> dict:
    return session_headers(bob.id)
