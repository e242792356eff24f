"""API test fixtures — in-memory database + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - db_manager swapped for a tracking manager bound to the test engine,
      so get_db runs its real acquire/release path
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import enrollment.infrastructure.database as db_module
from enrollment.db.base import Base
from enrollment.infrastructure.database import DatabaseSessionManager
from enrollment.main import app
import enrollment.models  # noqa: F401


class TrackingSessionManager(DatabaseSessionManager):
    """Counts session scopes entered and exited."""

    def __init__(self, engine):
        super().__init__(engine=engine)
        self.acquired = 0
        self.released = 0

    @asynccontextmanager
    async def session(self):
        self.acquired += 1
        try:
            async with super().session() as session:
                yield session
        finally:
            self.released += 1


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def session_manager(test_engine):
    original = db_module.db_manager
    manager = TrackingSessionManager(test_engine)
    db_module.db_manager = manager
    yield manager
    db_module.db_manager = original


@pytest.fixture
async def client(session_manager):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
