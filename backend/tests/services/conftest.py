"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so readiness probes see the test engine
    - recording_store replaces the real store to observe (or forbid) store calls

Design Decisions:
    - SQLite in-memory with StaticPool: one connection shared by all sessions of a test
    - httpx ASGITransport does not run lifespan, so no real database is opened
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_site_store
from app.core.domain_types import default_site_list
from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.site_store import SqlSiteStore
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def store(test_db):
    return SqlSiteStore(test_db, default_site_list())


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def recording_store():
    """Replace the sites store with a fake that records every call.

    Returns dict with:
      - log: list of (operation, argument) tuples
      - fail: set to an exception instance to raise from every operation
    """
    state = {"log": [], "fail": None}

    class _RecordingStore:
        async def save(self, site):
            state["log"].append(("save", site))
            if state["fail"]:
                raise state["fail"]
            site.id = site.id or 1
            return site

        async def list_all(self):
            state["log"].append(("list_all", None))
            if state["fail"]:
                raise state["fail"]
            return []

        async def list_by_category(self, tag):
            state["log"].append(("list_by_category", tag))
            if state["fail"]:
                raise state["fail"]
            return []

    app.dependency_overrides[get_site_store] = lambda: _RecordingStore()
    yield state
    app.dependency_overrides.pop(get_site_store, None)
