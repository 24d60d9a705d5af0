"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - app.state.db_manager points at the test engine (readiness probe uses it)
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from user_api.db.base import Base
from user_api.infrastructure.database import get_db, DatabaseSessionManager
from user_api.models.user import User
from user_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = app.state.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager


@pytest.fixture
async def seed_users(test_db):
    """Insert three users with distinct, increasing created_at (Carol newest)."""
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    users = [
        User(name="Alice Smith", email="alice@example.com", created_at=base),
        User(
            name="Bob Jones", email="bob@work.org",
            created_at=base + timedelta(minutes=1),
        ),
        User(
            name="Carol White", email="carol@example.com",
            created_at=base + timedelta(minutes=2),
        ),
    ]
    test_db.add_all(users)
    await test_db.commit()
    for user in users:
        await test_db.refresh(user)
    return users
