"""
Subscriber API — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session:     Mock AsyncSession (no real DB needed)
    ├── mock_repository:     Mock SubscriberRepository patched into the service
    ├── make_subscriber:     Factory for transient Subscriber rows
    ├── test_client:         HTTPX AsyncClient against a fresh app, DB session mocked
    └── sqlite_session:      Real AsyncSession on an in-memory SQLite database
"""

import os

# Override settings BEFORE any subscriber_api import: the settings singleton
# and the engine are built at import time.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["API_PREFIX"] = "/subscribers"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from subscriber_api.database import Base, get_db_session
from subscriber_api.models.subscriber import Subscriber


@pytest.fixture
def mock_db_session():
    """
    A mock that simulates the AsyncSession surface the repository touches.

    Usage:
        mock_db_session.flush.side_effect = Exception("disk full")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_repository():
    """
    Replaces the repository used by SubscriberService.

    Defaults: empty store, save() returns the subscriber it was given,
    create() builds a subscriber with a fixed id.
    """
    repository = MagicMock()
    repository.find_all = AsyncMock(return_value=[])
    repository.find_by_id = AsyncMock(return_value=None)
    repository.create = MagicMock(
        side_effect=lambda fields: Subscriber(id="generated-id", **fields)
    )
    repository.save = AsyncMock(side_effect=lambda db, subscriber: subscriber)
    repository.remove = AsyncMock(return_value=None)

    with patch("subscriber_api.services.subscriber_service.subscriber_repository", repository):
        yield repository


@pytest.fixture
def make_subscriber():
    """Builds a transient Subscriber; unset fields stay None."""

    def _make(**fields) -> Subscriber:
        fields.setdefault("id", "123")
        return Subscriber(**fields)

    return _make


@pytest_asyncio.fixture
async def test_client(mock_db_session):
    """
    HTTPX AsyncClient talking to a fresh app over ASGITransport.

    The request's database session is replaced with `mock_db_session`, so
    the same object can be asserted on from the test.
    """
    from subscriber_api.main import create_app

    app = create_app()
    app.dependency_overrides[get_db_session] = lambda: mock_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def sqlite_session():
    """
    A real session on a throwaway in-memory SQLite database with the
    subscribers table created.
    """
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
