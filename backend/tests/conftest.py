"""
Bev's Bakery Backend - Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession (no real DB needed)
    ├── sample_order_data: A valid OrderCreate payload (camelCase)
    ├── memory_storage: The app's in-memory storage, emptied
    ├── sqlite_session: Real AsyncSession on a throwaway SQLite file
    └── test_client: HTTPX AsyncClient talking to the FastAPI app
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Settings are read when bakery.config is first imported, so the test
# environment must be in place before any bakery import below.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="bakery_test_"), "test.db"
)
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "password"
os.environ["SESSION_SECRET"] = "test-session-secret-not-real"
os.environ["RATE_LIMIT_REQUESTS"] = "10000"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from bakery.database import Base  # noqa: E402
from bakery.models.order import Order  # noqa: E402,F401


@pytest.fixture
def mock_db_session():
    """
    A MagicMock that simulates AsyncSession behavior.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = order
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_order_data():
    """A valid order request body as the order form sends it."""
    return {
        "name": "Beverley Johnson",
        "email": "bev@example.com",
        "phone": "07852220010",
        "cakeQuantity": 2,
        "sorrelQuantity": 1,
        "specialRequests": "No nuts please",
    }


@pytest.fixture
def memory_storage():
    """The module-level in-memory storage the app uses, emptied per test."""
    from bakery.services.order_storage import memory_storage as storage
    storage.clear()
    yield storage
    storage.clear()


@pytest_asyncio.fixture
async def sqlite_session(tmp_path):
    """
    A real AsyncSession on a fresh SQLite file with the orders table.

    Exercises the SQL that DatabaseOrderStorage emits without PostgreSQL.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(memory_storage):
    """
    HTTPX AsyncClient routed straight into the FastAPI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from bakery.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
