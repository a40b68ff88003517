"""
Noteful Backend: Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── mock_db_session: AsyncMock session for service unit tests (no DB)
    ├── database:        Database on a private in-memory SQLite instance,
    │                    schema created, foreign keys enforced
    ├── test_client:     HTTPX AsyncClient bound to create_app(database)
    ├── seeded_folders:  folders table populated from make_folders_array()
    └── seeded_notes:    folders + notes populated from the fixture arrays
"""

import os
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time; point them at SQLite before noteful loads
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

from noteful.database import Base, Database
from noteful.main import create_app
import noteful.models  # noqa: F401  (registers tables on Base.metadata)
from tests.fixtures import make_folders_array, make_notes_array, seed


# ══════════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_folder(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = folder
            result = await folder_service.get_folder(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock(return_value=MagicMock())
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest_asyncio.fixture
async def database():
    """
    A Database on a fresh in-memory SQLite instance.

    StaticPool keeps the single connection (and therefore the data) alive
    for the whole test; ids restart at 1 for every test.
    """
    db = Database(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(db.engine.sync_engine, "connect", _enable_foreign_keys)

    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield db

    await db.dispose()


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient talking to an app built around the test database.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/folders")
            assert response.status_code == 200
    """
    app = create_app(database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def seeded_folders(database):
    folders = make_folders_array()
    await seed(database, folders=folders)
    return folders


@pytest_asyncio.fixture
async def seeded_notes(database, seeded_folders):
    notes = make_notes_array()
    await seed(database, notes=notes)
    return notes
