"""
QuirkNotes Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── sample_note_data: Field values for a stored note
    └── test_client: HTTPX AsyncClient over a throwaway SQLite database
"""

import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before any quirknotes import: the engine is built from settings
_test_db_dir = tempfile.mkdtemp(prefix="quirknotes_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_db_dir}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_patch(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = note
            await note_service.patch_note(mock_db_session, note_id, payload)
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
def sample_note_data():
    """Field values matching the Note model."""
    return {
        "id": uuid4(),
        "title": "Groceries",
        "content": "Eggs, milk, flour",
        "color": None,
        "created_at": datetime.now(timezone.utc),
    }


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client backed by a real SQLite database.

    How:   Creates the tables, routes requests straight into the app with
           ASGITransport, then drops the tables and disposes the engine so
           no pooled connection outlives this test's event loop.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/getAllNotes")
            assert response.status_code == 200
    """
    from quirknotes.database import Base, create_tables, engine
    from quirknotes.main import app

    await create_tables()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
