"""Root conftest: shared test configuration and in-memory database fixtures.

Invariants:
    - Every test gets its own DatabaseSessionManager on in-memory SQLite, tables created
    - Tests never reach a real PostgreSQL server
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402

from catalog.infrastructure.database import DatabaseSessionManager  # noqa: E402


@pytest.fixture
async def manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(manager):
    async with manager.session() as session:
        yield session
