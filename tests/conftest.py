"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without
Docker / PostgreSQL.  ``StaticPool`` keeps every session on the same
connection, otherwise each connection would see its own empty database.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from src.domain.entities import School
from src.domain.errors import StoreError
from src.infrastructure.database import Database

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


class FakeSchoolStore:
    """In-memory stand-in for ``SchoolRepository``."""

    def __init__(self, schools=None, fail=False):
        self.schools: list[School] = list(schools or [])
        self.fail = fail
        self.insert_calls = 0

    async def insert(self, name, address, latitude, longitude) -> int:
        self.insert_calls += 1
        if self.fail:
            raise StoreError("store is down")
        school_id = len(self.schools) + 1
        self.schools.append(
            School(
                id=school_id,
                name=name,
                address=address,
                latitude=latitude,
                longitude=longitude,
            )
        )
        return school_id

    async def list_all(self) -> list[School]:
        if self.fail:
            raise StoreError("store is down")
        return list(self.schools)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def fake_store() -> FakeSchoolStore:
    return FakeSchoolStore()


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Create tables, yield the handle, then dispose of the engine."""
    db = Database(TEST_DB_URL, poolclass=StaticPool)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by the in-memory database."""
    from src.api.app import create_app
    from src.api.middleware import limiter

    limiter.reset()
    app = create_app(database=database)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
