"""SchoolRepository and seeding against in-memory SQLite."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from src.domain.errors import StoreError
from src.infrastructure.repositories import SchoolRepository
from src.infrastructure.seed import SAMPLE_SCHOOLS, seed_sample_schools


@pytest.mark.asyncio
async def test_insert_assigns_increasing_ids(database):
    async with database.session() as session:
        repo = SchoolRepository(session)
        first = await repo.insert("A", "1 A St", 1.0, 2.0)
        second = await repo.insert("B", "2 B St", 3.0, 4.0)
    assert second > first


@pytest.mark.asyncio
async def test_committed_insert_visible_to_later_read(database):
    async with database.session() as session:
        school_id = await SchoolRepository(session).insert("A", "1 A St", 1.0, 2.0)

    async with database.session() as session:
        schools = await SchoolRepository(session).list_all()

    assert [s.id for s in schools] == [school_id]
    school = schools[0]
    assert (school.name, school.address, school.latitude, school.longitude) == (
        "A",
        "1 A St",
        1.0,
        2.0,
    )
    assert school.created_at is not None


@pytest.mark.asyncio
async def test_failed_session_rolls_back(database):
    with pytest.raises(RuntimeError):
        async with database.session() as session:
            await SchoolRepository(session).insert("A", "1 A St", 1.0, 2.0)
            raise RuntimeError("boom")

    async with database.session() as session:
        assert await SchoolRepository(session).count() == 0


@pytest.mark.asyncio
async def test_sqlalchemy_failure_becomes_store_error():
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))
    with pytest.raises(StoreError):
        await SchoolRepository(session).list_all()


@pytest.mark.asyncio
async def test_seed_is_idempotent(database):
    async with database.session() as session:
        assert await seed_sample_schools(SchoolRepository(session)) == len(SAMPLE_SCHOOLS)
    async with database.session() as session:
        assert await seed_sample_schools(SchoolRepository(session)) == 0
        assert await SchoolRepository(session).count() == len(SAMPLE_SCHOOLS)


@pytest.mark.asyncio
async def test_ping(database):
    await database.ping()
