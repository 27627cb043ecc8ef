"""FastAPI dependency injection helpers."""

from typing import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.directory import SchoolDirectory
from src.infrastructure.repositories import SchoolRepository


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield a session from the app's ``Database``; commit on success, rollback on error."""
    async with request.app.state.db.session() as session:
        yield session


def get_directory(db: AsyncSession = Depends(get_db)) -> SchoolDirectory:
    return SchoolDirectory(SchoolRepository(db))
