"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

The repository receives an ``AsyncSession`` (unit-of-work), returns domain
entities and translates SQLAlchemy failures into ``StoreError``.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .models import SchoolModel
from src.domain.entities import School
from src.domain.errors import StoreError


def _to_entity(row: SchoolModel) -> School:
    return School(
        id=row.id,
        name=row.name,
        address=row.address,
        latitude=row.latitude,
        longitude=row.longitude,
        created_at=row.created_at,
    )


class SchoolRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(
        self, name: str, address: str, latitude: float, longitude: float
    ) -> int:
        school = SchoolModel(
            name=name, address=address, latitude=latitude, longitude=longitude
        )
        try:
            self.session.add(school)
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreError("could not insert school") from exc
        return school.id

    async def list_all(self) -> list[School]:
        """Every school, in id order."""
        try:
            result = await self.session.execute(
                select(SchoolModel).order_by(SchoolModel.id)
            )
        except SQLAlchemyError as exc:
            raise StoreError("could not list schools") from exc
        return [_to_entity(row) for row in result.scalars().all()]

    async def count(self) -> int:
        try:
            result = await self.session.execute(
                select(func.count()).select_from(SchoolModel)
            )
        except SQLAlchemyError as exc:
            raise StoreError("could not count schools") from exc
        return result.scalar() or 0
