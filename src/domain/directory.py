"""
School directory workflows
==========================

* **register**  -- validate a payload, then insert it into the store.
* **list_nearby** -- validate a query point, read every school, rank them.

The store is injected so the workflows can run against the SQL repository
in production and an in-memory fake in tests.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol, Sequence

from .entities import School, SchoolListing
from .errors import ValidationError
from .ranking import rank_by_proximity
from .validation import validate_point, validate_school

logger = logging.getLogger(__name__)


class SchoolStore(Protocol):
    async def insert(
        self, name: str, address: str, latitude: float, longitude: float
    ) -> int: ...

    async def list_all(self) -> Sequence[School]: ...


class SchoolDirectory:
    """High-level API used by the HTTP layer."""

    def __init__(self, store: SchoolStore):
        self.store = store

    async def register(self, data: Mapping[str, Any]) -> int:
        """Store a new school and return its id.

        Raises ``ValidationError`` without touching the store if any field
        is invalid.
        """
        result = validate_school(data)
        if not result.ok:
            raise ValidationError(result.errors)

        school = result.value
        school_id = await self.store.insert(
            school.name,
            school.address,
            school.location.latitude,
            school.location.longitude,
        )
        logger.info("Registered school %d (%s)", school_id, school.name)
        return school_id

    async def list_nearby(self, latitude: Any, longitude: Any) -> SchoolListing:
        """Return every school ordered by distance from the query point."""
        result = validate_point(latitude, longitude)
        if not result.ok:
            raise ValidationError(result.errors)

        schools = await self.store.list_all()
        return SchoolListing(schools=rank_by_proximity(result.value, schools))
