"""
Domain entities.

``School`` is immutable once the store has assigned its id.  ``RankedSchool``
only lives for the duration of a single listing request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class NewSchool:
    """A validated registration, not yet stored."""

    name: str
    address: str
    location: Location


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class School:
    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class RankedSchool:
    school: School
    distance_km: float


@dataclass(frozen=True)
class SchoolListing:
    schools: list[RankedSchool] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.schools)
