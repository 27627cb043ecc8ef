"""
Proximity ranking.

Attaches a rounded great-circle distance to every school and orders the
result nearest-first.  Pure: no storage, no I/O, the input is never mutated.

Complexity: O(n log n) for n schools.
"""

from __future__ import annotations

from typing import Iterable

from .distance import haversine_km, round_km
from .entities import Location, RankedSchool, School


def rank_by_proximity(
    origin: Location, schools: Iterable[School]
) -> list[RankedSchool]:
    """Return *schools* sorted by ascending ``distance_km`` from *origin*.

    ``sorted`` is stable, so schools at the same rounded distance keep the
    order in which the store returned them.
    """
    ranked = [
        RankedSchool(
            school=s,
            distance_km=round_km(
                haversine_km(
                    origin.latitude, origin.longitude, s.latitude, s.longitude
                )
            ),
        )
        for s in schools
    ]
    return sorted(ranked, key=lambda r: r.distance_km)
