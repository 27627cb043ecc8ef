"""
Distance calculation using the Haversine formula.

The Earth is approximated as a sphere of radius 6 371 km, so results are
great-circle distances, not road distances.  ``atan2`` keeps the formula
stable for coincident and antipodal points alike.

Complexity: O(1) per call.
"""

import math

EARTH_RADIUS_KM = 6_371.0
DISTANCE_DECIMALS = 2


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    a = min(1.0, max(0.0, a))  # float overshoot near antipodes
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def round_km(distance_km: float) -> float:
    """Round to the reported precision (built-in ``round``, half-to-even)."""
    return round(distance_km, DISTANCE_DECIMALS)
