"""Sample schools inserted into an empty table on request."""

from __future__ import annotations

import logging

from .repositories import SchoolRepository

logger = logging.getLogger(__name__)


SAMPLE_SCHOOLS = [
    {"name": "Washington High School", "address": "1234 Washington St, Seattle, WA", "lat": 47.6062, "lng": -122.3321},
    {"name": "Lincoln Elementary", "address": "5678 Lincoln Ave, Portland, OR", "lat": 45.5152, "lng": -122.6784},
    {"name": "Jefferson Middle School", "address": "9012 Jefferson Blvd, San Francisco, CA", "lat": 37.7749, "lng": -122.4194},
    {"name": "Roosevelt Academy", "address": "3456 Roosevelt Way, Los Angeles, CA", "lat": 34.0522, "lng": -118.2437},
    {"name": "Kennedy High", "address": "7890 Kennedy Rd, San Diego, CA", "lat": 32.7157, "lng": -117.1611},
]


async def seed_sample_schools(repo: SchoolRepository) -> int:
    """Insert ``SAMPLE_SCHOOLS`` if the table is empty; return rows added."""
    if await repo.count() > 0:
        logger.info("Schools table already populated; skipping seed")
        return 0

    for s in SAMPLE_SCHOOLS:
        await repo.insert(s["name"], s["address"], s["lat"], s["lng"])
    logger.info("Seeded %d sample schools", len(SAMPLE_SCHOOLS))
    return len(SAMPLE_SCHOOLS)
