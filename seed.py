"""
Seed script -- populates the database with sample schools for reviewers.

Run after migrations:
    python seed.py

Creates 5 schools on the US West Coast (Seattle to San Diego).  Does
nothing if the ``schools`` table already has rows, so it is safe to re-run.
"""

import asyncio

from src.config import settings
from src.infrastructure.database import Database
from src.infrastructure.repositories import SchoolRepository
from src.infrastructure.seed import seed_sample_schools


async def main():
    print("Seeding database...")
    db = Database.from_settings(settings)
    try:
        async with db.session() as session:
            added = await seed_sample_schools(SchoolRepository(session))
    finally:
        await db.dispose()

    if added:
        print(f"  Created {added} schools")
        print("\nSeed complete!")
    else:
        print("Database already seeded. Skipping.")


if __name__ == "__main__":
    asyncio.run(main())
