"""
FastAPI application factory.

* Registers routes for schools and admin.
* Opens the database handle via lifespan events (connection check,
  optional schema creation and sample-data seeding).
* Maps domain errors to HTTP responses.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, schools
from src.config import settings
from src.domain.errors import StoreError, ValidationError
from src.infrastructure.database import Database
from src.infrastructure.repositories import SchoolRepository
from src.infrastructure.seed import seed_sample_schools

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check the database on startup; release the pool on shutdown."""
    db: Database = app.state.db
    await db.ping()
    logger.info("Database connection successful")
    if settings.create_schema_on_startup:
        await db.create_all()
    if settings.seed_sample_data:
        async with db.session() as session:
            await seed_sample_schools(SchoolRepository(session))
    yield
    await db.dispose()


async def _validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=400, content={"success": False, "errors": exc.errors}
    )


async def _store_error_handler(request: Request, exc: StoreError):
    logger.error(
        "Store failure on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": "An error occurred while processing the request",
        },
    )


def create_app(database: Optional[Database] = None) -> FastAPI:
    app = FastAPI(
        title="School Locator API",
        description=(
            "Registers schools with their coordinates and lists them "
            "ordered by great-circle distance from any point."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.db = database or Database.from_settings(settings)

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Domain errors
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(StoreError, _store_error_handler)

    # Routers
    app.include_router(schools.index_router)
    app.include_router(schools.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
