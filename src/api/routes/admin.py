"""
Admin / observability endpoints
===============================

GET /api/v1/admin/health -- liveness plus a database round-trip
"""

from fastapi import APIRouter, Request

from src.api.schemas import HealthResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health(request: Request):
    await request.app.state.db.ping()
    return HealthResponse()
