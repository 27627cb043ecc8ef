"""
School endpoints
================

POST /api/v1/addSchool   -- register a school (returns 201 with its id)
GET  /api/v1/listSchools -- all schools sorted by distance from a point
GET  /                   -- endpoint index
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from src.api.middleware import limiter
from src.api.schemas import (
    ErrorResponse,
    RankedSchoolResponse,
    SchoolCreatedResponse,
    SchoolCreateRequest,
    SchoolListResponse,
    ValidationErrorResponse,
)
from src.api.dependencies import get_directory
from src.config import settings
from src.domain.directory import SchoolDirectory

router = APIRouter(tags=["schools"])
index_router = APIRouter(tags=["meta"])

_ERROR_RESPONSES = {
    400: {"model": ValidationErrorResponse, "description": "Invalid input"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}


@router.post(
    "/addSchool",
    status_code=201,
    response_model=SchoolCreatedResponse,
    summary="Add a new school",
    responses=_ERROR_RESPONSES,
)
@limiter.limit(lambda: settings.rate_limit)
async def add_school(
    request: Request,
    body: SchoolCreateRequest,
    directory: SchoolDirectory = Depends(get_directory),
):
    school_id = await directory.register(body.model_dump())
    return SchoolCreatedResponse(school_id=school_id)


@router.get(
    "/listSchools",
    response_model=SchoolListResponse,
    summary="List all schools sorted by proximity to a location",
    responses=_ERROR_RESPONSES,
)
@limiter.limit(lambda: settings.rate_limit)
async def list_schools(
    request: Request,
    latitude: Optional[str] = None,
    longitude: Optional[str] = None,
    directory: SchoolDirectory = Depends(get_directory),
):
    listing = await directory.list_nearby(latitude, longitude)
    return SchoolListResponse(
        count=listing.count,
        schools=[
            RankedSchoolResponse(
                id=r.school.id,
                name=r.school.name,
                address=r.school.address,
                latitude=r.school.latitude,
                longitude=r.school.longitude,
                created_at=r.school.created_at,
                distance_km=r.distance_km,
            )
            for r in listing.schools
        ],
    )


@index_router.get("/", summary="Endpoint index")
async def index():
    return {
        "message": "School Management API",
        "endpoints": [
            {
                "path": "/api/v1/addSchool",
                "method": "POST",
                "description": "Add a new school",
                "payload": {
                    "name": "string (required)",
                    "address": "string (required)",
                    "latitude": "number (required, between -90 and 90)",
                    "longitude": "number (required, between -180 and 180)",
                },
            },
            {
                "path": "/api/v1/listSchools",
                "method": "GET",
                "description": "List all schools sorted by proximity to specified location",
                "parameters": {
                    "latitude": "number (required, between -90 and 90)",
                    "longitude": "number (required, between -180 and 180)",
                },
            },
        ],
    }
