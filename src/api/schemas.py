"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


# ── Requests ──────────────────────────────────────────────────────────


class SchoolCreateRequest(BaseModel):
    """Raw registration payload.

    Fields are deliberately untyped: the domain validator reports every
    problem at once instead of pydantic rejecting on the first bad type.
    """

    name: Any = Field(None, examples=["Test School"])
    address: Any = Field(None, examples=["1 Test St"])
    latitude: Any = Field(None, description="-90 to 90", examples=[47.6062])
    longitude: Any = Field(None, description="-180 to 180", examples=[-122.3321])


# ── Responses ─────────────────────────────────────────────────────────


class SchoolCreatedResponse(BaseModel):
    success: bool = True
    message: str = "School added successfully"
    school_id: int


class RankedSchoolResponse(BaseModel):
    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    created_at: Optional[datetime] = None
    distance_km: float


class SchoolListResponse(BaseModel):
    success: bool = True
    count: int
    schools: list[RankedSchoolResponse] = []


class HealthResponse(BaseModel):
    status: str = "ok"


class ValidationErrorResponse(BaseModel):
    success: bool = False
    errors: list[str]


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
