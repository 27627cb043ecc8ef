"""
Input validation for registrations and proximity queries.

Every rule is evaluated independently so the caller receives the complete
list of problems in one response.  Nothing in this module raises: results
are returned as ``ParsedNumber`` / ``Validated`` values.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, Optional, TypeVar

from .entities import Location, NewSchool

T = TypeVar("T")

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)
MAX_TEXT_LENGTH = 255  # VARCHAR(255) columns

_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class ParsedNumber:
    """Outcome of :func:`parse_number`: exactly one of the fields is set."""

    value: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Validated(Generic[T]):
    value: Optional[T] = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def parse_number(raw: Any) -> ParsedNumber:
    """Convert *raw* to a finite float.

    Accepts ints, floats and plain decimal strings, optionally with an
    exponent (surrounding whitespace is ignored).  Booleans, partial numbers
    like ``"12abc"``, digit separators like ``"1_0"``, NaN, infinities and
    integers too large for a float are rejected.
    """
    if isinstance(raw, bool):
        return ParsedNumber(error="boolean is not a number")
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return ParsedNumber(error="number out of range")
    elif isinstance(raw, str):
        text = raw.strip()
        if not _DECIMAL.fullmatch(text):
            return ParsedNumber(error=f"not a number: {raw!r}")
        value = float(text)
    else:
        return ParsedNumber(error="missing or non-numeric value")

    if not math.isfinite(value):
        return ParsedNumber(error="number must be finite")
    return ParsedNumber(value=value)


def _check_text(raw: Any, label: str, errors: list[str]) -> str:
    if not isinstance(raw, str) or not raw.strip():
        errors.append(f"{label} is required and must be a non-empty string")
        return ""
    text = raw.strip()
    if len(text) > MAX_TEXT_LENGTH:
        errors.append(f"{label} must be at most {MAX_TEXT_LENGTH} characters")
    return text


def _check_coordinate(
    raw: Any, label: str, bounds: tuple[float, float], errors: list[str]
) -> float:
    parsed = parse_number(raw)
    if not parsed.ok:
        errors.append(f"{label} is required and must be a valid number")
        return 0.0
    low, high = bounds
    if not low <= parsed.value <= high:
        errors.append(
            f"{label} must be between {low:g} and {high:g} degrees"
        )
    return parsed.value


def validate_point(latitude: Any, longitude: Any) -> Validated[Location]:
    """Validate a query coordinate pair."""
    errors: list[str] = []
    lat = _check_coordinate(latitude, "Latitude", LATITUDE_RANGE, errors)
    lng = _check_coordinate(longitude, "Longitude", LONGITUDE_RANGE, errors)
    if errors:
        return Validated(errors=errors)
    return Validated(value=Location(lat, lng))


def validate_school(data: Mapping[str, Any]) -> Validated[NewSchool]:
    """Validate a registration payload (name, address, latitude, longitude)."""
    errors: list[str] = []
    name = _check_text(data.get("name"), "Name", errors)
    address = _check_text(data.get("address"), "Address", errors)
    point = validate_point(data.get("latitude"), data.get("longitude"))
    errors.extend(point.errors)
    if errors:
        return Validated(errors=errors)
    return Validated(
        value=NewSchool(name=name, address=address, location=point.value)
    )
