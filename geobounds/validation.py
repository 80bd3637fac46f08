"""Validation helpers for untrusted query parameters."""

from __future__ import annotations

import math

from geobounds.geo.constants import MAX_LAT, MAX_LON, MIN_LAT, MIN_LON, MORTON_CODE_LIMIT
from geobounds.models import BoundsQuery, Location, MortonDistanceQuery


class InputError(ValueError):
    """Query parameters could not be turned into kernel input."""

    error = "invalid_input"

    def __init__(self, message: str, fields: list[str] | None = None):
        self.message = message
        self.fields = fields or []
        super().__init__(message)


class MissingInputError(InputError):
    """No query parameters were supplied at all."""

    error = "missing_input"


class InvalidInputError(InputError):
    """Query parameters were supplied but are incomplete or malformed."""


def _require(params: dict[str, str | None]) -> dict[str, str]:
    missing = [name for name, raw in params.items() if raw is None or not raw.strip()]
    if len(missing) == len(params):
        raise MissingInputError(
            f"no input provided; expected {', '.join(params)}", fields=missing
        )
    if missing:
        raise InvalidInputError(f"missing parameters: {', '.join(missing)}", fields=missing)
    return {name: raw.strip() for name, raw in params.items()}


def _parse_float(raw: str, name: str, lo: float | None = None, hi: float | None = None) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise InvalidInputError(f"{name} must be a number, got {raw!r}", fields=[name]) from None
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite", fields=[name])
    if lo is not None and value < lo:
        raise InvalidInputError(f"{name} must be at least {lo}", fields=[name])
    if hi is not None and value > hi:
        raise InvalidInputError(f"{name} must be at most {hi}", fields=[name])
    return value


def _parse_code(raw: str, name: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise InvalidInputError(f"{name} must be an integer, got {raw!r}", fields=[name]) from None
    if not 0 <= value < MORTON_CODE_LIMIT:
        raise InvalidInputError(f"{name} is outside the Morton code range", fields=[name])
    return value


def parse_point_query(lat: str | None, lon: str | None) -> Location:
    """Parse raw latitude/longitude parameters into a Location.

    Raises MissingInputError if neither is given, InvalidInputError otherwise.
    """
    values = _require({"lat": lat, "lon": lon})
    return Location(
        lat=_parse_float(values["lat"], "lat", MIN_LAT, MAX_LAT),
        lon=_parse_float(values["lon"], "lon", MIN_LON, MAX_LON),
    )


def parse_bounds_query(
    lat: str | None,
    lon: str | None,
    radius: str | None,
    max_radius_km: float | None = None,
) -> BoundsQuery:
    """Parse raw bounding box parameters.

    Policy:
    - all parameters absent -> MissingInputError
    - some absent -> InvalidInputError naming them
    - non-numeric, non-finite or out of range -> InvalidInputError
    - radius must be > 0 and, if max_radius_km is set, not above it
    """
    values = _require({"lat": lat, "lon": lon, "radius": radius})
    location = Location(
        lat=_parse_float(values["lat"], "lat", MIN_LAT, MAX_LAT),
        lon=_parse_float(values["lon"], "lon", MIN_LON, MAX_LON),
    )
    radius_km = _parse_float(values["radius"], "radius", hi=max_radius_km)
    if radius_km <= 0:
        raise InvalidInputError("radius must be positive", fields=["radius"])
    return BoundsQuery(location=location, radius_km=radius_km)


def parse_morton_pair(a: str | None, b: str | None) -> MortonDistanceQuery:
    """Parse two raw Morton codes (non-negative decimal integers below 2**64)."""
    values = _require({"a": a, "b": b})
    return MortonDistanceQuery(a=_parse_code(values["a"], "a"), b=_parse_code(values["b"], "b"))
