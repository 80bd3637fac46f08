"""Bounding box computation for radius queries."""

import logging
import math

from geobounds.models import BoundingBox, BoundsFailure, BoundsQuery, BoundsResult

from .constants import (
    EARTH_RADIUS_KM,
    MAX_LAT,
    MAX_LON,
    MIN_LAT,
    MIN_LON,
    POLE_COS_EPSILON,
)
from .errors import DegenerateGeometryError, DomainError, GeoError

logger = logging.getLogger(__name__)


def _check_number(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DomainError(f"{name} must be a number, got {type(value).__name__}")
    try:
        value = float(value)
    except OverflowError:
        raise DomainError(f"{name} is too large") from None
    if not math.isfinite(value):
        raise DomainError(f"{name} must be finite")
    return value


def check_location(lat: float, lon: float) -> tuple[float, float]:
    """
    Validate a coordinate pair.

    Raises:
        DomainError: If either value is non-numeric, non-finite or out of range
    """
    lat = _check_number(lat, "latitude")
    lon = _check_number(lon, "longitude")
    if not MIN_LAT <= lat <= MAX_LAT:
        raise DomainError(f"latitude {lat} outside [{MIN_LAT}, {MAX_LAT}]")
    if not MIN_LON <= lon <= MAX_LON:
        raise DomainError(f"longitude {lon} outside [{MIN_LON}, {MAX_LON}]")
    return lat, lon


def check_radius(radius_km: float) -> float:
    """
    Validate a radius in kilometers.

    Raises:
        DomainError: If the radius is non-numeric, non-finite or not positive
    """
    radius_km = _check_number(radius_km, "radius")
    if radius_km <= 0:
        raise DomainError(f"radius must be positive, got {radius_km}")
    return radius_km


def bounding_box(lat: float, lon: float, radius_km: float) -> BoundingBox:
    """
    Compute the bounding box of a circle around a point.

    Uses an equirectangular approximation: the radius is converted to a
    latitude delta directly, and to a longitude delta scaled by the
    latitude's cosine. This is only valid for radii that are small relative
    to the Earth and away from the poles; inputs for which the result would
    not be a plain, non-wrapping rectangle are rejected rather than clamped.

    Args:
        lat: Center latitude in degrees
        lon: Center longitude in degrees
        radius_km: Radius in kilometers

    Returns:
        Bounding box containing the circle

    Raises:
        DomainError: If an input is outside its valid range
        DegenerateGeometryError: If the box would touch a pole, extend past
            a pole, or cross the antimeridian
    """
    lat, lon = check_location(lat, lon)
    radius_km = check_radius(radius_km)

    lat_delta = (radius_km / EARTH_RADIUS_KM) * (180 / math.pi)

    # Degrees of longitude shrink towards the poles and vanish at them
    cos_lat = math.cos(math.radians(lat))
    if abs(cos_lat) < POLE_COS_EPSILON:
        raise DegenerateGeometryError(f"longitude span is unbounded at latitude {lat}")
    lon_delta = (radius_km / (EARTH_RADIUS_KM * cos_lat)) * (180 / math.pi)

    south = lat - lat_delta
    north = lat + lat_delta
    west = lon - lon_delta
    east = lon + lon_delta

    if south < MIN_LAT or north > MAX_LAT:
        raise DegenerateGeometryError(
            f"box [{south:.6f}, {north:.6f}] extends past a pole"
        )
    if east - west >= 360:
        raise DegenerateGeometryError("longitude span covers the whole globe")
    if west < MIN_LON or east > MAX_LON:
        raise DegenerateGeometryError(
            f"box [{west:.6f}, {east:.6f}] would cross the antimeridian"
        )

    return BoundingBox(south=south, west=west, north=north, east=east)


def compute_bounds(lat: float, lon: float, radius_km: float) -> BoundsResult:
    """
    Compute a bounding box, reporting failure as a value.

    Never raises for bad input: the result carries either the box or a
    failure whose kind is "domain" or "degenerate".
    """
    try:
        box = bounding_box(lat, lon, radius_km)
    except GeoError as e:
        logger.debug(f"No bounding box for ({lat}, {lon}) radius {radius_km} km: {e}")
        return BoundsResult(failure=BoundsFailure(kind=e.kind, detail=e.message))
    return BoundsResult(box=box)


def bounds_for_query(query: BoundsQuery) -> BoundsResult:
    """Compute the bounding box for a validated query."""
    return compute_bounds(query.location.lat, query.location.lon, query.radius_km)
