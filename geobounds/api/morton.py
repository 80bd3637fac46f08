"""Morton code endpoints."""

from fastapi import APIRouter

from geobounds.geo import encode, morton_distance
from geobounds.models import ErrorResponse, MortonDistanceResponse, MortonResponse
from geobounds.validation import parse_morton_pair, parse_point_query

router = APIRouter(prefix="/morton")

_error_responses = {400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}}


@router.get("", response_model=MortonResponse, responses=_error_responses)
async def get_morton_code(lat: str | None = None, lon: str | None = None) -> MortonResponse:
    """Encode a point as a Morton (Z-order) code."""
    location = parse_point_query(lat, lon)
    return MortonResponse(
        lat=location.lat,
        lon=location.lon,
        code=encode(location.lat, location.lon),
    )


@router.get("/distance", response_model=MortonDistanceResponse, responses=_error_responses)
async def get_morton_distance(a: str | None = None, b: str | None = None) -> MortonDistanceResponse:
    """
    Get the distance between two Morton codes.

    This is |a - b|, useful for comparing index keys. It is not a
    geographic distance.
    """
    pair = parse_morton_pair(a, b)
    return MortonDistanceResponse(a=pair.a, b=pair.b, distance=morton_distance(pair.a, pair.b))
