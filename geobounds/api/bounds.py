"""Bounding box endpoint."""

import logging

from fastapi import APIRouter

from geobounds.config import settings
from geobounds.geo import bounds_for_query, corner_codes
from geobounds.models import (
    BoundingBox,
    BoundsFeature,
    BoundsProperties,
    BoundsQuery,
    ErrorResponse,
    Polygon,
)
from geobounds.validation import parse_bounds_query

from .errors import error_response

logger = logging.getLogger(__name__)

router = APIRouter()


def build_feature(query: BoundsQuery, box: BoundingBox) -> BoundsFeature:
    """Wrap a bounding box in a GeoJSON feature."""
    return BoundsFeature(
        bbox=box.bbox,
        geometry=Polygon(coordinates=[box.ring()]),
        properties=BoundsProperties(
            center=query.location,
            radius_km=query.radius_km,
            morton=corner_codes(box, query.location.lat, query.location.lon),
        ),
    )


@router.get(
    "/geo_bounds",
    response_model=BoundsFeature,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def get_geo_bounds(
    lat: str | None = None,
    lon: str | None = None,
    radius: str | None = None,
):
    """
    Get the bounding box of a circle around a point.

    Example: /geo_bounds?lat=37.7749295&lon=-122.4194155&radius=100

    The radius is in kilometers. Returns a GeoJSON feature whose polygon
    runs SW -> NW -> NE -> SE -> SW. Circles that would touch a pole or
    cross the antimeridian are rejected with a 422.
    """
    query = parse_bounds_query(lat, lon, radius, max_radius_km=settings.max_radius_km)

    result = bounds_for_query(query)
    if not result.ok:
        logger.info(
            f"No bounding box for ({query.location.lat}, {query.location.lon}) "
            f"radius {query.radius_km} km: {result.failure.detail}"
        )
        return error_response(422, result.failure.kind, result.failure.detail)

    return build_feature(query, result.box)
