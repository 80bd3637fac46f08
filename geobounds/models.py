"""
Pydantic models for the geobounds service.

These models define the kernel's value types and the request/response
structures for the HTTP API.
"""

from typing import Literal

from pydantic import BaseModel, Field, model_validator


# -----------------------------------------------------------------------------
# Core Geometry Models
# -----------------------------------------------------------------------------


class Location(BaseModel):
    """A point on the Earth's surface (WGS84 degrees)."""

    model_config = {"frozen": True}

    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False, description="Latitude in degrees")
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False, description="Longitude in degrees")


class BoundingBox(BaseModel):
    """
    Axis-aligned latitude/longitude rectangle.

    The box never wraps: south <= north and west <= east always hold.
    """

    model_config = {"frozen": True}

    south: float = Field(..., ge=-90, le=90)
    west: float = Field(..., ge=-180, le=180)
    north: float = Field(..., ge=-90, le=90)
    east: float = Field(..., ge=-180, le=180)

    @model_validator(mode="after")
    def check_ordering(self) -> "BoundingBox":
        if self.south > self.north:
            raise ValueError("south must not exceed north")
        if self.west > self.east:
            raise ValueError("west must not exceed east")
        return self

    @property
    def bbox(self) -> list[float]:
        """GeoJSON bbox ordering: [west, south, east, north]."""
        return [self.west, self.south, self.east, self.north]

    def ring(self) -> list[list[float]]:
        """Closed polygon ring of [lon, lat] corners, SW -> NW -> NE -> SE -> SW."""
        return [
            [self.west, self.south],
            [self.west, self.north],
            [self.east, self.north],
            [self.east, self.south],
            [self.west, self.south],
        ]

    def contains(self, lat: float, lon: float) -> bool:
        return self.south <= lat <= self.north and self.west <= lon <= self.east


class BoundsFailure(BaseModel):
    """Why no bounding box could be produced."""

    model_config = {"frozen": True}

    kind: Literal["domain", "degenerate"]
    detail: str


class BoundsResult(BaseModel):
    """Either a bounding box or the reason there is none."""

    model_config = {"frozen": True}

    box: BoundingBox | None = None
    failure: BoundsFailure | None = None

    @model_validator(mode="after")
    def check_exclusive(self) -> "BoundsResult":
        if (self.box is None) == (self.failure is None):
            raise ValueError("exactly one of box or failure must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.box is not None


class MortonCorners(BaseModel):
    """Morton codes of a box's SW corner, its centre and its NE corner."""

    model_config = {"frozen": True}

    sw: int
    center: int
    ne: int
    sw_distance: int = Field(description="Morton distance from the SW corner to the centre")
    ne_distance: int = Field(description="Morton distance from the centre to the NE corner")


# -----------------------------------------------------------------------------
# Query Models
# -----------------------------------------------------------------------------


class BoundsQuery(BaseModel):
    """A validated bounding box query."""

    model_config = {"frozen": True}

    location: Location
    radius_km: float = Field(..., gt=0, allow_inf_nan=False, description="Radius in kilometers")


class MortonDistanceQuery(BaseModel):
    """A validated pair of Morton codes."""

    model_config = {"frozen": True}

    a: int = Field(..., ge=0)
    b: int = Field(..., ge=0)


# -----------------------------------------------------------------------------
# Response Models
# -----------------------------------------------------------------------------


class Polygon(BaseModel):
    """GeoJSON polygon geometry."""

    type: Literal["Polygon"] = "Polygon"
    coordinates: list[list[list[float]]]


class BoundsProperties(BaseModel):
    """Properties attached to a bounding box feature."""

    center: Location
    radius_km: float
    morton: MortonCorners


class BoundsFeature(BaseModel):
    """GeoJSON feature describing a bounding box."""

    type: Literal["Feature"] = "Feature"
    bbox: list[float] = Field(description="[west, south, east, north]")
    geometry: Polygon
    properties: BoundsProperties


class MortonResponse(BaseModel):
    """Morton code of a single point."""

    lat: float
    lon: float
    code: int


class MortonDistanceResponse(BaseModel):
    """Morton distance between two codes."""

    a: int
    b: int
    distance: int = Field(description="|a - b|; an index-comparison metric, not kilometers")


# -----------------------------------------------------------------------------
# Error Models
# -----------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    detail: str | None = None
    fields: list[str] = []
