"""Geometry kernel: bounding boxes and Morton codes."""

from .bbox import bounding_box, bounds_for_query, check_location, check_radius, compute_bounds
from .constants import EARTH_RADIUS_KM, MORTON_BITS
from .errors import DegenerateGeometryError, DomainError, GeoError
from .morton import corner_codes, deinterleave, encode, interleave, morton_distance, quantize

__all__ = [
    "EARTH_RADIUS_KM",
    "MORTON_BITS",
    "GeoError",
    "DomainError",
    "DegenerateGeometryError",
    "check_location",
    "check_radius",
    "bounding_box",
    "compute_bounds",
    "bounds_for_query",
    "encode",
    "morton_distance",
    "quantize",
    "interleave",
    "deinterleave",
    "corner_codes",
]
