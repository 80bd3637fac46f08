"""
Z-order (Morton) encoding of coordinates.

Latitude and longitude are each quantized to MORTON_BITS bits and their
bits interleaved, latitude first, into a single integer. Nearby points
tend to get numerically close codes, which makes the code usable as a
one-dimensional index key.
"""

from geobounds.models import BoundingBox, MortonCorners

from .bbox import check_location
from .constants import (
    MAX_LAT,
    MAX_LON,
    MIN_LAT,
    MIN_LON,
    MORTON_AXIS_MAX,
    MORTON_BITS,
    MORTON_CODE_LIMIT,
)
from .errors import DomainError


def _spread(value: int) -> int:
    """Spread the low 32 bits of value into the even bit positions."""
    value &= 0xFFFFFFFF
    value = (value | (value << 16)) & 0x0000FFFF0000FFFF
    value = (value | (value << 8)) & 0x00FF00FF00FF00FF
    value = (value | (value << 4)) & 0x0F0F0F0F0F0F0F0F
    value = (value | (value << 2)) & 0x3333333333333333
    value = (value | (value << 1)) & 0x5555555555555555
    return value


def _compact(value: int) -> int:
    """Inverse of _spread: gather the even bit positions into 32 bits."""
    value &= 0x5555555555555555
    value = (value | (value >> 1)) & 0x3333333333333333
    value = (value | (value >> 2)) & 0x0F0F0F0F0F0F0F0F
    value = (value | (value >> 4)) & 0x00FF00FF00FF00FF
    value = (value | (value >> 8)) & 0x0000FFFF0000FFFF
    value = (value | (value >> 16)) & 0x00000000FFFFFFFF
    return value


def quantize(value: float, lo: float, hi: float) -> int:
    """
    Map value in [lo, hi] onto an unsigned MORTON_BITS-bit integer.

    The upper edge shares the last cell rather than overflowing.
    """
    normalized = (value - lo) / (hi - lo)
    return min(int(normalized * (1 << MORTON_BITS)), MORTON_AXIS_MAX)


def interleave(lat_bits: int, lon_bits: int) -> int:
    """Interleave two axis values, latitude taking the higher bit of each pair."""
    return (_spread(lat_bits) << 1) | _spread(lon_bits)


def deinterleave(code: int) -> tuple[int, int]:
    """Split a code back into its (latitude, longitude) cell indices."""
    return _compact(code >> 1), _compact(code)


def encode(lat: float, lon: float) -> int:
    """
    Encode a coordinate as a Morton code.

    Points closer than one quantization step (180 / 2**32 degrees of
    latitude, 360 / 2**32 of longitude) may share a code.

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees

    Returns:
        Unsigned integer below 2**(2 * MORTON_BITS)

    Raises:
        DomainError: If the coordinate is out of range or non-finite
    """
    lat, lon = check_location(lat, lon)
    return interleave(quantize(lat, MIN_LAT, MAX_LAT), quantize(lon, MIN_LON, MAX_LON))


def _check_code(code, name: str) -> int:
    if isinstance(code, bool) or not isinstance(code, int):
        raise DomainError(f"{name} must be an integer")
    if not 0 <= code < MORTON_CODE_LIMIT:
        raise DomainError(f"{name} is outside the Morton code range")
    return code


def morton_distance(code_a: int, code_b: int) -> int:
    """
    Absolute difference between two Morton codes.

    This is a diagnostic measure for comparing index keys, not a
    geographic distance. The Z-order curve only preserves locality within
    a cell: two neighbouring points on either side of a high-order bit
    boundary can be very far apart here, and distant points can
    occasionally be close.

    Raises:
        DomainError: If either code is not a valid Morton code
    """
    return abs(_check_code(code_a, "code_a") - _check_code(code_b, "code_b"))


def corner_codes(box: BoundingBox, lat: float, lon: float) -> MortonCorners:
    """Morton codes for a box's SW corner, its centre and its NE corner."""
    sw = encode(box.south, box.west)
    center = encode(lat, lon)
    ne = encode(box.north, box.east)
    return MortonCorners(
        sw=sw,
        center=center,
        ne=ne,
        sw_distance=morton_distance(sw, center),
        ne_distance=morton_distance(center, ne),
    )
