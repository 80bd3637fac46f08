"""Constants shared by the geometry kernel."""

# Mean Earth radius
EARTH_RADIUS_KM = 6371.0

MIN_LAT = -90.0
MAX_LAT = 90.0
MIN_LON = -180.0
MAX_LON = 180.0

# Below this |cos(lat)| the longitude span is unbounded
POLE_COS_EPSILON = 1e-12

# Quantization depth per axis; codes are 2 * MORTON_BITS wide
MORTON_BITS = 32
MORTON_AXIS_MAX = (1 << MORTON_BITS) - 1
MORTON_CODE_LIMIT = 1 << (2 * MORTON_BITS)
