#!/usr/bin/env python3
"""
Print bounding boxes and Morton codes for sample coordinates.

Usage:
    python scripts/bounds_report.py [--lat LAT --lon LON]

For each coordinate and each radius from 0.01 km to 1000 km (x10 steps),
prints the SW and NE corners with their Morton codes and Morton distance
to the centre, or the reason no box exists.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from geobounds.geo import compute_bounds, corner_codes

SAMPLES = [
    (37.7749295, -122.4194155),
    (-90, -180),
    (0, -180),
    (-90, 0),
    (0, 0),
    (90, 0),
    (0, 180),
    (90, 180),
]

RADII_KM = [0.01, 0.1, 1.0, 10.0, 100.0, 1000.0]


def report(lat: float, lon: float) -> None:
    for radius in RADII_KM:
        result = compute_bounds(lat, lon, radius)
        if not result.ok:
            print(
                f"Error for ({lat:3.7f}, {lon:3.7f}) with distance {radius:3.7f} km: "
                f"[{result.failure.kind}] {result.failure.detail}\n"
            )
            continue

        box = result.box
        codes = corner_codes(box, lat, lon)
        print(f"Bounding box with distance {radius:8.3f}km [             morton # :    distance to center]")
        print(f"sw:       ({box.south: 11.7f},{box.west: 12.7f}): [{codes.sw:21d} : {codes.sw_distance:21d}]")
        print(f"center:   ({lat: 11.7f},{lon: 12.7f}): [{codes.center:21d}]")
        print(f"ne:       ({box.north: 11.7f},{box.east: 12.7f}): [{codes.ne:21d} : {codes.ne_distance:21d}]\n")


def main():
    parser = argparse.ArgumentParser(description="Bounding box and Morton code report")
    parser.add_argument("--lat", type=float, help="Latitude of a single point to report on")
    parser.add_argument("--lon", type=float, help="Longitude of a single point to report on")
    args = parser.parse_args()

    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")

    samples = [(args.lat, args.lon)] if args.lat is not None else SAMPLES
    for lat, lon in samples:
        report(lat, lon)


if __name__ == "__main__":
    main()
