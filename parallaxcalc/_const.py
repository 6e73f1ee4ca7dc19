"""
Constants declarations for parallaxcalc
"""

__all__ = [
    'Ellipsoid', 'MEAN_EARTH_RADIUS_KM', 'WGS84', 'WGS84_A', 'WGS84_B', 'WGS84_F'
]

from typing import NamedTuple


class Ellipsoid(NamedTuple):
    """Reference ellipsoid parameters"""
    a: float  # Semi-major axis (meters)
    b: float  # Semi-minor axis (meters)
    f: float  # Flattening


# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0
WGS84_B = 6356752.3142
WGS84_F = 1 / 298.257223563
WGS84 = Ellipsoid(WGS84_A, WGS84_B, WGS84_F)

# Mean Earth radius for chord conversion (kilometers). Not derived from WGS84.
MEAN_EARTH_RADIUS_KM = 6356.7523142
