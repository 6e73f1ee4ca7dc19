"""
Sky measurements taken from an observing station
"""

__all__ = ['CelestialObservation', 'Station']

from typing import NamedTuple

from parallaxcalc.coordinates import GeoPoint


class CelestialObservation(NamedTuple):
    """
    Angular position and elevation of the target as seen from one station at one instant.

    All values are in degrees.
    """
    right_ascension: float
    declination: float
    altitude: float


class Station(NamedTuple):
    """An observer's ground position paired with its simultaneous sky measurement"""
    location: GeoPoint
    observation: CelestialObservation
