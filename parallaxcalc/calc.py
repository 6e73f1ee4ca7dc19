""" Geometric calculations feeding the parallax triangulation """

__all__ = ['chord_distance', 'observation_parallax', 'parallax_angle']

import math

from parallaxcalc._const import MEAN_EARTH_RADIUS_KM
from parallaxcalc.observations import CelestialObservation


def chord_distance(arc_length_km: float, radius_km: float = MEAN_EARTH_RADIUS_KM) -> float:
    """
    Convert a surface arc length into the straight-line (through the earth) distance
    between its endpoints, treating the arc as part of a circle of the given radius.

    Args:
        arc_length_km:
            The surface distance, in kilometers

        radius_km: (Default MEAN_EARTH_RADIUS_KM)
            The radius of the circle the arc lies on, in kilometers

    Returns:
        (float) the chord length in kilometers
    """
    theta = arc_length_km / radius_km
    chord = 2 * radius_km * abs(math.sin(theta / 2))

    # r * (arc / r) can round one ulp above the arc itself
    return min(chord, abs(arc_length_km))


def parallax_angle(ra1: float, dec1: float, ra2: float, dec2: float) -> float:
    """
    Calculate the apparent angular shift of the target between two observations.

    This is the planar (Pythagorean) separation of the right ascension and
    declination differences, not a great-circle angle, and degrades at large
    separations or near the celestial poles.

    Args:
        ra1:
            Right ascension seen from the first station, in degrees

        dec1:
            Declination seen from the first station, in degrees

        ra2:
            Right ascension seen from the second station, in degrees

        dec2:
            Declination seen from the second station, in degrees

    Returns:
        (float) the parallax angle in degrees
    """
    delta_ra = abs(ra2 - ra1)
    delta_dec = abs(dec1 - dec2)
    return math.sqrt(delta_ra ** 2 + delta_dec ** 2)


def observation_parallax(obs1: CelestialObservation, obs2: CelestialObservation) -> float:
    """Parallax angle, in degrees, between two observations of the same target"""
    return parallax_angle(
        obs1.right_ascension, obs1.declination,
        obs2.right_ascension, obs2.declination,
    )
