"""
Triangulation of the distance from two observing stations to a common target
"""

__all__ = [
    'TriangleAngles', 'distance_to_target', 'distances_to_target',
    'triangle_angles', 'triangulate',
]

from typing import NamedTuple, Tuple

import numpy as np

from parallaxcalc.calc import chord_distance, observation_parallax
from parallaxcalc.conversion import convert_from_meters
from parallaxcalc.coordinates import GeoPoint
from parallaxcalc.distance import is_convergence_failure, vincenty_distance
from parallaxcalc.observations import CelestialObservation, Station
from parallaxcalc.utils.logging import LOGGER


class TriangleAngles(NamedTuple):
    """
    Auxiliary angles (degrees) of the station/target triangle.

    A and B are the stations, M the target, O the earth's center and N the
    apex formed by the stations' horizon planes.
    """
    anb: float
    aob: float
    oab: float
    oba: float
    nab: float
    nba: float
    mab: float
    mba: float


def triangle_angles(altitude1: float, altitude2: float, parallax_angle: float) -> TriangleAngles:
    """
    Derive the interior angles at each station from the altitude and parallax
    measurements.

    Assumes OAB is isosceles (OA == OB) and that both altitudes are measured in
    the plane of the triangle. Inputs inconsistent with that configuration give
    angles that look valid but have no geometric meaning.

    Args:
        altitude1:
            Altitude of the target above the horizon at station A, in degrees

        altitude2:
            Altitude of the target above the horizon at station B, in degrees

        parallax_angle:
            The angle subtended at the target by the baseline, in degrees

    Returns:
        TriangleAngles
    """
    anb = 360 - (360 - altitude1 - altitude2 - parallax_angle)
    aob = 360 - (anb + 90 + 90)
    oab = (180 - aob) / 2
    oba = oab
    nab = 90 - oab
    nba = 90 - oba
    return TriangleAngles(
        anb=anb,
        aob=aob,
        oab=oab,
        oba=oba,
        nab=nab,
        nba=nba,
        mab=nab + altitude1,
        mba=nba + altitude2,
    )


def triangulate(
        altitude1: float,
        altitude2: float,
        parallax_angle: float,
        baseline_km: float,
) -> Tuple[float, float]:
    """
    Resolve the distance from each station to the target by the law of sines, using
    the baseline between the stations as the reference side.

    Division follows IEEE semantics: a zero parallax angle produces nan (zero
    baseline) or inf rather than raising.

    Args:
        altitude1:
            Altitude of the target at station A, in degrees

        altitude2:
            Altitude of the target at station B, in degrees

        parallax_angle:
            The parallax angle between the two observations, in degrees

        baseline_km:
            The straight-line distance between the stations, in kilometers

    Returns:
        (Tuple[float, float]) the distances from station A and station B to the
        target, in kilometers
    """
    angles = triangle_angles(altitude1, altitude2, parallax_angle)
    mab, mba, theta = np.deg2rad([angles.mab, angles.mba, parallax_angle])

    with np.errstate(divide='ignore', invalid='ignore'):
        dist_a = baseline_km * (np.sin(mba) / np.sin(theta))
        dist_b = baseline_km * (np.sin(mab) / np.sin(theta))

    if not (np.isfinite(dist_a) and np.isfinite(dist_b)):
        LOGGER.warning(
            'Triangulation produced a non-finite result (parallax angle %s, baseline %s km)',
            parallax_angle, baseline_km
        )

    return float(dist_a), float(dist_b)


def distance_to_target(station1: Station, station2: Station) -> Tuple[float, float]:
    """
    Estimate the distance from two observing stations to the target they both
    observed.

    The geodesic distance between the stations is converted to a chord, which
    serves as the triangle's baseline. A geodesic convergence failure is logged
    and propagates as nan through both results.

    Args:
        station1:
            The first Station (A)

        station2:
            The second Station (B)

    Returns:
        (Tuple[float, float]) the distances from station A and station B to the
        target, in kilometers
    """
    arc_meters = vincenty_distance(station1.location, station2.location)
    if is_convergence_failure(arc_meters):
        LOGGER.warning(
            'Baseline between %r and %r is undefined; target distances will be nan',
            station1.location, station2.location
        )

    baseline_km = chord_distance(convert_from_meters(arc_meters, 'km'))
    theta = observation_parallax(station1.observation, station2.observation)
    return triangulate(
        station1.observation.altitude,
        station2.observation.altitude,
        theta,
        baseline_km,
    )


def distances_to_target(
        lat1: float, lon1: float, ra1: float, dec1: float, alt1: float,
        lat2: float, lon2: float, ra2: float, dec2: float, alt2: float,
) -> Tuple[float, float]:
    """Convenience wrapper around distance_to_target for flat numeric inputs"""
    return distance_to_target(
        Station(GeoPoint(lat1, lon1), CelestialObservation(ra1, dec1, alt1)),
        Station(GeoPoint(lat2, lon2), CelestialObservation(ra2, dec2, alt2)),
    )
