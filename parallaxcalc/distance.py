"""
Geodesic distance between observing stations.
Uses Vincenty's inverse formula on a reference ellipsoid (WGS84 by default).
"""

__all__ = [
    'CONVERGENCE_FAILURE', 'VINCENTY_MAX_ITERATIONS', 'VINCENTY_TOLERANCE',
    'is_convergence_failure', 'vincenty_distance',
]

import math

from parallaxcalc._const import WGS84, Ellipsoid
from parallaxcalc.conversion import degrees_to_radians
from parallaxcalc.coordinates import GeoPoint
from parallaxcalc.utils.functions import round_half_up
from parallaxcalc.utils.logging import LOGGER

VINCENTY_MAX_ITERATIONS = 100
VINCENTY_TOLERANCE = 1e-12

# Returned in place of a distance when the iteration fails to converge
CONVERGENCE_FAILURE = float('nan')


def is_convergence_failure(value: float) -> bool:
    """Test whether a value returned by vincenty_distance is the failure sentinel"""
    return math.isnan(value)


def vincenty_distance(
        point1: GeoPoint,
        point2: GeoPoint,
        ellipsoid: Ellipsoid = WGS84,
) -> float:
    """
    Calculate the surface distance between two points using Vincenty's inverse
    formula.

    Unlike a spherical approximation, there is no fallback when the formula fails
    to converge (usually near-antipodal points); CONVERGENCE_FAILURE is returned
    instead, and callers must check for it with is_convergence_failure() before
    using the result.

    Args:
        point1:
            The first GeoPoint

        point2:
            The second GeoPoint

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        (float) the distance in meters, rounded to the millimeter, or
        CONVERGENCE_FAILURE
    """
    a, b, f = ellipsoid

    L = degrees_to_radians(point2.longitude - point1.longitude)
    U1 = math.atan((1 - f) * math.tan(degrees_to_radians(point1.latitude)))
    U2 = math.atan((1 - f) * math.tan(degrees_to_radians(point2.latitude)))
    Lambda = L

    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    iteration = 0
    converged = False
    while iteration < VINCENTY_MAX_ITERATIONS:
        iteration += 1

        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            return 0.0  # Coincident points

        # eq. 15
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda

        # eq. 16
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18
        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            cos2SigmaM = 0  # Equatorial line

        # eq. 10
        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))

        Lambda_prev = Lambda

        # eq. 11
        Lambda = L + (1 - C) * f * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) <= VINCENTY_TOLERANCE:
            converged = True
            break

    if not converged:
        LOGGER.warning(
            'Vincenty formula failed to converge after %d iterations between %r and %r',
            VINCENTY_MAX_ITERATIONS, point1, point2
        )
        return CONVERGENCE_FAILURE

    LOGGER.debug('Vincenty formula converged after %d iterations', iteration)

    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
                cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
                B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
            )
    )

    # Millimeter precision
    return round_half_up(b * A * (sigma - deltaSigma), 3)
