
from parallaxcalc._version import __version__  # noqa: F401
from parallaxcalc.utils.logging import LOGGER
from parallaxcalc._const import WGS84, Ellipsoid
from parallaxcalc.coordinates import GeoPoint
from parallaxcalc.observations import CelestialObservation, Station
from parallaxcalc.distance import CONVERGENCE_FAILURE, is_convergence_failure, vincenty_distance
from parallaxcalc.calc import chord_distance, parallax_angle
from parallaxcalc.triangulation import distance_to_target, distances_to_target, triangulate

__all__ = [
    'CONVERGENCE_FAILURE',
    'CelestialObservation',
    'Ellipsoid',
    'GeoPoint',
    'Station',
    'WGS84',
    'chord_distance',
    'distance_to_target',
    'distances_to_target',
    'is_convergence_failure',
    'parallax_angle',
    'triangulate',
    'vincenty_distance',
    'LOGGER',
]
