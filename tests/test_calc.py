import math

from pytest import approx

from parallaxcalc._const import MEAN_EARTH_RADIUS_KM
from parallaxcalc.calc import *
from parallaxcalc.observations import CelestialObservation


def test_chord_distance():
    # A quarter of the circumference subtends a right angle
    arc = MEAN_EARTH_RADIUS_KM * math.pi / 2
    assert chord_distance(arc) == approx(MEAN_EARTH_RADIUS_KM * math.sqrt(2), rel=1e-9)

    # Half the circumference is the diameter
    arc = MEAN_EARTH_RADIUS_KM * math.pi
    assert chord_distance(arc) == approx(2 * MEAN_EARTH_RADIUS_KM, rel=1e-9)

    assert chord_distance(0.) == 0.


def test_chord_distance_shorter_than_arc():
    for arc in (100., 969.954166, 5_000., 10_000., 19_000.):
        assert chord_distance(arc) < arc

    # Converges on the arc length for short arcs
    assert chord_distance(100.) == approx(100., rel=1e-4)


def test_chord_distance_short_arcs():
    for arc in (1e-6, 1e-4, 1e-2, 0.5, 1.0, 2.0):
        chord = chord_distance(arc)
        assert chord <= arc
        assert chord == approx(arc, rel=1e-6)


def test_chord_distance_radius():
    assert chord_distance(math.pi / 3, radius_km=1.) == approx(1., rel=1e-9)


def test_chord_distance_nan():
    assert math.isnan(chord_distance(float('nan')))


def test_parallax_angle():
    assert parallax_angle(10., 20., 13., 24.) == approx(5.)
    assert parallax_angle(13., 24., 10., 20.) == approx(5.)
    assert parallax_angle(-1., -1., 1., 1.) == approx(math.sqrt(8))

    # Planar, not great-circle: identical near the pole and at the equator
    assert parallax_angle(0., 89., 1., 89.) == parallax_angle(0., 0., 1., 0.) == 1.


def test_parallax_angle_identical():
    assert parallax_angle(120.5, 18.2, 120.5, 18.2) == 0.


def test_parallax_angle_non_negative():
    values = [-180., -45.5, 0., 0.25, 33., 359.9]
    for ra1 in values:
        for dec2 in values:
            assert parallax_angle(ra1, 10., 5., dec2) >= 0.


def test_observation_parallax():
    obs1 = CelestialObservation(10., 20., 45.)
    obs2 = CelestialObservation(13., 24., 40.)
    assert observation_parallax(obs1, obs2) == approx(5.)
    assert observation_parallax(obs1, obs1) == 0.
