import pytest

from parallaxcalc import GeoPoint


def test_geopoint_init():
    p = GeoPoint(1., 0.)
    assert p.latitude == 1.
    assert p.longitude == 0.

    p = GeoPoint('1.0', '0.0')
    assert p.latitude == 1.
    assert p.longitude == 0.

    # Out-of-range values are not wrapped
    assert GeoPoint(91., 181.).to_float() == (91., 181.)


def test_geopoint_immutable():
    p = GeoPoint(1., 0.)
    with pytest.raises(AttributeError):
        p.latitude = 2.


def test_geopoint_hash():
    points = [
        GeoPoint(0., 0.),
        GeoPoint(0., 0.),
        GeoPoint(1., 1.)
    ]
    assert len(set(points)) == 2
    assert GeoPoint(0., 0.) in set(points)


def test_geopoint_eq():
    assert GeoPoint(0., 0.) == GeoPoint(0., 0.)
    assert GeoPoint(0., 0.) != GeoPoint(1., 0.)
    assert GeoPoint(1., 0.) != GeoPoint(0., 1.)
    assert GeoPoint(0., 0.) != (0., 0.)


def test_geopoint_repr():
    assert repr(GeoPoint(1., 0.)) == '<GeoPoint(1.0, 0.0)>'


def test_geopoint_to_float():
    assert GeoPoint(1., 0.).to_float() == (1.0, 0.0)
