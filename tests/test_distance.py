import math

import pytest

from geobee.core.geo import EARTH_RADIUS_M, GeoPoint, compute_distance_m

MONTREAL = GeoPoint(lat=45.4987, lon=-73.5703)
LAVAL = GeoPoint(lat=45.5569, lon=-73.7480)


def test_montreal_to_laval():
    assert compute_distance_m(MONTREAL, LAVAL) == pytest.approx(15297.83, abs=1.0)


def test_new_york_to_los_angeles():
    d = compute_distance_m(GeoPoint(lat=40.7128, lon=-74.0060), GeoPoint(lat=34.0522, lon=-118.2437))
    assert d / 1000 == pytest.approx(3944, abs=10)


def test_identical_points_are_zero():
    assert compute_distance_m(MONTREAL, MONTREAL) == 0.0


def test_distance_is_symmetric_and_non_negative():
    pairs = [
        (MONTREAL, LAVAL),
        (GeoPoint(lat=-77.8463, lon=166.6684), GeoPoint(lat=-75.1006, lon=123.3497)),
        (GeoPoint(lat=89.9, lon=0.0), GeoPoint(lat=89.9, lon=180.0)),
        (GeoPoint(lat=0.0, lon=0.0), GeoPoint(lat=0.0, lon=180.0)),
    ]
    for a, b in pairs:
        forward = compute_distance_m(a, b)
        assert forward > 0
        assert compute_distance_m(b, a) == pytest.approx(forward)


def test_twenty_degrees_of_latitude_across_equator():
    d = compute_distance_m(GeoPoint(lat=10.0, lon=0.0), GeoPoint(lat=-10.0, lon=0.0))
    assert d == pytest.approx(math.radians(20) * EARTH_RADIUS_M)
    assert d / 1000 == pytest.approx(2223, abs=10)


def test_date_line_crossing_is_short():
    d = compute_distance_m(GeoPoint(lat=0.0, lon=179.9), GeoPoint(lat=0.0, lon=-179.9))
    assert d < 50_000


def test_antipodal_points_are_half_circumference():
    d = compute_distance_m(GeoPoint(lat=0.0, lon=0.0), GeoPoint(lat=0.0, lon=180.0))
    assert d == pytest.approx(math.pi * EARTH_RADIUS_M)
