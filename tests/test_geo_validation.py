from decimal import Decimal

import pytest

from geobee.core.geo import (
    GeoPoint,
    is_valid_coordinate,
    is_valid_latitude,
    is_valid_longitude,
    parse_coordinate,
    parse_latitude,
)


@pytest.mark.parametrize(
    "value",
    [0, 45.5, -45.5, 90, -90, 90.0, "90", "+90.000000", "-0", "89.999999", "45.500000", Decimal("45.123456"), 1e-05],
)
def test_valid_latitudes(value):
    assert is_valid_latitude(value)


@pytest.mark.parametrize(
    "value",
    [
        91,
        -91,
        100,
        90.000001,
        "90.5",
        "45.1234567",  # 7 fractional digits
        1e-07,
        "045",
        "45.",
        ".5",
        " 45",
        "abc",
        "",
        None,
        True,
        [45],
        (45,),
        {"lat": 45},
        float("nan"),
        float("inf"),
    ],
)
def test_invalid_latitudes(value):
    assert not is_valid_latitude(value)


def test_longitude_bounds():
    assert is_valid_longitude(180)
    assert is_valid_longitude("-180.000000")
    assert is_valid_longitude("179.999999")
    assert is_valid_longitude(100)

    assert not is_valid_longitude(181)
    assert not is_valid_longitude(-181)
    assert not is_valid_longitude(180.5)
    assert not is_valid_longitude("200")
    assert not is_valid_longitude("180.0000001")


def test_is_valid_coordinate_pairs():
    assert is_valid_coordinate(45.5, -73.5)
    assert is_valid_coordinate(90, 180)
    assert is_valid_coordinate(-90, -180)
    assert is_valid_coordinate("45.500000", "-73.500000")

    assert not is_valid_coordinate(91, 50)
    assert not is_valid_coordinate(45, 181)
    assert not is_valid_coordinate([45], [73])
    assert not is_valid_coordinate([45.5], -73.5)


def test_parse_returns_floats_or_none():
    assert parse_latitude("+45.25") == 45.25
    assert parse_latitude("90.1") is None
    assert parse_coordinate("45.5", "-73.5") == GeoPoint(lat=45.5, lon=-73.5)
    assert parse_coordinate(45.5, 200) is None
