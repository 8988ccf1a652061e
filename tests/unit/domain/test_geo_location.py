"""Tests for GeoLocation value object."""

import math

import pytest

from hotel_search.domain import geo_constants as geo
from hotel_search.domain.exceptions import (
    InvalidValueError,
    NullArgumentError,
    OutOfRangeError,
)
from hotel_search.domain.value_objects.geo_location import GeoLocation


# ─── Construction ───────────────────────────────────────────────────


@pytest.mark.parametrize(
    "lat, lon",
    [
        (0.0, 0.0),
        (90.0, 0.0),
        (-90.0, 45.0),
        (12.345678, 180.0),
        (-33.8688, -180.0),
        (45.815, 15.982),
    ],
)
def test_create_valid_round_trips_inputs(lat, lon):
    loc = GeoLocation.create(lat, lon)
    assert loc.latitude == lat
    assert loc.longitude == lon


@pytest.mark.parametrize(
    "lat, lon",
    [(90.0000001, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0)],
)
def test_create_out_of_range_raises(lat, lon):
    with pytest.raises(OutOfRangeError):
        GeoLocation.create(lat, lon)


@pytest.mark.parametrize(
    "lat, lon",
    [(math.nan, 0.0), (0.0, math.nan), (math.inf, 0.0), (0.0, -math.inf)],
)
def test_create_non_finite_raises_invalid_value(lat, lon):
    with pytest.raises(InvalidValueError):
        GeoLocation.create(lat, lon)


def test_invalid_value_is_an_out_of_range_error():
    with pytest.raises(OutOfRangeError):
        GeoLocation.create(math.nan, 0.0)


def test_direct_construction_is_validated():
    with pytest.raises(OutOfRangeError):
        GeoLocation(latitude=100.0, longitude=0.0)


def test_geo_location_is_frozen():
    loc = GeoLocation.create(43.0, 76.0)
    with pytest.raises(AttributeError):
        loc.latitude = 50.0


# ─── Distance ───────────────────────────────────────────────────────


def test_distance_to_self_is_zero():
    loc = GeoLocation.create(43.238949, 76.945465)
    assert loc.distance_to(loc) == 0.0


def test_distance_to_equal_copy_is_zero():
    a = GeoLocation.create(43.238949, 76.945465)
    b = GeoLocation.create(43.238949, 76.945465)
    assert a.distance_to(b) == 0.0


def test_distance_to_none_raises():
    with pytest.raises(NullArgumentError):
        GeoLocation.create(0.0, 0.0).distance_to(None)


def test_distance_zagreb_to_vienna():
    """Zagreb to Vienna is approximately 268 km in a straight line."""
    zagreb = GeoLocation.create(45.815, 15.982)
    vienna = GeoLocation.create(48.208, 16.373)
    assert zagreb.distance_to(vienna) == pytest.approx(268, abs=15)


def test_distance_is_symmetric():
    a = GeoLocation.create(51.128207, 71.430411)
    b = GeoLocation.create(-33.8688, 151.2093)
    assert a.distance_to(b) == pytest.approx(b.distance_to(a), rel=1e-12)


@pytest.mark.parametrize(
    "a, b",
    [
        ((0.0, 0.0), (0.0, 180.0)),
        ((90.0, 0.0), (-90.0, 0.0)),
        ((45.0, 30.0), (-45.0, -150.0)),
    ],
)
def test_distance_antipodal_is_half_circumference(a, b):
    expected = math.pi * geo.EARTH_RADIUS_KM
    distance = GeoLocation.create(*a).distance_to(GeoLocation.create(*b))
    assert not math.isnan(distance)
    assert distance == pytest.approx(expected, abs=50)


def test_distance_across_antimeridian_is_short():
    west = GeoLocation.create(0.0, 179.5)
    east = GeoLocation.create(0.0, -179.5)
    assert west.distance_to(east) == pytest.approx(111.2, abs=1)


def test_distance_at_pole_ignores_longitude():
    a = GeoLocation.create(90.0, 0.0)
    b = GeoLocation.create(90.0, 123.0)
    assert a.distance_to(b) == pytest.approx(0.0, abs=1e-6)


# ─── Equality / hash ────────────────────────────────────────────────


def test_equality_within_tolerance():
    a = GeoLocation.create(45.0, 15.0)
    b = GeoLocation.create(45.00000004, 15.00000004)
    assert a.equals(b)
    assert a == b
    assert hash(a) == hash(b)


def test_inequality_beyond_tolerance():
    a = GeoLocation.create(45.0, 15.0)
    b = GeoLocation.create(45.000001, 15.0)
    assert not a.equals(b)
    assert a != b


def test_equality_with_other_types():
    loc = GeoLocation.create(1.0, 2.0)
    assert not loc.equals((1.0, 2.0))
    assert loc != (1.0, 2.0)
    assert not loc.equals(None)


def test_equal_locations_deduplicate_in_set():
    points = {
        GeoLocation.create(10.0, 20.0),
        GeoLocation.create(10.0, 20.0),
        GeoLocation.create(10.00000001, 20.0),
    }
    assert len(points) == 1


def test_str_uses_seven_decimals():
    assert str(GeoLocation.create(45.815, -15.5)) == "(45.8150000, -15.5000000)"
