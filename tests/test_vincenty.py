import logging
import math

import pytest
from pytest import approx

from geodesy import LatLon, ConvergenceError, OSGB36
from geodesy.vincenty import *

from tests.functions import assert_latlons_equal


LANDS_END = LatLon(50.06632, -5.71475)
JOHN_O_GROATS = LatLon(58.64402, -3.07009)
FLINDERS_PEAK = LatLon(-37.95103, 144.42487)


def test_inverse():
    actual = inverse(LANDS_END, JOHN_O_GROATS)
    assert actual.distance == approx(969954.166, abs=5e-4)
    assert actual.initial_bearing == approx(9.1419, abs=5e-5)
    assert actual.final_bearing == approx(11.2972, abs=5e-5)
    assert actual.iterations >= 1


def test_distance_to():
    assert distance_to(LANDS_END, JOHN_O_GROATS) == approx(969954.166, abs=1e-6)
    assert LANDS_END.distance_to(JOHN_O_GROATS) == approx(969954.166, abs=1e-6)

    # Follow equator exactly
    assert distance_to(LatLon(0., 0.), LatLon(0., 1.)) == approx(111319.491, abs=1e-6)

    # Antipodal, but converges
    assert distance_to(LatLon(0., 0.), LatLon(0.5, 179.5)) == approx(19936288.579, abs=1e-6)


@pytest.mark.parametrize('p1,p2', [
    ((30., 30.), (60., 60.)),
    ((60., 60.), (30., 30.)),
    ((30., 60.), (60., 30.)),
    ((60., 30.), (30., 60.)),
    ((30., -30.), (60., -60.)),
    ((60., -60.), (30., -30.)),
    ((30., -60.), (60., -30.)),
    ((60., -30.), (30., -60.)),
    ((-30., -30.), (-60., -60.)),
    ((-60., -60.), (-30., -30.)),
    ((-30., -60.), (-60., -30.)),
    ((-60., -30.), (-30., -60.)),
    ((-30., 30.), (-60., 60.)),
    ((-60., 60.), (-30., 30.)),
    ((-30., 60.), (-60., 30.)),
    ((-60., 30.), (-30., 60.)),
])
def test_distance_to_quadrants(p1, p2):
    assert distance_to(LatLon(*p1), LatLon(*p2)) == approx(4015703.021, abs=1e-6)


def test_bearings_to():
    assert initial_bearing_to(LANDS_END, JOHN_O_GROATS) == approx(9.1419, abs=5e-5)
    assert final_bearing_to(LANDS_END, JOHN_O_GROATS) == approx(11.2972, abs=5e-5)
    assert LANDS_END.initial_bearing_to(JOHN_O_GROATS) == initial_bearing_to(
        LANDS_END, JOHN_O_GROATS
    )
    assert LANDS_END.final_bearing_to(JOHN_O_GROATS) == final_bearing_to(
        LANDS_END, JOHN_O_GROATS
    )

    # Follow equator exactly
    assert initial_bearing_to(LatLon(0., 0.), LatLon(0., 1.)) == 90.
    assert initial_bearing_to(LatLon(0., 1.), LatLon(0., 0.)) == 270.


def test_coincident_points():
    actual = inverse(LANDS_END, LANDS_END)
    assert actual.distance == 0.
    assert math.isnan(actual.initial_bearing)
    assert math.isnan(actual.final_bearing)

    assert distance_to(LANDS_END, LANDS_END) == 0.
    assert math.isnan(initial_bearing_to(LANDS_END, LANDS_END))
    assert math.isnan(final_bearing_to(LANDS_END, LANDS_END))


def test_antipodal_convergence_failure(caplog):
    c1, c2 = LatLon(0., 0.), LatLon(0.5, 179.7)
    with pytest.raises(ConvergenceError):
        inverse(c1, c2)

    # Convergence errors are also ArithmeticErrors
    with pytest.raises(ArithmeticError):
        inverse(c1, c2)

    caplog.set_level(logging.DEBUG, logger='geodesy')
    assert math.isnan(distance_to(c1, c2))
    assert math.isnan(initial_bearing_to(c1, c2))
    assert math.isnan(final_bearing_to(c1, c2))
    assert 'undefined' in caplog.text


def test_inverse_symmetry():
    forward = inverse(LANDS_END, JOHN_O_GROATS)
    reverse = inverse(JOHN_O_GROATS, LANDS_END)
    assert forward.distance == approx(reverse.distance, abs=1e-6)
    assert forward.initial_bearing == approx((reverse.final_bearing - 180) % 360, abs=1e-8)
    assert forward.final_bearing == approx((reverse.initial_bearing - 180) % 360, abs=1e-8)


def test_inverse_across_antimeridian():
    west, east = LatLon(0., 179.5), LatLon(0., -179.5)
    assert distance_to(west, east) == approx(111319.491, abs=1e-3)
    assert distance_to(east, west) == approx(111319.491, abs=1e-3)
    assert initial_bearing_to(west, east) == approx(90.)
    assert final_bearing_to(west, east) == approx(90.)
    assert initial_bearing_to(east, west) == approx(270.)

    # Same geometry either side of the antimeridian
    assert distance_to(LatLon(0., -0.5), LatLon(0., 0.5)) == distance_to(west, east)

    forward = inverse(LatLon(10., 179.5), LatLon(-5., -178.))
    reverse = inverse(LatLon(-5., -178.), LatLon(10., 179.5))
    assert forward.distance == approx(reverse.distance, abs=1e-6)
    assert forward.initial_bearing == approx((reverse.final_bearing - 180) % 360, abs=1e-8)
    assert forward.final_bearing == approx((reverse.initial_bearing - 180) % 360, abs=1e-8)
    assert 90. < forward.initial_bearing < 180.


def test_inverse_across_datums():
    # The end point is converted to the start point's datum
    osgb = LANDS_END.convert_datum(OSGB36)
    assert distance_to(LANDS_END, osgb) == approx(0., abs=0.01)
    assert distance_to(osgb, LANDS_END) == 0.


def test_direct():
    actual = direct(FLINDERS_PEAK, 54972.271, 306.86816)
    assert actual.point.latitude == approx(-37.6528, abs=5e-5)
    assert actual.point.longitude == approx(143.9265, abs=5e-5)
    assert actual.point.datum == FLINDERS_PEAK.datum
    assert actual.final_bearing == approx(307.1736, abs=5e-5)


def test_destination_point():
    assert_latlons_equal(
        destination_point(FLINDERS_PEAK, 54972.271, 306.86816),
        LatLon(-37.6528, 143.9265),
        abs_tol=5e-5
    )
    assert FLINDERS_PEAK.destination_point(54972.271, 306.86816) == destination_point(
        FLINDERS_PEAK, 54972.271, 306.86816
    )

    # Coincident destination
    assert_latlons_equal(
        destination_point(LANDS_END, 0., 0.),
        LANDS_END,
        abs_tol=1e-12
    )

    # Crossing the antimeridian normalizes longitude
    actual = destination_point(LatLon(0., 179.9), 100_000., 90.)
    assert -180 < actual.longitude < -179


def test_final_bearing_on():
    assert final_bearing_on(FLINDERS_PEAK, 54972.271, 306.86816) == approx(307.1736, abs=5e-5)
    assert FLINDERS_PEAK.final_bearing_on(54972.271, 306.86816) == final_bearing_on(
        FLINDERS_PEAK, 54972.271, 306.86816
    )


@pytest.mark.parametrize('p1,p2', [
    (LANDS_END, JOHN_O_GROATS),
    (FLINDERS_PEAK, LatLon(-37.6528, 143.9265)),
    (LatLon(40.7128, -74.006), LatLon(51.4778, -0.0016)),
    (LatLon(-33.857, 151.215), LatLon(35.6586, 139.7454)),
    (LatLon(10., 179.), LatLon(-10., -179.)),
])
def test_direct_inverse_consistency(p1, p2):
    solution = inverse(p1, p2)
    actual = direct(p1, solution.distance, solution.initial_bearing)
    assert_latlons_equal(actual.point, p2, abs_tol=1e-8)
    assert actual.final_bearing == approx(solution.final_bearing, abs=1e-8)
