import pytest

from geodesy import LatLon, Vector3
from geodesy.datums import DATUMS, ED50, HelmertTransform, NAD27, OSGB36, WGS84
from geodesy.transform import apply_transform, convert_datum
from geodesy.utils.functions import round_half_up

from tests.functions import assert_latlons_equal


GREENWICH = LatLon(51.4778, -0.0016, WGS84)


def test_apply_transform():
    v = Vector3(3980581.21, -111.159, 4966824.522)
    assert apply_transform(v, HelmertTransform()) == v
    assert apply_transform(
        Vector3(10, 20, 30), HelmertTransform(1, 2, 3)
    ) == Vector3(11, 22, 33)

    # 1ppm scale change
    assert apply_transform(
        Vector3(1e6, 0, 0), HelmertTransform(s=1)
    ).x == pytest.approx(1e6 + 1, abs=1e-9)


def test_convert_datum_greenwich():
    osgb = convert_datum(GREENWICH, OSGB36)
    assert osgb.datum == OSGB36
    assert round_half_up(osgb.latitude, 4) == 51.4773
    assert round_half_up(osgb.longitude, 4) == 0.
    assert osgb.longitude == pytest.approx(0., abs=5e-5)

    # Method form and datum names
    assert GREENWICH.convert_datum('OSGB36') == osgb

    # ~3mm residual on round trip
    assert_latlons_equal(convert_datum(osgb, WGS84), GREENWICH, abs_tol=1e-7)


def test_convert_datum_same_datum():
    assert convert_datum(GREENWICH, WGS84) == GREENWICH

    point = LatLon(52.2, 0.12, OSGB36)
    assert convert_datum(point, OSGB36) == point


def test_convert_datum_pivots_through_reference():
    point = LatLon(48.8583, 2.2945, ED50)
    assert convert_datum(point, OSGB36) == convert_datum(
        convert_datum(point, WGS84), OSGB36
    )


@pytest.mark.parametrize('datum,lat,lon', [
    (OSGB36, 51.4778, -0.0016),
    (OSGB36, 55.9533, -3.1883),
    (ED50, 48.8583, 2.2945),
    (ED50, 40.4168, -3.7038),
    (NAD27, 40.7128, -74.006),
    (NAD27, 38.8977, -77.0365),
])
def test_convert_datum_round_trip(datum, lat, lon):
    point = LatLon(lat, lon)
    assert_latlons_equal(
        convert_datum(convert_datum(point, datum), WGS84),
        point,
        abs_tol=1e-7
    )


@pytest.mark.parametrize('datum', DATUMS.values())
def test_convert_datum_round_trip_all(datum):
    # Transforms are not accurate to better than a meter, and heights are dropped
    point = LatLon(35.6586, 139.7454, datum)
    for other in DATUMS.values():
        assert_latlons_equal(
            convert_datum(convert_datum(point, other), datum),
            point,
            abs_tol=1e-5
        )
