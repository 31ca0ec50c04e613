import pytest
from pytest import approx

from geodesy.datums import *
from geodesy.exceptions import InvalidInputError


def test_ellipsoids():
    assert set(ELLIPSOIDS) == {
        'WGS84', 'Airy1830', 'AiryModified', 'Bessel1841', 'Clarke1866',
        'Clarke1880IGN', 'GRS80', 'Intl1924', 'WGS72'
    }
    for ellipsoid in ELLIPSOIDS.values():
        assert ellipsoid.a > ellipsoid.b > 0
        assert ellipsoid.f == approx((ellipsoid.a - ellipsoid.b) / ellipsoid.a, rel=1e-4)


def test_ellipsoid_derived_values():
    wgs84 = ELLIPSOIDS['WGS84']
    assert wgs84.a == 6378137.0
    assert wgs84.eccentricity_squared == approx(0.00669437999014, abs=1e-14)
    assert wgs84.second_eccentricity_squared == approx(0.00673949674228, abs=1e-14)
    assert wgs84.third_flattening == approx(wgs84.f / (2 - wgs84.f))


def test_helmert_inverse():
    transform = OSGB36.transform
    inverse = transform.inverse()
    assert inverse == HelmertTransform(
        446.448, -125.157, 542.060, -20.4894, 0.1502, 0.2470, 0.8421
    )
    assert inverse.inverse() == transform
    assert not transform.is_identity


def test_reference_datum():
    assert REFERENCE_DATUM is WGS84
    assert WGS84.transform.is_identity
    assert WGS84.transform.inverse().is_identity


def test_datums():
    assert set(DATUMS) == {
        'ED50', 'Irl1975', 'NAD27', 'NAD83', 'NTF', 'OSGB36', 'Potsdam',
        'TokyoJapan', 'WGS72', 'WGS84'
    }
    assert OSGB36.ellipsoid == ELLIPSOIDS['Airy1830']
    assert POTSDAM.ellipsoid == TOKYO_JAPAN.ellipsoid == ELLIPSOIDS['Bessel1841']
    assert repr(OSGB36) == '<Datum(OSGB36)>'


def test_registries_read_only():
    with pytest.raises(TypeError):
        DATUMS['Mine'] = WGS84

    with pytest.raises(TypeError):
        ELLIPSOIDS['Mine'] = ELLIPSOIDS['WGS84']


def test_get_datum():
    assert get_datum('OSGB36') is OSGB36
    assert get_datum('osgb36') is OSGB36
    assert get_datum(NAD27) is NAD27

    with pytest.raises(InvalidInputError, match='Options'):
        get_datum('made up')

    with pytest.raises(InvalidInputError):
        get_datum(5)


def test_get_ellipsoid():
    assert get_ellipsoid('grs80') == ELLIPSOIDS['GRS80']

    with pytest.raises(InvalidInputError):
        get_ellipsoid('made up')
