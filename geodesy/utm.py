"""
Conversions between Universal Transverse Mercator coordinates and latitude/longitude.

Method based on Karney 2011 'Transverse Mercator with an accuracy of a few nanometers',
building on Krüger 1912 'Konforme Abbildung des Erdellipsoids in der Ebene'. Krüger
series to order n^6 give results accurate to 5nm for distances up to 3900km from
the central meridian.
"""

__all__ = ['Hemisphere', 'Utm', 'to_latlon', 'to_utm']

from enum import Enum
import math
from typing import List, Optional, Tuple, Union

from pydantic import validate_call

from geodesy._const import (
    CONVERGENCE_PRECISION, FALSE_EASTING, FALSE_NORTHING, GRID_PRECISION,
    LATLON_PRECISION, MGRS_LATITUDE_BANDS, SCALE_PRECISION, UTM_MAX_LATITUDE,
    UTM_MIN_LATITUDE, UTM_NEWTON_MAX_ITER, UTM_NEWTON_TOLERANCE, UTM_SCALE_FACTOR
)
from geodesy.coordinates import LatLon
from geodesy.datums import Datum, Ellipsoid, WGS84, get_datum
from geodesy.exceptions import ConvergenceError, InvalidInputError
from geodesy.utils.functions import round_half_up
from geodesy.utils.logging import LOGGER


class Hemisphere(str, Enum):
    NORTH = 'N'
    SOUTH = 'S'


class Utm:
    """
    A UTM coordinate.

    Args:
        zone:
            UTM 6° longitudinal zone (1..60 covering 180°W..180°E)

        hemisphere:
            Hemisphere.NORTH ('N') or Hemisphere.SOUTH ('S')

        easting:
            Easting in meters from the false easting (500km west of the central meridian)

        northing:
            Northing in meters from the equator (N) or from the false northing
            10,000km south of the equator (S)

        convergence:
            (Optional) Meridian convergence (bearing of grid north clockwise from
            true north), in degrees

        scale:
            (Optional) Grid scale factor
    """

    __slots__ = ('_zone', '_hemisphere', '_easting', '_northing', '_convergence', '_scale')

    @validate_call
    def __init__(
        self,
        zone: int,
        hemisphere: Hemisphere,
        easting: float,
        northing: float,
        convergence: Optional[float] = None,
        scale: Optional[float] = None,
    ):
        if not 1 <= zone <= 60:
            raise InvalidInputError(f'Invalid UTM zone {zone}; must be 1..60')

        if math.isnan(easting) or math.isnan(northing):
            raise InvalidInputError(f'Invalid UTM coordinate ({easting}, {northing})')

        object.__setattr__(self, '_zone', zone)
        object.__setattr__(self, '_hemisphere', hemisphere)
        object.__setattr__(self, '_easting', easting)
        object.__setattr__(self, '_northing', northing)
        object.__setattr__(self, '_convergence', convergence)
        object.__setattr__(self, '_scale', scale)

    def __setattr__(self, key, value):
        raise AttributeError('Utm is immutable')

    def __eq__(self, other):
        if not isinstance(other, Utm):
            return False

        return (
            self.zone == other.zone and
            self.hemisphere == other.hemisphere and
            self.easting == other.easting and
            self.northing == other.northing
        )

    def __hash__(self):
        return hash((self.zone, self.hemisphere, self.easting, self.northing))

    def __repr__(self):
        return (
            f'<Utm({self.zone}, {self.hemisphere.value}, {self.easting}, {self.northing})>'
        )

    @property
    def zone(self) -> int:
        return self._zone

    @property
    def hemisphere(self) -> Hemisphere:
        return self._hemisphere

    @property
    def easting(self) -> float:
        return self._easting

    @property
    def northing(self) -> float:
        return self._northing

    @property
    def convergence(self) -> Optional[float]:
        return self._convergence

    @property
    def scale(self) -> Optional[float]:
        return self._scale

    def to_latlon(self, datum: Union[Datum, str] = WGS84) -> LatLon:
        """Converts this coordinate to latitude/longitude"""
        return to_latlon(self, datum)


def _central_meridian(zone: int) -> float:
    """Longitude of a zone's central meridian, in degrees"""
    return (zone - 1) * 6 - 180 + 3


def _series_constants(ellipsoid: Ellipsoid) -> Tuple[float, float, float]:
    """
    Eccentricity, 3rd flattening and A (2πA is the circumference of a meridian)
    for an ellipsoid
    """
    e = math.sqrt(ellipsoid.f * (2 - ellipsoid.f))
    n = ellipsoid.third_flattening
    A = ellipsoid.a / (1 + n) * (1 + n ** 2 / 4 + n ** 4 / 64 + n ** 6 / 256)
    return e, n, A


def _alpha(n: float) -> List[float]:
    """6th order Krüger series coefficients α1..α6 (one-based; α[0] unused)"""
    n2, n3, n4, n5, n6 = n ** 2, n ** 3, n ** 4, n ** 5, n ** 6
    return [
        0.,
        1/2*n - 2/3*n2 + 5/16*n3 + 41/180*n4 - 127/288*n5 + 7891/37800*n6,
        13/48*n2 - 3/5*n3 + 557/1440*n4 + 281/630*n5 - 1983433/1935360*n6,
        61/240*n3 - 103/140*n4 + 15061/26880*n5 + 167603/181440*n6,
        49561/161280*n4 - 179/168*n5 + 6601661/7257600*n6,
        34729/80640*n5 - 3418889/1995840*n6,
        212378941/319334400*n6,
    ]


def _beta(n: float) -> List[float]:
    """6th order inverse Krüger series coefficients β1..β6 (one-based; β[0] unused)"""
    n2, n3, n4, n5, n6 = n ** 2, n ** 3, n ** 4, n ** 5, n ** 6
    return [
        0.,
        1/2*n - 2/3*n2 + 37/96*n3 - 1/360*n4 - 81/512*n5 + 96199/604800*n6,
        1/48*n2 + 1/15*n3 - 437/1440*n4 + 46/105*n5 - 1118711/3870720*n6,
        17/480*n3 - 37/840*n4 - 209/4480*n5 + 5569/90720*n6,
        4397/161280*n4 - 11/504*n5 - 830251/7257600*n6,
        4583/161280*n5 - 108847/3991680*n6,
        20648693/638668800*n6,
    ]


def _conformal_tan(tau: float, e: float) -> float:
    """τʹ, the tangent of the conformal latitude, from τ = tanφ"""
    sigma = math.sinh(e * math.atanh(e * tau / math.sqrt(1 + tau * tau)))
    return tau * math.sqrt(1 + sigma * sigma) - sigma * math.sqrt(1 + tau * tau)


def _zone_for(latitude: float, longitude: float) -> int:
    """
    The UTM zone of a point, including the Norway/Svalbard exceptions.
    Longitude 180 is treated as -180.
    """
    if longitude == 180:
        longitude = -180.

    zone = math.floor((longitude + 180) / 6) + 1

    # grid zones are 8° tall; 0°N is offset 10 into latitude bands array
    band = MGRS_LATITUDE_BANDS[math.floor(latitude / 8 + 10)]

    # Norway
    if zone == 31 and band == 'V' and longitude >= 3:
        return 32

    # Svalbard
    if band == 'X':
        if zone == 32:
            return 31 if longitude < 9 else 33
        if zone == 34:
            return 33 if longitude < 21 else 35
        if zone == 36:
            return 35 if longitude < 33 else 37

    return zone


def to_utm(point: LatLon) -> Utm:
    """
    Converts a latitude/longitude point to a UTM coordinate, using the ellipsoid of
    the point's datum.

    Args:
        point:
            A LatLon with latitude in [-80, 84]

    Returns:
        Utm, including the convergence and scale at the point

    Example:
        >>> to_utm(LatLon(48.8583, 2.2945))  # 31 N 448251.898 5411943.794
    """
    if not UTM_MIN_LATITUDE <= point.latitude <= UTM_MAX_LATITUDE:
        raise InvalidInputError(f'Latitude {point.latitude} outside UTM limits')

    zone = _zone_for(point.latitude, point.longitude)
    lambda0 = math.radians(_central_meridian(zone))

    phi = math.radians(point.latitude)
    lam = math.radians(point.longitude) - lambda0
    if lam > math.pi:
        lam -= 2 * math.pi  # longitude 180 measured from zone 1

    ellipsoid = point.datum.ellipsoid
    e, n, A = _series_constants(ellipsoid)
    alpha = _alpha(n)

    # ---- easting, northing: Karney 2011 Eq 7-14, 29, 35
    cos_lam, sin_lam, tan_lam = math.cos(lam), math.sin(lam), math.tan(lam)

    # τ ≡ tanφ, τʹ ≡ tanφʹ; prime (ʹ) indicates angles on the conformal sphere
    tau = math.tan(phi)
    tau_p = _conformal_tan(tau, e)

    xi_p = math.atan2(tau_p, cos_lam)
    eta_p = math.asinh(sin_lam / math.sqrt(tau_p * tau_p + cos_lam * cos_lam))

    xi, eta = xi_p, eta_p
    for j in range(1, 7):
        xi += alpha[j] * math.sin(2 * j * xi_p) * math.cosh(2 * j * eta_p)
        eta += alpha[j] * math.cos(2 * j * xi_p) * math.sinh(2 * j * eta_p)

    x = UTM_SCALE_FACTOR * A * eta
    y = UTM_SCALE_FACTOR * A * xi

    # ---- convergence: Karney 2011 Eq 23, 24
    p_p, q_p = 1., 0.
    for j in range(1, 7):
        p_p += 2 * j * alpha[j] * math.cos(2 * j * xi_p) * math.cosh(2 * j * eta_p)
        q_p += 2 * j * alpha[j] * math.sin(2 * j * xi_p) * math.sinh(2 * j * eta_p)

    gamma = (
        math.atan(tau_p / math.sqrt(1 + tau_p * tau_p) * tan_lam) +
        math.atan2(q_p, p_p)
    )

    # ---- scale: Karney 2011 Eq 25
    sin_phi = math.sin(phi)
    k = UTM_SCALE_FACTOR * (
        math.sqrt(1 - e * e * sin_phi * sin_phi) * math.sqrt(1 + tau * tau) /
        math.sqrt(tau_p * tau_p + cos_lam * cos_lam)
    ) * (
        A / ellipsoid.a * math.sqrt(p_p * p_p + q_p * q_p)
    )

    # shift x/y to false origins
    x += FALSE_EASTING
    if y < 0:
        y += FALSE_NORTHING

    return Utm(
        zone,
        Hemisphere.NORTH if point.latitude >= 0 else Hemisphere.SOUTH,
        round_half_up(x, GRID_PRECISION),
        round_half_up(y, GRID_PRECISION),
        round_half_up(math.degrees(gamma), CONVERGENCE_PRECISION),
        round_half_up(k, SCALE_PRECISION),
    )


def _geographic_tan(tau_p: float, e: float) -> float:
    """
    Newton-Raphson iteration for τ = tanφ from the conformal τʹ. Converges in 2-3
    iterations using IEEE 754; δτ toggles on ±1.12e-16 for e.g. 31 N 400000 5000000,
    hence the relatively large tolerance.
    """
    e2 = e * e
    tau_i = tau_p
    for iteration in range(1, UTM_NEWTON_MAX_ITER + 1):
        tau_ip = _conformal_tan(tau_i, e)
        delta = (
            (tau_p - tau_ip) / math.sqrt(1 + tau_ip * tau_ip) *
            (1 + (1 - e2) * tau_i * tau_i) / ((1 - e2) * math.sqrt(1 + tau_i * tau_i))
        )
        tau_i += delta
        if abs(delta) <= UTM_NEWTON_TOLERANCE:
            LOGGER.debug('Latitude converged after %s iterations', iteration)
            return tau_i

    raise ConvergenceError(
        f'Latitude failed to converge within {UTM_NEWTON_MAX_ITER} iterations'
    )


def to_latlon(utm: Utm, datum: Union[Datum, str] = WGS84) -> LatLon:
    """
    Converts a UTM coordinate to latitude/longitude.

    Args:
        utm:
            The Utm coordinate

        datum:
            (Default WGS84) The Datum (or datum name) whose ellipsoid the coordinate
            was projected from

    Returns:
        LatLon, carrying the convergence and scale at the point

    Example:
        >>> to_latlon(Utm(31, 'N', 448251.795, 5411932.678))  # 48°51′29.52″N, 002°17′40.20″E
    """
    datum = get_datum(datum)
    x = utm.easting - FALSE_EASTING  # ± relative to central meridian
    y = utm.northing - FALSE_NORTHING if utm.hemisphere == Hemisphere.SOUTH else utm.northing

    ellipsoid = datum.ellipsoid
    e, n, A = _series_constants(ellipsoid)
    beta = _beta(n)

    # ---- Karney 2011 Eq 15-22, 36
    eta = x / (UTM_SCALE_FACTOR * A)
    xi = y / (UTM_SCALE_FACTOR * A)

    xi_p, eta_p = xi, eta
    for j in range(1, 7):
        xi_p -= beta[j] * math.sin(2 * j * xi) * math.cosh(2 * j * eta)
        eta_p -= beta[j] * math.cos(2 * j * xi) * math.sinh(2 * j * eta)

    sinh_eta_p = math.sinh(eta_p)
    sin_xi_p, cos_xi_p = math.sin(xi_p), math.cos(xi_p)

    tau_p = sin_xi_p / math.sqrt(sinh_eta_p * sinh_eta_p + cos_xi_p * cos_xi_p)
    tau = _geographic_tan(tau_p, e)

    phi = math.atan(tau)
    lam = math.atan2(sinh_eta_p, cos_xi_p)

    # ---- convergence: Karney 2011 Eq 26, 27
    p, q = 1., 0.
    for j in range(1, 7):
        p -= 2 * j * beta[j] * math.cos(2 * j * xi) * math.cosh(2 * j * eta)
        q += 2 * j * beta[j] * math.sin(2 * j * xi) * math.sinh(2 * j * eta)

    gamma = math.atan(math.tan(xi_p) * math.tanh(eta_p)) + math.atan2(q, p)

    # ---- scale: Karney 2011 Eq 28
    sin_phi = math.sin(phi)
    k = UTM_SCALE_FACTOR * (
        math.sqrt(1 - e * e * sin_phi * sin_phi) * math.sqrt(1 + tau * tau) *
        math.sqrt(sinh_eta_p * sinh_eta_p + cos_xi_p * cos_xi_p)
    ) * (
        A / ellipsoid.a / math.sqrt(p * p + q * q)
    )

    lam += math.radians(_central_meridian(utm.zone))  # zonal to global

    # strictly, latitude rounding should be φ⋅cosφ
    return LatLon(
        round_half_up(math.degrees(phi), LATLON_PRECISION),
        round_half_up(math.degrees(lam), LATLON_PRECISION),
        datum,
        round_half_up(math.degrees(gamma), CONVERGENCE_PRECISION),
        round_half_up(k, SCALE_PRECISION),
    )
