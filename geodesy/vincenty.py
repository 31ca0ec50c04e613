"""
Direct and inverse solutions of geodesics on the ellipsoid using Vincenty's formulae.

From: T Vincenty, "Direct and Inverse Solutions of Geodesics on the Ellipsoid with
application of nested equations", Survey Review, vol XXIII no 176, 1975.
www.ngs.noaa.gov/PUBS_LIB/inverse.pdf
"""

__all__ = [
    'DirectResult', 'InverseResult',
    'direct', 'inverse',
    'destination_point', 'distance_to', 'final_bearing_on',
    'final_bearing_to', 'initial_bearing_to',
]

import math
from typing import NamedTuple

from geodesy._const import (
    BEARING_PRECISION, DISTANCE_PRECISION, VINCENTY_DIRECT_MAX_ITER,
    VINCENTY_INVERSE_MAX_ITER, VINCENTY_TOLERANCE
)
from geodesy.coordinates import LatLon
from geodesy.exceptions import ConvergenceError
from geodesy.utils.functions import round_half_up, wrap180, wrap360
from geodesy.utils.logging import LOGGER


class InverseResult(NamedTuple):
    """Solution of the inverse problem. Bearings are NaN for coincident points."""
    distance: float
    initial_bearing: float
    final_bearing: float
    iterations: int


class DirectResult(NamedTuple):
    """Solution of the direct problem"""
    point: LatLon
    final_bearing: float
    iterations: int


def _a_b_coefficients(uSq: float):
    """Vincenty's A and B coefficients (eq. 3, 4)"""
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    return A, B


def _delta_sigma(B: float, sinSigma: float, cosSigma: float, cos2SigmaM: float) -> float:
    """eq. 6"""
    return B * sinSigma * (
        cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
        )
    )


def inverse(start: LatLon, end: LatLon) -> InverseResult:
    """
    Vincenty inverse calculation: the geodesic distance and bearings between two points,
    on the ellipsoid of the start point's datum.

    Args:
        start:
            The starting LatLon

        end:
            The ending LatLon. Converted to the start point's datum if it differs.

    Returns:
        InverseResult

    Raises:
        ConvergenceError: if λ > π or the formula failed to converge (nearly
            antipodal points)
    """
    if end.datum != start.datum:
        LOGGER.debug('Converting %r to datum %s', end, start.datum.name)
        end = end.convert_datum(start.datum)

    a, b, f = start.datum.ellipsoid

    lat1, lat2 = math.radians(start.latitude), math.radians(end.latitude)

    # longitude difference in (-π, π]
    L = math.radians(wrap180(end.longitude - start.longitude))
    tanU1 = (1 - f) * math.tan(lat1)
    cosU1 = 1 / math.sqrt(1 + tanU1 ** 2)
    sinU1 = tanU1 * cosU1
    tanU2 = (1 - f) * math.tan(lat2)
    cosU2 = 1 / math.sqrt(1 + tanU2 ** 2)
    sinU2 = tanU2 * cosU2

    sinLambda = cosLambda = 0.
    sinSigma, cosSigma, sigma = 0., 1., 0.
    cosSqAlpha = cos2SigmaM = 0.

    Lambda = L
    iterations = 0
    while True:
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSqSigma = (
            (cosU2 * sinLambda) ** 2 +
            (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2
        )
        if sinSqSigma == 0:
            break  # Coincident points

        sinSigma = math.sqrt(sinSqSigma)

        # eq. 15, 16
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18; equatorial line has cosSqAlpha = 0 (§6)
        cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha if cosSqAlpha != 0 else 0.

        # eq. 10, 11
        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
        Lambda_prev = Lambda
        Lambda = L + (1 - C) * f * sinAlpha * (
            sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda) > math.pi:
            raise ConvergenceError('λ > π')

        if abs(Lambda - Lambda_prev) <= VINCENTY_TOLERANCE:
            break

        iterations += 1
        if iterations >= VINCENTY_INVERSE_MAX_ITER:
            raise ConvergenceError('Formula failed to converge')

    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
    A, B = _a_b_coefficients(uSq)
    deltaSigma = _delta_sigma(B, sinSigma, cosSigma, cos2SigmaM)

    s = b * A * (sigma - deltaSigma)
    if s == 0:
        return InverseResult(s, math.nan, math.nan, iterations)

    # eq. 20, 21
    alpha1 = math.atan2(cosU2 * sinLambda, cosU1 * sinU2 - sinU1 * cosU2 * cosLambda)
    alpha2 = math.atan2(cosU1 * sinLambda, -sinU1 * cosU2 + cosU1 * sinU2 * cosLambda)

    return InverseResult(
        s,
        wrap360(math.degrees(alpha1)),
        wrap360(math.degrees(alpha2)),
        iterations
    )


def direct(start: LatLon, distance: float, initial_bearing: float) -> DirectResult:
    """
    Vincenty direct calculation: the destination point and final bearing having
    travelled a distance along a geodesic from a start point at an initial bearing.

    Args:
        start:
            The starting LatLon

        distance:
            Distance travelled along the geodesic, in meters

        initial_bearing:
            Initial bearing, in degrees from north

    Returns:
        DirectResult

    Raises:
        ConvergenceError: if the formula failed to converge (not expected for
            valid input)
    """
    a, b, f = start.datum.ellipsoid

    lat1, lon1 = math.radians(start.latitude), math.radians(start.longitude)
    alpha1 = math.radians(initial_bearing)
    sinAlpha1, cosAlpha1 = math.sin(alpha1), math.cos(alpha1)

    tanU1 = (1 - f) * math.tan(lat1)
    cosU1 = 1 / math.sqrt(1 + tanU1 ** 2)
    sinU1 = tanU1 * cosU1

    sigma1 = math.atan2(tanU1, cosAlpha1)
    sinAlpha = cosU1 * sinAlpha1
    cosSqAlpha = 1 - sinAlpha ** 2
    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
    A, B = _a_b_coefficients(uSq)

    sigma = distance / (b * A)
    iterations = 0
    while True:
        cos2SigmaM = math.cos(2 * sigma1 + sigma)
        sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
        deltaSigma = _delta_sigma(B, sinSigma, cosSigma, cos2SigmaM)
        sigma_prev = sigma
        sigma = distance / (b * A) + deltaSigma

        if abs(sigma - sigma_prev) <= VINCENTY_TOLERANCE:
            break

        iterations += 1
        if iterations >= VINCENTY_DIRECT_MAX_ITER:
            raise ConvergenceError('Formula failed to converge')

    tmp = sinU1 * sinSigma - cosU1 * cosSigma * cosAlpha1
    lat2 = math.atan2(
        sinU1 * cosSigma + cosU1 * sinSigma * cosAlpha1,
        (1 - f) * math.sqrt(sinAlpha ** 2 + tmp ** 2)
    )
    lambda_val = math.atan2(
        sinSigma * sinAlpha1,
        cosU1 * cosSigma - sinU1 * sinSigma * cosAlpha1
    )
    C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
    L = lambda_val - (1 - C) * f * sinAlpha * (
        sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
    )
    lon2 = lon1 + L

    alpha2 = math.atan2(sinAlpha, -tmp)

    return DirectResult(
        LatLon(math.degrees(lat2), math.degrees(lon2), start.datum),
        wrap360(math.degrees(alpha2)),
        iterations
    )


def distance_to(start: LatLon, end: LatLon) -> float:
    """
    The distance between two points along a geodesic, rounded to the millimeter.

    Returns:
        (float) the distance in meters, or NaN if the formula failed to converge

    Example:
        >>> distance_to(LatLon(50.06632, -5.71475), LatLon(58.64402, -3.07009))  # 969954.166
    """
    try:
        return round_half_up(inverse(start, end).distance, DISTANCE_PRECISION)
    except ConvergenceError as exc:
        LOGGER.debug('Distance from %r to %r is undefined: %s', start, end, exc)
        return math.nan


def initial_bearing_to(start: LatLon, end: LatLon) -> float:
    """
    The initial bearing (forward azimuth) from the start point along the geodesic
    to the end point.

    Returns:
        (float) degrees from north [0, 360), or NaN if the formula failed to converge
        or the points are coincident
    """
    try:
        return round_half_up(inverse(start, end).initial_bearing, BEARING_PRECISION)
    except ConvergenceError as exc:
        LOGGER.debug('Bearing from %r to %r is undefined: %s', start, end, exc)
        return math.nan


def final_bearing_to(start: LatLon, end: LatLon) -> float:
    """
    The final bearing (reverse azimuth) on arriving at the end point along the geodesic
    from the start point.

    Returns:
        (float) degrees from north [0, 360), or NaN if the formula failed to converge
        or the points are coincident
    """
    try:
        return round_half_up(inverse(start, end).final_bearing, BEARING_PRECISION)
    except ConvergenceError as exc:
        LOGGER.debug('Bearing from %r to %r is undefined: %s', start, end, exc)
        return math.nan


def destination_point(start: LatLon, distance: float, initial_bearing: float) -> LatLon:
    """
    The destination having travelled a distance (meters) along a geodesic from the
    start point at an initial bearing (degrees).

    Example:
        >>> destination_point(LatLon(-37.95103, 144.42487), 54972.271, 306.86816)
        # 37.6528°S, 143.9265°E
    """
    return direct(start, distance, initial_bearing).point


def final_bearing_on(start: LatLon, distance: float, initial_bearing: float) -> float:
    """
    The final bearing (degrees, [0, 360)) having travelled a distance (meters) along
    a geodesic from the start point at an initial bearing (degrees).
    """
    return round_half_up(
        direct(start, distance, initial_bearing).final_bearing,
        BEARING_PRECISION
    )
