"""
Conversions between geodetic latitude/longitude and geocentric cartesian (x/y/z)
coordinates.

q.v. Ordnance Survey 'A guide to coordinate systems in Great Britain', Section 6.
"""

__all__ = ['to_cartesian', 'to_geodetic']

import math
from typing import Union

from geodesy.coordinates import LatLon
from geodesy.datums import Datum, get_datum
from geodesy.exceptions import InvalidInputError
from geodesy.utils.logging import warn_once
from geodesy.vector import Vector3


def to_cartesian(point: LatLon) -> Vector3:
    """
    Converts a geodetic point to geocentric cartesian coordinates on the ellipsoid
    of its datum. Height above the ellipsoid is taken to be zero.

    Args:
        point:
            A LatLon

    Returns:
        Vector3 of meters from the earth's centre
    """
    phi = math.radians(point.latitude)
    lam = math.radians(point.longitude)
    a = point.datum.ellipsoid.a
    e2 = point.datum.ellipsoid.eccentricity_squared

    sin_phi, cos_phi = math.sin(phi), math.cos(phi)

    # radius of curvature in prime vertical
    nu = a / math.sqrt(1 - e2 * sin_phi * sin_phi)

    return Vector3(
        nu * cos_phi * math.cos(lam),
        nu * cos_phi * math.sin(lam),
        nu * (1 - e2) * sin_phi,
    )


def to_geodetic(vector: Vector3, datum: Union[Datum, str]) -> LatLon:
    """
    Converts geocentric cartesian coordinates to a geodetic point on the specified
    datum, using Bowring's (1985) formulation for μm precision.

    Points on the polar axis resolve to latitude ±90 with longitude 0.

    Args:
        vector:
            A Vector3 of meters from the earth's centre

        datum:
            The Datum (or datum name) of the resulting point

    Returns:
        LatLon
    """
    datum = get_datum(datum)
    a, b, _ = datum.ellipsoid
    e2 = datum.ellipsoid.eccentricity_squared
    eps2 = datum.ellipsoid.second_eccentricity_squared
    x, y, z = vector

    p = math.hypot(x, y)  # distance from minor axis
    if p == 0:
        if z == 0:
            raise InvalidInputError('The earth centre has no geodetic position')

        warn_once('Longitude is undefined on the polar axis; 0 is used.')
        return LatLon(math.copysign(90., z), 0., datum)

    r = math.hypot(p, z)  # polar radius

    # parametric latitude (Bowring eqn 17, replacing tanβ = z·a / p·b)
    tan_beta = (b * z) / (a * p) * (1 + eps2 * b / r)
    cos_beta = 1 / math.sqrt(1 + tan_beta * tan_beta)
    sin_beta = tan_beta * cos_beta

    # geodetic latitude (Bowring eqn 18)
    phi = math.atan2(
        z + eps2 * b * sin_beta ** 3,
        p - e2 * a * cos_beta ** 3
    )
    lam = math.atan2(y, x)

    return LatLon(math.degrees(phi), math.degrees(lam), datum)
