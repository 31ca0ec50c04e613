"""
Datum conversion via seven-parameter Helmert transforms
"""

__all__ = ['apply_transform', 'convert_datum']

import math
from typing import Union

import numpy as np

from geodesy.cartesian import to_cartesian, to_geodetic
from geodesy.coordinates import LatLon
from geodesy.datums import Datum, HelmertTransform, REFERENCE_DATUM, get_datum
from geodesy.vector import Vector3


def _arcseconds_to_radians(seconds: float) -> float:
    return math.radians(seconds / 3600)


def apply_transform(vector: Vector3, transform: HelmertTransform) -> Vector3:
    """
    Applies a Helmert transform to a geocentric cartesian vector, using the
    small-angle similarity transform:

        x' = tx + x·(1+s) - y·rz + z·ry
        y' = ty + x·rz + y·(1+s) - z·rx
        z' = tz - x·ry + y·rx + z·(1+s)

    Args:
        vector:
            The cartesian point, in meters

        transform:
            The HelmertTransform to apply

    Returns:
        The transformed Vector3
    """
    s1 = transform.s / 1e6 + 1  # normalize parts-per-million to (s+1)
    rx = _arcseconds_to_radians(transform.rx)
    ry = _arcseconds_to_radians(transform.ry)
    rz = _arcseconds_to_radians(transform.rz)

    rotation = np.array([
        [s1, -rz, ry],
        [rz, s1, -rx],
        [-ry, rx, s1],
    ])
    translation = np.array([transform.tx, transform.ty, transform.tz])

    return Vector3._from_array(translation + rotation @ np.array(vector.to_float()))


def convert_datum(point: LatLon, to_datum: Union[Datum, str]) -> LatLon:
    """
    Converts a point to a new datum. Only transforms to/from WGS84 are held, so
    conversions between two other datums pivot through WGS84.

    Args:
        point:
            The LatLon to convert

        to_datum:
            The target Datum (or datum name)

    Returns:
        LatLon

    Example:
        >>> convert_datum(LatLon(51.4778, -0.0016, WGS84), OSGB36)  # 51.4773°N, 000.0000°E
    """
    to_datum = get_datum(to_datum)

    if point.datum == to_datum:
        return LatLon(point.latitude, point.longitude, to_datum)

    if point.datum == REFERENCE_DATUM:
        transform = to_datum.transform

    elif to_datum == REFERENCE_DATUM:
        transform = point.datum.transform.inverse()

    else:
        point = convert_datum(point, REFERENCE_DATUM)
        transform = to_datum.transform

    return to_geodetic(apply_transform(to_cartesian(point), transform), to_datum)
