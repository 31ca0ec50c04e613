"""
Geodesy calculations on an ellipsoidal earth model: Vincenty geodesics, UTM
projection and datum conversion
"""

from geodesy._version import __version__  # noqa: F401
from geodesy.utils.logging import LOGGER
from geodesy.coordinates import LatLon
from geodesy.datums import (
    Datum, Ellipsoid, HelmertTransform, DATUMS, ELLIPSOIDS, REFERENCE_DATUM,
    ED50, IRL1975, NAD27, NAD83, NTF, OSGB36, POTSDAM, TOKYO_JAPAN, WGS72, WGS84,
    get_datum, get_ellipsoid,
)
from geodesy.exceptions import ConvergenceError, GeodesyError, InvalidInputError
from geodesy.vector import Vector3
from geodesy.cartesian import to_cartesian, to_geodetic
from geodesy.transform import apply_transform, convert_datum
from geodesy.utm import Hemisphere, Utm, to_latlon, to_utm
from geodesy.vincenty import (
    direct, inverse, destination_point, distance_to, final_bearing_on,
    final_bearing_to, initial_bearing_to,
)

__all__ = [
    'ConvergenceError',
    'Datum',
    'DATUMS',
    'ED50',
    'Ellipsoid',
    'ELLIPSOIDS',
    'GeodesyError',
    'HelmertTransform',
    'Hemisphere',
    'InvalidInputError',
    'IRL1975',
    'LatLon',
    'NAD27',
    'NAD83',
    'NTF',
    'OSGB36',
    'POTSDAM',
    'REFERENCE_DATUM',
    'TOKYO_JAPAN',
    'Utm',
    'Vector3',
    'WGS72',
    'WGS84',
    'apply_transform',
    'convert_datum',
    'destination_point',
    'direct',
    'distance_to',
    'final_bearing_on',
    'final_bearing_to',
    'get_datum',
    'get_ellipsoid',
    'initial_bearing_to',
    'inverse',
    'to_cartesian',
    'to_geodetic',
    'to_latlon',
    'to_utm',
    'LOGGER',
]
