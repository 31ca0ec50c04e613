"""
Representation of a geodetic point on an ellipsoidal earth
"""

__all__ = ['LatLon']

import math
from typing import Optional, Tuple, Union, TYPE_CHECKING

from geodesy.datums import Datum, WGS84, get_datum
from geodesy.exceptions import InvalidInputError
from geodesy.utils.functions import wrap180

if TYPE_CHECKING:  # pragma: no cover
    from geodesy.utm import Utm
    from geodesy.vector import Vector3


class LatLon:
    """
    Representation of a geodetic latitude/longitude pair within a datum.

    Longitudes are normalized to (-180, 180]. Latitudes must fall within [-90, 90].

    Points produced by an inverse UTM projection additionally carry the meridian
    convergence (degrees) and grid scale factor at that point.
    """

    __slots__ = ('_latitude', '_longitude', '_datum', '_convergence', '_scale')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        datum: Union[Datum, str] = WGS84,
        convergence: Optional[float] = None,
        scale: Optional[float] = None,
    ):
        try:
            lat, lon = float(latitude), float(longitude)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f'Invalid point ({latitude}, {longitude})') from exc

        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise InvalidInputError(f'Invalid point ({latitude}, {longitude})')

        if not -90 <= lat <= 90:
            raise InvalidInputError(f'Latitude {lat} outside of [-90, 90]')

        object.__setattr__(self, '_latitude', lat)
        object.__setattr__(self, '_longitude', wrap180(lon))
        object.__setattr__(self, '_datum', get_datum(datum))
        object.__setattr__(self, '_convergence', convergence)
        object.__setattr__(self, '_scale', scale)

    def __setattr__(self, key, value):
        raise AttributeError('LatLon is immutable')

    def __eq__(self, other):
        if not isinstance(other, LatLon):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.datum == other.datum
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.datum.name))

    def __repr__(self):
        return f'<LatLon({self.latitude}, {self.longitude}, {self.datum.name})>'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def datum(self) -> Datum:
        return self._datum

    @property
    def convergence(self) -> Optional[float]:
        return self._convergence

    @property
    def scale(self) -> Optional[float]:
        return self._scale

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude)
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude

    def to_cartesian(self) -> 'Vector3':
        """Converts this point to geocentric cartesian (x/y/z) coordinates"""
        from geodesy.cartesian import to_cartesian  # pylint: disable=import-outside-toplevel
        return to_cartesian(self)

    def convert_datum(self, to_datum: Union[Datum, str]) -> 'LatLon':
        """
        Converts this point to another datum.

        Example:
            >>> LatLon(51.4778, -0.0016).convert_datum('OSGB36')  # 51.4773°N, 000.0000°E
        """
        from geodesy.transform import convert_datum  # pylint: disable=import-outside-toplevel
        return convert_datum(self, to_datum)

    def to_utm(self) -> 'Utm':
        """Converts this point to a UTM coordinate"""
        from geodesy.utm import to_utm  # pylint: disable=import-outside-toplevel
        return to_utm(self)

    def distance_to(self, point: 'LatLon') -> float:
        """
        The distance in meters along a geodesic to another point (rounded to the
        millimeter), or NaN if Vincenty's formula failed to converge.
        """
        from geodesy.vincenty import distance_to  # pylint: disable=import-outside-toplevel
        return distance_to(self, point)

    def initial_bearing_to(self, point: 'LatLon') -> float:
        """The initial bearing in degrees [0, 360) towards another point, or NaN"""
        from geodesy.vincenty import initial_bearing_to  # pylint: disable=import-outside-toplevel
        return initial_bearing_to(self, point)

    def final_bearing_to(self, point: 'LatLon') -> float:
        """The final bearing in degrees [0, 360) on arriving at another point, or NaN"""
        from geodesy.vincenty import final_bearing_to  # pylint: disable=import-outside-toplevel
        return final_bearing_to(self, point)

    def destination_point(self, distance: float, initial_bearing: float) -> 'LatLon':
        """The point reached travelling a distance (meters) along a geodesic at a bearing"""
        from geodesy.vincenty import destination_point  # pylint: disable=import-outside-toplevel
        return destination_point(self, distance, initial_bearing)

    def final_bearing_on(self, distance: float, initial_bearing: float) -> float:
        """The final bearing on travelling a distance (meters) along a geodesic at a bearing"""
        from geodesy.vincenty import final_bearing_on  # pylint: disable=import-outside-toplevel
        return final_bearing_on(self, distance, initial_bearing)
