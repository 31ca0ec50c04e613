"""
Representation of a 3-d vector, e.g. an earth-centred earth-fixed (geocentric)
cartesian position
"""

__all__ = ['Vector3']

import math
from typing import Optional, Tuple, Union

import numpy as np
from numpy.linalg import norm


class Vector3:
    """
    An immutable 3-d vector. Operations return new vectors so that they can be chained:

        v1.cross(v2).dot(v3)  # v1 × v2 ⋅ v3
    """

    __slots__ = ('_xyz',)

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, '_xyz', (float(x), float(y), float(z)))

    def __setattr__(self, key, value):
        raise AttributeError('Vector3 is immutable')

    @property
    def x(self) -> float:
        return self._xyz[0]

    @property
    def y(self) -> float:
        return self._xyz[1]

    @property
    def z(self) -> float:
        return self._xyz[2]

    @classmethod
    def _from_array(cls, arr) -> 'Vector3':
        return cls(*(float(v) for v in arr))

    def __add__(self, other: 'Vector3') -> 'Vector3':
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: Union[float, int]) -> 'Vector3':
        if not isinstance(factor, (float, int)):
            return NotImplemented
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: Union[float, int]) -> 'Vector3':
        if not isinstance(factor, (float, int)):
            return NotImplemented
        return Vector3(self.x / factor, self.y / factor, self.z / factor)

    def __neg__(self) -> 'Vector3':
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return False

        return self._xyz == other._xyz

    def __hash__(self):
        return hash(self._xyz)

    def __iter__(self):
        return iter(self._xyz)

    def __repr__(self):
        return f'<Vector3({", ".join(map(str, self._xyz))})>'

    @property
    def length(self) -> float:
        """Magnitude (norm) of this vector"""
        return float(norm(self._xyz))

    def dot(self, other: 'Vector3') -> float:
        """Dot (scalar) product of this vector and another"""
        return float(np.dot(self._xyz, other._xyz))

    def cross(self, other: 'Vector3') -> 'Vector3':
        """Cross (vector) product of this vector and another"""
        return self._from_array(np.cross(self._xyz, other._xyz))

    def unit(self) -> 'Vector3':
        """
        Normalizes this vector to its unit vector. If the vector is already a unit vector
        or is of zero magnitude, returns the vector unchanged.
        """
        length = self.length
        if length in (0., 1.):
            return self

        return self / length

    def angle_to(self, other: 'Vector3', plane_normal: Optional['Vector3'] = None) -> float:
        """
        Calculates the angle between this vector and another.

        Args:
            other:
                The second vector

            plane_normal:
                (Optional) If supplied, the angle is signed in -π..+π: positive if
                this->other is clockwise looking along the normal, negative in the
                opposite direction. Without it, the angle is always in 0..π.

        Returns:
            The angle, in radians
        """
        cross = self.cross(other)
        sign = 1.
        if plane_normal is not None:
            sign = -1. if cross.dot(plane_normal) < 0 else 1.

        return math.atan2(cross.length * sign, self.dot(other))

    def rotate_around(self, axis: 'Vector3', theta: float) -> 'Vector3':
        """
        Rotates this vector (normalized to a unit vector) around an axis.

        Args:
            axis:
                The axis being rotated around

            theta:
                The angle of rotation, in radians

        Returns:
            The rotated unit vector
        """
        # Quaternion-derived rotation matrix, see
        # en.wikipedia.org/wiki/Rotation_matrix#Rotation_matrix_from_axis_and_angle
        p = np.array(self.unit()._xyz)
        ax, ay, az = axis.unit()
        s, c = math.sin(theta), math.cos(theta)
        t = 1 - c
        q = np.array([
            [ax * ax * t + c, ax * ay * t - az * s, ax * az * t + ay * s],
            [ay * ax * t + az * s, ay * ay * t + c, ay * az * t - ax * s],
            [az * ax * t - ay * s, az * ay * t + ax * s, az * az * t + c],
        ])
        return self._from_array(q @ p)

    def to_float(self) -> Tuple[float, float, float]:
        """Returns the vector as an (x, y, z) tuple"""
        return self._xyz
