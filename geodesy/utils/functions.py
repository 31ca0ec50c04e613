"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_up', 'wrap180', 'wrap360']

import math


def round_half_up(value: float, precision: int) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    NaN and infinite values are returned unchanged.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    if not math.isfinite(value):
        return value

    mod = value + math.copysign(10 ** -(precision + 12), value)

    return round(mod, precision)


def wrap180(degrees: float) -> float:
    """
    Constrains an angle to the range (-180, 180], e.g. 181 -> -179, -180 -> 180.

    Args:
        degrees:
            An angle in degrees

    Returns:
        float
    """
    if -180 < degrees <= 180:
        return degrees

    wrapped = (degrees + 180) % 360 - 180
    return 180. if wrapped == -180 else wrapped


def wrap360(degrees: float) -> float:
    """Constrains an angle (e.g. a bearing) to the range [0, 360)"""
    if 0 <= degrees < 360:
        return degrees

    wrapped = degrees % 360
    return 0. if wrapped == 360 else wrapped
