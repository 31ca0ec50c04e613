"""
Exceptions raised by geodesy
"""

__all__ = ['GeodesyError', 'InvalidInputError', 'ConvergenceError']


class GeodesyError(Exception):
    """Base class for all geodesy errors"""


class InvalidInputError(GeodesyError, ValueError):
    """
    A value handed to geodesy cannot be used, e.g. a NaN latitude, a point outside
    the UTM latitude limits, or an unknown datum name.
    """


class ConvergenceError(GeodesyError, ArithmeticError):
    """
    An iterative formula failed to converge within its iteration budget.

    For Vincenty's inverse formula this is a known limitation of the method for
    nearly-antipodal points, not a bug.
    """
