"""Exception hierarchy for polycut.

Geometric degeneracy (parallel edges, a cut that misses the polygon) is
never an exception; it is reported through result values. Exceptions are
reserved for inputs the algorithms cannot work with at all.
"""


class PolycutError(Exception):
    """Base class for all polycut errors."""


class ValidationError(PolycutError, ValueError):
    """Input geometry does not meet a precondition.

    Raised for polygons with fewer than three distinct vertices, segments
    that are not made of exactly two points, non-finite coordinates and
    unsupported geometry types.
    """


class ConfigurationError(PolycutError, ValueError):
    """Invalid configuration value (e.g. a negative tolerance)."""


__all__ = [
    'PolycutError',
    'ValidationError',
    'ConfigurationError',
]
