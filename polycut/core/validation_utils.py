"""Precondition checks for polygon and segment input."""

from typing import Sequence
import warnings

import numpy as np
from shapely.geometry import Polygon
from shapely.validation import explain_validity

from .errors import ValidationError


def check_finite(coords: np.ndarray, what: str = "Geometry") -> None:
    """Raise ValidationError if any coordinate is NaN or infinite."""
    if not np.all(np.isfinite(coords)):
        raise ValidationError(f"{what} contains non-finite coordinates")


def check_min_vertices(coords: np.ndarray, min_vertices: int = 3) -> None:
    """Raise ValidationError unless ``coords`` has ``min_vertices`` distinct points.

    Args:
        coords: (N, 2) coordinate array of an open ring
        min_vertices: Minimum number of distinct vertices

    Examples:
        >>> check_min_vertices(np.array([[0, 0], [1, 0], [1, 1]]))
        >>> check_min_vertices(np.array([[0, 0], [1, 0], [0, 0]]))
        Traceback (most recent call last):
        ...
        polycut.core.errors.ValidationError: Polygon needs at least 3 distinct vertices, got 2
    """
    distinct = len(np.unique(coords, axis=0)) if len(coords) else 0
    if distinct < min_vertices:
        raise ValidationError(
            f"Polygon needs at least {min_vertices} distinct vertices, got {distinct}"
        )


def is_simple_ring(points: Sequence[Sequence[float]]) -> bool:
    """Check whether an open ring of points forms a simple polygon."""
    return Polygon(points).is_valid


def warn_if_not_simple(points: Sequence[Sequence[float]]) -> bool:
    """Issue a UserWarning if the ring self-intersects.

    Returns:
        True if the ring is simple, False if a warning was issued
    """
    polygon = Polygon(points)
    if polygon.is_valid:
        return True

    warnings.warn(
        f"Polygon is not simple ({explain_validity(polygon)}); split result may be malformed",
        UserWarning,
        stacklevel=3,
    )
    return False


__all__ = [
    'check_finite',
    'check_min_vertices',
    'is_simple_ring',
    'warn_if_not_simple',
]
