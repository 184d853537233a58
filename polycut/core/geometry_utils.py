"""Coordinate normalisation and shapely conversion helpers.

Every public operation accepts plain coordinate sequences, numpy arrays or
shapely geometries. These helpers turn all of them into tuples of
:class:`~polycut.core.types.Point` so the algorithms only ever see one
representation.
"""

from typing import Iterable, Sequence, Tuple, Union

import numpy as np
from shapely.geometry import LinearRing, LineString, Polygon
from shapely.geometry.base import BaseGeometry

from .errors import ValidationError
from .types import Point, Segment
from .validation_utils import check_finite, check_min_vertices

PolygonLike = Union[Polygon, LinearRing, np.ndarray, Sequence[Sequence[float]]]
SegmentLike = Union[Segment, LineString, np.ndarray, Sequence[Sequence[float]]]


def _coords_2d(data, what: str) -> np.ndarray:
    """Convert ``data`` to an (N, 2) float array, dropping any Z column."""
    try:
        coords = np.asarray(data, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{what} coordinates are not numeric: {exc}") from exc

    if coords.size == 0:
        return coords.reshape(0, 2)
    if coords.ndim != 2 or coords.shape[1] < 2:
        raise ValidationError(
            f"{what} must be a sequence of (x, y) pairs, got array of shape {coords.shape}"
        )
    return coords[:, :2]


def as_ring(polygon: PolygonLike) -> Tuple[Point, ...]:
    """Normalise a polygon to an open ring of at least three points.

    Shapely polygons contribute their exterior ring; holes are ignored. A
    repeated closing coordinate is dropped so the closing edge stays
    implicit.

    Args:
        polygon: Shapely Polygon or LinearRing, (N, 2) array, or sequence
            of (x, y) pairs

    Returns:
        Tuple of Points in input order

    Raises:
        ValidationError: If the ring has fewer than three distinct vertices
            or contains non-finite coordinates

    Examples:
        >>> as_ring([(0, 0), (1, 0), (1, 1), (0, 0)])
        (Point(x=0.0, y=0.0), Point(x=1.0, y=0.0), Point(x=1.0, y=1.0))
    """
    if isinstance(polygon, Polygon):
        if polygon.is_empty:
            raise ValidationError("Cannot split an empty polygon")
        data = polygon.exterior.coords
    elif isinstance(polygon, LinearRing):
        data = polygon.coords
    elif isinstance(polygon, BaseGeometry):
        raise ValidationError(f"Expected a Polygon or LinearRing, got {polygon.geom_type}")
    else:
        data = polygon

    coords = _coords_2d(data, "Polygon")
    if len(coords) > 1 and np.array_equal(coords[0], coords[-1]):
        coords = coords[:-1]

    check_finite(coords, "Polygon")
    check_min_vertices(coords, 3)
    return tuple(Point(float(x), float(y)) for x, y in coords)


def as_segment(segment: SegmentLike) -> Segment:
    """Normalise a segment given as two points or a two-point LineString.

    Raises:
        ValidationError: If the input does not hold exactly two finite points
    """
    if isinstance(segment, Segment):
        data = [segment.start, segment.end]
    elif isinstance(segment, LineString):
        data = segment.coords
    elif isinstance(segment, BaseGeometry):
        raise ValidationError(f"Expected a LineString segment, got {segment.geom_type}")
    else:
        data = segment

    coords = _coords_2d(data, "Segment")
    if len(coords) != 2:
        raise ValidationError(f"Segment needs exactly 2 points, got {len(coords)}")
    check_finite(coords, "Segment")

    (x0, y0), (x1, y1) = coords
    return Segment(Point(float(x0), float(y0)), Point(float(x1), float(y1)))


def side_of_line(point: Point, segment: Segment, tolerance: float = 0.0) -> int:
    """Report which side of the infinite line through ``segment`` a point lies on.

    Args:
        point: Point to classify
        segment: Non-degenerate segment defining the line and its direction
        tolerance: Points closer to the line than this distance count as on it

    Returns:
        1 for the left side, -1 for the right side, 0 for on the line

    Examples:
        >>> cut = Segment(Point(0.0, 0.0), Point(10.0, 0.0))
        >>> side_of_line(Point(3.0, 2.0), cut), side_of_line(Point(3.0, 0.0), cut)
        (1, 0)
    """
    (x0, y0), (x1, y1) = segment
    dx, dy = x1 - x0, y1 - y0
    cross = dx * (point.y - y0) - dy * (point.x - x0)
    if abs(cross) <= tolerance * np.hypot(dx, dy):
        return 0
    return 1 if cross > 0 else -1


def signed_area(points: Sequence[Point]) -> float:
    """Shoelace area of an open ring; positive for counter-clockwise order."""
    if len(points) < 3:
        return 0.0
    coords = np.asarray(points, dtype=float)
    x, y = coords[:, 0], coords[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)))


def to_shapely_polygon(points: Iterable[Point]) -> Polygon:
    """Build a shapely Polygon from an open ring of points."""
    return Polygon([(p.x, p.y) for p in points])


__all__ = [
    'PolygonLike',
    'SegmentLike',
    'as_ring',
    'as_segment',
    'side_of_line',
    'signed_area',
    'to_shapely_polygon',
]
