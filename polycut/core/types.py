"""Value types for polycut operations.

This module defines the points, segments and result objects passed between
the intersector, the splitter and their callers. All of them are immutable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from shapely.geometry import Polygon


class Point(NamedTuple):
    """A 2D point. Equality is exact coordinate equality."""
    x: float
    y: float


class Segment(NamedTuple):
    """A directed line segment from ``start`` to ``end``."""
    start: Point
    end: Point


class IntersectionKind(Enum):
    """Outcome category of a segment/segment intersection test.

    Attributes:
        NONE: Parallel, or the infinite lines cross outside either segment
        COLLINEAR: Both segments lie on the same infinite line
        POINT: The segments meet in a single point

    Examples:
        >>> from polycut import intersect, IntersectionKind
        >>> result = intersect([(0, 0), (2, 2)], [(0, 2), (2, 0)])
        >>> result.kind is IntersectionKind.POINT
        True
    """
    NONE = 'none'
    COLLINEAR = 'collinear'
    POINT = 'point'


class VertexPolicy(Enum):
    """How the splitter treats a cut passing exactly through a vertex.

    Attributes:
        MERGE: Count only places where the boundary passes from one side of
            the cut to the other, registering each once (default)
        KEEP: Classic walk; the crossing is registered on both edges that
            share the vertex and appears more than once in the output

    Examples:
        >>> from polycut import split, SplitConfig, VertexPolicy
        >>> square = [(0, 0), (10, 0), (10, 10), (0, 10)]
        >>> result = split(square, [(0, 0), (10, 10)])
        >>> len(result.poly1), len(result.poly2)
        (3, 3)
        >>> raw = split(square, [(0, 0), (10, 10)], SplitConfig(vertex_policy=VertexPolicy.KEEP))
        >>> len(raw.crossings)
        4
    """
    MERGE = 'merge'
    KEEP = 'keep'


@dataclass(frozen=True)
class IntersectionResult:
    """Result of :func:`polycut.intersect`.

    ``point``, ``t`` and ``u`` are only set when ``kind`` is
    :attr:`IntersectionKind.POINT`. ``t`` parametrises the first segment and
    ``u`` the second, both in ``[0, 1]`` (widened by the tolerance used).
    """

    kind: IntersectionKind
    point: Optional[Point] = None
    t: Optional[float] = None
    u: Optional[float] = None

    @property
    def is_point(self) -> bool:
        return self.kind is IntersectionKind.POINT

    @classmethod
    def none(cls) -> "IntersectionResult":
        return cls(IntersectionKind.NONE)

    @classmethod
    def collinear(cls) -> "IntersectionResult":
        return cls(IntersectionKind.COLLINEAR)

    @classmethod
    def point_at(cls, point: Point, t: float, u: float) -> "IntersectionResult":
        return cls(IntersectionKind.POINT, point, t, u)


@dataclass(frozen=True)
class SplitResult:
    """Result of :func:`polycut.split`.

    A successful split holds the two pieces as vertex tuples in boundary
    traversal order, along with the crossings inserted into both of them.
    An unsuccessful one has all three tuples empty and is falsy.
    """

    poly1: Tuple[Point, ...] = ()
    poly2: Tuple[Point, ...] = ()
    crossings: Tuple[Point, ...] = ()

    @property
    def is_split(self) -> bool:
        return bool(self.poly1) and bool(self.poly2)

    def __bool__(self) -> bool:
        return self.is_split

    @classmethod
    def no_split(cls) -> "SplitResult":
        return cls()

    def to_shapely(self) -> Optional[Tuple[Polygon, Polygon]]:
        """Return both pieces as shapely Polygons, or None if there was no split."""
        if not self.is_split:
            return None
        return Polygon(self.poly1), Polygon(self.poly2)

    def pieces(self) -> List[Tuple[Point, ...]]:
        if not self.is_split:
            return []
        return [self.poly1, self.poly2]


__all__ = [
    'Point',
    'Segment',
    'IntersectionKind',
    'VertexPolicy',
    'IntersectionResult',
    'SplitResult',
]
