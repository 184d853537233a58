"""Split a simple polygon in two along a straight cut segment.

The boundary is walked once. Vertices are appended to whichever of two
output rings is currently live, and every time the cut crosses the boundary
the crossing point is appended to both rings and the live ring switches.
For a simple polygon cut by a single chord this paints each side of the
chord into its own ring.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Set, Tuple

import numpy as np
from shapely.geometry import LineString, Polygon

from .core.config import SplitConfig
from .core.geometry_utils import (
    PolygonLike,
    SegmentLike,
    as_ring,
    as_segment,
    side_of_line,
    signed_area,
)
from .core.types import Point, Segment, SplitResult, VertexPolicy
from .core.validation_utils import warn_if_not_simple
from .intersect import intersect_normalized


def split(
    polygon: PolygonLike,
    cut: SegmentLike,
    config: Optional[SplitConfig] = None,
) -> SplitResult:
    """Split ``polygon`` along ``cut``.

    Args:
        polygon: Simple polygon as a sequence of (x, y) pairs, an (N, 2)
            array or a shapely Polygon. The closing edge is implicit.
        cut: Cut segment as two (x, y) points or a two-point LineString
        config: Splitting options (tolerance, vertex policy, simplicity check)

    Returns:
        SplitResult holding both pieces in boundary order, or an empty
        (falsy) SplitResult when the cut does not cross the polygon cleanly:
        fewer than two crossings, an odd number of crossings, or a piece
        that would be empty (or degenerate, under ``VertexPolicy.MERGE``).

    Raises:
        ValidationError: If the polygon has fewer than three distinct
            vertices or the cut is not a two-point segment

    Examples:
        >>> square = [(0, 0), (10, 0), (10, 10), (0, 10)]
        >>> result = split(square, [(-5, 5), (15, 5)])
        >>> result.poly1
        (Point(x=0.0, y=0.0), Point(x=10.0, y=0.0), Point(x=10.0, y=5.0), Point(x=0.0, y=5.0))
        >>> bool(split(square, [(-5, -5), (-1, -1)]))
        False
    """
    if config is None:
        config = SplitConfig()

    ring = as_ring(polygon)
    segment = as_segment(cut)

    if config.check_simple:
        warn_if_not_simple(ring)

    if config.vertex_policy is VertexPolicy.KEEP:
        buffers, crossings = _walk_keep(ring, segment, config.tolerance)
    else:
        buffers, crossings = _walk_merge(ring, segment, config.tolerance)

    return _finish(buffers, crossings, config)


def split_polygon(
    polygon: Polygon,
    line: LineString,
    config: Optional[SplitConfig] = None,
) -> Optional[Tuple[Polygon, Polygon]]:
    """Split a shapely Polygon with a two-point LineString.

    Returns:
        The two pieces as shapely Polygons, or None if the line does not
        split the polygon
    """
    return split(polygon, line, config).to_shapely()


def _edge(ring: Tuple[Point, ...], i: int) -> Segment:
    return Segment(ring[i], ring[(i + 1) % len(ring)])


def _walk_keep(ring, segment, tolerance):
    """Classic walk: every edge hit is a crossing, vertex hits included."""
    buffers: Tuple[List[Point], List[Point]] = ([], [])
    crossings: List[Point] = []
    active = 0

    for i, vertex in enumerate(ring):
        buffers[active].append(vertex)
        hit = intersect_normalized(segment, _edge(ring, i), tolerance)
        if hit.is_point:
            buffers[0].append(hit.point)
            buffers[1].append(hit.point)
            crossings.append(hit.point)
            active = 1 - active

    return buffers, crossings


def _walk_merge(ring, segment, tolerance):
    """Walk that only counts places where the boundary passes through the cut.

    Vertices are classified by their side of the cut line. An edge whose
    ends lie strictly on opposite sides is tested with the intersector. A
    vertex on the line is a crossing only if the boundary arrives from one
    side and leaves to the other; a cut that merely touches a vertex or
    runs along an edge registers nothing there.
    """
    buffers: Tuple[List[Point], List[Point]] = ([], [])
    crossings: List[Point] = []

    (x0, y0), (x1, y1) = segment
    if np.hypot(x1 - x0, y1 - y0) <= tolerance:
        return buffers, crossings

    orientation = np.sign(signed_area(ring))
    if orientation == 0:
        return buffers, crossings

    sides = [side_of_line(vertex, segment, tolerance) for vertex in ring]
    if not any(sides):
        return buffers, crossings
    crossing_vertices = _crossing_vertices(ring, sides, segment, tolerance, orientation)

    n = len(ring)
    active = 0
    for i, vertex in enumerate(ring):
        buffers[active].append(vertex)

        if i in crossing_vertices:
            buffers[1 - active].append(vertex)
            crossings.append(vertex)
            active = 1 - active

        if sides[i] * sides[(i + 1) % n] < 0:
            hit = intersect_normalized(segment, _edge(ring, i), tolerance)
            if hit.is_point:
                buffers[0].append(hit.point)
                buffers[1].append(hit.point)
                crossings.append(hit.point)
                active = 1 - active

    return buffers, crossings


def _crossing_vertices(
    ring: Tuple[Point, ...],
    sides: Sequence[int],
    segment: Segment,
    tolerance: float,
    orientation: float,
) -> Set[int]:
    """Indices of on-line vertices where the boundary crosses the cut.

    Consecutive on-line vertices form a run along the cut line. When the
    vertices before and after a run lie on opposite sides, the boundary
    crosses the line there. For a run of several vertices the cut enters
    the interior at the reflex end, so that end is the crossing.
    """
    n = len(ring)
    start = next(i for i, side in enumerate(sides) if side != 0)
    result: Set[int] = set()

    i = start + 1
    stop = start + n
    while i < stop:
        if sides[i % n] != 0:
            i += 1
            continue

        j = i
        while sides[j % n] == 0:
            j += 1

        before, after = sides[(i - 1) % n], sides[j % n]
        if before != after:
            first, last = i % n, (j - 1) % n
            vertex = first
            if first != last:
                vertex = last if _is_reflex(ring, first, last, j % n, orientation) else first
            if _on_cut(ring[vertex], segment, tolerance):
                result.add(vertex)
        i = j

    return result


def _is_reflex(ring, first: int, last: int, following: int, orientation: float) -> bool:
    """Whether the boundary turns against its orientation after the run ends."""
    run_x = ring[last].x - ring[first].x
    run_y = ring[last].y - ring[first].y
    out_x = ring[following].x - ring[last].x
    out_y = ring[following].y - ring[last].y
    return (run_x * out_y - run_y * out_x) * orientation < 0


def _on_cut(point: Point, segment: Segment, tolerance: float) -> bool:
    """Whether a point on the cut line lies within the cut's extent."""
    (x0, y0), (x1, y1) = segment
    dx, dy = x1 - x0, y1 - y0
    length = np.hypot(dx, dy)
    along = (point.x - x0) * dx + (point.y - y0) * dy
    return -tolerance * length <= along <= dx * dx + dy * dy + tolerance * length


def _is_degenerate(piece: Sequence[Point], tolerance: float) -> bool:
    """Whether a piece encloses no area (up to a sliver ``tolerance`` wide)."""
    coords = np.asarray(piece, dtype=float)
    perimeter = np.sum(np.hypot(*(np.roll(coords, -1, axis=0) - coords).T))
    return abs(signed_area(piece)) <= tolerance * perimeter


def _finish(buffers, crossings, config: SplitConfig) -> SplitResult:
    poly1, poly2 = buffers
    count = len(crossings)

    if count < 2 or count % 2:
        return SplitResult.no_split()
    if not poly1 or not poly2:
        return SplitResult.no_split()

    if config.vertex_policy is VertexPolicy.MERGE:
        # More than one chord would need more than two pieces.
        if count != 2:
            return SplitResult.no_split()
        if len(poly1) < 3 or len(poly2) < 3:
            return SplitResult.no_split()
        if _is_degenerate(poly1, config.tolerance) or _is_degenerate(poly2, config.tolerance):
            return SplitResult.no_split()

    return SplitResult(tuple(poly1), tuple(poly2), tuple(crossings))


__all__ = ['split', 'split_polygon']
