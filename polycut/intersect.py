"""Segment/segment intersection.

Both segments are written parametrically, ``A0 + t * (A1 - A0)`` and
``B0 + u * (B1 - B0)``, and solved for ``t`` and ``u`` with Cramer's rule.
"""

from __future__ import annotations

import math

from .core.config import check_tolerance
from .core.geometry_utils import SegmentLike, as_segment
from .core.types import IntersectionResult, Point, Segment


def intersect(
    segment_a: SegmentLike,
    segment_b: SegmentLike,
    tolerance: float = 0.0,
) -> IntersectionResult:
    """Intersect two finite line segments.

    Endpoints are inclusive: a segment touching the other at ``t`` or ``u``
    equal to 0 or 1 counts as a hit. Collinear segments, including
    zero-length ones, are reported as ``COLLINEAR`` without computing any
    overlap.

    Args:
        segment_a: First segment, as two (x, y) points or a LineString
        segment_b: Second segment
        tolerance: Distance in coordinate units. Segments whose directions
            drift apart by at most this much are parallel, a segment within
            it of the other's line is collinear, and each segment is
            extended by it at both ends

    Returns:
        IntersectionResult with kind NONE, COLLINEAR or POINT. For POINT the
        point lies on ``segment_a`` at parameter ``t`` and on ``segment_b``
        at parameter ``u``.

    Examples:
        >>> intersect([(0, 0), (2, 2)], [(0, 2), (2, 0)]).point
        Point(x=1.0, y=1.0)
        >>> intersect([(0, 0), (1, 0)], [(0, 1), (1, 1)]).kind
        <IntersectionKind.NONE: 'none'>
    """
    return intersect_normalized(
        as_segment(segment_a),
        as_segment(segment_b),
        check_tolerance(tolerance),
    )


def intersect_normalized(a: Segment, b: Segment, tolerance: float = 0.0) -> IntersectionResult:
    """Same as :func:`intersect` for already-normalised segments, without input checks."""
    (ax0, ay0), (ax1, ay1) = a
    (bx0, by0), (bx1, by1) = b

    adx, ady = ax1 - ax0, ay1 - ay0
    bdx, bdy = bx1 - bx0, by1 - by0

    denom = bdy * adx - bdx * ady
    num_t = bdx * (ay0 - by0) - bdy * (ax0 - bx0)
    num_u = adx * (ay0 - by0) - ady * (ax0 - bx0)

    len_a = math.hypot(adx, ady)
    len_b = math.hypot(bdx, bdy)

    # denom = |A| |B| sin(angle); parallel when the longer segment drifts
    # off the other's direction by at most tolerance.
    if abs(denom) <= tolerance * min(len_a, len_b):
        # num_t and num_u are distances to the other line scaled by its length.
        if abs(num_t) <= tolerance * len_b and abs(num_u) <= tolerance * len_a:
            return IntersectionResult.collinear()
        # A zero-length segment has no direction; it cannot cross anything.
        if len_a <= tolerance or len_b <= tolerance:
            return IntersectionResult.collinear()
        return IntersectionResult.none()

    t = num_t / denom
    u = num_u / denom

    slack_t = tolerance / len_a
    slack_u = tolerance / len_b
    if -slack_t <= t <= 1.0 + slack_t and -slack_u <= u <= 1.0 + slack_u:
        point = Point(ax0 + t * adx, ay0 + t * ady)
        return IntersectionResult.point_at(point, t, u)

    return IntersectionResult.none()


__all__ = ['intersect', 'intersect_normalized']
