"""Polycut - Split simple polygons along a straight cut.

This library computes segment intersections and splits a simple polygon
into two pieces along a user-drawn cut segment. It works on plain
coordinates and interoperates with Shapely geometries.
"""


# Intersection
from .intersect import intersect

# Splitting
from .split import split, split_polygon

# Interactive session
from .session import CutSession, SessionState

# Core types
from .core import (
    Point,
    Segment,
    IntersectionKind,
    VertexPolicy,
    IntersectionResult,
    SplitResult,
    SplitConfig,
)

# Core exceptions
from .core import (
    PolycutError,
    ValidationError,
    ConfigurationError,
)

__all__ = [

    # Intersection
    'intersect',

    # Splitting
    'split',
    'split_polygon',

    # Interactive session
    'CutSession',
    'SessionState',

    # Core types
    'Point',
    'Segment',
    'IntersectionKind',
    'VertexPolicy',
    'IntersectionResult',
    'SplitResult',
    'SplitConfig',

    # Core exceptions
    'PolycutError',
    'ValidationError',
    'ConfigurationError',
]
