"""Core types and utilities for polycut.

This module provides the value types, configuration, exceptions and
coordinate helpers used throughout the library.
"""

from .types import (
    Point,
    Segment,
    IntersectionKind,
    VertexPolicy,
    IntersectionResult,
    SplitResult,
)

from .errors import (
    PolycutError,
    ValidationError,
    ConfigurationError,
)

from .config import SplitConfig

__all__ = [
    # Value types
    'Point',
    'Segment',
    'IntersectionKind',
    'VertexPolicy',
    'IntersectionResult',
    'SplitResult',

    # Configuration
    'SplitConfig',

    # Exceptions
    'PolycutError',
    'ValidationError',
    'ConfigurationError',
]
