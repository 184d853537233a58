"""Configuration for polygon splitting."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import ConfigurationError
from .types import VertexPolicy


@dataclass(frozen=True)
class SplitConfig:
    """Settings for :func:`polycut.split`.

    Attributes:
        tolerance: Distance in coordinate units used for parallel and
            collinear detection, segment end slack, the side-of-line test
            and the zero-area check. ``0.0`` means exact comparisons.
        vertex_policy: Treatment of cuts passing exactly through a vertex
        check_simple: Warn when the polygon is not simple (self-intersecting).
            The split is still attempted.
    """

    tolerance: float = 0.0
    vertex_policy: VertexPolicy = VertexPolicy.MERGE
    check_simple: bool = False

    def __post_init__(self):
        check_tolerance(self.tolerance)
        if not isinstance(self.vertex_policy, VertexPolicy):
            raise ConfigurationError(
                f"vertex_policy must be a VertexPolicy, got {self.vertex_policy!r}"
            )


def check_tolerance(tolerance: float) -> float:
    """Return ``tolerance`` as a float, raising if it is negative or not finite."""
    try:
        value = float(tolerance)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"tolerance must be a number, got {tolerance!r}") from exc
    if not math.isfinite(value) or value < 0:
        raise ConfigurationError(f"tolerance must be finite and >= 0, got {tolerance!r}")
    return value


__all__ = ['SplitConfig', 'check_tolerance']
