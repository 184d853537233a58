"""Pointer-driven cut session.

Tracks one interactive cut at a time as a small state machine so that the
geometric core can stay stateless. The session never draws anything; a
renderer reads :attr:`CutSession.shapes` and :attr:`CutSession.cut`.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from .core.config import SplitConfig
from .core.geometry_utils import PolygonLike, as_ring
from .core.types import Point, Segment, SplitResult
from .split import split


class SessionState(Enum):
    """State of a :class:`CutSession`.

    Attributes:
        IDLE: Waiting for a pointer press
        DRAGGING: A cut is being drawn
        SPLIT: The polygon has been split; further input is ignored until reset
    """
    IDLE = 'idle'
    DRAGGING = 'dragging'
    SPLIT = 'split'


class CutSession:
    """Turn pointer down/move/up events into a single polygon split.

    Examples:
        >>> session = CutSession([(0, 0), (10, 0), (10, 10), (0, 10)])
        >>> session.pointer_down(-5, 5)
        >>> session.pointer_move(3, 5)
        >>> result = session.pointer_up(15, 5)
        >>> session.state
        <SessionState.SPLIT: 'split'>
        >>> len(session.shapes)
        2
    """

    def __init__(self, polygon: PolygonLike, config: Optional[SplitConfig] = None):
        self.polygon = as_ring(polygon)
        self.config = config if config is not None else SplitConfig()
        self.state = SessionState.IDLE
        self.result: Optional[SplitResult] = None
        self._start: Optional[Point] = None
        self._current: Optional[Point] = None

    @property
    def cut(self) -> Optional[Segment]:
        """The cut being drawn (or last drawn), or None before any drag."""
        if self._start is None or self._current is None:
            return None
        return Segment(self._start, self._current)

    @property
    def shapes(self) -> List[Tuple[Point, ...]]:
        """Polygons a renderer should show for the current state."""
        if self.state is SessionState.SPLIT and self.result is not None:
            return self.result.pieces()
        return [self.polygon]

    def pointer_down(self, x: float, y: float) -> None:
        if self.state is not SessionState.IDLE:
            return
        self._start = Point(float(x), float(y))
        self._current = self._start
        self.state = SessionState.DRAGGING

    def pointer_move(self, x: float, y: float) -> None:
        if self.state is not SessionState.DRAGGING:
            return
        self._current = Point(float(x), float(y))

    def pointer_up(self, x: float, y: float) -> Optional[SplitResult]:
        """Finish the drag and attempt the split.

        Returns:
            The SplitResult of the attempt, or None if no drag was active.
            A failed attempt returns the session to IDLE so the user can
            draw again.
        """
        if self.state is not SessionState.DRAGGING:
            return None

        self._current = Point(float(x), float(y))
        result = split(self.polygon, self.cut, self.config)
        if result:
            self.result = result
            self.state = SessionState.SPLIT
        else:
            self.state = SessionState.IDLE
        return result

    def reset(self) -> None:
        self.state = SessionState.IDLE
        self.result = None
        self._start = None
        self._current = None

    def __repr__(self) -> str:
        return f"CutSession(state={self.state.value}, vertices={len(self.polygon)})"


__all__ = ['SessionState', 'CutSession']
