"""Duplicate-free collection of the points of a fuzzy segment."""

from __future__ import annotations
import sys
from typing import Iterator, Optional, Set, Tuple

from ..domain.geometry import Point


class PointLedger:
    """Set of the points currently included in a fuzzy segment.

    Points are iterated in lexicographic order, which generally differs from
    the order in which they were admitted. The sorted view is cached and stays
    stable until the next successful ``add``.

    Attributes:
        max_points: Configured capacity, or None for unbounded.
    """

    def __init__(self, max_size: Optional[int] = None):
        if max_size is not None and max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self.max_points = max_size
        self._points: Set[Point] = set()
        self._sorted: Optional[Tuple[Point, ...]] = None

    def add(self, point: Point) -> bool:
        """Insert a point; returns False if it was already present."""
        if point in self._points:
            return False
        self._points.add(point)
        self._sorted = None
        return True

    def size(self) -> int:
        return len(self._points)

    def empty(self) -> bool:
        return not self._points

    def max_size(self) -> int:
        """Maximal number of points this ledger may hold."""
        return sys.maxsize if self.max_points is None else self.max_points

    def maxSize(self) -> int:
        """Same as ``max_size``."""
        return self.max_size()

    def is_full(self) -> bool:
        return self.size() >= self.max_size()

    def points(self) -> Tuple[Point, ...]:
        """Sorted snapshot of the stored points."""
        if self._sorted is None:
            self._sorted = tuple(sorted(self._points))
        return self._sorted

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points())

    def __contains__(self, point) -> bool:
        return point in self._points

    def __repr__(self) -> str:
        return f"PointLedger(size={self.size()}, max_size={self.max_points})"
