"""Incremental convex hull with insertion at both ends of a point chain.

This module provides MelkmanHull, which keeps the convex hull of a chain of
points that grows at its front and at its back. The hull is stored as a
double-ended queue of vertices in counter-clockwise order; an insertion pops
the vertices the new point makes concave from the ends of the queue and
pushes the new point, in the manner of Melkman's algorithm.

All turn tests use exact arithmetic (see ``fuzzyseg.domain.orientation``), so
collinear configurations are decided deterministically.

Example usage:
    Building and rolling back a hull::

        from fuzzyseg.analysis.hull import MelkmanHull
        from fuzzyseg.domain import Point

        hull = MelkmanHull(Point(0, 0))
        hull.insert_at_back(Point(4, 0))
        hull.insert_at_front(Point(0, 3))
        hull.vertices           # (Point(0, 0), Point(4, 0), Point(0, 3))
        hull.insert_at_back(Point(9, 9))
        hull.rollback_last()    # hull is a triangle again
"""

from __future__ import annotations
from collections import deque
from typing import Deque, Optional, Tuple

from ..domain.geometry import Point, orientation
from ..domain.results import Side


class MelkmanHull:
    """Convex hull of a point chain, maintained incrementally.

    Invariants:
        - vertices are pairwise distinct and in counter-clockwise order;
        - three consecutive vertices always make a strict left turn, so
          collinear points are never kept as vertices;
        - with one vertex the hull is a point, with two it is a segment.

    The chain ends (``front_point`` and ``back_point``) are tracked for
    diagnostics only; the hull itself does not depend on the side a point was
    inserted at.
    """

    def __init__(self, first: Point):
        self._hull: Deque[Point] = deque([first])
        self._front = first
        self._back = first
        self._snapshot: Optional[Tuple[Deque[Point], Point, Point]] = None

    # -- queries -----------------------------------------------------------

    @property
    def vertices(self) -> Tuple[Point, ...]:
        """Hull vertices in counter-clockwise order."""
        return tuple(self._hull)

    @property
    def front_point(self) -> Point:
        """Most recent point inserted at the front of the chain."""
        return self._front

    @property
    def back_point(self) -> Point:
        """Most recent point inserted at the back of the chain."""
        return self._back

    def __len__(self) -> int:
        return len(self._hull)

    def is_degenerate(self) -> bool:
        """True when the hull is a single point or a segment."""
        return len(self._hull) < 3

    def contains(self, point: Point) -> bool:
        """Check whether a point lies on or inside the hull."""
        hull = self._hull
        n = len(hull)
        if n == 1:
            return point == hull[0]
        if n == 2:
            a, b = hull
            if orientation(a, b, point) != 0:
                return False
            return (point - a).dot(point - b) <= 0
        return all(orientation(hull[i], hull[(i + 1) % n], point) >= 0 for i in range(n))

    def is_valid(self) -> bool:
        """Structural self-check of the hull invariants."""
        hull = self._hull
        n = len(hull)
        if n == 0 or len(set(hull)) != n:
            return False
        if n < 3:
            return True
        for i in range(n):
            a, b, c = hull[i], hull[(i + 1) % n], hull[(i + 2) % n]
            if orientation(a, b, c) <= 0:
                return False
        # Strict left turns everywhere still allow a polygon winding twice.
        for i in range(n):
            a, b = hull[i], hull[(i + 1) % n]
            if any(orientation(a, b, v) < 0 for v in hull):
                return False
        return True

    # -- mutation ----------------------------------------------------------

    def insert(self, point: Point, side: Side) -> None:
        """Insert a point at one end of the chain.

        A snapshot of the current state is taken first so that the insertion
        can be undone with ``rollback_last``.
        """
        self._snapshot = (deque(self._hull), self._front, self._back)
        self._integrate(point)
        if side is Side.FRONT:
            self._front = point
        else:
            self._back = point

    def insert_at_front(self, point: Point) -> None:
        self.insert(point, Side.FRONT)

    def insert_at_back(self, point: Point) -> None:
        self.insert(point, Side.BACK)

    def rollback_last(self) -> bool:
        """Undo the most recent insertion.

        Returns:
            True if a snapshot was restored, False if there was nothing to
            undo (no insertion since construction or since the last rollback).
        """
        if self._snapshot is None:
            return False
        self._hull, self._front, self._back = self._snapshot
        self._snapshot = None
        return True

    def _integrate(self, p: Point) -> None:
        hull = self._hull
        n = len(hull)

        if n == 1:
            if p != hull[0]:
                hull.append(p)
            return

        if n == 2:
            a, b = hull
            turn = orientation(a, b, p)
            if turn > 0:
                hull.append(p)
            elif turn < 0:
                hull.clear()
                hull.extend((b, a, p))
            else:
                # collinear: keep the two extreme points
                direction = b - a
                ends = sorted((a, b, p), key=direction.dot)
                hull.clear()
                hull.extend((ends[0], ends[-1]))
            return

        # O(h) scan of every edge. The input chain need not be a simple
        # polyline, so Melkman's constant-time wedge test does not apply; the
        # width measurement after each insertion is O(h) as well.
        visible = [orientation(hull[i], hull[(i + 1) % n], p) < 0 for i in range(n)]
        if not any(visible):
            return

        # Edges seen from p form one contiguous run; find where it starts.
        start = next(i for i in range(n) if visible[i] and not visible[i - 1])
        count = 0
        while visible[(start + count) % n]:
            count += 1

        # Bring the first vertex after the run to the front; the run's inner
        # vertices then sit at the back of the queue.
        hull.rotate(-((start + count) % n))
        for _ in range(count - 1):
            hull.pop()

        while len(hull) >= 2 and orientation(hull[-2], hull[-1], p) == 0:
            hull.pop()
        while len(hull) >= 2 and orientation(p, hull[0], hull[1]) == 0:
            hull.popleft()
        hull.append(p)
