"""Minimal-width strip of a convex polygon by rotating calipers.

For a convex polygon the thinnest enclosing strip has one of its lines
supporting a polygon edge. WidthEstimator sweeps the edges in order while an
antipodal pointer tracks the vertex farthest from the current edge; since
that pointer only moves forward, one sweep costs time linear in the number of
hull vertices.

Widths are never compared as floats. For an edge ``a -> b`` the farthest
vertex ``v`` gives ``h = orientation(a, b, v)``; the strip normal is the
edge direction turned a quarter turn, ``N = perp(b - a)``, and the strip is
``N.a <= N.X <= N.a + h``. Euclidean widths ``h / |N|`` are ordered through
their exact squares, axis widths ``h / max(|Nx|, |Ny|)`` directly as
fractions.
"""

from __future__ import annotations
from typing import Sequence

from ..domain.geometry import Point, orientation
from ..domain.results import WidthMode
from ..domain.strip import ParallelStrip

# Normal used for a single-point hull (horizontal lines).
_DEFAULT_NORMAL = Point(0, 1)


class WidthEstimator:
    """Computes the thinnest strip enclosing a convex polygon.

    Attributes:
        mode: Thickness definition used to pick the thinnest strip.

    Example:
        >>> from fuzzyseg.domain import Point
        >>> estimator = WidthEstimator()
        >>> square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        >>> estimator.measure(square).euclidean_width
        2.0
    """

    def __init__(self, mode: WidthMode = WidthMode.EUCLIDEAN):
        self.mode = WidthMode(mode)

    def measure(self, vertices: Sequence[Point]) -> ParallelStrip:
        """Thinnest strip enclosing a convex polygon.

        Args:
            vertices: Polygon vertices in counter-clockwise order with no
                three consecutive collinear vertices, as kept by MelkmanHull.
                One or two vertices describe a point or a segment.

        Returns:
            The ParallelStrip of minimal width. Ties keep the first edge
            counting from the lexicographically smallest vertex. A point or
            a segment yields a strip of zero width, aligned with the segment,
            or horizontal for a single point.

        Raises:
            ValueError: If ``vertices`` is empty.
        """
        n = len(vertices)
        if n == 0:
            raise ValueError("cannot measure the width of an empty hull")
        if n == 1:
            p = vertices[0]
            return ParallelStrip(_DEFAULT_NORMAL, _DEFAULT_NORMAL.dot(p), 0)
        if n == 2:
            a, b = sorted(vertices)
            normal = (b - a).perpendicular()
            return ParallelStrip(normal, normal.dot(a), 0)

        # Sweep from the smallest vertex so ties break the same way
        # whatever rotation the hull queue is in.
        vertices = list(vertices)
        first = min(range(n), key=vertices.__getitem__)
        vertices = vertices[first:] + vertices[:first]

        best = None
        best_key = None
        j = 1
        for i in range(n):
            a = vertices[i]
            b = vertices[(i + 1) % n]
            if j < i + 1:
                j = i + 1
            height = orientation(a, b, vertices[j % n])
            while True:
                ahead = orientation(a, b, vertices[(j + 1) % n])
                if ahead <= height:
                    break
                j += 1
                height = ahead
            normal = (b - a).perpendicular()
            strip = ParallelStrip(normal, normal.dot(a), height)
            key = strip.width_key(self.mode)
            if best_key is None or key < best_key:
                best, best_key = strip, key

        return best

    def width(self, vertices: Sequence[Point]) -> float:
        """Width of the thinnest enclosing strip, as a float."""
        return self.measure(vertices).width(self.mode)
