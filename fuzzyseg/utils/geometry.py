"""Geometric utility functions.

This module provides reference algorithms and conversion helpers that
supplement the incremental recognition layer. The reference algorithms do not
share code with MelkmanHull and WidthEstimator and are used to cross-check
them.

The module provides the following functions:
    coerce_points: Convert an iterable of point-like values to Points.
    points_from_array: Convert an Nx2 numpy array to exact Points.
    points_to_array: Convert Points to an Nx2 float array.
    gift_wrap: Convex hull by gift wrapping (Jarvis march).
    canonical_cycle: Rotate a polygon so that its smallest vertex comes first.
    min_width_squared: Brute-force squared minimal width of a point set.
    digital_line: Integer points of a naive digital straight segment.

Example usage:
    Cross-checking a hull::

        from fuzzyseg.utils.geometry import canonical_cycle, coerce_points, gift_wrap

        points = coerce_points([(0, 0), (3, 0), (1, 1), (0, 3)])
        canonical_cycle(gift_wrap(points))
        # [Point(0, 0), Point(3, 0), Point(0, 3)]
"""

from __future__ import annotations

from fractions import Fraction
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..domain.geometry import Point, orientation


def coerce_points(values: Iterable) -> List[Point]:
    """Convert Points, 2-sequences or numpy rows to a list of Points."""
    return [Point.coerce(v) for v in values]


def points_from_array(array) -> List[Point]:
    """Convert an Nx2 array to exact Points.

    Integer arrays give integer coordinates; float arrays give the exact
    Fractions of their binary values.

    Args:
        array: Array-like of shape (N, 2).

    Returns:
        List of N Points.

    Raises:
        ValueError: If the array is not of shape (N, 2).
    """
    arr = np.asarray(array)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must be an Nx2 array, got shape {arr.shape}")
    if np.issubdtype(arr.dtype, np.integer):
        return [Point(int(x), int(y)) for x, y in arr.tolist()]
    return [Point(float(x), float(y)) for x, y in arr.tolist()]


def points_to_array(points: Iterable[Point]) -> np.ndarray:
    """Convert Points to an Nx2 float64 array."""
    rows = [(float(p.x), float(p.y)) for p in points]
    if not rows:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array(rows, dtype=np.float64)


def gift_wrap(points: Iterable[Point]) -> List[Point]:
    """Convex hull of a point set by gift wrapping.

    Collinear points on hull edges are dropped, so the result has the same
    shape as MelkmanHull: counter-clockwise, strictly convex, one vertex for
    a single point and two for a segment.

    Args:
        points: Points; duplicates are allowed.

    Returns:
        Hull vertices in counter-clockwise order starting from the
        lexicographically smallest point. Empty for an empty input.
    """
    unique = sorted(set(points))
    if len(unique) <= 1:
        return unique

    start = unique[0]
    hull = [start]
    current = start
    while True:
        candidate: Optional[Point] = None
        for p in unique:
            if p == current:
                continue
            if candidate is None:
                candidate = p
                continue
            turn = orientation(current, candidate, p)
            # Take the most clockwise point, the farthest one among collinear.
            if turn < 0 or (turn == 0 and
                            (p - current).norm_squared() > (candidate - current).norm_squared()):
                candidate = p
        if candidate == start:
            break
        hull.append(candidate)
        current = candidate
        if len(hull) > len(unique):
            raise RuntimeError("gift wrapping did not close")
    return hull


def canonical_cycle(vertices: Sequence[Point]) -> List[Point]:
    """Rotate a polygon so that its lexicographically smallest vertex is first."""
    if not vertices:
        return []
    first = min(range(len(vertices)), key=lambda i: vertices[i])
    return list(vertices[first:]) + list(vertices[:first])


def min_width_squared(points: Iterable[Point]) -> Fraction:
    """Squared Euclidean width of a point set, by brute force.

    Every direction defined by two distinct points is tried as a strip
    direction; this covers every hull edge direction. Runs in O(n^3) and is
    meant for small sets only.

    Returns:
        The exact squared width; 0 for fewer than three distinct points or
        collinear points.
    """
    unique = sorted(set(points))
    best: Optional[Fraction] = None
    for i, a in enumerate(unique):
        for b in unique[i + 1:]:
            heights = [orientation(a, b, p) for p in unique]
            spread = max(heights) - min(heights)
            value = Fraction(spread) ** 2 / (b - a).norm_squared()
            if best is None or value < best:
                best = value
    return best if best is not None else Fraction(0)


def digital_line(start: Tuple[int, int], end: Tuple[int, int]) -> List[Point]:
    """Naive digital straight segment between two integer points.

    One point is produced per step along the dominant axis; the other
    coordinate is the real line's value rounded half up, in exact integer
    arithmetic. The result is 8-connected, includes both ends, and every
    point lies within half a pixel of the real line along the minor axis,
    so it always fits a strip thinner than 1.

    Args:
        start: First point as an (x, y) integer pair.
        end: Last point as an (x, y) integer pair.

    Returns:
        Points from ``start`` to ``end``.

    Example:
        >>> [p.to_tuple() for p in digital_line((0, 0), (5, 3))]
        [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2), (5, 3)]
    """
    x0, y0 = start
    dx, dy = end[0] - x0, end[1] - y0
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return [Point(x0, y0)]

    def rounded(k, delta):
        # round(k * delta / steps), ties toward +inf
        return (2 * k * delta + steps) // (2 * steps)

    return [Point(x0 + rounded(k, dx), y0 + rounded(k, dy)) for k in range(steps + 1)]
