"""Domain objects for fuzzy segment recognition.

This module provides the value objects shared by the recognition layer:

Geometry:
    Point: Immutable 2D point with exact (int or Fraction) coordinates.
    Vector: Alias of Point used for free vectors.
    orientation: Exact signed-area turn test.

Strips:
    WidthBound: Strictly positive rational bound on the thickness.
    ParallelStrip: Pair of parallel lines enclosing a point set.

Outcomes:
    Side, Extension, RecognizerState, WidthMode.

Example usage:
    Working with geometry::

        from fuzzyseg.domain import Point, orientation

        a, b, c = Point(0, 0), Point(2, 0), Point(1, 1)
        orientation(a, b, c)   # 2, counter-clockwise
        Point(0.5, 1)          # Point(x=Fraction(1, 2), y=1)
"""

from .geometry import Point, Scalar, Vector, orientation, to_exact
from .results import Extension, RecognizerState, Side, WidthMode
from .strip import ParallelStrip, WidthBound

__all__ = [
    'Point', 'Vector', 'Scalar', 'orientation', 'to_exact',
    'ParallelStrip', 'WidthBound',
    'Side', 'Extension', 'RecognizerState', 'WidthMode',
]
