"""Utility functions for fuzzy segment recognition.

This module provides conversion helpers and reference geometry used around
the recognition layer, and exported for external code.

Conversion:
    coerce_points: Point-like values to Points.
    points_from_array / points_to_array: numpy interop.

Reference geometry:
    gift_wrap: Convex hull by gift wrapping.
    canonical_cycle: Canonical rotation of a polygon.
    min_width_squared: Brute-force squared minimal width.
    digital_line: Naive digital straight segment.

Example usage:
    Feeding a numpy contour to the recognizer::

        import numpy as np
        from fuzzyseg.utils import points_from_array
        from fuzzyseg.analysis import FuzzySegmentComputer

        contour = np.array([[0, 0], [1, 0], [2, 1], [3, 1]])
        computer = FuzzySegmentComputer(points_from_array(contour), width=1)
"""

from .geometry import (
    canonical_cycle,
    coerce_points,
    digital_line,
    gift_wrap,
    min_width_squared,
    points_from_array,
    points_to_array,
)

__all__ = [
    'coerce_points', 'points_from_array', 'points_to_array',
    'gift_wrap', 'canonical_cycle', 'min_width_squared', 'digital_line',
]
