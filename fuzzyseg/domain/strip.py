"""Strip primitive and width bound.

This module provides the value objects produced and consumed by the
recognizer:
    WidthBound: Strictly positive rational bound on the strip thickness.
    ParallelStrip: Two parallel lines ``mu <= N.X <= mu + nu`` enclosing
        a point set.

All quantities are exact. The strip normal ``N`` is not normalized, so that
it can be built from integer hull edges without square roots; widths in
Euclidean units are exposed either squared (exact) or as floats.

Example usage:
    Checking a strip against a bound::

        from fuzzyseg.domain import ParallelStrip, Point, WidthBound

        strip = ParallelStrip(normal=Point(-1, 2), mu=0, nu=3)
        bound = WidthBound.coerce((3, 2))
        strip.is_thinner_than(bound)   # 3 / sqrt(5) < 1.5 -> True
        strip.contains(Point(1, 1))    # 0 <= 1 <= 3 -> True
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict, Tuple
import math

import numpy as np

from .geometry import Point, Scalar, to_exact
from .results import WidthMode


@dataclass(frozen=True)
class WidthBound:
    """Strictly positive rational bound on the strip thickness."""
    value: Fraction

    def __post_init__(self):
        value = Fraction(to_exact(self.value))
        if value <= 0:
            raise ValueError(f"width bound must be positive, got {value}")
        object.__setattr__(self, 'value', value)

    @property
    def numerator(self) -> int:
        return self.value.numerator

    @property
    def denominator(self) -> int:
        return self.value.denominator

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def coerce(cls, width) -> WidthBound:
        """Build a bound from a number, a fraction string or a ``(num, den)`` pair.

        Args:
            width: A ``WidthBound``, an int, a float, a ``Fraction``, a string
                such as ``'3/2'`` or a ``(numerator, denominator)`` pair.

        Returns:
            The corresponding WidthBound.

        Raises:
            ValueError: If the value is not strictly positive, or the
                denominator is zero.
            TypeError: If ``width`` cannot be read as a number.
        """
        if isinstance(width, WidthBound):
            return width
        if isinstance(width, str):
            return cls(Fraction(width))
        if isinstance(width, (tuple, list)):
            if len(width) != 2:
                raise ValueError(f"expected (numerator, denominator), got {width!r}")
            numerator, denominator = (to_exact(v) for v in width)
            if denominator == 0:
                raise ValueError("width bound denominator must not be zero")
            return cls(Fraction(numerator) / Fraction(denominator))
        return cls(to_exact(width))


@dataclass(frozen=True)
class ParallelStrip:
    """Closed strip between two parallel lines.

    A point ``X`` belongs to the strip when ``mu <= N.X <= mu + nu``.

    Attributes:
        normal: Non-zero normal vector ``N`` (not normalized).
        mu: Lower offset, in units of ``N``.
        nu: Thickness, in units of ``N`` (non-negative).
    """
    normal: Point
    mu: Scalar
    nu: Scalar

    def __post_init__(self):
        if self.normal.is_zero():
            raise ValueError("strip normal must be non-zero")
        object.__setattr__(self, 'mu', to_exact(self.mu))
        object.__setattr__(self, 'nu', to_exact(self.nu))
        if self.nu < 0:
            raise ValueError(f"strip thickness must be non-negative, got {self.nu}")

    @property
    def upper(self) -> Scalar:
        """Upper offset ``mu + nu``."""
        return self.mu + self.nu

    @property
    def main_axis(self) -> int:
        """Index (0 for x, 1 for y) of the largest normal component."""
        return 0 if abs(self.normal.x) >= abs(self.normal.y) else 1

    @property
    def euclidean_width_squared(self) -> Fraction:
        """Exact squared distance between the two lines."""
        return Fraction(self.nu) ** 2 / self.normal.norm_squared()

    @property
    def euclidean_width(self) -> float:
        """Distance between the two lines."""
        return math.sqrt(self.euclidean_width_squared)

    @property
    def axis_width(self) -> Fraction:
        """Exact distance between the two lines along the main axis."""
        return Fraction(self.nu) / max(abs(self.normal.x), abs(self.normal.y))

    def width(self, mode: WidthMode = WidthMode.EUCLIDEAN) -> float:
        """Thickness of the strip under the given definition."""
        if mode is WidthMode.AXIS:
            return float(self.axis_width)
        return self.euclidean_width

    def width_key(self, mode: WidthMode = WidthMode.EUCLIDEAN) -> Fraction:
        """Exact quantity that orders strips by thickness.

        This is the squared width in Euclidean mode and the axis width in
        axis mode. Comparing keys of two strips compares their widths.
        """
        if mode is WidthMode.AXIS:
            return self.axis_width
        return self.euclidean_width_squared

    def is_thinner_than(self, bound: WidthBound, mode: WidthMode = WidthMode.EUCLIDEAN) -> bool:
        """Strict, exact comparison of the strip thickness with a bound."""
        if mode is WidthMode.AXIS:
            return self.axis_width < bound.value
        return self.euclidean_width_squared < bound.value ** 2

    def contains(self, point: Point) -> bool:
        """Check whether a point lies in the closed strip."""
        value = self.normal.dot(point)
        return self.mu <= value <= self.mu + self.nu

    def normalized(self) -> Tuple[np.ndarray, float, float]:
        """Float form of the strip with a unit normal.

        Returns:
            Tuple ``(unit_normal, mu, epsilon)`` where ``unit_normal`` is a
            length-2 float array and ``mu <= unit_normal . X <= mu + epsilon``.
        """
        norm = math.sqrt(self.normal.norm_squared())
        unit = np.array([float(self.normal.x), float(self.normal.y)]) / norm
        return unit, float(self.mu) / norm, float(self.nu) / norm

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        unit, mu, epsilon = self.normalized()
        return {
            'normal': self.normal.to_list(),
            'mu': float(self.mu),
            'nu': float(self.nu),
            'unit_normal': unit.tolist(),
            'unit_mu': mu,
            'epsilon': epsilon,
            'axis_width': float(self.axis_width),
        }

    def __str__(self) -> str:
        return (f"ParallelStrip({self.mu} <= {self.normal.x}*x + {self.normal.y}*y "
                f"<= {self.upper})")
