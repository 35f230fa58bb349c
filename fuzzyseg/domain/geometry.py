"""Exact geometric value objects for fuzzy segment recognition."""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import List, Tuple, Union
import math
import numbers

Scalar = Union[int, Fraction]


def to_exact(value) -> Scalar:
    """Convert a coordinate to an exact scalar.

    Integers (including numpy integer scalars) become ``int``; floats are
    converted to the ``Fraction`` they represent exactly; rationals become
    ``Fraction``. A rational with denominator 1 is reduced to ``int`` so that
    equal coordinates hash the same way regardless of how they were given.

    Args:
        value: Coordinate value.

    Returns:
        The exact ``int`` or ``Fraction`` equal to ``value``.

    Raises:
        TypeError: If ``value`` is not a real number (booleans included).
        ValueError: If ``value`` is infinite or NaN.
    """
    if isinstance(value, bool):
        raise TypeError(f"coordinate must be a number, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Rational):
        exact = Fraction(value.numerator, value.denominator)
    elif isinstance(value, numbers.Real):
        number = float(value)
        if not math.isfinite(number):
            raise ValueError(f"coordinate must be finite, got {number}")
        exact = Fraction(number)
    else:
        raise TypeError(f"coordinate must be a number, got {type(value).__name__}")
    if exact.denominator == 1:
        return int(exact)
    return exact


@dataclass(frozen=True, order=True)
class Point:
    """Immutable 2D point with exact coordinates.

    Also used as a free vector (difference of two points). Ordering is
    lexicographic on ``(x, y)``.
    """
    x: Scalar
    y: Scalar

    def __post_init__(self):
        object.__setattr__(self, 'x', to_exact(self.x))
        object.__setattr__(self, 'y', to_exact(self.y))

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, scalar) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def dot(self, other: Point) -> Scalar:
        """Dot product treating points as vectors."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> Scalar:
        """Z component of the cross product treating points as vectors."""
        return self.x * other.y - self.y * other.x

    def norm_squared(self) -> Scalar:
        """Squared length when treated as a vector from origin."""
        return self.x * self.x + self.y * self.y

    def perpendicular(self) -> Point:
        """Vector rotated a quarter turn counter-clockwise."""
        return Point(-self.y, self.x)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def to_tuple(self) -> Tuple[Scalar, Scalar]:
        """Convert to an exact tuple."""
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [float(self.x), float(self.y)]

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    @classmethod
    def coerce(cls, value) -> Point:
        """Build a point from a Point, a 2-sequence or a numpy row."""
        if isinstance(value, Point):
            return value
        try:
            x, y = value
        except (TypeError, ValueError):
            raise TypeError(f"expected a 2D point, got {value!r}") from None
        return cls(x, y)

    @classmethod
    def from_tuple(cls, t: Tuple[Scalar, Scalar]) -> Point:
        """Create from tuple."""
        return cls(t[0], t[1])

    @classmethod
    def from_list(cls, lst: List[Scalar]) -> Point:
        """Create from list."""
        return cls(lst[0], lst[1])


# Free vectors share the point representation.
Vector = Point


def orientation(a: Point, b: Point, c: Point) -> Scalar:
    """Twice the signed area of triangle ``abc``.

    Positive when ``c`` is left of the directed line ``a -> b`` (a
    counter-clockwise turn), negative when right, zero when collinear. The
    result is exact for integer and rational coordinates.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)
