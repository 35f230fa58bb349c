"""Incremental recognition of fuzzy segments.

This module provides FuzzySegmentComputer, which grows a fuzzy segment over a
sequence of points from a starting index toward both ends. Each extension is
speculative: the candidate point is inserted into the hull, the thinnest
enclosing strip is measured, and the insertion is either kept or undone.

The recognizer coordinates three collaborators:
    - PointLedger holds the admitted points;
    - MelkmanHull maintains their convex hull and can undo one insertion;
    - WidthEstimator measures the thinnest strip around the hull.

Example usage:
    Growing a segment over a digitized curve::

        from fuzzyseg.analysis import FuzzySegmentComputer

        curve = [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2), (5, 7)]
        computer = FuzzySegmentComputer(curve, width=2, start=2)
        while computer.extend_back():
            pass
        while computer.extend_front():
            pass
        print(computer.size(), computer.primitive())

    Pushing points directly::

        from fuzzyseg.domain import Side

        computer = FuzzySegmentComputer.from_point((0, 0), width=(3, 2))
        computer.try_extend((1, 0))
        computer.try_extend((-1, 1), Side.FRONT)
"""

from __future__ import annotations
import logging
from typing import Iterable, Iterator, Optional, Tuple

from ..domain.geometry import Point
from ..domain.results import Extension, RecognizerState, Side, WidthMode
from ..domain.strip import ParallelStrip, WidthBound
from .hull import MelkmanHull
from .ledger import PointLedger
from .width import WidthEstimator

logger = logging.getLogger(__name__)


class FuzzySegmentComputer:
    """Fuzzy segment recognizer with extension at both ends.

    The recognizer is always built from a point source and a width bound;
    there is no empty state and instances cannot be copied.

    Attributes:
        width_bound: The strict upper bound on the strip width.
        mode: Thickness definition compared with the bound.

    Example:
        >>> computer = FuzzySegmentComputer([(0, 0), (1, 0), (2, 1), (0, 10)], width=2)
        >>> bool(computer.extend_back()), bool(computer.extend_back())
        (True, True)
        >>> computer.extend_back()
        <Extension.REJECTED: 'rejected'>
        >>> computer.size()
        3
    """

    def __init__(
        self,
        points: Iterable,
        width,
        start: int = 0,
        max_size: Optional[int] = None,
        mode: WidthMode = WidthMode.EUCLIDEAN,
    ):
        """Initialize the recognizer on ``points[start]``.

        Args:
            points: Candidate points in chain order. Extending at the front
                walks toward index 0, extending at the back toward the end.
                Each point is a Point, a 2-sequence or a numpy row.
            width: Width bound; any form accepted by ``WidthBound.coerce``.
            start: Index of the initial point.
            max_size: Maximal number of points in the segment, or None.
            mode: Thickness definition, a WidthMode or its string value.

        Raises:
            ValueError: If ``points`` is empty, ``start`` is out of range,
                the width is not positive or ``max_size`` is below 1.
            TypeError: If a point or the width is not numeric.
        """
        self._points = [Point.coerce(p) for p in points]
        if not self._points:
            raise ValueError("a fuzzy segment needs at least one point")
        if not 0 <= start < len(self._points):
            raise ValueError(f"start index {start} out of range for {len(self._points)} points")

        self.width_bound = WidthBound.coerce(width)
        self.mode = WidthMode(mode)
        self._estimator = WidthEstimator(self.mode)

        first = self._points[start]
        self._ledger = PointLedger(max_size)
        self._ledger.add(first)
        self._hull = MelkmanHull(first)
        self._strip = self._estimator.measure(self._hull.vertices)

        self._front_index = start
        self._back_index = start
        self._blocked = {Side.FRONT: False, Side.BACK: False}

    @classmethod
    def from_point(
        cls,
        point,
        width,
        max_size: Optional[int] = None,
        mode: WidthMode = WidthMode.EUCLIDEAN,
    ) -> FuzzySegmentComputer:
        """Recognizer with no candidate sequence, driven by ``try_extend``."""
        return cls([point], width, 0, max_size, mode)

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    # -- forward container view -------------------------------------------

    def size(self) -> int:
        """Number of distinct points in the segment."""
        return self._ledger.size()

    def empty(self) -> bool:
        return self._ledger.empty()

    def max_size(self) -> int:
        """Maximal number of points allowed in the segment."""
        return self._ledger.max_size()

    def maxSize(self) -> int:
        """Same as ``max_size``."""
        return self._ledger.max_size()

    def __len__(self) -> int:
        return self._ledger.size()

    def __iter__(self) -> Iterator[Point]:
        return iter(self._ledger)

    def __contains__(self, point) -> bool:
        return Point.coerce(point) in self._ledger

    # -- state -------------------------------------------------------------

    @property
    def front_index(self) -> int:
        """Index in the candidate sequence of the first admitted point."""
        return self._front_index

    @property
    def back_index(self) -> int:
        """Index in the candidate sequence of the last admitted point."""
        return self._back_index

    @property
    def hull(self) -> Tuple[Point, ...]:
        """Convex hull vertices in counter-clockwise order."""
        return self._hull.vertices

    @property
    def state(self) -> RecognizerState:
        if self._blocked[Side.FRONT] and self._blocked[Side.BACK]:
            return RecognizerState.MAXIMAL
        return RecognizerState.ACTIVE

    def primitive(self) -> ParallelStrip:
        """Thinnest strip enclosing the current segment.

        The strip has the form ``mu <= N.X <= mu + nu`` and its width, under
        the recognizer's mode, is strictly below the width bound.
        """
        return self._strip

    # -- extension ---------------------------------------------------------

    def is_extendable_front(self) -> bool:
        """Test whether the next point before the segment can be admitted."""
        return self._can_admit(Side.FRONT)

    def is_extendable_back(self) -> bool:
        """Test whether the next point after the segment can be admitted."""
        return self._can_admit(Side.BACK)

    def extend_front(self) -> Extension:
        """Try to admit the next point before the segment."""
        return self._extend(Side.FRONT)

    def extend_back(self) -> Extension:
        """Try to admit the next point after the segment."""
        return self._extend(Side.BACK)

    def try_extend(self, point, side: Side = Side.BACK) -> Extension:
        """Try to admit an explicit point at one end of the chain.

        The candidate sequence and its indices are left untouched.
        """
        result = self._attempt(Point.coerce(point), side, commit=True)
        self._blocked[side] = not result
        return result

    def _candidate(self, side: Side) -> Optional[Point]:
        if side is Side.FRONT:
            index = self._front_index - 1
        else:
            index = self._back_index + 1
        if 0 <= index < len(self._points):
            return self._points[index]
        return None

    def _can_admit(self, side: Side) -> bool:
        candidate = self._candidate(side)
        if candidate is None:
            return False
        return bool(self._attempt(candidate, side, commit=False))

    def _extend(self, side: Side) -> Extension:
        candidate = self._candidate(side)
        if candidate is None:
            logger.debug("No point left at the %s", side.value)
            self._blocked[side] = True
            return Extension.EXHAUSTED

        result = self._attempt(candidate, side, commit=True)
        if result:
            if side is Side.FRONT:
                self._front_index -= 1
            else:
                self._back_index += 1
        self._blocked[side] = not result
        return result

    def _attempt(self, point: Point, side: Side, commit: bool) -> Extension:
        if point in self._ledger:
            logger.debug("Point %s already in segment", point)
            return Extension.DUPLICATE
        if self._ledger.is_full():
            logger.debug("Segment full at %d points, %s refused", self._ledger.size(), point)
            return Extension.REJECTED

        self._hull.insert(point, side)
        strip = self._estimator.measure(self._hull.vertices)
        accepted = strip.is_thinner_than(self.width_bound, self.mode)

        if accepted and commit:
            self._ledger.add(point)
            self._strip = strip
            logger.debug("Admitted %s at the %s: width %.6g < %s",
                         point, side.value, strip.width(self.mode), self.width_bound)
        else:
            self._hull.rollback_last()
            if not accepted:
                logger.debug("Refused %s at the %s: width %.6g >= %s",
                             point, side.value, strip.width(self.mode), self.width_bound)
        return Extension.ACCEPTED if accepted else Extension.REJECTED

    # -- diagnostics -------------------------------------------------------

    def is_valid(self) -> bool:
        """Check the consistency of the hull, the points and the strip."""
        problems = []
        if not self._hull.is_valid():
            problems.append("hull is not strictly convex")
        outside = [p for p in self._ledger if not self._hull.contains(p)]
        if outside:
            problems.append(f"{len(outside)} point(s) outside the hull")
        if not self._strip.is_thinner_than(self.width_bound, self.mode):
            problems.append("strip is not thinner than the bound")
        if any(not self._strip.contains(p) for p in self._ledger):
            problems.append("strip does not enclose every point")
        for problem in problems:
            logger.error("Invalid fuzzy segment: %s", problem)
        return not problems

    def self_display(self) -> str:
        """Multi-line description of the recognizer."""
        hull = ', '.join(str(v) for v in self._hull.vertices)
        lines = [
            "[FuzzySegmentComputer]",
            f"  width bound: {self.width_bound} ({self.mode.value})",
            f"  points: {self.size()} (indices {self._front_index}..{self._back_index})",
            f"  hull: [{hull}]",
            f"  primitive: {self._strip}",
            f"  width: {self._strip.width(self.mode):.6g}",
            f"  state: {self.state.value}",
        ]
        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.self_display()

    def __repr__(self) -> str:
        return (f"FuzzySegmentComputer(size={self.size()}, width_bound={self.width_bound}, "
                f"mode={self.mode.value}, state={self.state.value})")
