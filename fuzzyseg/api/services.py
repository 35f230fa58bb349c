"""Service layer for fuzzy segment recognition.

This module provides a high-level service class that wraps
FuzzySegmentComputer behind plain data: point lists in, dictionaries out,
suitable for JSON serialization. Each call recognizes one segment; splitting a
whole curve into segments is left to the caller.

Example usage:
    SegmentService operations::

        from fuzzyseg.api.services import SegmentService

        service = SegmentService()

        # Longest segment around index 4
        result = service.recognize(curve, width=1.5, start=4)
        print(result['front_index'], result['back_index'], result['width'])

        # Does the whole list fit in one segment?
        report = service.check(curve, width=1.5)
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..analysis.recognizer import FuzzySegmentComputer
from ..config import DEFAULT_MAX_SIZE, DEFAULT_WIDTH, DEFAULT_WIDTH_MODE
from ..domain.results import Extension

# Logger for service errors
_logger = logging.getLogger(__name__)


@dataclass
class SegmentService:
    """Service for fuzzy segment recognition.

    All methods return serializable dictionaries. Invalid input (empty point
    list, non-positive width, bad start index, non-numeric coordinates) is
    reported as ``{'error': message}`` instead of raising.

    Attributes:
        mode: Thickness definition, 'euclidean' or 'axis'.
        max_size: Maximal number of points per segment, or None.

    Example:
        >>> service = SegmentService()
        >>> service.check([(0, 0), (1, 0), (2, 1)], width=2)['fits']
        True
    """
    mode: str = DEFAULT_WIDTH_MODE
    max_size: Optional[int] = DEFAULT_MAX_SIZE

    def recognize(self, points: Sequence, width=DEFAULT_WIDTH, start: int = 0) -> Dict[str, Any]:
        """Grow a segment from ``start`` until it is maximal on both sides.

        Back and front extensions alternate, one point at a time, until
        neither side can grow.

        Args:
            points: Sequence of (x, y) pairs in curve order.
            width: Width bound (number, fraction string or (num, den) pair).
            start: Index of the initial point.

        Returns:
            Dictionary with:
                - 'front_index', 'back_index' (int): inclusive index range
                - 'size' (int): number of distinct points in the segment
                - 'points' (list): the segment points, sorted
                - 'hull' (list): hull vertices, counter-clockwise
                - 'strip' (dict): the strip primitive, see ParallelStrip.to_dict
                - 'width' (float): width under the configured mode
                - 'front_stop', 'back_stop' (str): why each side stopped,
                    'rejected' or 'exhausted'
            or {'error': message} for invalid input.
        """
        computer = self._make_computer(points, width, start)
        if isinstance(computer, dict):
            return computer

        front = back = Extension.ACCEPTED
        while front or back:
            if back:
                back = computer.extend_back()
            if front:
                front = computer.extend_front()

        result = self._describe(computer)
        result['front_stop'] = front.value
        result['back_stop'] = back.value
        _logger.info("Recognized segment [%d, %d] of %d points, width %.6g",
                     computer.front_index, computer.back_index, computer.size(), result['width'])
        return result

    def check(self, points: Sequence, width=DEFAULT_WIDTH) -> Dict[str, Any]:
        """Check whether a whole point list fits in one fuzzy segment.

        Args:
            points: Sequence of (x, y) pairs.
            width: Width bound.

        Returns:
            Dictionary with:
                - 'fits' (bool): True if every point was admitted
                - 'size' (int): number of distinct points admitted
                - 'rejected_index' (int or None): index of the first point
                    that could not be admitted
                - 'width' (float): width of the admitted prefix
            or {'error': message} for invalid input.
        """
        computer = self._make_computer(points, width, 0)
        if isinstance(computer, dict):
            return computer

        result = computer.extend_back()
        while result:
            result = computer.extend_back()

        fits = result is Extension.EXHAUSTED
        return {
            'fits': fits,
            'size': computer.size(),
            'rejected_index': None if fits else computer.back_index + 1,
            'width': computer.primitive().width(computer.mode),
        }

    def _make_computer(self, points, width, start):
        try:
            return FuzzySegmentComputer(points, width, start=start,
                                        max_size=self.max_size, mode=self.mode)
        except (TypeError, ValueError) as e:
            _logger.error("Cannot start a fuzzy segment: %s", e)
            return {'error': str(e)}

    @staticmethod
    def _describe(computer: FuzzySegmentComputer) -> Dict[str, Any]:
        strip = computer.primitive()
        points: List[List[float]] = [p.to_list() for p in computer]
        return {
            'front_index': computer.front_index,
            'back_index': computer.back_index,
            'size': computer.size(),
            'points': points,
            'hull': [v.to_list() for v in computer.hull],
            'strip': strip.to_dict(),
            'width': strip.width(computer.mode),
        }
