"""API layer for fuzzy segment recognition.

This module provides the service layer, offering dictionary-based
interfaces suitable for API integration. The service hides the recognizer's
extension protocol behind single calls.

The module exports one service class:
    SegmentService: Recognizes the maximal fuzzy segment around a point of a
        curve, and checks whether a point list fits in one segment.

Example usage:
    Recognize a segment::

        from fuzzyseg.api import SegmentService

        service = SegmentService(mode='axis')
        result = service.recognize([[0, 0], [1, 0], [2, 1], [3, 1]], width=1)
        if 'error' not in result:
            print(f"Points {result['front_index']}..{result['back_index']}")
"""

from .services import SegmentService

__all__ = ['SegmentService']
