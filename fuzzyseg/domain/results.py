"""Enumerations describing recognizer inputs and outcomes.

The module provides the following enumerations:
    Side: Logical end of the point chain (front or back).
    Extension: Outcome of a single extension attempt.
    RecognizerState: Coarse state of a recognizer.
    WidthMode: How the thickness of a strip is measured.

Example usage:
    Using an extension outcome as a boolean::

        from fuzzyseg.domain.results import Extension

        result = computer.extend_back()
        if result:
            print("segment grew")
        elif result is Extension.EXHAUSTED:
            print("no more points behind")
"""

from __future__ import annotations
from enum import Enum


class Side(Enum):
    """Logical end of the point chain at which a point is offered."""
    FRONT = 'front'
    BACK = 'back'

    @property
    def opposite(self) -> Side:
        return Side.BACK if self is Side.FRONT else Side.FRONT


class Extension(Enum):
    """Outcome of one extension attempt.

    ACCEPTED and DUPLICATE are truthy; REJECTED and EXHAUSTED are falsy, so
    the result can be used directly as the boolean answer to "did the
    segment extend?".

    Attributes:
        ACCEPTED: The point was admitted and the width stays below the bound.
        DUPLICATE: The point was already part of the segment; nothing
            changed, and this does not count as a rejection.
        REJECTED: Admitting the point would reach or exceed the width bound,
            or the segment is at capacity. Nothing changed.
        EXHAUSTED: No candidate point is left on the requested side.
    """
    ACCEPTED = 'accepted'
    DUPLICATE = 'duplicate'
    REJECTED = 'rejected'
    EXHAUSTED = 'exhausted'

    def __bool__(self) -> bool:
        return self in (Extension.ACCEPTED, Extension.DUPLICATE)


class RecognizerState(Enum):
    """Coarse recognizer state.

    ACTIVE while at least one side may still extend, MAXIMAL once the latest
    attempt on both sides failed (rejected or exhausted).
    """
    ACTIVE = 'active'
    MAXIMAL = 'maximal'


class WidthMode(Enum):
    """Thickness definition used to compare a strip with the width bound.

    Attributes:
        EUCLIDEAN: Perpendicular distance between the two supporting lines.
        AXIS: Distance between the two lines measured along the x or y axis,
            whichever is closest to the strip normal.
    """
    EUCLIDEAN = 'euclidean'
    AXIS = 'axis'
