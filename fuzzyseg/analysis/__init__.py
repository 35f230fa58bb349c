"""Fuzzy segment recognition module.

This module provides the incremental recognition layer. It is built from
three collaborators driven by one controller:

    PointLedger: Duplicate-free set of the admitted points.
    MelkmanHull: Convex hull under insertion at both chain ends, with
        one-step rollback.
    WidthEstimator: Thinnest enclosing strip of a convex polygon by rotating
        calipers.
    FuzzySegmentComputer: Speculative insert, measure, then accept or roll
        back, at the front and at the back of the chain.

Example usage:
    Recognize the longest fuzzy segment around a point of a curve::

        from fuzzyseg.analysis import FuzzySegmentComputer

        computer = FuzzySegmentComputer(curve, width=(3, 2), start=10)
        while computer.extend_back() or computer.extend_front():
            pass
        strip = computer.primitive()
"""

from .hull import MelkmanHull
from .ledger import PointLedger
from .recognizer import FuzzySegmentComputer
from .width import WidthEstimator

__all__ = ['PointLedger', 'MelkmanHull', 'WidthEstimator', 'FuzzySegmentComputer']
