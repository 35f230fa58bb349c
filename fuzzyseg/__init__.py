"""Fuzzy Segment Recognition Package.

Incremental recognition of fuzzy digital straight segments: points of a
digital curve are admitted one at a time at either end of a segment, and the
thinnest strip enclosing them is kept strictly below a width bound.

Architecture Overview:
    The package is layered, each layer only using the ones above it:

    - domain provides exact value objects (Point, ParallelStrip, WidthBound)
      and the outcome enumerations (Side, Extension, ...)
    - analysis holds the algorithms: the point ledger, the incremental
      convex hull, the rotating-calipers width estimator and the recognizer
      that drives them
    - utils offers numpy interop and reference algorithms for cross-checks
    - api offers a dictionary-based service for external consumers

Every orientation and width comparison is done with exact integer or
rational arithmetic; floats only appear in reported widths.

Example usage:
    Basic recognition::

        from fuzzyseg import FuzzySegmentComputer

        curve = [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2), (5, 2)]
        computer = FuzzySegmentComputer(curve, width=1)
        while computer.extend_back():
            pass
        print(computer.size(), computer.primitive())

    Service layer::

        from fuzzyseg.api import SegmentService

        result = SegmentService().recognize(curve, width=1, start=3)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .analysis import FuzzySegmentComputer, MelkmanHull, PointLedger, WidthEstimator
from .api import SegmentService
from .domain import (
    Extension,
    ParallelStrip,
    Point,
    RecognizerState,
    Side,
    Vector,
    WidthBound,
    WidthMode,
    orientation,
)

__all__ = [
    # Domain objects
    'Point', 'Vector', 'orientation', 'ParallelStrip', 'WidthBound',
    'Side', 'Extension', 'RecognizerState', 'WidthMode',
    # Analysis
    'PointLedger', 'MelkmanHull', 'WidthEstimator', 'FuzzySegmentComputer',
    # Services
    'SegmentService',
]

__version__ = '1.0.0'
