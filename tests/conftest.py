"""Shared pytest fixtures for the fuzzyseg test suite.

Fixtures:
    example_curve: The (0,0), (1,0), (2,1), (0,10) chain used across tests
    line_points: Naive digital straight segment from (0,0) to (20,7)
    rng: Seeded numpy random generator
    random_point_sets: Small random integer point sets with many collinear
        configurations
    noisy_curve: Random walk along a line, for bound-invariant tests
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fuzzyseg.domain import Point
from fuzzyseg.utils import digital_line


@pytest.fixture
def example_curve():
    """Three points of width < 2 followed by a point that reaches width 2."""
    return [(0, 0), (1, 0), (2, 1), (0, 10)]


@pytest.fixture
def line_points():
    """Digital straight segment of 21 points.

    Returns:
        list[Point]: Points from (0, 0) to (20, 7), 8-connected.
    """
    return digital_line((0, 0), (20, 7))


@pytest.fixture
def rng():
    """Seeded random generator so failures are reproducible."""
    return np.random.default_rng(20150105)


@pytest.fixture
def random_point_sets(rng):
    """Forty small random point sets on a 7x7 grid.

    The small grid makes duplicates and collinear triples frequent.

    Returns:
        list[list[Point]]: Point sets of 1 to 14 points, duplicates allowed.
    """
    sets = []
    for _ in range(40):
        n = int(rng.integers(1, 15))
        coords = rng.integers(-3, 4, size=(n, 2))
        sets.append([Point(int(x), int(y)) for x, y in coords])
    return sets


@pytest.fixture
def noisy_curve(rng):
    """Points along y = x / 3 with vertical jitter in [-2, 2].

    Returns:
        list[Point]: 60 points with increasing x.
    """
    jitter = rng.integers(-2, 3, size=60)
    return [Point(x, x // 3 + int(j)) for x, j in enumerate(jitter)]
