"""Unit tests for FuzzySegmentComputer.

Tests the extension protocol and its guarantees:
    - accepted extensions keep the strip strictly below the bound
    - rejected extensions leave the recognizer exactly as before
    - duplicates are absorbed without counting as rejections
    - exhausted cursors are reported without raising
    - the resulting hull and primitive do not depend on the extension order
"""

import copy
import sys
import unittest
from fractions import Fraction

import pytest

from fuzzyseg.analysis.recognizer import FuzzySegmentComputer
from fuzzyseg.domain import Extension, ParallelStrip, Point, RecognizerState, Side, WidthBound, WidthMode
from fuzzyseg.utils import canonical_cycle, coerce_points, digital_line, gift_wrap, min_width_squared


def snapshot(computer):
    """Everything observable about a recognizer."""
    return (
        computer.size(),
        list(computer),
        computer.hull,
        computer.primitive(),
        computer.front_index,
        computer.back_index,
    )


class TestExampleScenario(unittest.TestCase):
    """(0,0), (1,0), (2,1) fit under width 2; adding (0,10) reaches width 2."""

    def setUp(self):
        self.computer = FuzzySegmentComputer([(0, 0), (1, 0), (2, 1), (0, 10)], width=2)

    def test_first_three_points_accepted(self):
        """Test that the first three points form a segment of width 1/sqrt(5)."""
        self.assertIs(self.computer.extend_back(), Extension.ACCEPTED)
        self.assertIs(self.computer.extend_back(), Extension.ACCEPTED)
        self.assertEqual(self.computer.size(), 3)
        self.assertEqual(canonical_cycle(self.computer.hull), coerce_points([(0, 0), (1, 0), (2, 1)]))
        strip = self.computer.primitive()
        self.assertEqual(strip.euclidean_width_squared, Fraction(1, 5))
        self.assertLess(strip.euclidean_width, 2)

    def test_fourth_point_rejected(self):
        """Test that (0, 10) is rejected and nothing moves."""
        self.computer.extend_back()
        self.computer.extend_back()
        self.assertIs(self.computer.extend_back(), Extension.REJECTED)
        self.assertEqual(self.computer.size(), 3)
        self.assertEqual(self.computer.back_index, 2)
        self.assertNotIn((0, 10), self.computer)

    def test_rejection_is_strict(self):
        """Committing (0, 10) would give width exactly 2."""
        points = coerce_points([(0, 0), (1, 0), (2, 1), (0, 10)])
        self.assertEqual(min_width_squared(points), 4)
        wider = FuzzySegmentComputer(points, width=(201, 100))
        for _ in range(3):
            self.assertTrue(wider.extend_back())
        self.assertEqual(wider.size(), 4)

    def test_point_near_diagonal_accepted(self):
        """(10, 10) keeps all points within 1/sqrt(2) of a diagonal strip."""
        computer = FuzzySegmentComputer([(0, 0), (1, 0), (2, 1), (10, 10)], width=2)
        for _ in range(3):
            self.assertIs(computer.extend_back(), Extension.ACCEPTED)
        self.assertEqual(computer.primitive().euclidean_width_squared, Fraction(1, 2))

    def test_pushed_diagonal_point_accepted(self):
        """Test that pushing (10, 10) after the first three points keeps a width below 2."""
        computer = FuzzySegmentComputer.from_point((0, 0), width=2)
        for p in [(1, 0), (2, 1), (10, 10)]:
            self.assertIs(computer.try_extend(p), Extension.ACCEPTED)
        self.assertEqual(computer.size(), 4)
        self.assertEqual(computer.primitive().axis_width, 1)


class TestRollbackAtomicity(unittest.TestCase):
    """A refused or merely tested point leaves no trace."""

    def setUp(self):
        self.computer = FuzzySegmentComputer([(0, 0), (1, 0), (2, 1), (0, 10)], width=2)
        self.computer.extend_back()
        self.computer.extend_back()

    def test_is_extendable_false_changes_nothing(self):
        """Test that a failing is_extendable_back leaves no trace."""
        before = snapshot(self.computer)
        self.assertFalse(self.computer.is_extendable_back())
        self.assertEqual(snapshot(self.computer), before)

    def test_rejected_extend_changes_nothing(self):
        """Test that a rejected extend_back leaves no trace."""
        before = snapshot(self.computer)
        primitive = self.computer.primitive()
        self.computer.extend_back()
        self.assertEqual(snapshot(self.computer), before)
        self.assertIs(self.computer.primitive(), primitive)
        self.assertTrue(self.computer.is_valid())

    def test_is_extendable_true_does_not_commit(self):
        """Test that a succeeding is_extendable_back does not admit the point."""
        computer = FuzzySegmentComputer([(0, 0), (1, 0), (2, 1)], width=2)
        before = snapshot(computer)
        self.assertTrue(computer.is_extendable_back())
        self.assertEqual(snapshot(computer), before)
        self.assertTrue(computer.extend_back())
        self.assertEqual(computer.size(), 2)


class TestExhaustion(unittest.TestCase):
    """Cursor exhaustion is a result, not an error."""

    def test_single_point_sequence(self):
        """Test that both cursors are exhausted on a one-point sequence."""
        computer = FuzzySegmentComputer.from_point((3, 3), width=1)
        self.assertIs(computer.extend_back(), Extension.EXHAUSTED)
        self.assertIs(computer.extend_front(), Extension.EXHAUSTED)
        self.assertFalse(computer.is_extendable_back())
        self.assertFalse(computer.is_extendable_front())
        self.assertEqual(computer.size(), 1)

    def test_front_exhausted_at_start(self):
        """Test exhaustion at index 0 and at the last index."""
        computer = FuzzySegmentComputer([(0, 0), (1, 0)], width=1)
        self.assertIs(computer.extend_front(), Extension.EXHAUSTED)
        self.assertIs(computer.extend_back(), Extension.ACCEPTED)
        self.assertIs(computer.extend_back(), Extension.EXHAUSTED)

    def test_exhausted_is_falsy(self):
        """Test the truth value of each Extension."""
        self.assertFalse(Extension.EXHAUSTED)
        self.assertFalse(Extension.REJECTED)
        self.assertTrue(Extension.ACCEPTED)
        self.assertTrue(Extension.DUPLICATE)


class TestDuplicates(unittest.TestCase):
    """Points already in the segment are absorbed."""

    def test_duplicate_in_sequence(self):
        """Test that a repeated point advances the cursor only."""
        computer = FuzzySegmentComputer([(0, 0), (1, 0), (0, 0), (2, 0)], width=1)
        self.assertIs(computer.extend_back(), Extension.ACCEPTED)
        before = (computer.size(), computer.hull, computer.primitive())
        self.assertIs(computer.extend_back(), Extension.DUPLICATE)
        self.assertEqual((computer.size(), computer.hull, computer.primitive()), before)
        self.assertEqual(computer.back_index, 2)
        self.assertIs(computer.state, RecognizerState.ACTIVE)
        self.assertIs(computer.extend_back(), Extension.ACCEPTED)
        self.assertEqual(computer.size(), 3)

    def test_duplicate_pushed(self):
        """Test that try_extend reports a duplicate."""
        computer = FuzzySegmentComputer.from_point((0, 0), width=1)
        computer.try_extend((1, 1))
        self.assertIs(computer.try_extend(Point(1.0, 1.0), Side.FRONT), Extension.DUPLICATE)
        self.assertEqual(computer.size(), 2)

    def test_duplicate_accepted_even_when_full(self):
        """Test that a duplicate is absorbed by a full segment."""
        computer = FuzzySegmentComputer([(0, 0), (1, 0), (1, 0)], width=1, max_size=2)
        computer.extend_back()
        self.assertIs(computer.extend_back(), Extension.DUPLICATE)


class TestFrontExtension(unittest.TestCase):
    """Extension toward the start of the sequence."""

    def test_front_walks_backward(self):
        """Test that extend_front reaches index 0."""
        points = digital_line((0, 0), (9, 4))
        computer = FuzzySegmentComputer(points, width=1, start=9)
        while computer.extend_front():
            pass
        self.assertEqual(computer.front_index, 0)
        self.assertEqual(computer.back_index, 9)
        self.assertEqual(computer.size(), 10)

    def test_both_ends_from_middle(self):
        """Test growth in both directions over a digital line."""
        points = digital_line((0, 0), (15, 6))
        computer = FuzzySegmentComputer(points, width=1, start=7)
        while computer.extend_back() or computer.extend_front():
            pass
        self.assertEqual((computer.front_index, computer.back_index), (0, 15))
        self.assertIs(computer.state, RecognizerState.MAXIMAL)

    def test_corner_stops_both_sides(self):
        """An L-shaped chain is split at its corner."""
        points = [(0, 5), (0, 4), (0, 3), (0, 2), (0, 1), (0, 0), (1, 0), (2, 0), (3, 0)]
        computer = FuzzySegmentComputer(points, width=1, start=2)
        while computer.extend_back() or computer.extend_front():
            pass
        self.assertEqual(computer.front_index, 0)
        self.assertEqual(computer.back_index, 6)
        self.assertIs(computer.extend_back(), Extension.REJECTED)


class TestStateMachine(unittest.TestCase):
    """ACTIVE until both sides fail, MAXIMAL afterwards."""

    def test_starts_active(self):
        """Test that a new recognizer is ACTIVE."""
        computer = FuzzySegmentComputer([(0, 0), (1, 0)], width=1)
        self.assertIs(computer.state, RecognizerState.ACTIVE)

    def test_maximal_after_both_fail(self):
        """Test that the state becomes MAXIMAL once both sides fail."""
        computer = FuzzySegmentComputer([(0, 0), (1, 0), (2, 1), (0, 10)], width=2)
        while computer.extend_back():
            pass
        self.assertIs(computer.state, RecognizerState.ACTIVE)
        computer.extend_front()
        self.assertIs(computer.state, RecognizerState.MAXIMAL)
        self.assertEqual(computer.size(), 3)

    def test_push_reactivates(self):
        """Test that a successful try_extend makes the recognizer ACTIVE again."""
        computer = FuzzySegmentComputer.from_point((0, 0), width=1)
        computer.extend_back()
        computer.extend_front()
        self.assertIs(computer.state, RecognizerState.MAXIMAL)
        self.assertTrue(computer.try_extend((1, 0)))
        self.assertIs(computer.state, RecognizerState.ACTIVE)


class TestWidthModes(unittest.TestCase):
    """Euclidean and axis widths can disagree on the same points."""

    def test_axis_mode_is_stricter(self):
        """Test that axis mode rejects a point Euclidean mode accepts."""
        points = [(0, 0), (1, 1), (0, 1)]
        euclidean = FuzzySegmentComputer(points, width=1)
        axis = FuzzySegmentComputer(points, width=1, mode=WidthMode.AXIS)
        self.assertTrue(euclidean.extend_back())
        self.assertTrue(euclidean.extend_back())
        self.assertTrue(axis.extend_back())
        self.assertIs(axis.extend_back(), Extension.REJECTED)

    def test_mode_from_string(self):
        """Test that the mode can be given by name."""
        computer = FuzzySegmentComputer([(0, 0)], width=1, mode='axis')
        self.assertIs(computer.mode, WidthMode.AXIS)


class TestCapacity(unittest.TestCase):
    """max_size caps the number of points."""

    def test_rejects_beyond_capacity(self):
        """Test that a full segment rejects new points."""
        computer = FuzzySegmentComputer([(0, 0), (1, 0), (2, 0)], width=1, max_size=2)
        self.assertTrue(computer.extend_back())
        self.assertIs(computer.extend_back(), Extension.REJECTED)
        self.assertEqual(computer.size(), 2)
        self.assertEqual(computer.max_size(), 2)
        self.assertEqual(computer.maxSize(), 2)

    def test_unbounded_by_default(self):
        """Test that max_size is unbounded without a capacity."""
        computer = FuzzySegmentComputer([(0, 0)], width=1)
        self.assertEqual(computer.max_size(), sys.maxsize)


class TestConstruction(unittest.TestCase):
    """The recognizer only exists in a valid, initialized state."""

    def test_needs_points(self):
        """Test that an empty sequence raises ValueError."""
        with self.assertRaises(ValueError):
            FuzzySegmentComputer([], width=1)

    def test_start_in_range(self):
        """Test that an out-of-range start raises ValueError."""
        with self.assertRaises(ValueError):
            FuzzySegmentComputer([(0, 0)], width=1, start=1)
        with self.assertRaises(ValueError):
            FuzzySegmentComputer([(0, 0)], width=1, start=-1)

    def test_positive_width(self):
        """Test that a zero width raises ValueError."""
        with self.assertRaises(ValueError):
            FuzzySegmentComputer([(0, 0)], width=0)

    def test_unknown_mode(self):
        """Test that an unknown mode raises ValueError."""
        with self.assertRaises(ValueError):
            FuzzySegmentComputer([(0, 0)], width=1, mode='diagonal')

    def test_non_numeric_point(self):
        """Test that a non-numeric coordinate raises TypeError."""
        with self.assertRaises(TypeError):
            FuzzySegmentComputer([('a', 1)], width=1)

    def test_width_bound_exposed(self):
        """Test that the coerced bound is available as width_bound."""
        computer = FuzzySegmentComputer([(0, 0)], width=(3, 2))
        self.assertEqual(computer.width_bound, WidthBound(Fraction(3, 2)))

    def test_copy_forbidden(self):
        """Test that copying raises TypeError."""
        computer = FuzzySegmentComputer([(0, 0)], width=1)
        with self.assertRaises(TypeError):
            copy.copy(computer)
        with self.assertRaises(TypeError):
            copy.deepcopy(computer)

    def test_initial_state(self):
        """Test the state right after construction."""
        computer = FuzzySegmentComputer([(5, 5), (6, 6)], width=1)
        self.assertEqual(computer.size(), 1)
        self.assertFalse(computer.empty())
        self.assertEqual(list(computer), [Point(5, 5)])
        self.assertEqual(computer.primitive().nu, 0)
        self.assertTrue(computer.is_valid())


class TestContainerView(unittest.TestCase):
    """Forward-iterable view over the admitted points."""

    def test_iteration_sorted(self):
        """Test that iteration yields the points in sorted order."""
        computer = FuzzySegmentComputer([(2, 0), (1, 0), (0, 0)], width=1)
        computer.extend_back()
        computer.extend_back()
        self.assertEqual(list(computer), coerce_points([(0, 0), (1, 0), (2, 0)]))
        self.assertEqual(len(computer), 3)
        self.assertIn((1, 0), computer)
        self.assertNotIn((3, 0), computer)


class TestDiagnostics(unittest.TestCase):
    """Textual dump and self-check."""

    def test_self_display(self):
        """Test the multi-line description."""
        computer = FuzzySegmentComputer([(0, 0), (1, 0), (2, 1)], width=2)
        computer.extend_back()
        text = str(computer)
        self.assertIn("[FuzzySegmentComputer]", text)
        self.assertIn("width bound: 2 (euclidean)", text)
        self.assertIn("points: 2 (indices 0..1)", text)
        self.assertEqual(text, computer.self_display())

    def test_repr(self):
        """Test the repr format."""
        computer = FuzzySegmentComputer([(0, 0)], width=2)
        self.assertEqual(repr(computer),
                         "FuzzySegmentComputer(size=1, width_bound=2, mode=euclidean, state=active)")

    def test_is_valid_detects_corrupted_strip(self):
        """Test that is_valid logs a strip that misses a point."""
        computer = FuzzySegmentComputer([(0, 0), (1, 0), (2, 1)], width=2)
        computer.extend_back()
        computer.extend_back()
        computer._strip = ParallelStrip(Point(0, 1), 100, 0)
        with self.assertLogs('fuzzyseg.analysis.recognizer', level='ERROR') as logs:
            self.assertFalse(computer.is_valid())
        self.assertIn("strip does not enclose every point", logs.output[0])

    def test_extensions_logged_at_debug(self):
        """Test that refused points are logged at DEBUG."""
        computer = FuzzySegmentComputer([(0, 0), (1, 0), (2, 1), (0, 10)], width=2)
        with self.assertLogs('fuzzyseg.analysis.recognizer', level='DEBUG') as logs:
            while computer.extend_back():
                pass
        self.assertTrue(any("Refused (0, 10)" in line for line in logs.output))


class TestProperties:
    """Randomized checks of the recognition guarantees."""

    @pytest.mark.parametrize("width", [1, (3, 2), 3])
    def test_bound_invariant(self, noisy_curve, width):
        """Test that accepted points stay under the bound and rejected ones reach it."""
        bound = WidthBound.coerce(width)
        start = len(noisy_curve) // 2
        computer = FuzzySegmentComputer(noisy_curve, width=bound, start=start)
        for side in [Side.BACK, Side.FRONT] * 40:
            index = computer.back_index + 1 if side is Side.BACK else computer.front_index - 1
            admitted = list(computer)
            result = computer.extend_back() if side is Side.BACK else computer.extend_front()
            if result is Extension.ACCEPTED:
                assert computer.primitive().is_thinner_than(bound)
            elif result is Extension.REJECTED:
                assert min_width_squared(admitted + [noisy_curve[index]]) >= bound.value ** 2
            assert computer.is_valid()
            assert canonical_cycle(computer.hull) == gift_wrap(list(computer))

    def test_width_monotone(self, noisy_curve):
        """Test that the width never shrinks as points are admitted."""
        computer = FuzzySegmentComputer(noisy_curve, width=4)
        previous = computer.primitive().width_key()
        while computer.extend_back():
            key = computer.primitive().width_key()
            assert key >= previous
            previous = key

    def test_order_independence(self, line_points, rng):
        """Any admission order of the same points gives the same result."""
        start = len(line_points) // 2

        back_first = FuzzySegmentComputer(line_points, width=1, start=start)
        while back_first.extend_back():
            pass
        while back_first.extend_front():
            pass

        alternating = FuzzySegmentComputer(line_points, width=1, start=start)
        while alternating.extend_front() or alternating.extend_back():
            pass

        shuffled = list(line_points)
        rng.shuffle(shuffled)
        pushed = FuzzySegmentComputer.from_point(shuffled[0], width=1)
        for p in shuffled[1:]:
            side = Side.FRONT if rng.integers(2) else Side.BACK
            assert pushed.try_extend(p, side)

        for computer in (alternating, pushed):
            assert list(computer) == list(back_first)
            assert canonical_cycle(computer.hull) == canonical_cycle(back_first.hull)
            assert computer.primitive() == back_first.primitive()


class TestExampleCurveFixture:
    """The shared example chain, driven from both ends."""

    def test_front_growth_stops_at_same_point(self, example_curve):
        """Test that the reversed chain stops before (0, 10) at the front."""
        reversed_curve = example_curve[::-1]
        computer = FuzzySegmentComputer(reversed_curve, width=2, start=3)
        assert computer.extend_front()
        assert computer.extend_front()
        assert computer.extend_front() is Extension.REJECTED
        assert computer.front_index == 1
        assert (0, 10) not in computer
