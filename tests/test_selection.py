"""Tests for the selection path tracker."""

from wordgrid.game import SelectionPathTracker
from wordgrid.puzzle import Coord


class TestAdding:
    """Test cases for extending the selection."""

    def test_first_tile_always_accepted(self):
        """Any tile can start a selection."""
        tracker = SelectionPathTracker()
        assert tracker.try_add(Coord(3, 4), "Q") is True
        assert tracker.path == [Coord(3, 4)]

    def test_non_adjacent_rejected(self):
        """A tile two steps away is rejected."""
        tracker = SelectionPathTracker()
        tracker.try_add(Coord(0, 0), "A")
        assert tracker.try_add(Coord(2, 2), "X") is False
        assert tracker.path == [Coord(0, 0)]

    def test_diagonal_accepted(self):
        """Diagonal neighbours are adjacent."""
        tracker = SelectionPathTracker()
        tracker.try_add(Coord(0, 0), "A")
        assert tracker.try_add(Coord(1, 1), "X") is True
        assert tracker.current_word() == "AX"

    def test_duplicate_rejected(self):
        """A tile already in the path cannot be added again."""
        tracker = SelectionPathTracker()
        tracker.try_add(Coord(0, 0), "A")
        tracker.try_add(Coord(1, 0), "B")
        assert tracker.try_add(Coord(0, 0), "A") is False
        assert tracker.try_add(Coord(1, 0), "B") is False
        assert len(tracker) == 2

    def test_plain_tuples_accepted(self):
        """Coordinates may be given as plain tuples."""
        tracker = SelectionPathTracker()
        tracker.try_add((0, 0), "c")
        tracker.try_add((0, 1), "a")
        assert tracker.path == [Coord(0, 0), Coord(0, 1)]
        assert tracker.current_word() == "CA"


class TestRetracting:
    """Test cases for the back-up gesture."""

    def _tracker(self) -> SelectionPathTracker:
        tracker = SelectionPathTracker()
        tracker.try_add(Coord(0, 0), "C")
        tracker.try_add(Coord(1, 0), "A")
        tracker.try_add(Coord(2, 0), "T")
        return tracker

    def test_retract_to_second_to_last(self):
        """Re-entering the previous tile drops the last one."""
        tracker = self._tracker()
        assert tracker.try_retract_to(Coord(1, 0)) is True
        assert tracker.current_word() == "CA"

    def test_deeper_backtrack_unsupported(self):
        """Re-entering an earlier tile does nothing."""
        tracker = self._tracker()
        assert tracker.try_retract_to(Coord(0, 0)) is False
        assert tracker.current_word() == "CAT"

    def test_retract_on_last_tile_ignored(self):
        """Staying on the last tile does nothing."""
        tracker = self._tracker()
        assert tracker.try_retract_to(Coord(2, 0)) is False

    def test_single_tile_cannot_retract(self):
        """There is nothing to back up to with one tile."""
        tracker = SelectionPathTracker()
        tracker.try_add(Coord(0, 0), "C")
        assert tracker.try_retract_to(Coord(0, 0)) is False
        assert len(tracker) == 1

    def test_retract_then_extend(self):
        """After backing up, a different tile can be chosen."""
        tracker = self._tracker()
        tracker.try_retract_to(Coord(1, 0))
        assert tracker.try_add(Coord(2, 1), "G") is True
        assert tracker.current_word() == "CAG"


class TestClearing:
    """Test cases for clearing."""

    def test_clear(self):
        """Clearing empties the path."""
        tracker = SelectionPathTracker()
        tracker.try_add(Coord(0, 0), "C")
        tracker.clear()
        assert tracker.is_empty
        assert tracker.current_word() == ""

    def test_add_after_clear(self):
        """A cleared tracker accepts any first tile."""
        tracker = SelectionPathTracker()
        tracker.try_add(Coord(0, 0), "C")
        tracker.clear()
        assert tracker.try_add(Coord(4, 4), "Q") is True
