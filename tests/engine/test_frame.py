"""
Sport Tracker - Frame Tests

Completion, legality and rack tracking for frames 1-9 and the 10th frame.
"""

import pytest

from sport_tracker.engine.base import Roll
from sport_tracker.engine.errors import FrameClosed, IllegalFrameScore
from sport_tracker.engine.frame import Frame


def _frame(index: int, *rolls: int) -> Frame:
    frame = Frame(index=index)
    for pins in rolls:
        frame.add_roll(pins)
    return frame


# === Frames 1-9 ===


class TestRegularFrame:
    """Tests for frames 1-9."""

    def test_new_frame_is_open(self):
        frame = Frame(index=1)
        assert frame.is_open
        assert frame.pins_standing == 10
        assert frame.rolls == []

    def test_invalid_index(self):
        with pytest.raises(ValueError):
            Frame(index=11)

    def test_given_rolls_are_checked(self):
        with pytest.raises(FrameClosed):
            Frame(index=1, rolls=[Roll(10), Roll(5)])
        with pytest.raises(IllegalFrameScore):
            Frame(index=2, rolls=[7, 5])

    def test_given_rolls_are_kept(self):
        frame = Frame(index=10, rolls=[Roll(10), 10, 10])
        assert frame.is_closed
        assert frame.pinfall == 30

    def test_strike_closes(self):
        frame = _frame(1, 10)
        assert frame.is_strike
        assert frame.is_closed
        assert not frame.is_spare

    def test_one_roll_keeps_open(self):
        frame = _frame(3, 7)
        assert frame.is_open
        assert frame.pins_standing == 3

    def test_spare_closes(self):
        frame = _frame(4, 6, 4)
        assert frame.is_spare
        assert frame.is_closed
        assert frame.pinfall == 10

    def test_open_frame_closes_after_two(self):
        frame = _frame(5, 3, 4)
        assert frame.is_closed
        assert not frame.is_spare
        assert frame.pinfall == 7

    def test_zero_then_ten_is_spare(self):
        frame = _frame(2, 0, 10)
        assert frame.is_spare
        assert not frame.is_strike

    def test_second_roll_exceeding_standing_raises(self):
        frame = _frame(1, 6)
        with pytest.raises(IllegalFrameScore, match="only 4 standing"):
            frame.add_roll(5)

    def test_rejected_roll_leaves_frame_unchanged(self):
        frame = _frame(1, 6)
        with pytest.raises(IllegalFrameScore):
            frame.add_roll(7)
        assert frame.rolls == [Roll(6)]
        assert frame.pins_standing == 4

    def test_roll_after_strike_raises_frame_closed(self):
        frame = _frame(1, 10)
        with pytest.raises(FrameClosed, match="Frame 1 is already complete"):
            frame.add_roll(0)

    def test_third_roll_raises_frame_closed(self):
        frame = _frame(9, 2, 3)
        with pytest.raises(FrameClosed):
            frame.add_roll(1)
        assert len(frame.rolls) == 2

    def test_accepts_roll_objects(self):
        frame = Frame(index=1)
        recorded = frame.add_roll(Roll(knocked_down_pins=8))
        assert recorded == Roll(8)

    def test_invalid_count_raises_value_error(self):
        with pytest.raises(ValueError):
            Frame(index=1).add_roll(11)

    @pytest.mark.parametrize("first", range(1, 10))
    def test_two_rolls_never_exceed_ten(self, first):
        frame = _frame(1, first)
        frame.add_roll(10 - first)
        assert frame.pinfall == 10
        with pytest.raises(IllegalFrameScore):
            _frame(1, first).add_roll(11 - first)


class TestRackFlags:
    """Tests for can_strike / can_spare / rack_rolls."""

    def test_first_roll(self):
        frame = Frame(index=1)
        assert frame.can_strike
        assert not frame.can_spare
        assert frame.rack_rolls == 0

    def test_second_roll(self):
        frame = _frame(1, 3)
        assert not frame.can_strike
        assert frame.can_spare
        assert frame.rack_rolls == 1

    def test_after_gutter_spare_still_possible(self):
        frame = _frame(1, 0)
        assert frame.can_spare
        assert not frame.can_strike

    def test_closed_frame_allows_nothing(self):
        frame = _frame(1, 3, 3)
        assert not frame.can_strike
        assert not frame.can_spare


# === Frame 10 ===


class TestTenthFrame:
    """Tests for the 10th frame bonus rolls and rack resets."""

    def test_open_tenth_closes_after_two(self):
        frame = _frame(10, 3, 4)
        assert frame.is_closed
        assert frame.pinfall == 7

    def test_strike_earns_two_more(self):
        frame = _frame(10, 10)
        assert frame.is_open
        assert frame.pins_standing == 10
        frame.add_roll(10)
        assert frame.is_open
        frame.add_roll(5)
        assert frame.is_closed
        assert frame.pinfall == 25

    def test_spare_earns_one_more(self):
        frame = _frame(10, 5, 5)
        assert frame.is_open
        assert frame.pins_standing == 10
        frame.add_roll(3)
        assert frame.is_closed
        assert frame.pinfall == 13

    def test_strike_then_partial_limits_third(self):
        frame = _frame(10, 10, 3)
        assert frame.pins_standing == 7
        with pytest.raises(IllegalFrameScore):
            frame.add_roll(8)
        frame.add_roll(7)
        assert frame.is_closed
        assert frame.pinfall == 20

    def test_three_strikes(self):
        frame = _frame(10, 10, 10, 10)
        assert frame.is_closed
        assert frame.pinfall == 30

    def test_no_fourth_roll(self):
        frame = _frame(10, 10, 10, 10)
        with pytest.raises(FrameClosed):
            frame.add_roll(0)

    def test_open_tenth_rejects_third(self):
        frame = _frame(10, 4, 4)
        with pytest.raises(FrameClosed, match="Frame 10"):
            frame.add_roll(2)

    def test_rack_flags_after_strike(self):
        frame = _frame(10, 10)
        assert frame.can_strike
        assert not frame.can_spare

    def test_rack_flags_after_strike_and_partial(self):
        frame = _frame(10, 10, 4)
        assert not frame.can_strike
        assert frame.can_spare

    def test_rack_flags_after_spare(self):
        frame = _frame(10, 2, 8)
        assert frame.can_strike
        assert frame.rack_rolls == 0


class TestMarks:
    """Tests for score-sheet symbols."""

    @pytest.mark.parametrize(
        "index,rolls,expected",
        [
            (1, (10,), ["X"]),
            (1, (7, 3), ["7", "/"]),
            (1, (0, 10), ["-", "/"]),
            (1, (9, 0), ["9", "-"]),
            (1, (4,), ["4"]),
            (10, (10, 10, 10), ["X", "X", "X"]),
            (10, (10, 3, 7), ["X", "3", "/"]),
            (10, (10, 0, 0), ["X", "-", "-"]),
            (10, (6, 4, 10), ["6", "/", "X"]),
            (10, (0, 10, 5), ["-", "/", "5"]),
        ],
    )
    def test_marks(self, index, rolls, expected):
        assert _frame(index, *rolls).marks() == expected


class TestFrameToDict:
    def test_shape(self):
        assert _frame(3, 4, 5).to_dict() == {
            "index": 3,
            "rolls": [{"knocked_down_pins": 4}, {"knocked_down_pins": 5}],
        }
