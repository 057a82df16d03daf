# tests/unit/test_tracker.py

from itertools import islice
from typing import Tuple

import pytest

from spiral_memory.components import ORIGIN, Position
from spiral_memory.sequencer import spiral_positions
from spiral_memory.state import Tracker
from spiral_memory.systems.tracker import advance_to, apply
from spiral_memory.types import Direction
from tests.test_utils import ExhaustedDirections, index_grid_positions


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.EAST, (1, 0)),
        (Direction.NORTH, (0, 1)),
        (Direction.WEST, (-1, 0)),
        (Direction.SOUTH, (0, -1)),
    ],
)
def test_apply_moves_one_cell(direction: Direction, expected: Tuple[int, int]) -> None:
    tracker = apply(Tracker(), direction)
    assert tracker.position == Position(*expected)
    assert tracker.index == 2


def test_apply_does_not_mutate() -> None:
    tracker = Tracker()
    apply(tracker, Direction.EAST)
    assert tracker == Tracker(position=ORIGIN, index=1)


def test_advance_to_one_takes_no_step() -> None:
    tracker = advance_to(1, directions=ExhaustedDirections())
    assert tracker == Tracker()


@pytest.mark.parametrize("target", [0, -3])
def test_advance_to_rejects_index_below_one(target: int) -> None:
    with pytest.raises(ValueError):
        advance_to(target)


def test_advance_to_rejects_passed_index() -> None:
    tracker = advance_to(10)
    with pytest.raises(ValueError):
        advance_to(5, tracker=tracker)


def test_advance_to_matches_index_grid() -> None:
    for pos, index in index_grid_positions():
        tracker = advance_to(index)
        assert tracker.position == pos
        assert tracker.index == index


def test_advance_to_matches_spiral_positions() -> None:
    for index, pos in enumerate(islice(spiral_positions(), 200), start=1):
        assert advance_to(index).position == pos


@pytest.mark.parametrize("start, target", [(2, 3), (10, 20), (9, 10), (25, 26)])
def test_advance_to_resumes_from_given_tracker(start: int, target: int) -> None:
    resumed = advance_to(target, tracker=advance_to(start))
    assert resumed == advance_to(target)


def test_advance_to_given_tracker_at_target_takes_no_step() -> None:
    tracker = advance_to(7)
    assert advance_to(7, tracker=tracker, directions=ExhaustedDirections()) == tracker
