# tests/unit/test_accumulator.py

from itertools import islice

import pytest
from pyrsistent import pmap

from spiral_memory.components import ORIGIN, Position
from spiral_memory.state import ORIGIN_VALUE, Accumulator, Tracker
from spiral_memory.systems.accumulator import (
    apply,
    current_value,
    neighbor_sum,
    run_until_exceeds,
    spiral_values,
)
from spiral_memory.types import Direction
from tests.test_utils import STRESS_VALUES


def test_accumulator_is_seeded_at_origin() -> None:
    accumulator = Accumulator()
    assert accumulator.position == ORIGIN
    assert accumulator.index == 1
    assert accumulator.values == pmap({ORIGIN: ORIGIN_VALUE})
    assert current_value(accumulator) == 1


def test_neighbor_sum_counts_unvisited_as_zero() -> None:
    accumulator = Accumulator()
    assert neighbor_sum(accumulator) == 0
    assert neighbor_sum(accumulator, Position(1, 1)) == 1
    assert neighbor_sum(accumulator, Position(2, 0)) == 0


def test_neighbor_sum_includes_diagonals() -> None:
    values = pmap(
        {
            Position(-1, -1): 1,
            Position(0, -1): 2,
            Position(1, -1): 4,
            Position(-1, 0): 8,
            Position(0, 0): 1000,  # the cell itself is not a neighbor
            Position(1, 0): 16,
            Position(-1, 1): 32,
            Position(0, 1): 64,
            Position(1, 1): 128,
        }
    )
    accumulator = Accumulator(tracker=Tracker(), values=values)
    assert neighbor_sum(accumulator) == 255


def test_apply_writes_neighbor_sum() -> None:
    accumulator = apply(Accumulator(), Direction.EAST)
    assert accumulator.position == Position(1, 0)
    assert accumulator.index == 2
    assert current_value(accumulator) == 1
    accumulator = apply(accumulator, Direction.NORTH)
    assert current_value(accumulator) == 2


def test_apply_does_not_mutate() -> None:
    accumulator = Accumulator()
    apply(accumulator, Direction.EAST)
    assert len(accumulator.values) == 1
    assert accumulator.tracker == Tracker()


def test_apply_refuses_to_overwrite() -> None:
    accumulator = apply(Accumulator(), Direction.EAST)
    with pytest.raises(ValueError):
        apply(accumulator, Direction.WEST)


def test_written_values_are_frozen() -> None:
    accumulator = Accumulator()
    written = dict(accumulator.values)
    for direction in [
        Direction.EAST,
        Direction.NORTH,
        Direction.WEST,
        Direction.WEST,
        Direction.SOUTH,
        Direction.SOUTH,
    ]:
        accumulator = apply(accumulator, direction)
        for pos, value in written.items():
            assert accumulator.values[pos] == value
        written = dict(accumulator.values)
    assert len(written) == 7


def test_spiral_values_prefix() -> None:
    assert list(islice(spiral_values(), len(STRESS_VALUES))) == STRESS_VALUES


@pytest.mark.parametrize(
    "threshold, expected",
    [
        (1, 2),
        (2, 4),
        (5, 10),
        (23, 25),
        (150, 304),
        (750, 806),
        (806, 880),
    ],
)
def test_run_until_exceeds(threshold: int, expected: int) -> None:
    assert run_until_exceeds(threshold) == expected


def test_run_until_exceeds_is_repeatable() -> None:
    assert run_until_exceeds(23) == run_until_exceeds(23) == 25


@pytest.mark.parametrize("threshold", [0, -1])
def test_run_until_exceeds_rejects_threshold_below_one(threshold: int) -> None:
    with pytest.raises(ValueError):
        run_until_exceeds(threshold)
