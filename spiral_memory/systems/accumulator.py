"""Value accumulator system (stress test).

Fills the spiral in order: the origin holds 1 and every new cell receives
the sum of its eight neighbors written so far. A neighbor written earlier in
spiral order is final by the time it is read, so values can be frozen as
soon as they are computed.

Sequence of written values: 1, 1, 2, 4, 5, 10, 11, 23, 25, 26, 54, ...
"""

import logging
from dataclasses import replace
from typing import Iterator, Optional

from spiral_memory.components import Position
from spiral_memory.sequencer import DirectionSequencer
from spiral_memory.state import Accumulator
from spiral_memory.systems import tracker as tracker_system
from spiral_memory.types import Direction
from spiral_memory.utils.grid import neighbors

logger = logging.getLogger(__name__)


def neighbor_sum(accumulator: Accumulator, position: Optional[Position] = None) -> int:
    """Sum the written values around ``position`` (current cell by default).

    Unvisited neighbors count as 0. The cell itself is not included.
    """
    if position is None:
        position = accumulator.position
    return sum(accumulator.values.get(neighbor, 0) for neighbor in neighbors(position))


def current_value(accumulator: Accumulator) -> int:
    """Return the value written at the current cell."""
    return accumulator.values[accumulator.position]


def apply(accumulator: Accumulator, direction: Direction) -> Accumulator:
    """Step the tracker, then write the neighbor sum of the new cell.

    Raises:
        ValueError: If the new cell already holds a value. The spiral never
            revisits a cell, so this signals a broken direction source.
    """
    tracker = tracker_system.apply(accumulator.tracker, direction)
    if tracker.position in accumulator.values:
        raise ValueError(f"Cell {tracker.position} was already written")
    value = neighbor_sum(accumulator, tracker.position)
    return replace(
        accumulator,
        tracker=tracker,
        values=accumulator.values.set(tracker.position, value),
    )


def run_until_exceeds(
    threshold: int, directions: Optional[Iterator[Direction]] = None
) -> int:
    """Return the first written value strictly greater than ``threshold``.

    Starts from a freshly seeded accumulator, so repeated calls are
    independent. The seeded origin value is never returned: at least one
    step is always taken.

    Raises:
        ValueError: If ``threshold`` is below 1.
    """
    if threshold < 1:
        raise ValueError(f"Threshold must be at least 1, got {threshold}")
    if directions is None:
        directions = DirectionSequencer()
    accumulator = Accumulator()
    while current_value(accumulator) <= threshold:
        accumulator = apply(accumulator, next(directions))
    logger.debug(
        "Value %d written at %s (index %d) exceeds %d",
        current_value(accumulator),
        accumulator.position,
        accumulator.index,
        threshold,
    )
    return current_value(accumulator)


def spiral_values() -> Iterator[int]:
    """Yield the stress-test values in spiral order, starting with the origin."""
    accumulator = Accumulator()
    yield current_value(accumulator)
    for direction in DirectionSequencer():
        accumulator = apply(accumulator, direction)
        yield current_value(accumulator)
