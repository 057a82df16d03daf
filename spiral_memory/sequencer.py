"""Direction sequencer for the square spiral.

The spiral from the origin runs east 1, north 1, west 2, south 2, east 3,
north 3, ... : the direction cycles counter-clockwise and the run length
grows by one after every second run. :class:`DirectionSequencer` produces
that sequence lazily as an explicit state machine, so a consumer pulls only
as many steps as it needs.

Every traversal must start from a fresh sequencer; instances are never
shared between the distance and stress computations.
"""

from typing import Iterator

from spiral_memory.components import ORIGIN, Position
from spiral_memory.types import DIRECTION_CYCLE, Direction


class DirectionSequencer:
    """Infinite iterator of spiral step directions.

    State:
        turn: Index into :data:`DIRECTION_CYCLE` of the current run.
        run_length: Length of the current pair of runs (1, 2, 3, ...).
        emitted: Directions already produced in the current run.
        second_run: Whether the current run is the second of its pair.
    """

    def __init__(self) -> None:
        self.turn = 0
        self.run_length = 1
        self.emitted = 0
        self.second_run = False

    def __iter__(self) -> "DirectionSequencer":
        return self

    def __next__(self) -> Direction:
        if self.emitted == self.run_length:
            self.turn = (self.turn + 1) % len(DIRECTION_CYCLE)
            self.emitted = 0
            if self.second_run:
                self.run_length += 1
            self.second_run = not self.second_run
        self.emitted += 1
        return DIRECTION_CYCLE[self.turn]


def spiral_positions() -> Iterator[Position]:
    """Yield every grid cell in spiral order, starting with the origin (index 1)."""
    position = ORIGIN
    yield position
    for direction in DirectionSequencer():
        position = position.moved(direction)
        yield position
