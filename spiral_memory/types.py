"""Common type aliases and enumerations.

``Direction`` is the only movement vocabulary of the spiral. Its members are
listed in the order the spiral turns (counter-clockwise starting east), which
is the order :data:`DIRECTION_CYCLE` exposes for the sequencer.
"""

from enum import StrEnum, auto
from typing import Dict, Tuple


class Direction(StrEnum):
    """Cardinal step directions.

    The y axis points north, so ``NORTH`` increases ``y`` (unlike screen rows).
    """

    EAST = auto()
    NORTH = auto()
    WEST = auto()
    SOUTH = auto()


DIRECTION_CYCLE = [Direction.EAST, Direction.NORTH, Direction.WEST, Direction.SOUTH]

DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.EAST: (1, 0),
    Direction.NORTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.SOUTH: (0, -1),
}

SpiralIndex = int
