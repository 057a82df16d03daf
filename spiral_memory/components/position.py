"""Position component.

Immutable signed grid coordinates. Used both as the tracker's current cell
and as the key of the accumulator's value map.
"""

from dataclasses import dataclass

from spiral_memory.types import Direction, DIRECTION_DELTAS


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column offset from the origin (positive is east).
        y: Row offset from the origin (positive is north).
    """

    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        """Return the adjacent coordinate one step along ``direction``."""
        dx, dy = DIRECTION_DELTAS[direction]
        return Position(self.x + dx, self.y + dy)


ORIGIN = Position(0, 0)
