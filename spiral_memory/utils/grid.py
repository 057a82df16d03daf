"""Grid math helpers.

Pure coordinate utilities used by the systems and the renderer.
"""

from typing import List

from spiral_memory.components import ORIGIN, Position

NEIGHBOR_OFFSETS = [
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
]


def manhattan_distance(pos: Position, other: Position = ORIGIN) -> int:
    """Return ``|dx| + |dy|`` between two cells (origin by default)."""
    return abs(pos.x - other.x) + abs(pos.y - other.y)


def neighbors(pos: Position) -> List[Position]:
    """Return the eight orthogonally and diagonally adjacent cells of ``pos``."""
    return [Position(pos.x + dx, pos.y + dy) for dx, dy in NEIGHBOR_OFFSETS]


def chebyshev_radius(pos: Position) -> int:
    """Ring of the spiral ``pos`` lies on (0 for the origin)."""
    return max(abs(pos.x), abs(pos.y))
