"""Plain text rendering of the spiral around the origin.

The square block of radius ``r`` holds exactly the first ``(2r + 1) ** 2``
cells of the spiral, so both label grids are built by walking that many
steps. Rows are printed north first::

    17  16  15  14  13
    18   5   4   3  12
    19   6   1   2  11
    20   7   8   9  10
    21  22  23  24  25
"""

from itertools import islice
from typing import Iterable, Mapping

from pyrsistent import PMap, pmap

from spiral_memory.components import Position
from spiral_memory.sequencer import spiral_positions
from spiral_memory.systems.accumulator import spiral_values
from spiral_memory.utils.grid import chebyshev_radius

CELL_SEPARATOR = "  "


def _block_size(radius: int) -> int:
    if radius < 0:
        raise ValueError(f"Radius must be non-negative, got {radius}")
    return (2 * radius + 1) ** 2


def _label_block(radius: int, labels: Iterable[int]) -> PMap[Position, int]:
    size = _block_size(radius)
    return pmap(dict(islice(zip(spiral_positions(), labels), size)))


def spiral_index_grid(radius: int) -> PMap[Position, int]:
    """Map every cell within ``radius`` of the origin to its spiral index."""
    return _label_block(radius, range(1, _block_size(radius) + 1))


def stress_value_grid(radius: int) -> PMap[Position, int]:
    """Map every cell within ``radius`` of the origin to its stress-test value."""
    return _label_block(radius, spiral_values())


def render_grid(cells: Mapping[Position, int], radius: int) -> str:
    """Render labeled cells within ``radius`` as right-aligned text rows.

    Cells missing from ``cells`` are left blank.

    Raises:
        ValueError: If ``radius`` is negative.
    """
    _block_size(radius)
    shown = [str(label) for pos, label in cells.items() if chebyshev_radius(pos) <= radius]
    width = max((len(text) for text in shown), default=1)
    rows = []
    for y in range(radius, -radius - 1, -1):
        row = [
            str(cells[Position(x, y)]).rjust(width) if Position(x, y) in cells else " " * width
            for x in range(-radius, radius + 1)
        ]
        rows.append(CELL_SEPARATOR.join(row).rstrip())
    return "\n".join(rows)
