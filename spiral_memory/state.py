"""Immutable traversal state.

Both walkers are frozen dataclasses: a step never mutates a tracker or an
accumulator but returns a new one (see :mod:`spiral_memory.systems`). The
stress-test walker is built by composition: an :class:`Accumulator` holds a
:class:`Tracker` next to its value map instead of extending it.

Design notes:

* ``Accumulator.values`` is a persistent map (``pyrsistent.PMap``) keyed by
    :class:`Position`. Absence of a key means the cell has not been visited
    and counts as 0 in neighbor sums.
* Entries are append-only; the accumulator system refuses to overwrite one.
"""

from dataclasses import dataclass

from pyrsistent import PMap, pmap

from spiral_memory.components import ORIGIN, Position
from spiral_memory.types import SpiralIndex


@dataclass(frozen=True)
class Tracker:
    """Current cell of a spiral walk.

    Attributes:
        position (Position): Coordinates of the current cell.
        index (SpiralIndex): 1-based spiral index of the current cell; grows by
            one per applied direction.
    """

    position: Position = ORIGIN
    index: SpiralIndex = 1


ORIGIN_VALUE = 1


@dataclass(frozen=True)
class Accumulator:
    """Stress-test walk: a tracker plus the values written so far.

    Attributes:
        tracker (Tracker): Position and index of the most recently written cell.
        values (PMap[Position, int]): Value written to each visited cell,
            seeded with ``ORIGIN_VALUE`` at the origin.
    """

    tracker: Tracker = Tracker()
    values: PMap[Position, int] = pmap({ORIGIN: ORIGIN_VALUE})

    @property
    def position(self) -> Position:
        return self.tracker.position

    @property
    def index(self) -> SpiralIndex:
        return self.tracker.index
