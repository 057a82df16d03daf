"""Position tracker system.

Moves a :class:`Tracker` along the spiral one direction at a time. Each
applied direction advances the spiral index by exactly one, so after
``advance_to(n)`` the tracker sits on the n-th cell in spiral order.
"""

import logging
from dataclasses import replace
from itertools import islice
from typing import Iterator, Optional

from spiral_memory.sequencer import DirectionSequencer
from spiral_memory.state import Tracker
from spiral_memory.types import Direction, SpiralIndex

logger = logging.getLogger(__name__)


def apply(tracker: Tracker, direction: Direction) -> Tracker:
    """Step one cell along ``direction`` and bump the spiral index.

    Args:
        tracker (Tracker): Tracker before the step.
        direction (Direction): Direction to move.

    Returns:
        Tracker: New tracker one cell further along; ``tracker`` is unchanged.
    """
    return replace(
        tracker, position=tracker.position.moved(direction), index=tracker.index + 1
    )


def advance_to(
    target_index: SpiralIndex,
    tracker: Optional[Tracker] = None,
    directions: Optional[Iterator[Direction]] = None,
) -> Tracker:
    """Walk along the spiral until the tracker reaches ``target_index``.

    Directions are pulled from a fresh :class:`DirectionSequencer` unless
    ``directions`` is given. A fresh sequencer is first wound past the steps
    ``tracker`` has already taken. For ``target_index == 1`` no direction is
    pulled.

    Args:
        target_index (SpiralIndex): 1-based spiral index to stop at.
        tracker (Tracker | None): Starting tracker; a tracker at the origin if
            omitted. With explicit ``directions`` it must sit where that
            source resumes.
        directions (Iterator[Direction] | None): Source of directions.

    Returns:
        Tracker: Tracker positioned on the target cell.

    Raises:
        ValueError: If ``target_index`` is below 1 or already passed.
    """
    if target_index < 1:
        raise ValueError(f"Spiral index must be at least 1, got {target_index}")
    if tracker is None:
        tracker = Tracker()
    if tracker.index > target_index:
        raise ValueError(
            f"Tracker is already past index {target_index} (at {tracker.index})"
        )
    if directions is None:
        directions = DirectionSequencer()
        for _ in islice(directions, tracker.index - 1):
            pass
    while tracker.index != target_index:
        tracker = apply(tracker, next(directions))
    logger.debug("Reached spiral index %d at %s", tracker.index, tracker.position)
    return tracker
