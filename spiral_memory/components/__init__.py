"""spiral_memory.components
=============================

Value objects shared by the sequencer, the systems and the renderer::

    from spiral_memory.components import Position, ORIGIN
"""

from .position import ORIGIN, Position

__all__ = [
    "ORIGIN",
    "Position",
]
