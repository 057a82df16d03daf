"""Spiral memory.

Walks the square spiral numbering of an infinite grid (1 at the origin,
then east, north, west, south with growing runs) and answers two questions
about it: how far a numbered cell sits from the origin, and which value the
neighbor-sum stress test writes first past a threshold.

See :mod:`spiral_memory.puzzle` for the two tasks and
:mod:`spiral_memory.cli` for the command line entry point.
"""

__version__ = "1.0.0"
