"""Rendering subpackage.

Turns the first rings of the spiral into plain text tables, labeled either
by spiral index or by stress-test value. See :mod:`spiral_memory.renderer.text`.
"""

from .text import render_grid, spiral_index_grid, stress_value_grid

__all__ = [
    "render_grid",
    "spiral_index_grid",
    "stress_value_grid",
]
