"""Command line entry point.

Runs the self-checks, then prints one ``label: value`` line per task::

    $ python -m spiral_memory
    distance: 430
    stress: 312453

A failed self-check is logged and turns into exit status 1.
"""

import argparse
import logging
from dataclasses import dataclass
from typing import List, Optional

from spiral_memory.puzzle import PUZZLE_INPUT, SelfCheckError, run_self_checks, solve
from spiral_memory.renderer import render_grid, spiral_index_grid, stress_value_grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunConfig:
    """Options for one command line run.

    Attributes:
        puzzle_input: Square index and stress threshold to solve for.
        render_radius: If set, also print both label grids of this radius.
        log_level: Name of the root logging level.
    """

    puzzle_input: int = PUZZLE_INPUT
    render_radius: Optional[int] = None
    log_level: str = "WARNING"


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> RunConfig:
    parser = argparse.ArgumentParser(
        prog="spiral-memory",
        description="Solve the spiral memory distance and stress-test tasks.",
    )
    parser.add_argument(
        "--render",
        dest="render_radius",
        type=_non_negative,
        metavar="RADIUS",
        help="Also print the index and stress-value grids of this radius.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: WARNING).",
    )
    args = parser.parse_args(argv)
    return RunConfig(render_radius=args.render_radius, log_level=args.log_level)


def run(config: RunConfig) -> int:
    """Check, solve and print; return the process exit status."""
    try:
        run_self_checks()
    except SelfCheckError as exc:
        logger.critical("%s", exc)
        return 1

    solution = solve(config.puzzle_input)
    print(f"distance: {solution.distance}")
    print(f"stress: {solution.stress}")

    if config.render_radius is not None:
        print()
        print(render_grid(spiral_index_grid(config.render_radius), config.render_radius))
        print()
        print(render_grid(stress_value_grid(config.render_radius), config.render_radius))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    logging.basicConfig(level=getattr(logging, config.log_level))
    return run(config)

