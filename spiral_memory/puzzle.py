"""The two spiral memory tasks and their known-answer checks.

* ``distance(n)``: steps needed to carry data from square ``n`` back to
  square 1, i.e. the Manhattan distance of the n-th spiral cell.
* ``stress(threshold)``: first value the neighbor-sum stress test writes
  that is larger than ``threshold``.

``SELF_CHECKS`` pins both against the worked examples; ``run_self_checks``
is run before solving so a logic defect stops the program instead of
printing a wrong answer.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from spiral_memory.systems.accumulator import run_until_exceeds
from spiral_memory.systems.tracker import advance_to
from spiral_memory.utils.grid import manhattan_distance

logger = logging.getLogger(__name__)

PUZZLE_INPUT = 312051


def distance(n: int) -> int:
    """Manhattan distance from spiral square ``n`` to square 1."""
    return manhattan_distance(advance_to(n).position)


def stress(threshold: int) -> int:
    """First stress-test value strictly larger than ``threshold``."""
    return run_until_exceeds(threshold)


class SelfCheckError(AssertionError):
    """A task returned the wrong answer for one of the worked examples."""


@dataclass(frozen=True)
class SelfCheck:
    """Known answer for one task call.

    Attributes:
        name: Task name, used in the failure message.
        fn: Task function.
        argument: Input passed to ``fn``.
        expected: Answer ``fn(argument)`` must return.
    """

    name: str
    fn: Callable[[int], int]
    argument: int
    expected: int

    @property
    def label(self) -> str:
        return f"{self.name}({self.argument})"


SELF_CHECKS: Tuple[SelfCheck, ...] = (
    SelfCheck("distance", distance, 1, 0),
    SelfCheck("distance", distance, 12, 3),
    SelfCheck("distance", distance, 23, 2),
    SelfCheck("distance", distance, 1024, 31),
    SelfCheck("stress", stress, 1, 2),
    SelfCheck("stress", stress, 5, 10),
    SelfCheck("stress", stress, 23, 25),
    SelfCheck("stress", stress, 23, 25),  # repeated call must not reuse state
    SelfCheck("stress", stress, 150, 304),
    SelfCheck("stress", stress, 750, 806),
)


def run_self_checks(checks: Optional[Sequence[SelfCheck]] = None) -> None:
    """Evaluate ``checks`` in order, stopping at the first mismatch.

    Arguments:
        checks: Checks to run; ``SELF_CHECKS`` if omitted.

    Raises:
        SelfCheckError: Naming the failed call with expected and actual values.
    """
    if checks is None:
        checks = SELF_CHECKS
    for check in checks:
        actual = check.fn(check.argument)
        if actual != check.expected:
            raise SelfCheckError(
                f"Self-check {check.label} failed: expected {check.expected}, got {actual}"
            )
        logger.debug("Self-check %s == %d passed", check.label, actual)


@dataclass(frozen=True)
class Solution:
    """Answers to both tasks for one puzzle input."""

    puzzle_input: int
    distance: int
    stress: int


def solve(puzzle_input: int = PUZZLE_INPUT) -> Solution:
    """Compute both answers for ``puzzle_input``."""
    solution = Solution(
        puzzle_input=puzzle_input,
        distance=distance(puzzle_input),
        stress=stress(puzzle_input),
    )
    logger.info("Solved input %d: %s", puzzle_input, solution)
    return solution
