"""
Staircase upper bound for branch-and-bound.

The estimator builds complete, constraint-respecting routes from the start cell to
the target that only move Right and Down, alternating axes after every run. The
cheapest such staircase is a real route's real cost, so it is a valid upper bound
and can seed the search's best-known total. It is never a lower-bound heuristic.

Run sizing follows ``split_distance``: leading runs of ``max_run``, one trimmed run,
then ``min_run`` runs, so a distance that does not divide evenly into ``max_run``
strides still ends on a legal run. In the standard configuration the candidates
include the single-step alternating staircase; in the extended configuration they
include the ``max_run`` stride staircase.

Example:
    >>> route = BoundingEstimator(grid, EXTENDED).estimate()
    >>> route.cost >= solve(grid, EXTENDED)
    True
"""

import logging
from typing import Iterator, List, Optional, Sequence

from ..enums import Heading
from ..grid import Grid
from ..models import RunConstraints
from .path_models import Route
from .utils import feasible_run_counts, split_distance

logger = logging.getLogger(__name__)


class BoundingEstimator:
    """Cheapest staircase route of a grid under run constraints."""

    def __init__(self, grid: Grid, constraints: RunConstraints):
        self.grid = grid
        self.constraints = constraints

    def staircase(
        self,
        first: Heading,
        horizontal_runs: Sequence[int],
        vertical_runs: Sequence[int],
    ) -> Route:
        """
        Build one staircase route.

        Args:
            first: Heading of the first run, RIGHT or DOWN
            horizontal_runs: Lengths of the rightward runs, in order
            vertical_runs: Lengths of the downward runs, in order

        Returns:
            Route walking the runs alternately, starting with ``first``

        Raises:
            ValueError: If the runs cannot alternate or do not end on the target
        """
        if first is Heading.RIGHT:
            leading, trailing = list(horizontal_runs), list(vertical_runs)
            other = Heading.DOWN
        elif first is Heading.DOWN:
            leading, trailing = list(vertical_runs), list(horizontal_runs)
            other = Heading.RIGHT
        else:
            raise ValueError(f"staircase must start RIGHT or DOWN, not {first.name}")

        if len(leading) - len(trailing) not in (0, 1):
            raise ValueError(
                f"{len(leading)} {first.name} runs cannot alternate with "
                f"{len(trailing)} {other.name} runs"
            )

        position = self.grid.start
        cells = [position]
        for i in range(len(leading) + len(trailing)):
            heading, runs = (first, leading) if i % 2 == 0 else (other, trailing)
            for _ in range(runs[i // 2]):
                position = heading.step(position)
                cells.append(position)

        if position != self.grid.target:
            raise ValueError(f"staircase ends at {position}, not {self.grid.target}")
        return Route.through(self.grid, cells)

    def candidates(self) -> Iterator[Route]:
        """Yield every staircase whose runs fit the constraints, in a fixed order."""
        min_run, max_run = self.constraints.min_run, self.constraints.max_run
        across = self.grid.width - 1
        down = self.grid.height - 1

        for h_count in feasible_run_counts(across, min_run, max_run):
            h_runs = split_distance(across, h_count, min_run, max_run)
            for v_count in (h_count - 1, h_count, h_count + 1):
                v_runs = split_distance(down, v_count, min_run, max_run)
                if h_runs is None or v_runs is None:
                    continue
                if h_count > v_count:
                    firsts: List[Heading] = [Heading.RIGHT]
                elif h_count < v_count:
                    firsts = [Heading.DOWN]
                else:
                    firsts = [Heading.RIGHT, Heading.DOWN]
                for first in firsts:
                    yield self.staircase(first, h_runs, v_runs)

    def estimate(self) -> Optional[Route]:
        """
        Get the cheapest staircase route.

        Returns:
            Cheapest candidate, or None when no staircase fits the grid
            (e.g. a span shorter than min_run, or spans too unequal to alternate)
        """
        best: Optional[Route] = None
        count = 0
        for route in self.candidates():
            count += 1
            if best is None or route.cost < best.cost:
                best = route

        if best is None:
            logger.debug(
                f"No staircase fits {self.grid.width}x{self.grid.height} grid "
                f"under {self.constraints.name} constraints"
            )
        else:
            logger.debug(
                f"Staircase bound {best.cost} from {count} candidates "
                f"({self.constraints.name})"
            )
        return best
