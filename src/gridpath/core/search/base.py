"""Base classes for run-constrained search engines."""

import logging
import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, Iterator, Optional, Tuple

from ..enums import Heading
from ..exceptions import InvalidConfigurationError, SearchBudgetExceededError
from ..grid import Grid
from ..models import NAMED_CONSTRAINTS, STANDARD, RunConstraints, SearchState
from .config import SearchSettings
from .estimator import BoundingEstimator
from .path_models import Route, SearchMetrics, SearchResult
from .types import SearchStrategy
from .utils import MemoryManager

logger = logging.getLogger(__name__)

# Headings in move-generation order
MOVE_ORDER = (Heading.UP, Heading.DOWN, Heading.LEFT, Heading.RIGHT)


class RunPathFinder(ABC):
    """
    Abstract base class for search engines over (position, heading, run length).

    Subclasses share the state model: the two initial moves, the transition rule
    and the search budget. They differ in how they order the frontier.
    """

    strategy: SearchStrategy

    def __init__(
        self,
        grid: Grid,
        constraints: RunConstraints,
        settings: Optional[SearchSettings] = None,
    ):
        """Initialize finder with grid, run constraints and optional budget."""
        self.grid = grid
        self.constraints = constraints
        self.settings = settings or SearchSettings()
        self.memory_manager = MemoryManager(self.settings.max_memory_mb)

    @abstractmethod
    def find_route(self) -> SearchResult:
        """Find the cheapest route from the start cell to the target."""
        pass

    def find_cost(self) -> int:
        """Find the minimal total cost to reach the target."""
        return self.find_route().cost

    def initial_moves(self) -> Iterator[Tuple[SearchState, int]]:
        """
        Yield the two legal first moves with their costs.

        One step Right, then one step Down, each with run length 1. The start cell
        contributes no cost.
        """
        for heading in (Heading.RIGHT, Heading.DOWN):
            state = SearchState(heading.step(self.grid.start), heading, 1)
            yield state, self.grid.cost_at(*state.position)

    def successors(self, state: SearchState) -> Iterator[SearchState]:
        """
        Yield the legal next states of ``state`` in Up, Down, Left, Right order.

        - Reversing is never legal.
        - Going straight is legal while the run is shorter than max_run.
        - Turning is legal once the run reaches min_run, and only towards a side
          with at least min_run cells before the grid edge, since a turn that cannot
          complete its minimum run is a dead end.
        - Moves leaving the grid are illegal.
        """
        x, y = state.position
        for heading in MOVE_ORDER:
            if heading is state.heading.opposite:
                continue
            if not self.grid.in_bounds(x + heading.dx, y + heading.dy):
                continue
            if heading is state.heading:
                if not self.constraints.can_continue(state.run_length):
                    continue
            elif not (
                self.constraints.can_turn(state.run_length)
                and self.grid.clearance(x, y, heading) >= self.constraints.min_run
            ):
                continue
            yield state.advance(heading)

    def _new_metrics(self) -> SearchMetrics:
        return SearchMetrics(operation=self.strategy.value, start_time=time.time())

    def _check_budget(self, metrics: SearchMetrics) -> None:
        """
        Enforce the configured search budget.

        Raises:
            SearchBudgetExceededError: If max_states or timeout is exceeded
            MemoryError: If the memory limit is exceeded
        """
        settings = self.settings
        if settings.max_states is not None and metrics.states_visited > settings.max_states:
            logger.warning(f"{self.strategy.value}: state budget {settings.max_states} exhausted")
            raise SearchBudgetExceededError(
                f"Search exceeded max_states={settings.max_states}"
            )

        if metrics.states_visited % settings.memory_check_interval == 0:
            self.memory_manager.check_memory()
            if settings.timeout is not None and time.time() - metrics.start_time > settings.timeout:
                logger.warning(f"{self.strategy.value}: timeout {settings.timeout}s exceeded")
                raise SearchBudgetExceededError(
                    f"Search timeout of {settings.timeout}s exceeded"
                )

    @contextmanager
    def _search_context(self, metrics: SearchMetrics):
        """Context manager for search operations."""
        self.memory_manager.reset_peak_memory()
        try:
            yield
        finally:
            metrics.end_time = time.time()
            metrics.max_memory_used = self.memory_manager.peak_memory_bytes

    def _result(self, route: Route, metrics: SearchMetrics) -> SearchResult:
        return SearchResult(
            cost=route.cost,
            route=route,
            constraints=self.constraints,
            strategy=self.strategy,
            metrics=metrics,
        )


class RunPathFinding:
    """Interface for run-constrained search operations."""

    def _validate_constraints(self, constraints: RunConstraints) -> None:
        """Validate constraints parameter."""
        if not isinstance(constraints, RunConstraints):
            raise InvalidConfigurationError(
                f"constraints must be RunConstraints, got {type(constraints).__name__}"
            )

    def _create_finder(
        self,
        grid: Grid,
        constraints: RunConstraints,
        strategy: SearchStrategy,
        settings: Optional[SearchSettings],
    ) -> RunPathFinder:
        from .algorithms.branch_and_bound import BranchAndBoundFinder
        from .algorithms.dijkstra import DijkstraFinder

        finders = {
            SearchStrategy.BRANCH_AND_BOUND: BranchAndBoundFinder,
            SearchStrategy.DIJKSTRA: DijkstraFinder,
        }
        try:
            finder_cls = finders[SearchStrategy(strategy)]
        except ValueError:
            raise InvalidConfigurationError(f"unknown search strategy {strategy!r}")
        return finder_cls(grid, constraints, settings)

    def find_route(
        self,
        grid: Grid,
        constraints: RunConstraints = STANDARD,
        strategy: SearchStrategy = SearchStrategy.BRANCH_AND_BOUND,
        settings: Optional[SearchSettings] = None,
    ) -> SearchResult:
        """
        Find the cheapest route under run constraints.

        Raises:
            InvalidConfigurationError: If constraints or strategy are invalid
            NoPathFoundError: If no route reaches the target
            SearchBudgetExceededError: If the search budget is exhausted
        """
        self._validate_constraints(constraints)
        finder = self._create_finder(grid, constraints, strategy, settings)
        result = finder.find_route()
        logger.debug(
            f"{result.strategy.value} ({constraints.name}) on {grid.width}x{grid.height}: "
            f"cost {result.cost}, {result.metrics.states_expanded} states expanded "
            f"in {result.metrics.duration:.1f}ms"
        )
        return result

    def solve(
        self,
        grid: Grid,
        constraints: RunConstraints = STANDARD,
        strategy: SearchStrategy = SearchStrategy.BRANCH_AND_BOUND,
        settings: Optional[SearchSettings] = None,
    ) -> int:
        """Find the minimal total cost to reach the target."""
        return self.find_route(grid, constraints, strategy, settings).cost

    def solve_all(
        self,
        grid: Grid,
        strategy: SearchStrategy = SearchStrategy.BRANCH_AND_BOUND,
        settings: Optional[SearchSettings] = None,
    ) -> Dict[str, int]:
        """Solve the grid under every named configuration."""
        return {
            name: self.solve(grid, constraints, strategy, settings)
            for name, constraints in NAMED_CONSTRAINTS.items()
        }

    def estimate(self, grid: Grid, constraints: RunConstraints = STANDARD) -> Optional[Route]:
        """Get the staircase upper bound, or None when no staircase fits."""
        self._validate_constraints(constraints)
        return BoundingEstimator(grid, constraints).estimate()
