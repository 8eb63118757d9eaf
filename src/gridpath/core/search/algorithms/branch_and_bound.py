"""Depth-first branch-and-bound over (position, heading, run length) states."""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Union

from ...exceptions import NoPathFoundError
from ...models import SearchState
from ..base import RunPathFinder
from ..cache import StateCostCache
from ..estimator import BoundingEstimator
from ..path_models import Route, SearchMetrics, SearchResult
from ..types import SearchStrategy, WorkItem
from ..utils import timer

logger = logging.getLogger(__name__)


@dataclass
class SearchContext:
    """
    Mutable state owned by one branch-and-bound invocation.

    Attributes:
        cache: Cheapest known cost per state
        best_cost: Best known total cost to the target (infinite until one is known)
        best_state: Target state that achieved ``best_cost`` during the search
        seed_route: Staircase route whose cost seeded ``best_cost``, if any
    """

    cache: StateCostCache = field(default_factory=StateCostCache)
    best_cost: Union[int, float] = math.inf
    best_state: Optional[SearchState] = None
    seed_route: Optional[Route] = None

    def offer_target(self, state: SearchState, cost: int) -> None:
        """Record a completed path if it beats the best known total."""
        if cost < self.best_cost:
            self.best_cost = cost
            self.best_state = state


class BranchAndBoundFinder(RunPathFinder):
    """
    Depth-first search with a best-known-total bound and a per-state cost cache.

    Every work item is checked when it is taken off the stack:
    1. a cumulative cost above the best known total abandons the branch;
    2. a state already entered at an equal or lower cost abandons the branch.
    A state on the target cell is a leaf. Children are pushed in reverse
    generation order, so the stack replays the recursive Up, Down, Left, Right
    exploration exactly, without Python's recursion limit.
    """

    strategy = SearchStrategy.BRANCH_AND_BOUND

    def _seed_bound(self, context: SearchContext, metrics: SearchMetrics) -> None:
        if not self.settings.seed_bound:
            return
        with timer(f"Staircase bound ({self.constraints.name})"):
            route = BoundingEstimator(self.grid, self.constraints).estimate()
        if route is None:
            return
        context.seed_route = route
        context.best_cost = route.cost
        metrics.initial_bound = route.cost

    def _explore(self, context: SearchContext, metrics: SearchMetrics) -> None:
        grid = self.grid
        target = grid.target
        stack: List[WorkItem] = [
            (state, cost, None) for state, cost in reversed(list(self.initial_moves()))
        ]

        while stack:
            state, cost, parent = stack.pop()
            metrics.states_visited += 1
            self._check_budget(metrics)

            if cost > context.best_cost:
                metrics.pruned_by_bound += 1
                continue
            if not context.cache.offer(state, cost, parent):
                metrics.pruned_by_cache += 1
                continue
            metrics.states_expanded += 1

            if state.position == target:
                context.offer_target(state, cost)
                continue

            children = [
                (child, cost + grid.cost_at(*child.position), state)
                for child in self.successors(state)
            ]
            stack.extend(reversed(children))

    def find_route(self) -> SearchResult:
        """
        Find the cheapest route using branch-and-bound.

        Raises:
            NoPathFoundError: If no route reaches the target
            SearchBudgetExceededError: If the search budget is exhausted
        """
        metrics = self._new_metrics()
        context = SearchContext()

        with self._search_context(metrics):
            self._seed_bound(context, metrics)
            logger.debug(
                f"Branch-and-bound on {self.grid.width}x{self.grid.height} "
                f"({self.constraints.name}), initial bound {metrics.initial_bound}"
            )
            self._explore(context, metrics)
            metrics.cache_size = len(context.cache)

        if context.best_state is not None:
            cells = context.cache.route_to(context.best_state, self.grid.start)
            route = Route.through(self.grid, cells)
        elif context.seed_route is not None:
            logger.debug("No route beat the staircase bound")
            route = context.seed_route
        else:
            raise NoPathFoundError(
                f"No path reaches {self.grid.target} under {self.constraints.name} constraints "
                f"(min_run={self.constraints.min_run}, max_run={self.constraints.max_run})"
            )

        return self._result(route, metrics)
