"""Label-setting search over (position, heading, run length) states."""

import logging
from heapq import heappop, heappush
from itertools import count
from typing import List, Optional, Tuple

from ...exceptions import NoPathFoundError
from ...models import SearchState
from ..base import RunPathFinder
from ..cache import StateCostCache
from ..path_models import Route, SearchResult
from ..types import SearchStrategy

logger = logging.getLogger(__name__)


class DijkstraFinder(RunPathFinder):
    """
    Dijkstra's algorithm over the same state model as branch-and-bound.

    Costs are non-negative, so the first target state taken off the queue is
    optimal. Stale queue entries are skipped on pop.
    """

    strategy = SearchStrategy.DIJKSTRA

    def find_route(self) -> SearchResult:
        """
        Find the cheapest route using Dijkstra's algorithm.

        Raises:
            NoPathFoundError: If no route reaches the target
            SearchBudgetExceededError: If the search budget is exhausted
        """
        metrics = self._new_metrics()
        cache = StateCostCache()
        target = self.grid.target
        sequence = count()  # Unique counter to break ties
        queue: List[Tuple[int, int, SearchState]] = []
        reached: Optional[SearchState] = None

        with self._search_context(metrics):
            for state, cost in self.initial_moves():
                if cache.offer(state, cost, None):
                    heappush(queue, (cost, next(sequence), state))

            while queue:
                cost, _, state = heappop(queue)
                metrics.states_visited += 1
                self._check_budget(metrics)

                if cost > cache.get(state):
                    metrics.pruned_by_cache += 1
                    continue
                metrics.states_expanded += 1

                if state.position == target:
                    reached = state
                    break

                for child in self.successors(state):
                    child_cost = cost + self.grid.cost_at(*child.position)
                    if cache.offer(child, child_cost, state):
                        heappush(queue, (child_cost, next(sequence), child))
                    else:
                        metrics.pruned_by_cache += 1

            metrics.cache_size = len(cache)

        if reached is None:
            raise NoPathFoundError(
                f"No path reaches {target} under {self.constraints.name} constraints "
                f"(min_run={self.constraints.min_run}, max_run={self.constraints.max_run})"
            )

        route = Route.through(self.grid, cache.route_to(reached, self.grid.start))
        return self._result(route, metrics)
