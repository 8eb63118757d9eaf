"""
Best-cost-per-state cache for a single search.

The cache maps each SearchState to the cheapest cumulative cost at which the search
has entered it, together with the predecessor state on that cheapest path. It is the
memoization half of branch-and-bound: re-entering a state at an equal or higher cost
cannot lead anywhere better, so such branches are abandoned.

A cache belongs to exactly one search invocation. It encodes partial results for one
(grid, constraints) pair and must never be reused or shared.

Example:
    >>> cache = StateCostCache()
    >>> cache.offer(state, 7, parent=None)
    True
    >>> cache.offer(state, 9, parent=None)  # no improvement
    False
"""

from typing import Dict, List, Optional, Tuple

from ..models import SearchState
from .types import Position


class StateCostCache:
    """
    Cheapest known cost and predecessor for every state entered by a search.

    Features:
        - Improvement-only updates
        - Predecessor links for route reconstruction
        - Hit/miss metrics tracking
    """

    def __init__(self):
        self._costs: Dict[SearchState, int] = {}
        self._parents: Dict[SearchState, Optional[SearchState]] = {}
        self._hits = 0
        self._misses = 0

    def get(self, state: SearchState) -> Optional[int]:
        """Get the cheapest recorded cost of ``state``, or None if never entered."""
        return self._costs.get(state)

    def offer(self, state: SearchState, cost: int, parent: Optional[SearchState]) -> bool:
        """
        Record ``cost`` for ``state`` if it improves on the cached cost.

        Args:
            state: State being entered
            cost: Cumulative cost of entering it on the current path
            parent: Predecessor state on the current path (None for initial moves)

        Returns:
            True if the cost was recorded and the state should be explored,
            False if a cost lower than or equal to ``cost`` was already cached
        """
        cached = self._costs.get(state)
        if cached is not None and cached <= cost:
            self._hits += 1
            return False
        self._misses += 1
        self._costs[state] = cost
        self._parents[state] = parent
        return True

    def route_to(self, state: SearchState, origin: Position) -> Tuple[Position, ...]:
        """
        Reconstruct the cells of the cheapest recorded path ending in ``state``.

        Args:
            state: Final state of the path
            origin: Cell the first move started from

        Returns:
            Cells from ``origin`` to the position of ``state``

        Raises:
            KeyError: If ``state`` was never recorded
        """
        cells: List[Position] = []
        current: Optional[SearchState] = state
        while current is not None:
            cells.append(current.position)
            current = self._parents[current]
            if len(cells) > len(self._parents):
                raise RuntimeError("predecessor links form a cycle")
        cells.append(origin)
        cells.reverse()
        return tuple(cells)

    def get_metrics(self) -> Dict[str, float]:
        """
        Get current cache metrics.

        Returns a dictionary containing:
        - size: Number of distinct states recorded
        - hits: Offers rejected because a cheaper or equal cost was cached
        - misses: Offers that recorded a new or improved cost
        - hit_rate: Share of offers rejected
        """
        total = self._hits + self._misses
        return {
            "size": float(len(self._costs)),
            "hits": float(self._hits),
            "misses": float(self._misses),
            "hit_rate": float(self._hits) / total if total > 0 else 0.0,
        }

    def clear(self) -> None:
        """Remove all recorded states and reset metrics."""
        self._costs.clear()
        self._parents.clear()
        self._hits = 0
        self._misses = 0

    def __len__(self) -> int:
        return len(self._costs)

    def __contains__(self, state: object) -> bool:
        return state in self._costs
