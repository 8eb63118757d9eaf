"""Type definitions for run-constrained path search."""

from enum import Enum
from typing import Optional, Tuple

from ..models import SearchState


class SearchStrategy(Enum):
    """Enumeration of search engine types."""

    BRANCH_AND_BOUND = "branch_and_bound"  # Depth-first, seeded by the staircase bound
    DIJKSTRA = "dijkstra"  # Label-setting, used as a cross-check


# Type alias for a grid cell
Position = Tuple[int, int]

# Type alias for a pending work item: (state, cumulative cost, predecessor)
WorkItem = Tuple[SearchState, int, Optional[SearchState]]
