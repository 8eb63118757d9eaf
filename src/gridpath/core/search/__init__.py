"""
Run-constrained minimum-cost search and its supporting pieces.
"""

from .algorithms.branch_and_bound import BranchAndBoundFinder, SearchContext
from .algorithms.dijkstra import DijkstraFinder
from .base import MOVE_ORDER, RunPathFinder, RunPathFinding
from .cache import StateCostCache
from .config import SearchSettings
from .estimator import BoundingEstimator
from .path_models import Route, RouteValidationError, SearchMetrics, SearchResult
from .types import SearchStrategy
from .utils import MemoryManager, feasible_run_counts, split_distance, timer

# Re-export types and classes
__all__ = [
    "MOVE_ORDER",
    "BoundingEstimator",
    "BranchAndBoundFinder",
    "DijkstraFinder",
    "MemoryManager",
    "Route",
    "RouteValidationError",
    "RunPathFinder",
    "RunPathFinding",
    "SearchContext",
    "SearchMetrics",
    "SearchResult",
    "SearchSettings",
    "SearchStrategy",
    "StateCostCache",
    "feasible_run_counts",
    "split_distance",
    "timer",
]
