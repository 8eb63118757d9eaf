"""Search engine implementations."""

from .branch_and_bound import BranchAndBoundFinder, SearchContext
from .dijkstra import DijkstraFinder

__all__ = [
    "BranchAndBoundFinder",
    "DijkstraFinder",
    "SearchContext",
]
