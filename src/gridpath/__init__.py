"""
gridpath - Run-constrained minimum-cost paths across cost grids

This package computes the cheapest route from the top-left to the bottom-right cell
of a grid of single-digit movement costs, for an agent that must travel at least
``min_run`` and at most ``max_run`` cells in a heading before turning, and may never
reverse. It includes:

- Grid parsing and validation
- Named run configurations (standard and extended)
- A staircase bounding estimator
- A branch-and-bound search engine and a Dijkstra cross-check engine
- A command line interface

Example:
    >>> import gridpath
    >>> grid = gridpath.parse_grid(open("grid.txt").read())
    >>> gridpath.solve(grid, gridpath.EXTENDED)
"""

__version__ = "0.1.0"
__author__ = "gridpath Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("gridpath requires Python 3.10 or higher")

# Import commonly used components for easier access
from typing import Optional

from .core.exceptions import (
    InvalidConfigurationError,
    MalformedGridError,
    NoPathFoundError,
    SearchBudgetExceededError,
)
from .core.grid import Grid, parse_grid
from .core.models import EXTENDED, STANDARD, RunConstraints
from .core.search import RunPathFinding, SearchResult, SearchSettings, SearchStrategy


def solve(
    grid: Grid,
    constraints: RunConstraints = STANDARD,
    strategy: SearchStrategy = SearchStrategy.BRANCH_AND_BOUND,
    settings: Optional[SearchSettings] = None,
) -> int:
    """
    Compute the minimal total cost to reach the target cell.

    Raises:
        InvalidConfigurationError: If constraints are not RunConstraints
        NoPathFoundError: If the constraints never allow reaching the target
        SearchBudgetExceededError: If ``settings`` bounds the search and it runs out
    """
    return RunPathFinding().solve(grid, constraints, strategy, settings)


__all__ = [
    "EXTENDED",
    "Grid",
    "InvalidConfigurationError",
    "MalformedGridError",
    "NoPathFoundError",
    "RunConstraints",
    "RunPathFinding",
    "STANDARD",
    "SearchBudgetExceededError",
    "SearchResult",
    "SearchSettings",
    "SearchStrategy",
    "parse_grid",
    "solve",
]
