"""
Data models for run-constrained path search.

This module provides the core data structures returned by the search package:
- Route: Cells visited from start to target, with the total cost
- SearchMetrics: Container for search performance metrics
- SearchResult: Cost, route and metrics of one search
- RouteValidationError: Exception for route validation failures

Example:
    >>> route = Route.through(grid, [(0, 0), (1, 0), (1, 1)])
    >>> route.validate(grid, STANDARD)
    >>> list(route.legs())
    [(<Heading.RIGHT: (1, 0)>, 1), (<Heading.DOWN: (0, 1)>, 1)]
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Sequence, Tuple, Union

from ..enums import Heading
from ..grid import Grid
from ..models import RunConstraints
from .types import Position, SearchStrategy


class RouteValidationError(Exception):
    """
    Raised when a route fails validation checks.

    This exception indicates issues such as:
    - Route not starting at the start cell or not ending at the target
    - Non-adjacent consecutive cells
    - Reversals
    - Runs longer than max_run, or turns before min_run
    - Cost not matching the cells' costs
    """

    pass


@dataclass(frozen=True)
class Route:
    """
    Container for one complete path through the grid.

    Attributes:
        cells: Visited cells in order, start cell included
        cost: Sum of the costs of every visited cell except the start cell
    """

    cells: Tuple[Position, ...]
    cost: int

    @classmethod
    def through(cls, grid: Grid, cells: Sequence[Position]) -> "Route":
        """Build a route over ``cells``, costing it against ``grid``."""
        cells = tuple(cells)
        return cls(cells=cells, cost=sum(grid.cost_at(x, y) for x, y in cells[1:]))

    def __len__(self) -> int:
        """Return the number of steps in the route."""
        return max(len(self.cells) - 1, 0)

    def legs(self) -> Iterator[Tuple[Heading, int]]:
        """
        Yield the straight runs of the route as ``(heading, length)``.

        Raises:
            ValueError: If two consecutive cells are not adjacent
        """
        heading: Optional[Heading] = None
        length = 0
        for origin, destination in zip(self.cells, self.cells[1:]):
            step = Heading.between(origin, destination)
            if step is heading:
                length += 1
                continue
            if heading is not None:
                yield heading, length
            heading, length = step, 1
        if heading is not None:
            yield heading, length

    def validate(self, grid: Grid, constraints: RunConstraints) -> None:
        """
        Validate the route against a grid and run constraints.

        The final leg is exempt from the minimum-run check: reaching the target
        ends the journey whatever the current run length.

        Raises:
            RouteValidationError: If any validation check fails
        """
        if len(self.cells) < 2:
            raise RouteValidationError("route must contain at least one step")
        if self.cells[0] != grid.start:
            raise RouteValidationError(f"route starts at {self.cells[0]}, not {grid.start}")
        if self.cells[-1] != grid.target:
            raise RouteValidationError(f"route ends at {self.cells[-1]}, not {grid.target}")
        for x, y in self.cells:
            if not grid.in_bounds(x, y):
                raise RouteValidationError(f"cell ({x}, {y}) outside grid")

        try:
            legs = list(self.legs())
        except ValueError as e:
            raise RouteValidationError(str(e))

        for i, (heading, length) in enumerate(legs):
            if length > constraints.max_run:
                raise RouteValidationError(
                    f"leg {i} runs {length} cells {heading.name}, max_run is {constraints.max_run}"
                )
            if i < len(legs) - 1 and length < constraints.min_run:
                raise RouteValidationError(
                    f"leg {i} turns after {length} cells, min_run is {constraints.min_run}"
                )
            if i > 0 and not heading.is_perpendicular(legs[i - 1][0]):
                raise RouteValidationError(f"leg {i} reverses from {legs[i - 1][0].name}")

        calculated = sum(grid.cost_at(x, y) for x, y in self.cells[1:])
        if calculated != self.cost:
            raise RouteValidationError(
                f"Cost mismatch: calculated {calculated} != stored {self.cost}"
            )


@dataclass
class SearchMetrics:
    """
    Container for search performance metrics.

    Attributes:
        operation: Name of the search operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        states_visited: Work items taken off the frontier
        states_expanded: Work items that survived pruning
        pruned_by_bound: Work items discarded because they exceeded the best total
        pruned_by_cache: Work items discarded because the state was reached as cheaply before
        cache_size: Distinct states recorded in the cost cache
        initial_bound: Cost of the seeding estimate, if any
        max_memory_used: Peak memory usage during operation (bytes)

    Example:
        >>> metrics = SearchMetrics(operation="branch_and_bound", start_time=time())
        >>> # ... perform search ...
        >>> metrics.end_time = time()
        >>> print(f"Search took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    states_visited: int = 0
    states_expanded: int = 0
    pruned_by_bound: int = 0
    pruned_by_cache: int = 0
    cache_size: int = 0
    initial_bound: Optional[int] = None
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "states_visited": self.states_visited,
            "states_expanded": self.states_expanded,
            "pruned_by_bound": self.pruned_by_bound,
            "pruned_by_cache": self.pruned_by_cache,
            "cache_size": self.cache_size,
            "initial_bound": self.initial_bound,
            "max_memory_used": self.max_memory_used,
        }


@dataclass
class SearchResult:
    """
    Outcome of one search.

    Attributes:
        cost: Minimal total cost to reach the target
        route: One route achieving ``cost``
        constraints: Run constraints the search honoured
        strategy: Engine that produced the result
        metrics: Performance metrics of the search
    """

    cost: int
    route: Route
    constraints: RunConstraints
    strategy: SearchStrategy
    metrics: SearchMetrics

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.cost, int) or self.cost < 0:
            raise TypeError("cost must be a non-negative integer")
        if self.route.cost != self.cost:
            raise ValueError(f"route cost {self.route.cost} does not match result cost {self.cost}")
