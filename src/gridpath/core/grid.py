"""
Immutable cost grid and its text parser.

A grid is a rectangular table of single-digit movement costs. Coordinates are
``(x, y)`` with ``x`` the column and ``y`` the row, both 0-indexed. The start cell is
the top-left corner and the target is the bottom-right corner.

Example:
    >>> grid = parse_grid("241\\n321\\n325\\n")
    >>> grid.cost_at(2, 0)
    1
    >>> grid.target
    (2, 2)
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from .enums import Heading
from .exceptions import MalformedGridError

# Constants
MIN_GRID_SIZE = 2
MAX_CELL_COST = 9

Position = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """
    Rectangular table of non-negative per-cell movement costs.

    Attributes:
        rows: Cell costs indexed ``rows[y][x]``
    """

    rows: Tuple[Tuple[int, ...], ...]

    def __post_init__(self):
        """Validate grid shape and cell values."""
        if len(self.rows) < MIN_GRID_SIZE:
            raise MalformedGridError(
                f"grid must have at least {MIN_GRID_SIZE} rows, got {len(self.rows)}"
            )
        width = len(self.rows[0])
        if width < MIN_GRID_SIZE:
            raise MalformedGridError(
                f"grid must have at least {MIN_GRID_SIZE} columns, got {width}"
            )
        for y, row in enumerate(self.rows):
            if len(row) != width:
                raise MalformedGridError(
                    f"row {y + 1} has length {len(row)}, expected {width}"
                )
            for x, cost in enumerate(row):
                if not isinstance(cost, int) or isinstance(cost, bool):
                    raise MalformedGridError(f"cell ({x}, {y}) is not an integer: {cost!r}")
                if not 0 <= cost <= MAX_CELL_COST:
                    raise MalformedGridError(
                        f"cell ({x}, {y}) cost {cost} must be between 0 and {MAX_CELL_COST}"
                    )

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "Grid":
        """Build a grid from already-split integer rows."""
        return cls(rows=tuple(tuple(row) for row in rows))

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def start(self) -> Position:
        return (0, 0)

    @property
    def target(self) -> Position:
        return (self.width - 1, self.height - 1)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cost_at(self, x: int, y: int) -> int:
        """
        Get the cost of entering cell ``(x, y)``.

        Raises:
            IndexError: If the cell lies outside the grid
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self.rows[y][x]

    def clearance(self, x: int, y: int, heading: Heading) -> int:
        """Number of cells between ``(x, y)`` and the grid edge along ``heading``."""
        if heading is Heading.UP:
            return y
        if heading is Heading.DOWN:
            return self.height - 1 - y
        if heading is Heading.LEFT:
            return x
        return self.width - 1 - x

    def __str__(self) -> str:
        return "\n".join("".join(str(cost) for cost in row) for row in self.rows)


def parse_grid(text: str) -> Grid:
    """
    Parse grid text into a Grid.

    Each non-empty line becomes one row; every character must be a digit 0-9.
    Trailing whitespace (including ``\\r``) is ignored.

    Args:
        text: Grid text, one row per line

    Returns:
        Parsed Grid

    Raises:
        MalformedGridError: On non-digit characters, jagged rows or a grid
            smaller than 2x2
    """
    lines = [line.rstrip() for line in text.splitlines()]
    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        raise MalformedGridError("grid text is empty")

    rows = []
    for line_no, line in enumerate(lines, start=1):
        row = []
        for col_no, char in enumerate(line, start=1):
            if char not in "0123456789":
                raise MalformedGridError(
                    f"line {line_no}, column {col_no}: expected a digit, got {char!r}"
                )
            row.append(int(char))
        rows.append(tuple(row))

    width = len(rows[0])
    for line_no, row in enumerate(rows, start=1):
        if len(row) != width:
            raise MalformedGridError(
                f"line {line_no} has {len(row)} cells, expected {width}"
            )

    return Grid(rows=tuple(rows))
