"""
Enumerations for movement on the cost grid.

This module defines the heading taxonomy used by the search engines. Headings are
ordered Up, Down, Left, Right; the engines generate candidate moves in that order,
which fixes the exploration order of the depth-first search.
"""

from enum import Enum
from typing import Tuple


class Heading(Enum):
    """
    Enumeration of the four cardinal headings.

    Each member's value is the unit offset ``(dx, dy)`` of a single step, with
    ``y`` growing downwards (row index).
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Heading":
        """Heading pointing the other way along the same axis."""
        return _OPPOSITES[self]

    @property
    def is_horizontal(self) -> bool:
        return self.dy == 0

    def is_perpendicular(self, other: "Heading") -> bool:
        """Return True if ``other`` lies on the other axis."""
        return self.is_horizontal != other.is_horizontal

    def step(self, position: Tuple[int, int], distance: int = 1) -> Tuple[int, int]:
        """Return ``position`` moved ``distance`` cells along this heading."""
        x, y = position
        return (x + self.dx * distance, y + self.dy * distance)

    @classmethod
    def between(cls, origin: Tuple[int, int], destination: Tuple[int, int]) -> "Heading":
        """
        Get the heading of a single step between two adjacent cells.

        Raises:
            ValueError: If the cells are not orthogonally adjacent
        """
        offset = (destination[0] - origin[0], destination[1] - origin[1])
        for heading in cls:
            if heading.value == offset:
                return heading
        raise ValueError(f"Cells {origin} and {destination} are not adjacent")


_OPPOSITES = {
    Heading.UP: Heading.DOWN,
    Heading.DOWN: Heading.UP,
    Heading.LEFT: Heading.RIGHT,
    Heading.RIGHT: Heading.LEFT,
}
