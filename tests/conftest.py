"""Shared test fixtures."""

import random
from typing import Callable

import pytest

from gridpath.core.grid import Grid, parse_grid

EXAMPLE_GRID = """\
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
"""

UNFORTUNATE_GRID = """\
111111111111
999999999991
999999999991
999999999991
999999999991
"""


@pytest.fixture
def example_grid_text() -> str:
    """Fixture providing the canonical 13x13 grid as text."""
    return EXAMPLE_GRID


@pytest.fixture
def example_grid() -> Grid:
    """Fixture providing the canonical 13x13 grid."""
    return parse_grid(EXAMPLE_GRID)


@pytest.fixture
def unfortunate_grid() -> Grid:
    """Fixture providing a grid that punishes turning too early (extended cost 71)."""
    return parse_grid(UNFORTUNATE_GRID)


@pytest.fixture
def uniform_grid() -> Callable[[int, int], Grid]:
    """Fixture providing a factory for grids where every cell costs 1."""

    def make(width: int, height: int) -> Grid:
        return Grid.from_rows([[1] * width for _ in range(height)])

    return make


@pytest.fixture
def random_grid() -> Callable[[int, int, int], Grid]:
    """Fixture providing a factory for seeded random grids with costs 1-9."""

    def make(width: int, height: int, seed: int) -> Grid:
        rng = random.Random(seed)
        return Grid.from_rows(
            [[rng.randint(1, 9) for _ in range(width)] for _ in range(height)]
        )

    return make
