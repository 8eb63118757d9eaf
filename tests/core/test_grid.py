"""
Tests for grid parsing and access.
"""

import pytest

from gridpath.core.enums import Heading
from gridpath.core.exceptions import MalformedGridError, ValidationError
from gridpath.core.grid import Grid, parse_grid


def test_parse_example(example_grid):
    """Test parsing the canonical grid."""
    assert example_grid.width == 13
    assert example_grid.height == 13
    assert example_grid.cost_at(0, 0) == 2
    assert example_grid.cost_at(1, 0) == 4
    assert example_grid.cost_at(0, 1) == 3
    assert example_grid.cost_at(12, 12) == 3
    assert example_grid.start == (0, 0)
    assert example_grid.target == (12, 12)


def test_parse_ignores_trailing_whitespace_and_crlf():
    """Test that line endings and trailing blank lines are tolerated."""
    grid = parse_grid("12\r\n34  \r\n\n\n")
    assert grid.rows == ((1, 2), (3, 4))


def test_parse_rejects_non_digit():
    """Test that a foreign character is reported with its position."""
    with pytest.raises(MalformedGridError, match="line 2, column 3"):
        parse_grid("123\n45x\n789")


def test_parse_rejects_jagged_rows():
    """Test that rows of unequal length are rejected."""
    with pytest.raises(MalformedGridError, match="line 3 has 2 cells, expected 3"):
        parse_grid("123\n456\n78")


def test_parse_rejects_blank_line_inside_grid():
    """Test that an empty row in the middle counts as a jagged row."""
    with pytest.raises(MalformedGridError):
        parse_grid("12\n\n34")


@pytest.mark.parametrize("text", ["", "\n\n", "1234", "1\n2\n3"])
def test_parse_rejects_small_grids(text):
    """Test that empty grids and grids narrower than 2x2 are rejected."""
    with pytest.raises(MalformedGridError):
        parse_grid(text)


def test_malformed_grid_is_validation_error():
    """Test that malformed grids surface as validation errors."""
    with pytest.raises(ValidationError):
        parse_grid("ab\ncd")


def test_from_rows_validates_costs():
    """Test cost range validation on already-split rows."""
    assert Grid.from_rows([[0, 9], [5, 5]]).cost_at(1, 0) == 9
    with pytest.raises(MalformedGridError, match="between 0 and 9"):
        Grid.from_rows([[0, 10], [5, 5]])
    with pytest.raises(MalformedGridError, match="between 0 and 9"):
        Grid.from_rows([[0, -1], [5, 5]])
    with pytest.raises(MalformedGridError, match="not an integer"):
        Grid.from_rows([[0, 1.5], [5, 5]])


def test_cost_at_out_of_bounds_is_fatal():
    """Test that out-of-range access raises IndexError."""
    grid = parse_grid("12\n34")
    with pytest.raises(IndexError):
        grid.cost_at(2, 0)
    with pytest.raises(IndexError):
        grid.cost_at(0, -1)


def test_grid_is_immutable():
    """Test that grids cannot be modified after construction."""
    grid = parse_grid("12\n34")
    with pytest.raises(AttributeError):
        grid.rows = ((0, 0), (0, 0))  # type: ignore[misc]


def test_clearance():
    """Test distance to the grid edge along each heading."""
    grid = parse_grid("1111\n1111\n1111")
    assert grid.clearance(1, 1, Heading.UP) == 1
    assert grid.clearance(1, 1, Heading.DOWN) == 1
    assert grid.clearance(1, 1, Heading.LEFT) == 1
    assert grid.clearance(1, 1, Heading.RIGHT) == 2
    assert grid.clearance(3, 2, Heading.RIGHT) == 0


def test_str_renders_text(example_grid_text, example_grid):
    """Test rendering a grid back to text."""
    assert str(example_grid) == example_grid_text.strip()
    assert parse_grid(str(example_grid)) == example_grid
