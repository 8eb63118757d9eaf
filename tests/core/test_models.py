"""
Tests for headings, run constraints and search states.
"""

import pytest

from gridpath.core.enums import Heading
from gridpath.core.exceptions import ConfigurationError, InvalidConfigurationError
from gridpath.core.models import EXTENDED, STANDARD, RunConstraints, SearchState


def test_named_configurations():
    """Test the two named run configurations."""
    assert (STANDARD.min_run, STANDARD.max_run) == (1, 3)
    assert (EXTENDED.min_run, EXTENDED.max_run) == (4, 10)
    assert RunConstraints.from_name("standard") is STANDARD
    assert RunConstraints.from_name("EXTENDED") is EXTENDED


def test_unknown_configuration_name():
    """Test that unknown names are rejected."""
    with pytest.raises(InvalidConfigurationError, match="unknown run configuration 'ultra'"):
        RunConstraints.from_name("ultra")


@pytest.mark.parametrize(
    "min_run,max_run,message",
    [
        (4, 3, "cannot exceed"),
        (0, 3, "min_run must be positive"),
        (1, 0, "max_run must be positive"),
        (-1, -1, "must be positive"),
        (1.0, 3, "min_run must be an integer"),
        (True, 3, "min_run must be an integer"),
    ],
)
def test_invalid_constraints(min_run, max_run, message):
    """Test constraint validation."""
    with pytest.raises(InvalidConfigurationError, match=message):
        RunConstraints(min_run=min_run, max_run=max_run)


def test_invalid_configuration_is_configuration_error():
    """Test exception hierarchy of invalid constraints."""
    with pytest.raises(ConfigurationError):
        RunConstraints(min_run=5, max_run=2)


def test_trivial_constraints_are_permitted():
    """Test that min_run == max_run == 1 is a legal configuration."""
    constraints = RunConstraints(min_run=1, max_run=1)
    assert not constraints.can_continue(1)
    assert constraints.can_turn(1)


def test_run_checks():
    """Test continue/turn checks against run lengths."""
    assert EXTENDED.can_continue(9)
    assert not EXTENDED.can_continue(10)
    assert not EXTENDED.can_turn(3)
    assert EXTENDED.can_turn(4)


def test_heading_geometry():
    """Test heading offsets, opposites and perpendicularity."""
    assert Heading.UP.opposite is Heading.DOWN
    assert Heading.LEFT.opposite is Heading.RIGHT
    assert Heading.UP.is_perpendicular(Heading.LEFT)
    assert not Heading.UP.is_perpendicular(Heading.DOWN)
    assert Heading.RIGHT.step((2, 3), 4) == (6, 3)
    assert Heading.between((2, 3), (2, 2)) is Heading.UP
    with pytest.raises(ValueError, match="not adjacent"):
        Heading.between((0, 0), (1, 1))


def test_search_state_advance():
    """Test run length bookkeeping when stepping."""
    state = SearchState((1, 0), Heading.RIGHT, 1)
    straight = state.advance(Heading.RIGHT)
    assert straight == SearchState((2, 0), Heading.RIGHT, 2)
    turned = straight.advance(Heading.DOWN)
    assert turned == SearchState((2, 1), Heading.DOWN, 1)


def test_search_state_is_hashable():
    """Test that equal states collapse in dictionaries."""
    a = SearchState((3, 4), Heading.DOWN, 2)
    b = SearchState((3, 4), Heading.DOWN, 2)
    assert {a: 1}[b] == 1
    assert a != SearchState((3, 4), Heading.DOWN, 3)
