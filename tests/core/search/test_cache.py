"""
Tests for the per-search state cost cache.
"""

import pytest

from gridpath.core.enums import Heading
from gridpath.core.models import SearchState
from gridpath.core.search import StateCostCache


@pytest.fixture
def cache() -> StateCostCache:
    return StateCostCache()


def test_offer_only_accepts_improvements(cache):
    """Test that equal or higher costs are rejected."""
    state = SearchState((1, 0), Heading.RIGHT, 1)
    assert cache.offer(state, 7, None)
    assert not cache.offer(state, 7, None)
    assert not cache.offer(state, 9, None)
    assert cache.offer(state, 5, None)
    assert cache.get(state) == 5
    assert state in cache
    assert len(cache) == 1


def test_unknown_state(cache):
    """Test lookups of states never entered."""
    state = SearchState((0, 1), Heading.DOWN, 1)
    assert cache.get(state) is None
    assert state not in cache


def test_route_to(cache):
    """Test rebuilding cells from predecessor links."""
    first = SearchState((1, 0), Heading.RIGHT, 1)
    second = first.advance(Heading.RIGHT)
    third = second.advance(Heading.DOWN)
    cache.offer(first, 1, None)
    cache.offer(second, 2, first)
    cache.offer(third, 3, second)
    assert cache.route_to(third, (0, 0)) == ((0, 0), (1, 0), (2, 0), (2, 1))


def test_route_to_follows_cheapest_parent(cache):
    """Test that an improved cost replaces the predecessor."""
    right = SearchState((1, 0), Heading.RIGHT, 1)
    down = SearchState((0, 1), Heading.DOWN, 1)
    meet = SearchState((1, 1), Heading.DOWN, 1)
    cache.offer(right, 5, None)
    cache.offer(down, 1, None)
    assert cache.offer(meet, 6, right)
    assert cache.route_to(meet, (0, 0)) == ((0, 0), (1, 0), (1, 1))
    assert cache.offer(meet, 2, down)
    assert cache.route_to(meet, (0, 0)) == ((0, 0), (0, 1), (1, 1))


def test_metrics_and_clear(cache):
    """Test hit/miss tracking and reset."""
    state = SearchState((1, 0), Heading.RIGHT, 1)
    cache.offer(state, 3, None)
    cache.offer(state, 4, None)
    metrics = cache.get_metrics()
    assert metrics["size"] == 1
    assert metrics["hits"] == 1
    assert metrics["misses"] == 1
    assert metrics["hit_rate"] == 0.5

    cache.clear()
    assert len(cache) == 0
    assert cache.get_metrics()["hit_rate"] == 0.0
