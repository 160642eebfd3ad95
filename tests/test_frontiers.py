"""Tests for the state-indexed frontier."""

import pytest

from puzzle_search.core.frontiers import Frontier
from puzzle_search.core.node import Node


def _node(state, cost):
    return Node(state=state, cost=cost)


class TestFrontier:
    """Test Frontier ordering and state index."""

    @pytest.fixture
    def frontier(self):
        return Frontier(lambda n: n.cost)

    def test_empty(self, frontier):
        assert len(frontier) == 0
        assert not frontier
        with pytest.raises(IndexError):
            frontier.pop_min()

    def test_pop_min_order(self, frontier):
        for s, c in [("a", 3), ("b", 1), ("c", 2)]:
            frontier.push(_node(s, c))
        assert [frontier.pop_min().state for _ in range(3)] == ["b", "c", "a"]
        assert not frontier

    def test_pop_returns_a_minimum_on_ties(self, frontier):
        for s, c in [("a", 1), ("b", 1), ("c", 0.5), ("d", 1)]:
            frontier.push(_node(s, c))
        assert frontier.pop_min().state == "c"
        assert frontier.pop_min().cost == 1

    def test_membership_is_by_state(self, frontier):
        n = _node(("x", 1), 4)
        frontier.push(n)
        assert frontier.contains_state(("x", 1))
        assert ("x", 1) in frontier
        assert n not in frontier
        assert not frontier.contains_state(("x", 2))

    def test_peek_cost(self, frontier):
        frontier.push(_node("a", 4))
        assert frontier.peek_cost("a") == 4.0
        assert frontier.peek_cost("b") is None

    def test_duplicate_push_rejected(self, frontier):
        frontier.push(_node("a", 4))
        with pytest.raises(KeyError):
            frontier.push(_node("a", 2))

    def test_replace_if_cheaper(self, frontier):
        frontier.push(_node("a", 5))
        frontier.push(_node("b", 3))
        cheaper = _node("a", 1)

        assert frontier.replace_if_cheaper(cheaper)
        assert frontier.peek_cost("a") == 1.0
        assert len(frontier) == 2
        assert frontier.pop_min() is cheaper
        assert frontier.pop_min().state == "b"
        # the stale entry for "a" must not resurface
        assert not frontier
        with pytest.raises(IndexError):
            frontier.pop_min()

    def test_replace_ignores_equal_or_higher_cost(self, frontier):
        original = _node("a", 2)
        frontier.push(original)
        assert not frontier.replace_if_cheaper(_node("a", 2))
        assert not frontier.replace_if_cheaper(_node("a", 7))
        assert frontier.pop_min() is original

    def test_replace_unknown_state_is_noop(self, frontier):
        assert not frontier.replace_if_cheaper(_node("z", 0))
        assert not frontier

    def test_priority_function_is_used(self):
        h = {"a": 10, "b": 0}
        frontier = Frontier(lambda n: n.cost + h[n.state])
        frontier.push(_node("a", 1))
        frontier.push(_node("b", 5))
        assert frontier.peek().state == "b"
        assert frontier.pop_min().state == "b"

    def test_clear(self, frontier):
        frontier.push(_node("a", 1))
        frontier.clear()
        assert not frontier
        assert not frontier.contains_state("a")
