"""Tests for search-tree nodes and child construction."""

import pytest

from puzzle_search.core.node import Node, child_node
from puzzle_search.core.utils import reconstruct_path, replay, solution_cost
from puzzle_search.problems.graph import GraphProblem


class TestNode:
    """Test Node records."""

    def test_root(self):
        root = Node.root("S")
        assert root.parent is None
        assert root.action is None
        assert root.cost == 0.0
        assert root.depth == 0
        assert root.solution() == []

    def test_frozen(self):
        root = Node.root("S")
        with pytest.raises(AttributeError):
            root.cost = 3.0

    def test_identity_equality(self):
        """Two nodes for the same state are different paths."""
        assert Node.root("S") != Node.root("S")

    def test_solution_matches_parent_walk(self, weighted_graph):
        """Walking parents and reversing gives the node's action sequence."""
        n = Node.root("S")
        for a in ["A", "C", "D", "G"]:
            n = child_node(weighted_graph, n, a)

        walked = []
        cur = n
        while cur.parent is not None:
            walked.append(cur.action)
            cur = cur.parent
        walked.reverse()

        assert n.solution() == walked == ["A", "C", "D", "G"]
        assert n.depth == 4
        assert [p.state for p in n.path()] == ["S", "A", "C", "D", "G"]

    def test_reconstruct_path(self, weighted_graph):
        n = child_node(weighted_graph, Node.root("S"), "A")
        n = child_node(weighted_graph, n, "C")
        actions, cost = reconstruct_path(n)
        assert actions == ["A", "C"]
        assert cost == 4.0
        assert solution_cost(weighted_graph, actions) == cost
        assert replay(weighted_graph, actions) == "C"


class TestChildNode:
    """Test child construction through the Problem contract."""

    def test_cost_accumulates(self, detour_graph):
        a = child_node(detour_graph, Node.root("S"), "A")
        b = detour_graph.child_node(a, "B")
        assert (a.state, a.cost) == ("A", 1.0)
        assert (b.state, b.cost) == ("B", 2.0)
        assert b.parent is a
        assert b.action == "B"

    def test_expand(self, detour_graph):
        children = list(Node.root("S").expand(detour_graph))
        assert [(c.state, c.cost) for c in children] == [("B", 5.0), ("A", 1.0)]

    def test_none_step_cost_rejected(self):
        class NoCost(GraphProblem):
            def step_cost(self, state, action, next_state):
                return None

        p = NoCost.from_edges([("S", "A", 1)], start="S", goals=["A"])
        with pytest.raises(ValueError, match="returned None"):
            child_node(p, Node.root("S"), "A")

    def test_negative_step_cost_rejected(self):
        p = GraphProblem.from_edges([("S", "A", -1)], start="S", goals=["A"])
        with pytest.raises(ValueError, match="negative"):
            child_node(p, Node.root("S"), "A")
