"""Shared fixtures for search tests."""

import pytest

from puzzle_search.problems.graph import GraphProblem
from puzzle_search.problems.sliding_puzzle import Move, PuzzleState, SlidingPuzzleProblem


class RecordingProblem:
    """Wraps a problem and records every state whose actions were requested.

    The engine asks for actions exactly once per expanded state, so the log
    is the expansion order.
    """

    def __init__(self, inner):
        self.inner = inner
        self.expanded = []

    def initial_state(self):
        return self.inner.initial_state()

    def is_goal(self, s):
        return self.inner.is_goal(s)

    def actions(self, s):
        self.expanded.append(s)
        return self.inner.actions(s)

    def result(self, s, a):
        return self.inner.result(s, a)

    def step_cost(self, s, a, s2):
        return self.inner.step_cost(s, a, s2)


@pytest.fixture
def goal_puzzle():
    """8-puzzle that starts solved."""
    return SlidingPuzzleProblem(PuzzleState.goal(3))


@pytest.fixture
def one_move_puzzle():
    """8-puzzle one blank move away from the goal (blank moved right)."""
    return SlidingPuzzleProblem(PuzzleState.goal(3).apply(Move.RIGHT))


@pytest.fixture
def detour_graph():
    """S reaches B directly for 5 or through A for 2; G hangs off B.

    Uniform-cost search opens B at cost 5 and must replace it when the
    cheaper path through A turns up.
    """
    return GraphProblem.from_edges(
        [("S", "B", 5), ("S", "A", 1), ("A", "B", 1), ("B", "G", 1)],
        start="S", goals=["G"],
    )


@pytest.fixture
def disconnected_graph():
    """S and A form a cycle; the goal G is only reachable from B."""
    return GraphProblem.from_edges(
        [("S", "A", 1), ("A", "S", 1), ("B", "G", 1)],
        start="S", goals=["G"],
    )


@pytest.fixture
def weighted_graph():
    """Undirected graph with several routes to G and an admissible table heuristic."""
    edges = [
        ("S", "A", 2), ("S", "B", 1), ("A", "C", 2), ("B", "C", 4),
        ("B", "D", 7), ("C", "D", 1), ("C", "G", 6), ("D", "G", 2),
        ("A", "E", 3), ("E", "G", 9),
    ]
    h = {"S": 6, "A": 4, "B": 5, "C": 3, "D": 2, "E": 7, "G": 0}
    return GraphProblem.from_edges(edges, start="S", goals=["G"], undirected=True, heuristic=h)


@pytest.fixture
def recording():
    return RecordingProblem
