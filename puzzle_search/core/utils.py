# puzzle_search/core/utils.py
# Helpers for turning a goal node back into the path that reached it.
from __future__ import annotations
from typing import List, Tuple
from .node import Node


def reconstruct_path(node: Node) -> Tuple[List, float]:
    return node.solution(), float(node.cost)


def solution_cost(problem, actions) -> float:
    """Replay ``actions`` from the initial state and sum their step costs."""
    s = problem.initial_state()
    total = 0.0
    for a in actions:
        s2 = problem.result(s, a)
        total += float(problem.step_cost(s, a, s2))
        s = s2
    return total


def replay(problem, actions):
    """Final state reached by applying ``actions`` from the initial state."""
    s = problem.initial_state()
    for a in actions:
        s = problem.result(s, a)
    return s
