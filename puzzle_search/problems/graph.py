# puzzle_search/problems/graph.py
# A small explicit weighted graph as a search problem. Used for fixtures where
# costs are not uniform or where the goal is unreachable.
from __future__ import annotations
from typing import Dict, FrozenSet, Hashable, Iterable, List, Mapping, Optional, Tuple

from ..core.problem import Problem

Edge = Tuple[Hashable, Hashable, float]


class GraphProblem(Problem):
    """
    Route finding on a directed weighted graph.

    - State: vertex
    - ACTIONS(s): successor vertices, in insertion order
    - RESULT(s,a): a (the action names the next vertex)
    - c(s,a,s'): edge weight
    """
    def __init__(self, graph: Mapping[Hashable, Mapping[Hashable, float]], start: Hashable,
                 goals: Iterable[Hashable], heuristic: Optional[Mapping[Hashable, float]] = None):
        self.graph: Dict[Hashable, Dict[Hashable, float]] = {u: dict(vs) for u, vs in graph.items()}
        for vs in list(self.graph.values()):
            for v in vs:
                self.graph.setdefault(v, {})
        if start not in self.graph:
            self.graph[start] = {}
        self.start = start
        self.goals: FrozenSet[Hashable] = frozenset(goals)
        self.h = dict(heuristic or {})

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], start: Hashable, goals: Iterable[Hashable],
                   undirected: bool = False, heuristic: Optional[Mapping[Hashable, float]] = None) -> "GraphProblem":
        graph: Dict[Hashable, Dict[Hashable, float]] = {}
        for u, v, w in edges:
            graph.setdefault(u, {})[v] = float(w)
            if undirected:
                graph.setdefault(v, {})[u] = float(w)
        return cls(graph, start, goals, heuristic)

    def initial_state(self):
        return self.start

    def is_goal(self, state) -> bool:
        return state in self.goals

    def actions(self, state) -> List[Hashable]:
        return list(self.graph[state])

    def result(self, state, action):
        if action not in self.graph[state]:
            raise ValueError(f"no edge {state!r} -> {action!r}")
        return action

    def step_cost(self, state, action, next_state) -> float:
        return float(self.graph[state][next_state])

    # Optional: table heuristic for A* fixtures (0 for unlisted vertices)
    def estimate(self, state) -> float:
        return float(self.h.get(state, 0.0))
