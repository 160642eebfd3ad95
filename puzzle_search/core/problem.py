# Defines the standard interfaces for search problems and heuristics (states, actions, goals, costs).
# puzzle_search/core/problem.py
from __future__ import annotations
from typing import TYPE_CHECKING, Hashable, Iterable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .node import Node

# States and actions are opaque to the engine: only equality and hashing matter.
Action = Hashable
State = Hashable


class Problem(Protocol):
    """Canonical AI search problem interface (atomic state-space view).

    Implementations must be pure: the engine may call any method any number of
    times, in any order, for the same arguments.
    """
    def initial_state(self) -> State: ...
    def actions(self, s: State) -> Iterable[Action]: ...
    def is_goal(self, s: State) -> bool: ...
    def result(self, s: State, a: Action) -> State: ...
    def step_cost(self, s: State, a: Action, s2: State) -> float: ...

    def child_node(self, parent: "Node", a: Action) -> "Node":
        """Node reached by applying ``a`` to ``parent.state``."""
        from .node import child_node
        return child_node(self, parent, a)


@runtime_checkable
class Heuristic(Protocol):
    """Estimated remaining cost from a state to the nearest goal.

    A* is only optimal when the estimate never exceeds the true remaining
    cost (admissibility). Nothing checks this; it is up to the caller.
    """
    def estimate(self, s: State) -> float: ...


class ZeroHeuristic:
    """h(s) = 0. A* with this heuristic is Uniform-Cost Search."""
    name = "zero"

    def estimate(self, s: State) -> float:
        return 0.0

    def __repr__(self) -> str:
        return "ZeroHeuristic()"
