# puzzle_search/algorithms/orderings.py
# Node orderings for the best-first engine. UCS and A* differ only in which one they install.
from __future__ import annotations
from typing import Callable, Union

from ..core.node import Node
from ..core.problem import Heuristic, State

Priority = Callable[[Node], float]
HeuristicLike = Union[Heuristic, Callable[[State], float]]


def as_estimator(h: HeuristicLike) -> Callable[[State], float]:
    if isinstance(h, Heuristic):
        return h.estimate
    if callable(h):
        return h
    raise TypeError(f"expected a Heuristic or a callable, got {type(h).__name__}")


def path_cost_ordering() -> Priority:
    """f(n) = g(n)."""
    def f(n: Node) -> float:
        return n.cost
    f.__name__ = "path_cost"
    return f


def heuristic_ordering(h: HeuristicLike) -> Priority:
    """f(n) = g(n) + h(n.state)."""
    estimate = as_estimator(h)

    def f(n: Node) -> float:
        return n.cost + float(estimate(n.state))
    f.__name__ = f"path_cost_plus_{getattr(h, '__name__', type(h).__name__)}"
    return f
