# puzzle_search/algorithms/astar.py
from __future__ import annotations
from typing import Optional

from .best_first import BestFirstSearch
from .orderings import HeuristicLike, heuristic_ordering


def _label(h: HeuristicLike) -> str:
    return getattr(h, "name", None) or getattr(h, "__name__", None) or type(h).__name__


def a_star_engine(heuristic: HeuristicLike, name: Optional[str] = None, trace_memory: bool = False) -> BestFirstSearch:
    """A*: best-first search ordered by f = g + h.

    Optimal only if ``heuristic`` never overestimates the remaining cost.
    """
    return BestFirstSearch(heuristic_ordering(heuristic), name=name or f"A*({_label(heuristic)})",
                           trace_memory=trace_memory)


def a_star_search(problem, heuristic: HeuristicLike):
    return a_star_engine(heuristic).run(problem)
