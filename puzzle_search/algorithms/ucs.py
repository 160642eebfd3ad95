# This code implements Uniform Cost Search (UCS) by configuring the generic best-first engine with path-cost ordering.
# puzzle_search/algorithms/ucs.py
from __future__ import annotations
from .best_first import BestFirstSearch
from .orderings import path_cost_ordering


def uniform_cost_engine(trace_memory: bool = False) -> BestFirstSearch:
    return BestFirstSearch(path_cost_ordering(), name="UCS", trace_memory=trace_memory)


def uniform_cost_search(problem):
    return uniform_cost_engine().run(problem)
