# puzzle_search/algorithms/best_first.py
# Generic best-first graph search. The node ordering is injected; see ucs.py and astar.py.
from __future__ import annotations
import functools
import logging
from typing import Callable, List, Optional, Set

from ..core.frontiers import Frontier
from ..core.metrics import MeasuredRun, SearchResult
from ..core.node import Node, child_node
from ..core.problem import Action, Problem, State

logger = logging.getLogger(__name__)


class BestFirstSearch:
    """Best-first graph search over any object satisfying the Problem contract.

    The engine keeps three sets of states: open (the frontier), closed (the
    explored set) and unseen. Each iteration pops the open node of lowest
    ``priority``, stops if it is a goal, closes its state, and opens every
    child whose state is unseen. A child reaching an open state by a cheaper
    path replaces the open node. Closed states are never reopened.

    Frontier, explored set and counters belong to the instance and are reset
    at the start of every ``search`` call, so one engine may be reused for
    many problems but must not run two searches at once.

    Args:
        priority: Node ordering, fixed for the lifetime of the engine.
        name: Label used in results and log messages.
        trace_memory: Record peak memory with tracemalloc (slow).
    """

    def __init__(self, priority: Callable[[Node], float], name: str = "BestFirst", trace_memory: bool = False):
        if priority is None or not callable(priority):
            raise TypeError("BestFirstSearch needs a node ordering, e.g. path_cost_ordering()")
        self.priority = priority
        self.name = name
        self.trace_memory = trace_memory
        self.frontier = Frontier(priority)
        self.explored: Set[State] = set()
        self._generated = 0
        self._expanded = 0
        self.last_result: Optional[SearchResult] = None

    def nodes_generated(self) -> int:
        """Nodes popped from the frontier by the last ``search`` call, root and goal included."""
        return self._generated

    def nodes_expanded(self) -> int:
        return self._expanded

    def search(self, problem: Problem) -> Optional[List[Action]]:
        """Return the actions leading to a goal, or None if no goal is reachable."""
        result = self.run(problem)
        return result.actions if result.success else None

    def run(self, problem: Problem) -> SearchResult:
        self.frontier.clear()
        self.explored = set()
        self._generated = 0
        self._expanded = 0
        logger.debug("%s: searching from %r", self.name, problem.initial_state())

        with MeasuredRun(trace_memory=self.trace_memory) as meter:
            goal = self._loop(problem)

        if goal is None:
            logger.info("%s: frontier exhausted after %d nodes, no solution", self.name, self._generated)
            result = SearchResult(self.name, False, [], float("inf"), self._generated, self._expanded,
                                  meter.elapsed, meter.peak_kb)
        else:
            actions = goal.solution()
            logger.debug("%s: solved, %d actions, cost %g, %d nodes generated",
                         self.name, len(actions), goal.cost, self._generated)
            result = SearchResult(self.name, True, actions, goal.cost, self._generated, self._expanded,
                                  meter.elapsed, meter.peak_kb)
        self.last_result = result
        return result

    def _loop(self, problem: Problem) -> Optional[Node]:
        frontier, explored = self.frontier, self.explored
        # problems that only meet the structural contract get the shared helper
        expand = getattr(problem, "child_node", None) or functools.partial(child_node, problem)
        frontier.push(Node.root(problem.initial_state()))

        while frontier:
            node = frontier.pop_min()
            self._generated += 1

            if problem.is_goal(node.state):
                return node

            explored.add(node.state)
            self._expanded += 1

            for a in problem.actions(node.state):
                child = expand(node, a)
                if child.state in explored:
                    continue
                if child.state in frontier:
                    frontier.replace_if_cheaper(child)
                else:
                    frontier.push(child)

        return None


def best_first_search(problem: Problem, f: Callable[[Node], float], name: str = "BestFirst") -> SearchResult:
    return BestFirstSearch(f, name=name).run(problem)
