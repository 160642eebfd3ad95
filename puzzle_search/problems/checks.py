# puzzle_search/problems/checks.py
# Independent references used to validate problems and search results on small state spaces.
from __future__ import annotations
import heapq
import itertools
from collections import deque
from typing import Dict, Hashable, Optional


def sanity_check_problem(problem, max_states: int = 10_000):
    """Walks states breadth-first and checks step_cost never returns None or a negative value."""
    seen = set()
    q = deque([problem.initial_state()])
    while q and len(seen) < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if cost is None:
                raise AssertionError(f"step_cost is None for (s={s}, a={a}, s'={s2})")
            if cost < 0:
                raise AssertionError(f"step_cost is negative for (s={s}, a={a}, s'={s2})")
            q.append(s2)
    return f"OK: visited {len(seen)} states; no None or negative costs."


def reachable_states(problem, max_states: Optional[int] = None) -> set:
    seen = {problem.initial_state()}
    q = deque(seen)
    while q:
        s = q.popleft()
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            if s2 not in seen:
                if max_states is not None and len(seen) >= max_states:
                    raise RuntimeError(f"more than {max_states} reachable states")
                seen.add(s2)
                q.append(s2)
    return seen


def optimal_cost(problem, max_states: Optional[int] = None) -> Optional[float]:
    """Cheapest path cost to any goal by plain Dijkstra, or None if no goal is reachable.

    Shares no code with the engine, so it can be used to check it.
    """
    start = problem.initial_state()
    dist: Dict[Hashable, float] = {start: 0.0}
    tie = itertools.count()
    heap = [(0.0, next(tie), start)]
    done = set()
    while heap:
        d, _, s = heapq.heappop(heap)
        if s in done:
            continue
        if problem.is_goal(s):
            return d
        done.add(s)
        if max_states is not None and len(done) > max_states:
            raise RuntimeError(f"more than {max_states} states expanded")
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            d2 = d + float(problem.step_cost(s, a, s2))
            if d2 < dist.get(s2, float("inf")):
                dist[s2] = d2
                heapq.heappush(heap, (d2, next(tie), s2))
    return None
