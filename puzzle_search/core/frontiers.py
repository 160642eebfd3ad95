# puzzle_search/core/frontiers.py
from __future__ import annotations
import heapq
import itertools
from typing import Callable, Dict, List, Optional

from .node import Node
from .problem import State


class Frontier:
    """Open set of a best-first graph search.

    Nodes live in a heap ordered by ``priority(node)`` and in a dict keyed by
    ``node.state``, so there is at most one open node per state. Equal
    priorities pop in insertion order.

    Replaced entries are not removed from the heap right away: they are
    marked stale and skipped when they reach the top (lazy deletion).
    """

    _STALE = object()

    def __init__(self, priority: Callable[[Node], float]):
        self.priority = priority
        self._heap: List[list] = []
        self._index: Dict[State, list] = {}
        self._counter = itertools.count()

    def push(self, node: Node) -> None:
        """Insert ``node``. Its state must not already be open."""
        if node.state in self._index:
            raise KeyError(f"state already in frontier: {node.state!r}")
        entry = [float(self.priority(node)), next(self._counter), node]
        self._index[node.state] = entry
        heapq.heappush(self._heap, entry)

    def pop_min(self) -> Node:
        while self._heap:
            _, _, node = heapq.heappop(self._heap)
            if node is not self._STALE:
                del self._index[node.state]
                return node
        raise IndexError("pop from an empty frontier")

    def contains_state(self, state: State) -> bool:
        return state in self._index

    def peek_cost(self, state: State) -> Optional[float]:
        entry = self._index.get(state)
        return None if entry is None else entry[2].cost

    def replace_if_cheaper(self, node: Node) -> bool:
        """Swap in ``node`` if its state is open with a higher path cost."""
        entry = self._index.get(node.state)
        if entry is None or entry[2].cost <= node.cost:
            return False
        entry[2] = self._STALE
        del self._index[node.state]
        self.push(node)
        return True

    def peek(self) -> Node:
        while self._heap and self._heap[0][2] is self._STALE:
            heapq.heappop(self._heap)
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0][2]

    def clear(self) -> None:
        self._heap.clear()
        self._index.clear()
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._index)

    def __bool__(self) -> bool:
        return bool(self._index)

    def __contains__(self, state: State) -> bool:
        return state in self._index

    def __repr__(self) -> str:
        return f"<Frontier open={len(self)} heap={len(self._heap)}>"

