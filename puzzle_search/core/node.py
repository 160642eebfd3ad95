# puzzle_search/core/node.py
# This code defines the Node record used by the best-first search engine to represent states in a search tree.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .problem import Action, Problem, State


@dataclass(frozen=True, eq=False)
class Node:
    """Immutable search-tree record.

    Nodes compare by identity: two nodes holding the same state are still
    different paths. Use ``node.state`` for duplicate detection.
    """
    state: State
    parent: Optional["Node"] = None
    action: Optional[Action] = None
    cost: float = 0.0
    depth: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "cost", float(self.cost))
        object.__setattr__(self, "depth", 0 if self.parent is None else self.parent.depth + 1)

    @classmethod
    def root(cls, state: State) -> "Node":
        return cls(state=state)

    def path(self) -> List["Node"]:
        """Nodes from the root down to this node."""
        nodes = []
        cur: Optional[Node] = self
        while cur is not None:
            nodes.append(cur)
            cur = cur.parent
        nodes.reverse()
        return nodes

    def solution(self) -> List[Action]:
        """Actions from the root to this node, oldest first."""
        actions = []
        cur = self
        while cur.parent is not None:
            actions.append(cur.action)
            cur = cur.parent
        actions.reverse()
        return actions

    def expand(self, problem: Problem) -> Iterator["Node"]:
        """Generate child Nodes by applying ACTIONS(s), using RESULT and step_cost."""
        for a in problem.actions(self.state):
            yield child_node(problem, self, a)

    def __repr__(self) -> str:
        return f"<Node {self.state!r} cost={self.cost:g} depth={self.depth}>"


def child_node(problem: Problem, parent: Node, action: Action) -> Node:
    s = parent.state
    s2 = problem.result(s, action)
    cost = problem.step_cost(s, action, s2)
    if cost is None:
        raise ValueError(
            f"step_cost returned None for (s={s!r}, a={action!r}, s'={s2!r}). "
            "Check your problem’s ACTIONS/RESULT/cost mapping."
        )
    if cost < 0:
        raise ValueError(f"negative step cost {cost!r} for (s={s!r}, a={action!r}, s'={s2!r})")
    return Node(state=s2, parent=parent, action=action, cost=parent.cost + float(cost))
