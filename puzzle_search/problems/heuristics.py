# puzzle_search/problems/heuristics.py
# Admissible heuristics for the sliding-tile puzzle. The blank is never counted.
from __future__ import annotations
from typing import Dict, Optional, Tuple

from ..core.problem import ZeroHeuristic
from .sliding_puzzle import PuzzleState


class _TileHeuristic:
    name = "tile"

    def __init__(self, goal: Optional[PuzzleState] = None):
        self.goal = goal
        self._positions: Dict[int, Dict[int, Tuple[int, int]]] = {}

    def _goal_positions(self, size: int) -> Dict[int, Tuple[int, int]]:
        pos = self._positions.get(size)
        if pos is not None:
            return pos
        if self.goal is None:
            pos = {t: divmod(t, size) for t in range(size * size)}
        elif self.goal.size != size:
            raise ValueError(f"heuristic goal is {self.goal.size}x{self.goal.size}, state is {size}x{size}")
        else:
            pos = {t: divmod(i, size) for i, t in enumerate(self.goal.tiles)}
        self._positions[size] = pos
        return pos

    def __repr__(self) -> str:
        return f"{type(self).__name__}()" if self.goal is None else f"{type(self).__name__}(goal={self.goal.tiles})"


class ManhattanDistance(_TileHeuristic):
    """Sum over tiles of |row - goal row| + |column - goal column|."""
    name = "manhattan"

    def estimate(self, state: PuzzleState) -> float:
        pos = self._goal_positions(state.size)
        dist = 0
        for idx, tile in enumerate(state.tiles):
            if tile == 0:
                continue
            r, c = divmod(idx, state.size)
            gr, gc = pos[tile]
            dist += abs(r - gr) + abs(c - gc)
        return float(dist)


class OutOfPlace(_TileHeuristic):
    """Number of tiles not on their goal square."""
    name = "out-of-place"

    def estimate(self, state: PuzzleState) -> float:
        pos = self._goal_positions(state.size)
        return float(sum(
            1 for idx, tile in enumerate(state.tiles)
            if tile != 0 and divmod(idx, state.size) != pos[tile]
        ))


HEURISTICS = {
    ManhattanDistance.name: ManhattanDistance,
    OutOfPlace.name: OutOfPlace,
    "zero": ZeroHeuristic,
}


def make_heuristic(name: str, goal: Optional[PuzzleState] = None):
    try:
        cls = HEURISTICS[name]
    except KeyError:
        raise ValueError(f"unknown heuristic {name!r}; choose from {sorted(HEURISTICS)}") from None
    return cls() if cls is ZeroHeuristic else cls(goal)
