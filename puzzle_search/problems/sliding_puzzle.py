# puzzle_search/problems/sliding_puzzle.py
from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from ..core.problem import Problem

Coord = Tuple[int, int]
RandomLike = Union[random.Random, int, None]


class IllegalMoveError(ValueError):
    """A move was applied in a state where the blank cannot make it."""


class Move(Enum):
    """Direction the blank slides."""
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)

    def __str__(self) -> str:
        return self.name.capitalize()


# Canonical action order; it only affects tie-breaking.
MOVES: Tuple[Move, ...] = (Move.LEFT, Move.RIGHT, Move.UP, Move.DOWN)


def _rng(rng: RandomLike) -> random.Random:
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)


@dataclass(frozen=True)
class PuzzleState:
    """
    An N x N sliding-tile board.

    - tiles: row-major tuple, 0 is the blank
    - goal(size): 0, 1, ..., N*N-1 (blank in the top-left corner)
    """
    size: int
    tiles: Tuple[int, ...]

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f"puzzle size must be >= 2, got {self.size}")
        object.__setattr__(self, "tiles", tuple(int(t) for t in self.tiles))
        n = self.size * self.size
        if len(self.tiles) != n:
            raise ValueError(f"expected {n} tiles for a {self.size}x{self.size} puzzle, got {len(self.tiles)}")
        if sorted(self.tiles) != list(range(n)):
            raise ValueError(f"tiles must be a permutation of 0..{n - 1}: {self.tiles}")

    @classmethod
    def goal(cls, size: int = 3) -> "PuzzleState":
        return cls(size, tuple(range(size * size)))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "PuzzleState":
        rows = [list(r) for r in rows]
        return cls(len(rows), tuple(t for r in rows for t in r))

    @classmethod
    def scrambled(cls, size: int = 3, moves: int = 20, rng: RandomLike = None) -> "PuzzleState":
        """Start from the goal and make ``moves`` random legal moves.

        The walk may undo itself, so the optimal solution can be shorter
        than ``moves``; it is never longer.
        """
        if moves < 0:
            raise ValueError(f"moves must be >= 0, got {moves}")
        rng = _rng(rng)
        s = cls.goal(size)
        for _ in range(moves):
            s = s.apply(rng.choice(s.legal_moves()))
        return s

    def tile_at(self, row: int, column: int) -> int:
        return self.tiles[row * self.size + column]

    def blank(self) -> Coord:
        return divmod(self.tiles.index(0), self.size)

    def legal_moves(self) -> List[Move]:
        r, c = self.blank()
        out = []
        for m in MOVES:
            dr, dc = m.value
            if 0 <= r + dr < self.size and 0 <= c + dc < self.size:
                out.append(m)
        return out

    def apply(self, move: Move) -> "PuzzleState":
        r, c = self.blank()
        dr, dc = move.value
        nr, nc = r + dr, c + dc
        if not (0 <= nr < self.size and 0 <= nc < self.size):
            raise IllegalMoveError(f"cannot move blank {move} from {(r, c)}")
        i, j = r * self.size + c, nr * self.size + nc
        tiles = list(self.tiles)
        tiles[i], tiles[j] = tiles[j], tiles[i]
        return PuzzleState(self.size, tuple(tiles))

    def is_solvable(self, goal: Optional["PuzzleState"] = None) -> bool:
        """Inversion-parity test against ``goal`` (default: the canonical goal)."""
        goal = goal or PuzzleState.goal(self.size)
        return _parity(self) == _parity(goal)

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        rows = []
        for r in range(self.size):
            row = self.tiles[r * self.size:(r + 1) * self.size]
            rows.append(" ".join(("." if t == 0 else str(t)).rjust(width) for t in row))
        return "\n".join(rows)


def _parity(s: PuzzleState) -> int:
    arr = [t for t in s.tiles if t != 0]
    inv = sum(1 for i in range(len(arr)) for j in range(i + 1, len(arr)) if arr[i] > arr[j])
    if s.size % 2:
        return inv % 2
    # even widths: the blank's row (from the bottom) joins the invariant
    return (inv + s.size - s.blank()[0]) % 2


class SlidingPuzzleProblem(Problem):
    """
    Sliding-tile puzzle with unit move costs.

    - State: PuzzleState
    - ACTIONS(s): moves of the blank that stay on the board
    - RESULT(s,a): board after sliding the blank
    - IS-GOAL(s): s == goal
    - c(s,a,s'): 1.0
    """
    def __init__(self, initial: PuzzleState, goal: Optional[PuzzleState] = None):
        goal = goal or PuzzleState.goal(initial.size)
        if goal.size != initial.size:
            raise ValueError(f"goal is {goal.size}x{goal.size} but initial state is {initial.size}x{initial.size}")
        self._initial = initial
        self.goal = goal

    @classmethod
    def scrambled(cls, size: int = 3, moves: int = 20, rng: RandomLike = None) -> "SlidingPuzzleProblem":
        return cls(PuzzleState.scrambled(size, moves, rng))

    @property
    def size(self) -> int:
        return self._initial.size

    def initial_state(self) -> PuzzleState:
        return self._initial

    def is_goal(self, state: PuzzleState) -> bool:
        return state == self.goal

    def actions(self, state: PuzzleState) -> List[Move]:
        return state.legal_moves()

    def result(self, state: PuzzleState, action: Move) -> PuzzleState:
        return state.apply(action)

    def step_cost(self, state: PuzzleState, action: Move, next_state: PuzzleState) -> float:
        return 1.0

    def __repr__(self) -> str:
        return f"SlidingPuzzleProblem(initial={self._initial.tiles}, size={self.size})"
