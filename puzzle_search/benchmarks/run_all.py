# puzzle_search/benchmarks/run_all.py
# Compares sliding-puzzle heuristics under A*: mean nodes generated per solution length.
from __future__ import annotations

import argparse
import json
import logging
import os
import random
import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..algorithms.astar import a_star_engine
from ..algorithms.ucs import uniform_cost_engine
from ..core.logs import setup_logging
from ..core.metrics import LengthStats
from ..problems.heuristics import HEURISTICS, make_heuristic
from ..problems.sliding_puzzle import SlidingPuzzleProblem

logger = logging.getLogger(__name__)

# ---- Tunables (overridable via environment variables) -----------------------
TRIALS = int(os.getenv("PUZZLE_TRIALS", "300"))        # puzzles per heuristic
MOVES  = int(os.getenv("PUZZLE_MOVES", "20"))          # random moves per scramble
SIZE   = int(os.getenv("PUZZLE_SIZE", "3"))            # board width (3 = 8-puzzle)
SEED   = os.getenv("PUZZLE_SEED")                      # unset = fresh randomness
HEURISTIC_NAMES = os.getenv("PUZZLE_HEURISTICS", "manhattan,out-of-place")

RESULTS_JSON = Path(__file__).with_name("results.json")


def run_trials(engine, trials: int, moves: int, size: int, seed: Optional[int],
               verbose: bool = False) -> LengthStats:
    """Solve ``trials`` scrambled puzzles with ``engine``.

    Puzzles come from ``random.Random(seed)``, so two calls with the same seed
    see the same boards in the same order.
    """
    rng = random.Random(seed)
    stats = LengthStats(max_length=moves)
    for i in range(trials):
        problem = SlidingPuzzleProblem.scrambled(size, moves, rng)
        solution = engine.search(problem)
        if solution is None:
            # scrambles start from the goal, so this means the engine is broken
            raise RuntimeError(f"{engine.name} found no solution for trial {i}:\n{problem.initial_state()}")
        stats.add(len(solution), engine.nodes_generated())
        if verbose:
            print(f"Problem: {i}")
            print("Initial State:")
            print(problem.initial_state())
            print("Solution:")
            for a in solution:
                print(a)
            print("----------------")
        logger.debug("%s trial %d: length=%d generated=%d", engine.name, i, len(solution), engine.nodes_generated())
    return stats


def format_table(results: Dict[str, LengthStats]) -> str:
    names = list(results)
    rows = max((len(s) for s in results.values()), default=0)
    lines = ["len : " + " ".join(f"{n:>14}" for n in names)]
    for length in range(rows):
        cells = " ".join(f"{results[n].mean(length):14.1f}" for n in names)
        lines.append(f"{length:3d} : {cells}")
    return "\n".join(lines)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="A* heuristic comparison on scrambled sliding puzzles.")
    ap.add_argument("--trials", type=int, default=TRIALS, help="puzzles per heuristic")
    ap.add_argument("--moves", type=int, default=MOVES, help="random moves used to scramble each puzzle")
    ap.add_argument("--size", type=int, default=SIZE, help="board width (3 = 8-puzzle)")
    ap.add_argument("--seed", type=int, default=int(SEED) if SEED else None, help="scramble seed")
    ap.add_argument("--heuristics", default=HEURISTIC_NAMES,
                    help=f"comma-separated, from {sorted(HEURISTICS)}")
    ap.add_argument("--ucs", action="store_true", help="also run Uniform-Cost Search")
    ap.add_argument("--verbose", action="store_true", help="print every puzzle and its solution")
    ap.add_argument("--out", type=Path, default=RESULTS_JSON, help="where to write the JSON results")
    ap.add_argument("--log-level", default="WARNING")
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> Dict[str, LengthStats]:
    args = _parse_args(argv)
    setup_logging(args.log_level)

    names: List[str] = [n.strip() for n in args.heuristics.split(",") if n.strip()]
    if not names and not args.ucs:
        raise SystemExit("Nothing to run: give --heuristics and/or --ucs.")

    # every engine sees the same puzzles
    seed = args.seed if args.seed is not None else random.randrange(2**32)

    engines = [a_star_engine(make_heuristic(n), name=n) for n in names]
    if args.ucs:
        engines.append(uniform_cost_engine())

    results: Dict[str, LengthStats] = {}
    for engine in engines:
        print("=======================")
        print(engine.name)
        print("=======================")
        t0 = time.perf_counter()
        results[engine.name] = run_trials(engine, args.trials, args.moves, args.size, seed, args.verbose)
        logger.info("%s: %d trials in %.2fs", engine.name, args.trials, time.perf_counter() - t0)

    print(format_table(results))

    out = {
        "config": {"trials": args.trials, "moves": args.moves, "size": args.size, "seed": seed},
        "results": {name: stats.to_dict() for name, stats in results.items()},
        "ts": time.time(),
    }
    args.out.write_text(json.dumps(out, indent=2))
    print(f"Wrote {args.out}")
    return results


if __name__ == "__main__":
    main()
