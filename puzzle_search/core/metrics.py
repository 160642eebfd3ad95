# puzzle_search/core/metrics.py
from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional
import time, tracemalloc

import numpy as np


@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List[Any]
    cost: float
    nodes_generated: int
    nodes_expanded: int
    time_s: float
    peak_kb: int = 0

    @property
    def length(self) -> int:
        return len(self.actions)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["actions"] = [str(a) for a in self.actions]
        return d


class MeasuredRun:
    """
    Context manager for timing and (optional, approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self, trace_memory: bool = False) -> None:
        self.trace_memory = trace_memory
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        if self.trace_memory and not tracemalloc.is_tracing():
            self._tracing = True
            tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Zero unless memory tracing was requested."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb


@dataclass
class LengthStats:
    """Nodes generated, bucketed by solution length.

    ``LengthStats(max_length=20)`` keeps buckets 0..20; longer solutions are
    still recorded and grow the table.
    """
    max_length: int = 0
    _samples: Dict[int, List[int]] = field(default_factory=dict, repr=False)

    def add(self, length: int, nodes_generated: int) -> None:
        if length < 0:
            raise ValueError(f"solution length must be >= 0, got {length}")
        self._samples.setdefault(length, []).append(int(nodes_generated))
        self.max_length = max(self.max_length, length)

    def __len__(self) -> int:
        return self.max_length + 1

    def count(self, length: int) -> int:
        return len(self._samples.get(length, ()))

    def mean(self, length: int) -> float:
        xs = self._samples.get(length)
        if not xs:
            return float("nan")
        return float(np.mean(xs))

    def means(self) -> np.ndarray:
        return np.array([self.mean(i) for i in range(len(self))], dtype=float)

    def overall_mean(self) -> float:
        xs = [x for v in self._samples.values() for x in v]
        return float(np.mean(xs)) if xs else float("nan")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_length": self.max_length,
            "samples": {str(k): v for k, v in sorted(self._samples.items())},
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "LengthStats":
        stats = cls(max_length=int(d.get("max_length", 0)))
        for k, v in d.get("samples", {}).items():
            for x in v:
                stats.add(int(k), x)
        return stats
