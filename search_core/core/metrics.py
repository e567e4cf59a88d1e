# search_core/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional
import time, tracemalloc

METRIC_NODES_EXPANDED = "nodes_expanded"
METRIC_QUEUE_SIZE = "queue_size"
METRIC_MAX_QUEUE_SIZE = "max_queue_size"
METRIC_PATH_COST = "path_cost"

SEARCH_METRICS = (METRIC_NODES_EXPANDED, METRIC_QUEUE_SIZE, METRIC_MAX_QUEUE_SIZE, METRIC_PATH_COST)


class Metrics:
    """
    Named counters for one search run. Not thread-safe: every concurrent
    search keeps its own instance and the caller merges them afterwards.
    """
    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def set(self, key: str, value) -> None:
        self._values[key] = value

    def get(self, key: str, default=0):
        return self._values.get(key, default)

    def get_int(self, key: str) -> int:
        return int(self._values.get(key, 0))

    def get_float(self, key: str) -> float:
        return float(self._values.get(key, 0.0))

    def set_if_greater(self, key: str, value) -> bool:
        """Keep a running maximum. Returns True when the stored value changed."""
        if key not in self._values or value > self._values[key]:
            self._values[key] = value
            return True
        return False

    def clear(self, *keys: str) -> None:
        for key in keys or tuple(self._values):
            self._values[key] = 0

    def merge(self, other: "Metrics") -> "Metrics":
        """Combine the metrics of two independent runs (e.g. both directions of a bidirectional search)."""
        merged = Metrics()
        merged._values = dict(self._values)
        merged.set(METRIC_NODES_EXPANDED, self.get_int(METRIC_NODES_EXPANDED) + other.get_int(METRIC_NODES_EXPANDED))
        merged.set(METRIC_QUEUE_SIZE, self.get_int(METRIC_QUEUE_SIZE) + other.get_int(METRIC_QUEUE_SIZE))
        merged.set(METRIC_MAX_QUEUE_SIZE, max(self.get_int(METRIC_MAX_QUEUE_SIZE), other.get_int(METRIC_MAX_QUEUE_SIZE)))
        for key, value in other._values.items():
            if key not in SEARCH_METRICS:
                merged._values.setdefault(key, value)
        return merged

    def keys(self) -> List[str]:
        return sorted(self._values)

    def snapshot(self) -> Mapping[str, Any]:
        return MappingProxyType(dict(self._values))

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}={self._values[k]}" for k in self.keys()) + "}"


@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int
    status: str = ""
    max_queue_size: int = 0
    error: Optional[str] = None


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    Memory tracing is skipped when trace_memory is False or another
    tracemalloc session is already running.
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._trace_memory = trace_memory

    def __enter__(self) -> "MeasuredRun":
        if self._trace_memory and not tracemalloc.is_tracing():
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
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
