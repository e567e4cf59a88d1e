from __future__ import annotations
from typing import Optional
from ..core.cancellation import CancellationSource
from ..core.frontiers import FIFOQueue
from ..core.metrics import SearchResult
from ..core.problem import Problem
from .best_first import run_queue_search


def breadth_first_search(
    problem: Problem,
    graph: bool = True,
    early_goal_check: bool = True,
    cancel: Optional[CancellationSource] = None,
) -> SearchResult:
    return run_queue_search(problem, FIFOQueue(), "BFS", graph=graph,
                            early_goal_check=early_goal_check, cancel=cancel)
