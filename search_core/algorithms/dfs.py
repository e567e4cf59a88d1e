# search_core/algorithms/dfs.py
# This code implements Depth-First Search (DFS) using a LIFO stack to explore nodes in a search tree.
from __future__ import annotations
from typing import Optional
from ..core.cancellation import CancellationSource
from ..core.frontiers import LIFOStack
from ..core.metrics import SearchResult
from ..core.problem import Problem
from .best_first import run_queue_search


def depth_first_search(problem: Problem, graph: bool = True,
                       cancel: Optional[CancellationSource] = None) -> SearchResult:
    # tree-search DFS only terminates on acyclic state spaces; pass a budget or cancel token otherwise
    return run_queue_search(problem, LIFOStack(), "DFS", graph=graph, cancel=cancel)
