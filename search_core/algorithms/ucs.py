# This code implements Uniform Cost Search (UCS) by reusing the generic best-first search function.
# search_core/algorithms/ucs.py
from __future__ import annotations
from typing import Optional
from ..core.cancellation import CancellationSource
from .best_first import best_first_search


def uniform_cost_search(problem, graph: bool = True, cancel: Optional[CancellationSource] = None):
    return best_first_search(problem, f=lambda n: n.path_cost, name="UCS", h=None, graph=graph, cancel=cancel)
