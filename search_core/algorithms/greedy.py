# search_core/algorithms/greedy.py
from __future__ import annotations
from typing import Callable, Optional
from ..core.cancellation import CancellationSource
from ..core.node import Node
from .best_first import best_first_search, heuristic_from_problem


def greedy_best_first_search(problem, heuristic: Optional[Callable[[Node], float]] = None,
                             graph: bool = True, cancel: Optional[CancellationSource] = None):
    h = heuristic or heuristic_from_problem(problem) or (lambda n: 0.0)
    # greedy: f = 0 + h
    return best_first_search(problem, f=lambda n: 0.0, h=h, name="Greedy", graph=graph, cancel=cancel)
