# search_core/algorithms/astar.py
from __future__ import annotations
from typing import Callable, Optional
from ..core.cancellation import CancellationSource
from ..core.node import Node
from .best_first import best_first_search, heuristic_from_problem


def a_star_search(problem, heuristic: Optional[Callable[[Node], float]] = None,
                  graph: bool = True, cancel: Optional[CancellationSource] = None):
    h = heuristic or heuristic_from_problem(problem)
    return best_first_search(problem, f=lambda n: n.path_cost, h=h, name="A*", graph=graph, cancel=cancel)
