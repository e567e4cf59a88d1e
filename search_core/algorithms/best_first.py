# search_core/algorithms/best_first.py
# Shared runner for the named strategies: builds the engine, picks tree or
# graph search, measures the run and packs everything into a SearchResult.
from __future__ import annotations
from typing import Callable, Optional
from .. import config
from ..core.cancellation import CancellationSource, ExpansionBudget
from ..core.engine import QueueSearch, SearchStatus
from ..core.frontiers import ExploredSetFrontier, Frontier, PriorityQueue
from ..core.metrics import METRIC_MAX_QUEUE_SIZE, METRIC_NODES_EXPANDED, MeasuredRun, SearchResult
from ..core.node import Node
from ..core.problem import Problem


def default_cancel(cancel: Optional[CancellationSource]) -> Optional[CancellationSource]:
    if cancel is not None:
        return cancel
    limit = config.max_expansions()
    return ExpansionBudget(limit) if limit is not None else None


def run_queue_search(
    problem: Problem,
    frontier: Frontier,
    name: str,
    graph: bool = True,
    early_goal_check: bool = False,
    cancel: Optional[CancellationSource] = None,
) -> SearchResult:
    if graph:
        frontier = ExploredSetFrontier(frontier)
    engine = QueueSearch(early_goal_check=early_goal_check)

    with MeasuredRun(trace_memory=config.trace_memory()) as meter:
        actions = engine.search(problem, frontier, default_cancel(cancel))

    metrics = engine.get_metrics()
    solved = engine.status is SearchStatus.SOLVED
    return SearchResult(
        algo=name,
        success=solved,
        actions=actions,
        cost=engine.last_node.path_cost if solved else float("inf"),
        nodes_expanded=metrics[METRIC_NODES_EXPANDED],
        time_s=meter.elapsed,
        peak_kb=meter.peak_kb,
        status=engine.status.value,
        max_queue_size=metrics[METRIC_MAX_QUEUE_SIZE],
    )


def best_first_search(
    problem: Problem,
    f: Callable[[Node], float],
    name: str = "BestFirst",
    h: Optional[Callable[[Node], float]] = None,
    graph: bool = True,
    cancel: Optional[CancellationSource] = None,
) -> SearchResult:
    def fscore(n: Node) -> float:
        base = float(f(n))
        if h is None:
            return base
        hv = h(n)
        return base + (0.0 if hv is None else float(hv))

    return run_queue_search(problem, PriorityQueue(key=fscore), name, graph=graph, cancel=cancel)


def heuristic_from_problem(problem) -> Optional[Callable[[Node], float]]:
    if hasattr(problem, "heuristic"):
        def h(n: Node) -> float:
            val = problem.heuristic(n.state)
            return 0.0 if val is None else float(val)
        return h
    return None
