# search_core/algorithms/bidirectional.py
# Bidirectional uniform-cost search over a DualFrontier. Each direction has
# its own NodeExpander and Metrics; the two are merged once the run ends.
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Tuple
from .. import config
from ..core.cancellation import NEVER_CANCELED, CancellationSource
from ..core.engine import SearchStatus
from ..core.frontiers import BACKWARD, FORWARD, DualFrontier, PriorityQueue
from ..core.metrics import (
    METRIC_MAX_QUEUE_SIZE,
    METRIC_NODES_EXPANDED,
    METRIC_PATH_COST,
    METRIC_QUEUE_SIZE,
    MeasuredRun,
    Metrics,
    SearchResult,
)
from ..core.node import Node, NodeExpander
from ..core.problem import NO_OP, Action, Problem, State
from ..core.utils import reconstruct_path
from .best_first import default_cancel

logger = logging.getLogger(__name__)

Edge = Tuple[Action, State, float]


class ReverseGraphProblem:
    """
    Backward view of an explicit successor mapping {state: [(action, next_state, cost), ...]}.

    Backward actions are (forward_action, predecessor, cost) triples; taking
    one moves to the predecessor. forward_action() maps a backward step
    back onto the forward action label.
    """
    def __init__(self, successors: Mapping[State, Iterable[Edge]], goal_states: Iterable[State]):
        self._goals = tuple(goal_states)
        if not self._goals:
            raise ValueError("ReverseGraphProblem needs at least one goal state")
        self._pred: Dict[State, List[Edge]] = defaultdict(list)
        self._forward: Dict[Tuple[State, State], Action] = {}
        for s, edges in successors.items():
            for a, s2, cost in edges:
                self._pred[s2].append((a, s, float(cost)))
                self._forward.setdefault((s, s2), a)

    def goal_states(self) -> Tuple[State, ...]:
        return self._goals

    def initial_state(self) -> State:
        return self._goals[0]

    def is_goal(self, s: State) -> bool:
        return False  # meeting is detected by the search, not by a goal test

    def actions(self, s: State) -> List[Edge]:
        return list(self._pred.get(s, ()))

    def result(self, s: State, a: Edge) -> State:
        return a[1]

    def step_cost(self, s: State, a: Edge, s2: State) -> float:
        return a[2]

    def forward_action(self, s_from: State, s_to: State) -> Action:
        return self._forward[(s_from, s_to)]


def _join(f_node: Node, b_node: Node, backward) -> List[Action]:
    actions, _ = reconstruct_path(f_node)
    cur = b_node
    while cur.parent is not None:
        actions.append(backward.forward_action(cur.state, cur.parent.state))
        cur = cur.parent
    return actions or [NO_OP]


def bidirectional_search(
    problem: Problem,
    backward,
    goal_states: Optional[Iterable[State]] = None,
    cancel: Optional[CancellationSource] = None,
) -> SearchResult:
    """
    Uniform-cost from the initial state and from every goal state at once.

    Always expands the direction whose cheapest frontier node is cheaper.
    Every generated node whose state the other direction has reached is a
    candidate meeting; the cheapest one is kept, and the search stops once
    the two frontier minimums add up to at least its cost. `backward` must
    expose actions/result/step_cost over reversed edges plus
    forward_action(s_from, s_to).
    """
    name = "Bidirectional UCS"
    cancel = default_cancel(cancel) or NEVER_CANCELED
    if goal_states is None:
        goal_states = backward.goal_states() if hasattr(backward, "goal_states") else (backward.initial_state(),)

    problems = {FORWARD: problem, BACKWARD: backward}
    expanders = {FORWARD: NodeExpander(), BACKWARD: NodeExpander()}
    metrics = {FORWARD: Metrics(), BACKWARD: Metrics()}
    for m in metrics.values():
        m.clear(METRIC_NODES_EXPANDED, METRIC_QUEUE_SIZE, METRIC_MAX_QUEUE_SIZE, METRIC_PATH_COST)
    reached: Dict[str, Dict[Hashable, Node]] = {FORWARD: {}, BACKWARD: {}}
    frontier = DualFrontier(
        PriorityQueue(key=lambda n: n.path_cost),
        PriorityQueue(key=lambda n: n.path_cost),
    )
    best_meet: Optional[Tuple[Node, Node]] = None
    best_cost = float("inf")

    def track(side: str) -> None:
        size = len(frontier.sides[side])
        metrics[side].set(METRIC_QUEUE_SIZE, size)
        metrics[side].set_if_greater(METRIC_MAX_QUEUE_SIZE, size)

    def top(side: str) -> float:
        if frontier.sides[side].is_empty():
            return float("inf")
        return frontier.peek(side).path_cost

    def offer(side: str, node: Node) -> None:
        nonlocal best_meet, best_cost
        prev = reached[side].get(node.state)
        if prev is not None and prev.path_cost <= node.path_cost:
            return
        reached[side][node.state] = node
        frontier.add(node, side)
        track(side)
        other = reached[BACKWARD if side == FORWARD else FORWARD].get(node.state)
        if other is not None and node.path_cost + other.path_cost < best_cost:
            best_meet = (node, other) if side == FORWARD else (other, node)
            best_cost = node.path_cost + other.path_cost
            logger.debug("directions met at %r: cost=%g", node.state, best_cost)

    status = SearchStatus.RUNNING
    actions: List[Action] = []
    cost = float("inf")

    with MeasuredRun(trace_memory=config.trace_memory()) as meter:
        root = expanders[FORWARD].create_root_node(problem.initial_state())
        if problem.is_goal(root.state):
            status, actions, cost = SearchStatus.SOLVED, [NO_OP], 0.0
        else:
            offer(FORWARD, root)
            for g in goal_states:
                offer(BACKWARD, expanders[BACKWARD].create_root_node(g))

        while status is SearchStatus.RUNNING:
            top_f, top_b = top(FORWARD), top(BACKWARD)
            if best_meet is not None and top_f + top_b >= best_cost:
                status = SearchStatus.SOLVED
                break
            if frontier.is_empty():
                status = SearchStatus.SOLVED if best_meet is not None else SearchStatus.FAILED
                break
            if cancel.is_canceled():
                status = SearchStatus.CANCELED
                break
            side = FORWARD if top_f <= top_b else BACKWARD
            node = frontier.remove_from(side)
            track(side)
            if reached[side].get(node.state) is not node:
                continue  # superseded by a cheaper node for the same state
            for child in expanders[side].expand(node, problems[side]):
                offer(side, child)

        if status is SearchStatus.SOLVED and best_meet is not None:
            f_node, b_node = best_meet
            actions = _join(f_node, b_node, backward)
            cost = best_cost

    for side in (FORWARD, BACKWARD):
        metrics[side].set(METRIC_NODES_EXPANDED, expanders[side].num_expand_calls)
    merged = metrics[FORWARD].merge(metrics[BACKWARD])
    if status is SearchStatus.SOLVED:
        merged.set(METRIC_PATH_COST, cost)
    else:
        logger.debug("bidirectional search ended with status %s", status.value)

    return SearchResult(
        algo=name,
        success=status is SearchStatus.SOLVED,
        actions=actions,
        cost=cost,
        nodes_expanded=merged.get_int(METRIC_NODES_EXPANDED),
        time_s=meter.elapsed,
        peak_kb=meter.peak_kb,
        status=status.value,
        max_queue_size=merged.get_int(METRIC_MAX_QUEUE_SIZE),
    )
