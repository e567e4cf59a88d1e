# search_core/core/engine.py
# The queue-based search loop shared by every strategy. BFS, DFS, UCS,
# greedy and A* differ only in the frontier handed to search().
from __future__ import annotations
import enum
import logging
from typing import List, Mapping, Optional
from .cancellation import NEVER_CANCELED, CancellationSource
from .frontiers import Frontier
from .metrics import (
    METRIC_MAX_QUEUE_SIZE,
    METRIC_NODES_EXPANDED,
    METRIC_PATH_COST,
    METRIC_QUEUE_SIZE,
    Metrics,
)
from .node import Node, NodeExpander
from .problem import Action, Problem
from .utils import actions_of, failure, is_goal_node

logger = logging.getLogger(__name__)


class SearchStatus(enum.Enum):
    INITIALIZED = "initialized"
    RUNNING = "running"
    SOLVED = "solved"
    FAILED = "failed"
    CANCELED = "canceled"


class QueueSearch:
    """
    Frontier/expansion loop with optional early goal check.

    With early_goal_check on, successors are goal-tested when generated
    instead of when removed. That only returns the shallowest solution for
    FIFO frontiers; the engine does not check which frontier it was given.
    """
    def __init__(self, node_expander: Optional[NodeExpander] = None, early_goal_check: bool = False):
        self.node_expander = node_expander or NodeExpander()
        self.early_goal_check = early_goal_check
        self.metrics = Metrics()
        self.status = SearchStatus.INITIALIZED
        self.last_node: Optional[Node] = None
        self.clear_instrumentation()

    def search(self, problem: Problem, frontier: Frontier,
               cancel: Optional[CancellationSource] = None) -> List[Action]:
        """
        Returns a list of actions to the goal if the goal was found, [NO_OP]
        if the initial state is already a goal, or an empty list if the
        frontier ran dry or `cancel` reported cancellation. `status` tells
        the last two apart.
        """
        cancel = cancel if cancel is not None else NEVER_CANCELED
        self.clear_instrumentation()
        self.status = SearchStatus.INITIALIZED
        self.last_node = None

        root = self.node_expander.create_root_node(problem.initial_state())
        logger.debug("search start: root=%r early_goal_check=%s", root.state, self.early_goal_check)
        if self.early_goal_check and is_goal_node(problem, root):
            return self._solution(root)

        self._add(frontier, root)
        self.status = SearchStatus.RUNNING
        while not frontier.is_empty() and not cancel.is_canceled():
            node = frontier.remove()
            self._update_queue_metrics(len(frontier))
            # successors were already tested before they went in
            if not self.early_goal_check and is_goal_node(problem, node):
                return self._solution(node)
            for successor in self.node_expander.expand(node, problem):
                if self.early_goal_check and is_goal_node(problem, successor):
                    return self._solution(successor)
                self._add(frontier, successor)

        if frontier.is_empty():
            self.status = SearchStatus.FAILED
            logger.debug("search failed: frontier exhausted after %d expansions",
                         self.node_expander.num_expand_calls)
        else:
            self.status = SearchStatus.CANCELED
            logger.debug("search canceled after %d expansions with %d nodes waiting",
                         self.node_expander.num_expand_calls, len(frontier))
        return failure()

    def get_metrics(self) -> Mapping[str, object]:
        """Read-only snapshot of the metrics of the last run."""
        self.metrics.set(METRIC_NODES_EXPANDED, self.node_expander.num_expand_calls)
        return self.metrics.snapshot()

    def clear_instrumentation(self) -> None:
        """Sets all metrics to zero."""
        self.node_expander.reset_counter()
        self.metrics.clear(METRIC_NODES_EXPANDED, METRIC_QUEUE_SIZE, METRIC_MAX_QUEUE_SIZE, METRIC_PATH_COST)

    def _add(self, frontier: Frontier, node: Node) -> None:
        frontier.add(node)
        self._update_queue_metrics(len(frontier))

    def _update_queue_metrics(self, queue_size: int) -> None:
        self.metrics.set(METRIC_QUEUE_SIZE, queue_size)
        self.metrics.set_if_greater(METRIC_MAX_QUEUE_SIZE, queue_size)

    def _solution(self, node: Node) -> List[Action]:
        self.metrics.set(METRIC_PATH_COST, node.path_cost)
        self.status = SearchStatus.SOLVED
        self.last_node = node
        logger.debug("search solved: depth=%d path_cost=%g expansions=%d",
                     node.depth, node.path_cost, self.node_expander.num_expand_calls)
        return actions_of(node)
