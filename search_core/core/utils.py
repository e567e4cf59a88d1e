# search_core/core/utils.py
# Helpers for turning goal nodes into action sequences and checking them against a problem.
from __future__ import annotations
from typing import Iterable, List, Tuple
from .node import Node
from .problem import NO_OP, Action, Problem, State


def reconstruct_path(node: Node) -> Tuple[List, float]:
    actions = []
    cost = float(node.path_cost)
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = cur.parent
    actions.reverse()
    return actions, cost


def actions_of(node: Node) -> List[Action]:
    """Root-to-node actions; [NO_OP] for the root itself."""
    actions, _ = reconstruct_path(node)
    return actions or [NO_OP]


def failure() -> List[Action]:
    return []


def is_goal_node(problem: Problem, node: Node) -> bool:
    return bool(problem.is_goal(node.state))


def replay(problem: Problem, actions: Iterable[Action]) -> State:
    """Apply actions from the initial state and return the state reached. NO_OP leaves the state unchanged."""
    s = problem.initial_state()
    for a in actions:
        if a is NO_OP:
            continue
        s = problem.result(s, a)
    return s
