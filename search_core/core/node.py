# search_core/core/node.py
# Search-tree nodes and the expander that generates their successors.
from __future__ import annotations
from typing import Callable, List, Optional
from .problem import Action, Problem, State


class Node:
    """One point of the search tree. Immutable once created."""
    __slots__ = ("state", "parent", "action", "path_cost", "depth")

    def __init__(self, state: State, parent: Optional["Node"] = None, action: Action = None,
                 path_cost: float = 0.0, depth: int = 0):
        object.__setattr__(self, "state", state)
        object.__setattr__(self, "parent", parent)
        object.__setattr__(self, "action", action)
        object.__setattr__(self, "path_cost", float(path_cost))
        object.__setattr__(self, "depth", depth)

    def __setattr__(self, name, value):
        raise AttributeError(f"Node is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Node is immutable; cannot delete {name!r}")

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def path(self) -> List["Node"]:
        """Nodes from the root down to this one."""
        nodes = []
        cur: Optional[Node] = self
        while cur is not None:
            nodes.append(cur)
            cur = cur.parent
        nodes.reverse()
        return nodes

    def __repr__(self) -> str:
        return f"Node(state={self.state!r}, action={self.action!r}, g={self.path_cost:g}, depth={self.depth})"


NodeListener = Callable[[Node], None]


class NodeExpander:
    """
    Creates root nodes and successor nodes for a problem.
    Counts expand() calls (one per expanded node, not per child); the count
    backs the nodes_expanded metric. Give each concurrent search its own
    instance.
    """
    def __init__(self) -> None:
        self.num_expand_calls = 0
        self._listeners: List[NodeListener] = []

    def create_root_node(self, state: State) -> Node:
        return Node(state)

    def add_node_listener(self, listener: NodeListener) -> None:
        """Register a callable told about every node right before it is expanded."""
        self._listeners.append(listener)

    def reset_counter(self) -> None:
        self.num_expand_calls = 0

    def expand(self, node: Node, problem: Problem) -> List[Node]:
        """Generate child Nodes by applying ACTIONS(s), using RESULT and step_cost."""
        for listener in self._listeners:
            listener(node)
        self.num_expand_calls += 1

        s = node.state
        children = []
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if cost is None or cost < 0:
                raise ValueError(
                    f"step_cost returned {cost!r} for (s={s!r}, a={a!r}, s'={s2!r}). "
                    "Step costs must be numbers >= 0."
                )
            children.append(Node(
                state=s2,
                parent=node,
                action=a,
                path_cost=node.path_cost + float(cost),
                depth=node.depth + 1,
            ))
        return children
