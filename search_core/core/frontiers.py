# search_core/core/frontiers.py
# Frontier disciplines: the insertion/removal order is what turns the one
# search loop into BFS, DFS, UCS, greedy or A*.
from __future__ import annotations
import heapq
from collections import deque
from typing import Callable, Dict, Optional, Protocol, runtime_checkable
from .node import Node
from .problem import State


@runtime_checkable
class Frontier(Protocol):
    def add(self, node: Node) -> None: ...
    def remove(self) -> Node: ...
    def is_empty(self) -> bool: ...
    def __len__(self) -> int: ...


class FIFOQueue:
    def __init__(self):
        self.q = deque()
    def add(self, x): self.q.append(x)
    def remove(self): return self.q.popleft()
    def is_empty(self): return not self.q
    def __len__(self): return len(self.q)
    def peek(self): return self.q[0]


class LIFOStack:
    def __init__(self):
        self.q = []
    def add(self, x): self.q.append(x)
    def remove(self): return self.q.pop()
    def is_empty(self): return not self.q
    def __len__(self): return len(self.q)
    def peek(self): return self.q[-1]


class PriorityQueue:
    """Min-heap by key(x); equal keys come out in insertion order."""
    def __init__(self, key: Callable[[Node], float]):
        self.key = key
        self.h = []
        self.counter = 0  # tie-breaker for stability
    def add(self, x):
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
    def remove(self):
        if not self.h:
            raise IndexError("remove from an empty PriorityQueue")
        return heapq.heappop(self.h)[2]
    def is_empty(self): return not self.h
    def __len__(self): return len(self.h)
    def peek(self):
        return self.h[0][2]


FORWARD = "forward"
BACKWARD = "backward"


class DualFrontier:
    """
    Two independent frontiers, one per search direction.

    remove() alternates between the directions, falling back to whichever
    side still has nodes; `last_side` tells the caller where the removed
    node came from. Deciding when the two searches meet is left to the
    caller.
    """
    def __init__(self, forward: Frontier, backward: Frontier):
        self.sides: Dict[str, Frontier] = {FORWARD: forward, BACKWARD: backward}
        self._next = FORWARD
        self.last_side: Optional[str] = None

    @property
    def forward(self) -> Frontier:
        return self.sides[FORWARD]

    @property
    def backward(self) -> Frontier:
        return self.sides[BACKWARD]

    def _side(self, side: str) -> Frontier:
        try:
            return self.sides[side]
        except KeyError:
            raise ValueError(f"unknown frontier side {side!r}; expected {FORWARD!r} or {BACKWARD!r}") from None

    def add(self, node: Node, side: str = FORWARD) -> None:
        self._side(side).add(node)

    def remove_from(self, side: str) -> Node:
        node = self._side(side).remove()
        self.last_side = side
        return node

    def _turn(self) -> str:
        other = BACKWARD if self._next == FORWARD else FORWARD
        side = self._next if not self.sides[self._next].is_empty() else other
        if self.sides[side].is_empty():
            raise IndexError("DualFrontier is empty")
        return side

    def remove(self) -> Node:
        side = self._turn()
        self._next = BACKWARD if side == FORWARD else FORWARD
        return self.remove_from(side)

    def peek(self, side: Optional[str] = None) -> Node:
        """Next node of `side`, or the node remove() would return next."""
        if side is None:
            side = self._turn()
        return self._side(side).peek()

    def is_empty(self) -> bool:
        return self.forward.is_empty() and self.backward.is_empty()

    def __len__(self) -> int:
        return len(self.forward) + len(self.backward)


class ExploredSetFrontier:
    """
    Graph-search wrapper around any frontier.

    Nodes whose state was already expanded are dropped, and so are nodes for
    a state that is already waiting, unless replace_cheaper is on and the new
    node has a lower path cost. The superseded entry stays inside the wrapped
    frontier and is skipped when it surfaces. replace_cheaper defaults to on
    for priority queues only.
    """
    def __init__(self, inner: Frontier, replace_cheaper: Optional[bool] = None):
        self.inner = inner
        if replace_cheaper is None:
            replace_cheaper = isinstance(inner, PriorityQueue)
        self.replace_cheaper = replace_cheaper
        self.explored: set = set()
        self.waiting: Dict[State, Node] = {}

    def add(self, node: Node) -> None:
        s = node.state
        if s in self.explored:
            return
        prev = self.waiting.get(s)
        if prev is not None and not (self.replace_cheaper and node.path_cost < prev.path_cost):
            return
        self.waiting[s] = node
        self.inner.add(node)

    def remove(self) -> Node:
        while True:
            node = self.inner.remove()
            if self.waiting.get(node.state) is node:
                del self.waiting[node.state]
                self.explored.add(node.state)
                return node

    def peek(self) -> Node:
        # superseded entries on top are discarded, they would be skipped anyway
        while True:
            node = self.inner.peek()
            if self.waiting.get(node.state) is node:
                return node
            self.inner.remove()

    def is_empty(self) -> bool:
        return not self.waiting

    def __len__(self) -> int:
        return len(self.waiting)
