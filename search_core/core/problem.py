# Defines the standard interface for any search problem (states, actions, goals, costs, heuristic).
# search_core/core/problem.py
from __future__ import annotations
from typing import Iterable, Protocol, Hashable

Action = Hashable
State = Hashable


class _NoOp:
    """Sentinel action: the initial state already satisfies the goal test."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NoOp"

    def __reduce__(self):
        return (_NoOp, ())


NO_OP: Action = _NoOp()


class Problem(Protocol):
    """Canonical AI search problem interface (atomic state-space view)."""
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def actions(self, s: State) -> Iterable[Action]: ...
    def result(self, s: State, a: Action) -> State: ...
    def step_cost(self, s: State, a: Action, s2: State) -> float: ...
    # Optional heuristic for informed search; default 0
    def heuristic(self, s: State) -> float: return 0.0
