# Small problems shared by the test modules.
from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Set, Tuple

import pytest

from search_core.core.problem import Problem


class ChainProblem(Problem):
    """States 0..length, one action 'advance' moving s -> s+1."""
    def __init__(self, start: int = 0, goal: int = 3, length: int = 3):
        self.start, self.goal, self.length = start, goal, length

    def initial_state(self):
        return self.start

    def is_goal(self, s) -> bool:
        return s == self.goal

    def actions(self, s):
        return ["advance"] if s < self.length else []

    def result(self, s, a):
        return s + 1

    def step_cost(self, s, a, s2) -> float:
        return 1.0


class GraphProblem(Problem):
    """Explicit successor mapping {state: [(action, next_state, cost), ...]}."""
    def __init__(self, successors: Dict[Hashable, List[Tuple[Hashable, Hashable, float]]],
                 start, goals: Iterable, h: Dict[Hashable, float] | None = None):
        self.successors = successors
        self.start = start
        self.goals: Set = set(goals)
        self.h = h or {}

    def initial_state(self):
        return self.start

    def is_goal(self, s) -> bool:
        return s in self.goals

    def actions(self, s):
        return [a for a, _, _ in self.successors.get(s, [])]

    def result(self, s, a):
        for a2, s2, _ in self.successors[s]:
            if a2 == a:
                return s2
        raise KeyError((s, a))

    def step_cost(self, s, a, s2) -> float:
        for a2, t, cost in self.successors[s]:
            if a2 == a and t == s2:
                return cost
        raise KeyError((s, a, s2))

    def heuristic(self, s) -> float:
        return self.h.get(s, 0.0)


_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}


class GridProblem(Problem):
    """4-neighbor grid pathfinding with unit costs and a Manhattan heuristic."""
    def __init__(self, rows: int, cols: int, start, goal, walls=None):
        self.rows, self.cols = rows, cols
        self._start, self._goal = start, goal
        self.walls = walls or set()

    def initial_state(self):
        return self._start

    def is_goal(self, s) -> bool:
        return s == self._goal

    def actions(self, s):
        r, c = s
        for name, (dr, dc) in _MOVES.items():
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols and (nr, nc) not in self.walls:
                yield name

    def result(self, s, a):
        r, c = s
        dr, dc = _MOVES[a]
        return (r + dr, c + dc)

    def step_cost(self, s, a, s2) -> float:
        return 1.0

    def heuristic(self, s) -> float:
        r, c = s
        gr, gc = self._goal
        return float(abs(r - gr) + abs(c - gc))


# S -a-> A -b-> G costs 1 + 10, S -c-> B -d-> C -e-> G costs 1 + 1 + 1
WEIGHTED = {
    "S": [("a", "A", 1.0), ("c", "B", 1.0)],
    "A": [("b", "G", 10.0)],
    "B": [("d", "C", 1.0)],
    "C": [("e", "G", 1.0)],
    "G": [],
}


@pytest.fixture
def chain():
    return ChainProblem()


@pytest.fixture
def weighted():
    return make_weighted()


@pytest.fixture
def disconnected():
    return GraphProblem({"X": [], "Y": []}, "X", ["Y"])


@pytest.fixture
def grid():
    walls = {(1, 3), (2, 3), (3, 3), (3, 4)}
    return GridProblem(rows=5, cols=7, start=(0, 0), goal=(4, 6), walls=walls)


def make_weighted():
    return GraphProblem(WEIGHTED, "S", ["G"], h={"S": 2, "A": 1, "B": 2, "C": 1, "G": 0})
