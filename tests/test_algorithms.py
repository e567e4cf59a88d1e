import itertools

import pytest

from search_core.algorithms.astar import a_star_search
from search_core.algorithms.bfs import breadth_first_search
from search_core.algorithms.dfs import depth_first_search
from search_core.algorithms.greedy import greedy_best_first_search
from search_core.algorithms.ucs import uniform_cost_search
from search_core.core.cancellation import ExpansionBudget
from search_core.core.problem import NO_OP
from search_core.core.utils import replay
from conftest import ChainProblem

ALL = [breadth_first_search, depth_first_search, uniform_cost_search, greedy_best_first_search, a_star_search]


@pytest.mark.parametrize("search", ALL)
def test_solutions_replay_to_a_goal(search, grid, weighted):
    for problem in (grid, weighted):
        r = search(problem)
        assert r.success
        assert r.status == "solved"
        assert problem.is_goal(replay(problem, r.actions))
        assert r.nodes_expanded > 0
        assert r.time_s >= 0.0


@pytest.mark.parametrize("search", ALL)
def test_root_goal_returns_no_op(search):
    r = search(ChainProblem(start=3))
    assert r.actions == [NO_OP]
    assert r.cost == 0.0
    assert r.nodes_expanded == 0


@pytest.mark.parametrize("search", ALL)
def test_unreachable_goal(search, disconnected):
    r = search(disconnected)
    assert not r.success
    assert r.actions == []
    assert r.status == "failed"
    assert r.cost == float("inf")


def test_bfs_chain_scenario(chain):
    r = breadth_first_search(chain)
    assert r.actions == ["advance"] * 3
    assert r.nodes_expanded == 3
    assert r.cost == 3.0


def _shortest_length(problem, max_len=12):
    moves = ("Up", "Down", "Left", "Right")
    for n in range(max_len + 1):
        for seq in itertools.product(moves, repeat=n):
            s = problem.initial_state()
            ok = True
            for a in seq:
                if a not in set(problem.actions(s)):
                    ok = False
                    break
                s = problem.result(s, a)
            if ok and problem.is_goal(s):
                return n
    return None


def test_bfs_finds_fewest_actions():
    from conftest import GridProblem
    small = GridProblem(rows=3, cols=4, start=(0, 0), goal=(2, 3), walls={(1, 1), (1, 2)})
    r = breadth_first_search(small)
    assert len(r.actions) == _shortest_length(small, max_len=6)


def test_weighted_costs(weighted):
    assert breadth_first_search(weighted).actions == ["a", "b"]
    assert breadth_first_search(weighted).cost == 11.0
    assert uniform_cost_search(weighted).actions == ["c", "d", "e"]
    assert uniform_cost_search(weighted).cost == 3.0
    assert a_star_search(weighted).actions == ["c", "d", "e"]
    assert greedy_best_first_search(weighted).actions == ["a", "b"]


def test_a_star_expands_no_more_than_ucs(grid):
    assert a_star_search(grid).nodes_expanded <= uniform_cost_search(grid).nodes_expanded
    assert a_star_search(grid).cost == uniform_cost_search(grid).cost == 10.0


def test_explicit_heuristic_overrides_problem(grid):
    r = a_star_search(grid, heuristic=lambda n: 0.0)
    assert r.cost == 10.0


def test_graph_search_expands_each_state_once(grid):
    r = breadth_first_search(grid, early_goal_check=False)
    states = 5 * 7 - 4
    assert r.nodes_expanded <= states


def test_tree_search_on_acyclic_chain(chain):
    r = depth_first_search(chain, graph=False)
    assert r.actions == ["advance"] * 3


def test_budget_cancels_algorithm(grid):
    r = uniform_cost_search(grid, cancel=ExpansionBudget(3))
    assert not r.success
    assert r.status == "canceled"
    assert r.nodes_expanded == 3


def test_env_budget_applies_when_no_token(grid, monkeypatch):
    monkeypatch.setenv("SEARCH_MAX_EXPANSIONS", "2")
    r = breadth_first_search(grid)
    assert r.status == "canceled"
    assert r.nodes_expanded == 2
