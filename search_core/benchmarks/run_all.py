# search_core/benchmarks/run_all.py
# Run several strategies on the same problem and tabulate their SearchResults.
from __future__ import annotations

import argparse
import importlib
import json
import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .. import config
from ..algorithms.astar import a_star_search
from ..algorithms.bfs import breadth_first_search
from ..algorithms.dfs import depth_first_search
from ..algorithms.greedy import greedy_best_first_search
from ..algorithms.ucs import uniform_cost_search
from ..core.metrics import SearchResult

logger = logging.getLogger(__name__)

Algo = Tuple[str, Callable[[Any], SearchResult]]

DEFAULT_ALGOS: List[Algo] = [
    ("BFS", breadth_first_search),
    ("UCS", uniform_cost_search),
    ("DFS", depth_first_search),
    ("Greedy", greedy_best_first_search),
    ("A*", a_star_search),
]


def _fmt_time(x):
    if isinstance(x, (int, float)):
        return f"{float(x):.4f}"
    return "n/a"


def compare(problem, algos: Optional[Sequence[Algo]] = None) -> List[SearchResult]:
    """
    Run every (name, fn) pair on `problem`. An exception raised by the
    problem inside one algorithm is recorded in that row's `error`; the
    remaining algorithms still run.
    """
    rows: List[SearchResult] = []
    for name, fn in (algos if algos is not None else DEFAULT_ALGOS):
        logger.info("Running %s ...", name)
        try:
            r = fn(problem)
        except Exception as e:
            logger.warning("%s: ERROR %r", name, e)
            rows.append(SearchResult(name, False, [], float("inf"), 0, 0.0, 0, status="error", error=repr(e)))
            continue
        logger.info(
            "  %s: %s cost=%s expanded=%s time=%ss",
            r.algo, "OK" if r.success else "FAIL", r.cost, r.nodes_expanded, _fmt_time(r.time_s),
        )
        rows.append(r)
    return rows


def format_table(rows: Sequence[SearchResult]) -> str:
    # Markdown table
    lines = [
        "| Algorithm | Status | Cost | Steps | Nodes Expanded | Max Queue | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|---:|---:|",
    ]
    for r in rows:
        def fnum(x):
            if isinstance(x, (int, float)):
                return f"{x:.6f}" if isinstance(x, float) else f"{x}"
            return "n/a"
        lines.append(
            f"| {r.algo} | {r.status or ('solved' if r.success else 'failed')} | {fnum(r.cost)} | "
            f"{len(r.actions)} | {fnum(r.nodes_expanded)} | {fnum(r.max_queue_size)} | "
            f"{fnum(r.time_s)} | {fnum(r.peak_kb)} |"
        )
    return "\n".join(lines)


def to_json(rows: Sequence[SearchResult]) -> str:
    out = [{
        "algo": r.algo,
        "success": r.success,
        "status": r.status,
        "cost": None if r.cost == float("inf") else r.cost,
        "actions": [repr(a) for a in r.actions],
        "nodes_expanded": r.nodes_expanded,
        "max_queue_size": r.max_queue_size,
        "time_s": r.time_s,
        "peak_kb": r.peak_kb,
        "error": r.error,
    } for r in rows]
    return json.dumps({"results": out}, indent=2)


def _load_problem(spec: str):
    """Import `package.module:factory` and call the factory."""
    module_name, _, attr = spec.partition(":")
    if not module_name or not attr:
        raise SystemExit(f"--problem must look like 'package.module:factory', got {spec!r}")
    factory = getattr(importlib.import_module(module_name), attr)
    return factory()


def main(argv: Optional[Sequence[str]] = None) -> List[SearchResult]:
    ap = argparse.ArgumentParser(description="Compare search strategies on one problem.")
    ap.add_argument("--problem", required=True, help="factory returning the problem, as package.module:function")
    ap.add_argument("--algos", default=",".join(name for name, _ in DEFAULT_ALGOS),
                    help="comma-separated subset of " + ", ".join(name for name, _ in DEFAULT_ALGOS))
    ap.add_argument("--json", default=None, help="path to save the results as JSON")
    ap.add_argument("--plot", default=None, help="path to save the comparison chart (PNG)")
    ap.add_argument("--log-level", default=None, help="overrides SEARCH_LOG_LEVEL")
    args = ap.parse_args(argv)

    config.configure_logging(args.log_level)
    wanted = [a.strip() for a in args.algos.split(",") if a.strip()]
    known = dict(DEFAULT_ALGOS)
    unknown = [a for a in wanted if a not in known]
    if unknown:
        ap.error(f"unknown algorithms: {', '.join(unknown)}")

    rows = compare(_load_problem(args.problem), [(a, known[a]) for a in wanted])
    print(format_table(rows))

    if args.json:
        Path(args.json).write_text(to_json(rows))
        logger.info("Wrote %s", args.json)
    if args.plot:
        from ..plots.plotting import bar_compare
        bar_compare(rows, title=args.problem).savefig(args.plot, dpi=160)
        logger.info("Wrote %s", args.plot)
    return rows


if __name__ == "__main__":
    main()
