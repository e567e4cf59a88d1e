import json

import pytest

import matplotlib
matplotlib.use("Agg")

from search_core.benchmarks.run_all import DEFAULT_ALGOS, compare, format_table, main, to_json
from search_core.plots.plotting import bar_compare
from conftest import ChainProblem


def test_compare_runs_every_algorithm(weighted):
    rows = compare(weighted)
    assert [r.algo for r in rows] == [name for name, _ in DEFAULT_ALGOS]
    assert all(r.success for r in rows)
    table = format_table(rows)
    assert table.splitlines()[0].startswith("| Algorithm |")
    assert len(table.splitlines()) == 2 + len(rows)
    assert "| UCS | solved | 3.000000 | 3 |" in table


def test_compare_records_collaborator_errors():
    class Broken(ChainProblem):
        def actions(self, s):
            raise RuntimeError("no actions today")

    rows = compare(Broken(), [("BFS", DEFAULT_ALGOS[0][1])])
    assert rows[0].error == "RuntimeError('no actions today')"
    assert rows[0].status == "error"
    assert not rows[0].success


def test_to_json(disconnected):
    data = json.loads(to_json(compare(disconnected)))
    assert len(data["results"]) == len(DEFAULT_ALGOS)
    assert all(row["cost"] is None for row in data["results"])
    assert all(row["status"] == "failed" for row in data["results"])


def test_bar_compare_builds_four_panels(weighted, disconnected):
    rows = compare(weighted) + compare(disconnected)[:1]
    fig = bar_compare(rows, title="weighted")
    assert len(fig.axes) == 4
    assert fig.axes[0].get_title() == "Nodes Expanded"
    assert len(fig.axes[1].patches) == len(rows)


def test_main_writes_json_and_plot(tmp_path, capsys):
    out_json = tmp_path / "results.json"
    out_png = tmp_path / "compare.png"
    rows = main(["--problem", "conftest:make_weighted", "--algos", "UCS, A*",
                 "--json", str(out_json), "--plot", str(out_png)])
    assert [r.algo for r in rows] == ["UCS", "A*"]
    assert "| A* | solved |" in capsys.readouterr().out
    assert json.loads(out_json.read_text())["results"][0]["cost"] == 3.0
    assert out_png.stat().st_size > 0


def test_main_rejects_unknown_algorithm():
    with pytest.raises(SystemExit):
        main(["--problem", "conftest:make_weighted", "--algos", "BOGO"])
