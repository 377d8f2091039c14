import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from simplegraph.cli import main
from simplegraph.model_io import load_graph_from_json, save_graph_to_json
from simplegraph.subgraph import clique


@pytest.fixture
def nine(tmp_path):
    path = tmp_path / "nine.json"
    save_graph_to_json(clique(range(1, 10)), str(path), name="k9")
    return str(path)


def test_generate_then_cycle_sort(tmp_path, capsys):
    out = str(tmp_path / "pentagon.json")
    assert main(["generate", "cycle", "--n", "5", "--out", out]) == 0
    graph, name = load_graph_from_json(out)
    assert name == "cycle"
    assert len(graph[1]) == 5

    assert main(["cycle-sort", out]) == 0
    assert "0-4-3-2-1-0" in capsys.readouterr().out


def test_generate_sized_family_needs_n(tmp_path, capsys):
    assert main(["generate", "path", "--out", str(tmp_path / "p.json")]) == 1
    assert "needs --n" in capsys.readouterr().out


def test_cycle_sort_folder_reports_failures(tmp_path, capsys):
    models = tmp_path / "models"
    models.mkdir()
    main(["generate", "cube", "--out", str(models / "cube.json")])
    main(["generate", "cycle", "--n", "4", "--out", str(models / "square.json")])
    (models / "broken.json").write_text("{not json", encoding="utf-8")
    results = tmp_path / "results.json"
    capsys.readouterr()

    assert main(["cycle-sort", str(models), "--out_json", str(results)]) == 1
    out = capsys.readouterr().out
    assert "[FAIL] broken.json" in out
    assert "not a cycle (8 vertices but 12 edges)" in out

    rows = {r["name"]: r for r in json.loads(results.read_text(encoding="utf-8"))}
    assert rows["cube"]["ok"] is False
    assert rows["cycle"]["ok"] is True
    assert rows["cycle"]["order"] == [0, 3, 2, 1, 0]


def test_find_path_ascending_and_descending(nine, capsys):
    assert main(["find-path", nine, "--start", "1", "--target", "9", "--admit", "even"]) == 0
    assert "k9: 1-2-4-6-8-9 (5 edges)" in capsys.readouterr().out

    assert main(["find-path", nine, "--start", "1", "--target", "9", "--admit", "even", "--descending"]) == 0
    assert "k9: 1-9 (1 edges)" in capsys.readouterr().out


def test_find_path_unknown_vertex(nine, capsys):
    assert main(["find-path", nine, "--start", "1", "--target", "42"]) == 1
    assert "vertex '42' not in graph" in capsys.readouterr().out


def test_find_path_no_path(tmp_path, capsys):
    path = str(tmp_path / "split.json")
    (tmp_path / "split.json").write_text(json.dumps({"vertices": [1, 2, 3, 4], "edges": [[1, 2], [3, 4]]}))
    assert main(["find-path", path, "--start", "1", "--target", "4"]) == 2
    assert "no path 1 -> 4" in capsys.readouterr().out


def test_plots_are_written(nine, tmp_path):
    png = tmp_path / "path.png"
    assert main(["find-path", nine, "--start", "1", "--target", "9", "--admit", "odd", "--plot", str(png)]) == 0
    assert png.exists() and png.stat().st_size > 0

    square = str(tmp_path / "square.json")
    main(["generate", "cycle", "--n", "4", "--out", square])
    cyc_png = tmp_path / "cycle.png"
    assert main(["cycle-sort", square, "--plot", str(cyc_png)]) == 0
    assert cyc_png.exists()


def test_cycle_sort_folder_survives_non_scalar_vertex_ids(tmp_path, capsys):
    models = tmp_path / "models"
    models.mkdir()
    (models / "bad_ids.json").write_text(
        json.dumps({"vertices": [{"id": [1]}, {"id": 2}], "edges": [[0, 1]]}), encoding="utf-8"
    )
    main(["generate", "cycle", "--n", "3", "--out", str(models / "triangle.json")])
    capsys.readouterr()

    assert main(["cycle-sort", str(models)]) == 1
    out = capsys.readouterr().out
    assert "[FAIL] bad_ids.json:" in out
    assert "vertex id must be a scalar" in out
    assert "0-2-1-0" in out
