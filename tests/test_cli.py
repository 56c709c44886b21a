import json

import circle_path.__main__ as cli
from circle_path.types import PathResult


def test_main_prints_path_for_circles_file(tmp_path, capsys):
    scene = tmp_path / "scene.json"
    scene.write_text(json.dumps([{"x": 0, "y": 0, "r": 0}, {"x": 10, "y": 0, "r": 0}]), encoding="utf-8")

    assert cli.main([str(scene)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["0.00 0.00 circle=0", "10.00 0.00 circle=1", "cost=11.0000"]


def test_main_accepts_wrapped_circles_and_emits_json(tmp_path, capsys):
    scene = tmp_path / "scene.json"
    scene.write_text(
        json.dumps({"circles": [{"x": 0, "y": 0, "r": 0}, {"x": 3, "y": 4, "r": 0}]}),
        encoding="utf-8",
    )

    assert cli.main([str(scene), "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["found"] is True
    assert payload["cost"] == 6.0
    assert payload["path"] == [
        {"x": 0.0, "y": 0.0, "circle_id": 0},
        {"x": 3.0, "y": 4.0, "circle_id": 1},
    ]


def test_main_demo_scene_runs_with_heuristic(capsys):
    assert cli.main(["--demo", "--json", "--heuristic", "euclidean"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["path"][0] == {"x": 30.0, "y": 74.0, "circle_id": 6}
    assert payload["path"][-1] == {"x": 570.0, "y": 280.0, "circle_id": 7}


def test_main_reports_invalid_input(tmp_path):
    scene = tmp_path / "scene.json"
    scene.write_text(json.dumps([{"x": 0, "y": 0, "r": 0}, {"x": 10, "y": 0, "r": 2}]), encoding="utf-8")

    assert cli.main([str(scene)]) == 2


def test_main_reports_non_list_scene(tmp_path):
    scene = tmp_path / "scene.json"
    scene.write_text("5", encoding="utf-8")

    assert cli.main([str(scene)]) == 2


def test_main_reports_negative_precision(tmp_path):
    scene = tmp_path / "scene.json"
    scene.write_text(json.dumps([{"x": 0, "y": 0, "r": 0}, {"x": 10, "y": 0, "r": 0}]), encoding="utf-8")

    assert cli.main([str(scene), "--precision", "-1"]) == 2


def test_main_reports_missing_path(monkeypatch, capsys):
    calls = []

    def _solve(circles, options):
        calls.append((len(circles), options.heuristic))
        return PathResult()

    monkeypatch.setattr(cli, "solve_circles", _solve)

    assert cli.main(["--demo", "--json"]) == 1
    assert calls == [(8, "none")]
    assert json.loads(capsys.readouterr().out) == {"found": False, "path": []}
