"""
Tests for the headless CLI and the SVG render runner.
"""

import json
import os
import sys

import networkx as nx
import pytest


def _ensure_scripts_on_path():
    repo_root = os.path.dirname(os.path.dirname(__file__))
    scripts_dir = os.path.join(repo_root, "scripts")
    if scripts_dir not in sys.path:
        sys.path.insert(0, scripts_dir)


@pytest.fixture
def cli_main():
    _ensure_scripts_on_path()
    from wave_cli import main  # Import added to path by _ensure_scripts_on_path()

    return main


def test_summary_output(cli_main, tmp_path):
    out = tmp_path / "summary.json"
    assert cli_main(["--frames", "60", "--nodes", "8", "--out", str(out)]) == 0

    summary = json.loads(out.read_text(encoding="utf-8"))
    assert summary["frame"] == 60
    assert summary["nodes"] == 8


def test_full_snapshot_output(cli_main, capsys):
    assert cli_main(["--frames", "30", "--full"]) == 0
    snap = json.loads(capsys.readouterr().out)
    assert snap["frame"] == 30
    assert {"nodes", "edges", "stats", "dimensions"} <= set(snap)


def test_validate(cli_main, capsys):
    assert cli_main(["--frames", "150", "--validate"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result == {"valid": True, "issues": {}}


def test_stats(cli_main, capsys):
    assert cli_main(["--frames", "60", "--stats"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result["stats"]["nodes_spawned"] >= 20
    assert result["frame"]["frame"] == 60


def test_invalid_dimensions_exit_code(cli_main):
    assert cli_main(["--width", "0.5", "--height", "0.5"]) == 2


def test_invalid_config_exit_code(cli_main, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("not_a_field: 1\n", encoding="utf-8")
    assert cli_main([str(path)]) == 2


@pytest.mark.parametrize("text", ["ideal_num_nodes: .inf\n", "drift_speed: .nan\n"])
def test_non_finite_config_exit_code(cli_main, tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    assert cli_main([str(path)]) == 2


def test_render_main_rejects_non_finite_config(tmp_path):
    from wave_anim.runner.render import main as render_main

    path = tmp_path / "bad.yaml"
    path.write_text("ideal_num_nodes: .inf\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        render_main(["--config", str(path), "--out", str(tmp_path / "out.svg")])
    assert "Invalid config" in str(excinfo.value.code)


def test_config_file_and_override(cli_main, tmp_path, capsys):
    path = tmp_path / "wave.yaml"
    path.write_text("ideal_num_nodes: 4\nramp_frames_per_node: 1\n", encoding="utf-8")
    assert cli_main([str(path), "--frames", "10"]) == 0
    assert json.loads(capsys.readouterr().out)["nodes"] == 4

    assert cli_main([str(path), "--frames", "10", "--nodes", "6"]) == 0
    assert json.loads(capsys.readouterr().out)["nodes"] == 6


def test_exports(cli_main, tmp_path):
    graphml = tmp_path / "frame.graphml"
    svg = tmp_path / "frame.svg"
    assert cli_main(["--frames", "90", "--export-graphml", str(graphml), "--export-svg", str(svg)]) == 0

    G = nx.read_graphml(str(graphml))
    assert G.number_of_nodes() == 20
    text = svg.read_text(encoding="utf-8")
    assert text.startswith("<svg")
    assert "<line" in text and "<image" in text


def test_version_and_configs(cli_main, capsys):
    from wave_core import __version__

    assert cli_main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == __version__

    assert cli_main(["--list-configs"]) == 0
    configs = json.loads(capsys.readouterr().out)
    assert any(c.endswith("default.yaml") for c in configs)


def test_render_svg_frames(tmp_path):
    from wave_core.config import WaveConfig
    from wave_anim.runner.render import render_svg

    frames_dir = tmp_path / "frames"
    out = tmp_path / "final.svg"
    markup = render_svg(WaveConfig(), 12, width=400, height=300, seed=1, out_path=str(out), frames_dir=str(frames_dir))

    assert sorted(os.listdir(frames_dir))[:2] == ["frame_00001.svg", "frame_00002.svg"]
    assert len(os.listdir(frames_dir)) == 12
    assert out.read_text(encoding="utf-8") == markup
    assert 'viewBox="0 0 1 0.75"' in markup
