"""
Tests for viz.utils helpers.
"""

from wave_core.config import WaveConfig
from wave_core.engine import WaveEngine
from wave_core.metrics import frame_summary
from viz.utils import build_cytoscape_elements, new_svg_background, population_history


def test_builder_nodes_and_edges():
    bg = new_svg_background(WaveConfig(ideal_num_nodes=6), 800, 800, seed=0)
    for _ in range(40):
        bg.tick()
    engine = bg.engine

    els = build_cytoscape_elements(engine, scale=100.0)
    nodes = [e for e in els if "source" not in e["data"]]
    edges = [e for e in els if "source" in e["data"]]

    assert len(nodes) == len(engine.nodes)
    assert len(edges) == len(engine.edges)

    first = engine.nodes[0]
    node0 = next(e for e in nodes if e["data"]["id"] == "0")
    assert abs(node0["position"]["x"] - first.x * 100.0) < 1e-9
    assert node0["data"]["color"] == first.style.fill
    assert node0["data"]["avatar"] == first.style.avatar

    ids = {e["data"]["id"] for e in nodes}
    assert all(e["data"]["source"] in ids and e["data"]["target"] in ids for e in edges)


def test_builder_without_styles():
    engine = WaveEngine(WaveConfig(ideal_num_nodes=3))
    engine.advance(12)
    els = build_cytoscape_elements(engine)
    assert all(e["data"]["color"] == "#ffffff" for e in els)
    assert all("avatar" not in e["data"] for e in els)


def test_population_history():
    engine = WaveEngine(WaveConfig(ideal_num_nodes=3))
    history = []
    for _ in range(5):
        engine.advance()
        history.append(frame_summary(engine))
    series = population_history(history)
    assert series["frame"] == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert series["nodes"][-1] == 1.0
