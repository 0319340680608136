"""
Edge case tests for the WaveEngine class.

This module tests the engine with invalid dimensions, empty and tiny graphs,
resets and export paths.
"""

import networkx as nx
import numpy as np
import pytest

from wave_core.config import WaveConfig
from wave_core.engine import WaveEngine


class TestDimensions:
    """Test the normalized dimension contract."""

    @pytest.mark.parametrize("w, h", [(1.0, 1.0), (1.0, 0.5625), (0.75, 1.0), (1.0, 0.0)])
    def test_valid_dimensions(self, w, h):
        e = WaveEngine()
        assert e.set_dimensions(w, h) is e
        assert (e.rel_width, e.rel_height) == (w, h)

    @pytest.mark.parametrize("w, h", [(1.2, 1.0), (1.0, -0.1), (0.5, 0.5), (0.99, 0.3), (2.0, 2.0)])
    def test_invalid_dimensions_raise(self, w, h):
        """Out-of-range fractions, or no side equal to 1, fail loudly."""
        e = WaveEngine()
        with pytest.raises(ValueError):
            e.set_dimensions(w, h)
        # Nothing changed
        assert (e.rel_width, e.rel_height) == (1.0, 1.0)


class TestEngineInitialization:
    def test_engine_defaults(self):
        e = WaveEngine()
        assert e.frame == 0
        assert e.nodes == [] and e.edges == []
        assert isinstance(e.config, WaveConfig)
        assert e.stats == {"nodes_spawned": 0, "nodes_removed": 0, "edges_created": 0, "edges_removed": 0}

    def test_snapshot_before_advance_is_empty(self):
        snap = WaveEngine().snapshot()
        assert snap["frame"] == 0
        assert snap["nodes"] == [] and snap["edges"] == []

    def test_zero_ideal_nodes_stays_empty(self):
        e = WaveEngine(WaveConfig(ideal_num_nodes=0), np.random.default_rng(0))
        e.advance(50)
        assert e.nodes == [] and e.edges == []

    def test_single_node_has_no_edges(self):
        e = WaveEngine(WaveConfig(ideal_num_nodes=1), np.random.default_rng(0))
        e.advance(50)
        assert len(e.nodes) == 1
        assert e.edges == []
        assert e.ideal_num_edges() == 0

    def test_ramp_of_zero_frames_is_treated_as_one(self):
        e = WaveEngine(WaveConfig(ideal_num_nodes=5, ramp_frames_per_node=0), np.random.default_rng(0))
        e.advance(2)
        assert len(e.nodes) == 2

    def test_reset_clears_everything(self):
        e = WaveEngine(rng=np.random.default_rng(1))
        e.advance(60)
        e.reset()
        assert e.frame == 0
        assert e.nodes == [] and e.edges == []
        assert e.stats["nodes_spawned"] == 0


class TestSnapshotAndExport:
    def test_snapshot_indices_refer_to_nodes(self):
        e = WaveEngine(rng=np.random.default_rng(2))
        snap = e.advance(90)

        assert snap["frame"] == 90
        assert len(snap["nodes"]) == len(e.nodes)
        n = len(snap["nodes"])
        for edge in snap["edges"]:
            assert 0 <= edge["a"] < n and 0 <= edge["b"] < n
            assert edge["effective_opacity"] <= edge["opacity"]
        assert snap["stats"]["nodes_spawned"] >= n

    def test_step_matches_advance(self):
        stepped = WaveEngine(rng=np.random.default_rng(8))
        advanced = WaveEngine(rng=np.random.default_rng(8))
        assert stepped.step(40) is None
        assert advanced.advance(40) == stepped.snapshot()

    def test_to_networkx(self):
        e = WaveEngine(rng=np.random.default_rng(3))
        e.advance(90)
        G = e.to_networkx()

        assert G.number_of_nodes() == len(e.nodes)
        assert G.number_of_edges() == len(e.edges)
        assert isinstance(G, nx.Graph)
        assert set(G.nodes[0]) == {"x", "y", "radius", "opacity"}

    def test_export_graphml_roundtrip(self, tmp_path):
        e = WaveEngine(rng=np.random.default_rng(4))
        e.advance(90)
        path = tmp_path / "frame.graphml"
        e.export_graphml(str(path))

        loaded = nx.read_graphml(str(path))
        assert loaded.number_of_nodes() == len(e.nodes)
        assert loaded.number_of_edges() == len(e.edges)
