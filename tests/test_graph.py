"""
Unit tests for the wave graph records.

This module tests Node, Edge, the cosmetic style records and the shared
fade function, focusing on defaults, identity semantics and clamping.
"""

import pytest

from wave_core.graph import Edge, EdgeStyle, Node, NodeStyle, apply_fade, edge_key


class TestApplyFade:
    """Test the pure fade function."""

    def test_fade_in_and_out(self):
        assert apply_fade(0.0, 0.25) == 0.25
        assert apply_fade(0.5, -0.25) == 0.25

    def test_fade_clamps_to_unit_interval(self):
        assert apply_fade(0.99, 0.02) == 1.0
        assert apply_fade(0.005, -0.01) == 0.0
        assert apply_fade(1.0, 5.0) == 1.0
        assert apply_fade(0.0, -5.0) == 0.0

    def test_fade_zero_delta_is_identity(self):
        assert apply_fade(0.42, 0.0) == 0.42


class TestNode:
    """Test Node initialization and identity."""

    def test_node_defaults(self):
        node = Node(0.1, 0.2, 0.01)

        assert (node.x, node.y, node.radius) == (0.1, 0.2, 0.01)
        assert node.vx == 0.0 and node.vy == 0.0
        assert node.opacity == 0.0
        assert node.dx == 0.0 and node.dy == 0.0
        assert node.style is None
        assert not node.visible

    def test_node_fade_updates_visibility(self):
        node = Node(0.5, 0.5, 0.01)
        node.fade(0.02)
        assert node.visible
        assert node.opacity == pytest.approx(0.02)
        node.fade(-1.0)
        assert node.opacity == 0.0
        assert not node.visible

    def test_nodes_compare_by_identity(self):
        """Two nodes with identical fields are still distinct nodes."""
        a = Node(0.5, 0.5, 0.01)
        b = Node(0.5, 0.5, 0.01)

        assert a != b
        assert a == a
        assert len({a, b}) == 2


class TestEdge:
    """Test Edge keys and effective opacity."""

    def test_edge_key_is_order_independent(self):
        a = Node(0.1, 0.1, 0.01)
        b = Node(0.2, 0.2, 0.01)

        assert Edge(a, b).key == Edge(b, a).key
        assert edge_key(a, b) == edge_key(b, a)

    def test_edge_key_distinguishes_pairs(self):
        a, b, c = Node(0, 0, 0.01), Node(1, 0, 0.01), Node(0, 1, 0.01)
        assert Edge(a, b).key != Edge(a, c).key

    def test_effective_opacity_bounded_by_endpoints(self):
        a = Node(0.1, 0.1, 0.01, opacity=0.3)
        b = Node(0.2, 0.2, 0.01, opacity=0.8)
        edge = Edge(a, b, opacity=1.0)

        assert edge.effective_opacity == 0.3
        a.opacity = 0.0
        assert edge.effective_opacity == 0.0

    def test_edge_fade_clamps(self):
        edge = Edge(Node(0, 0, 0.01), Node(1, 1, 0.01), opacity=0.995)
        edge.fade(0.02)
        assert edge.opacity == 1.0


class TestStyles:
    """Test the one-time cosmetic style records."""

    def test_styles_are_immutable(self):
        style = NodeStyle(fill="#000000", border="#ffffff", avatar="a.png")
        with pytest.raises(Exception):
            style.fill = "#111111"

    def test_styles_compare_by_value(self):
        assert EdgeStyle("#ffffff") == EdgeStyle("#ffffff")
        assert NodeStyle("#1", "#2", "x") == NodeStyle("#1", "#2", "x")
