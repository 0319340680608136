"""
Wave background engine.

This module animates the decorative graph behind the directory's landing
page. The engine owns every node and edge and advances them one frame at a
time; drawing is left to a renderer (see `wave_anim.adapters`).

Each call to `advance()` runs five phases:
1. Node aging: drift, damped random walk on velocity, fade by insideness
2. Spawning: new nodes at opacity 0 until the target count is met
3. Repulsion: pairwise positional correction (no momentum)
4. Topology: minimum spanning tree plus extra short edges, from scratch
5. Edge fading: ideal edges fade in, others fade out, missing ones are added

The target node count ramps up from zero at startup, one node every
`ramp_frames_per_node` frames.

Configuration: all tunables live in `WaveConfig` in `wave_core.config`.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List

import networkx as nx
import numpy as np

from .config import WaveConfig
from .graph import Edge, Node
from . import topology

logger = logging.getLogger(__name__)

# Keeps the repulsion finite for nearly coincident nodes
REPULSION_EPSILON = 0.00001

# Spawn radius = (U ** RADIUS_SKEW + RADIUS_FLOOR) * RADIUS_SCALE
RADIUS_SKEW = 5
RADIUS_FLOOR = 0.35
RADIUS_SCALE = 0.015


class WaveEngine:
    """
    Graph aggregate and per-frame physics for the wave background.

    Attributes:
        config: Tunable parameters
        rng: Random generator used for spawning and velocity noise
        nodes: Live nodes, in spawn order
        edges: Live edges
        frame: Number of frames advanced since the last reset
        rel_width, rel_height: Normalized drawing area (longer side is 1)
        stats: Lifetime counters since the last reset
    """

    def __init__(self, config: WaveConfig | None = None, rng: np.random.Generator | None = None):
        self.config = config or WaveConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.rel_width = 1.0
        self.rel_height = 1.0
        self.frame = 0
        self.nodes: List[Node] = []
        self.edges: List[Edge] = []
        self.stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            "nodes_spawned": 0,
            "nodes_removed": 0,
            "edges_created": 0,
            "edges_removed": 0,
        }

    def set_dimensions(self, rel_width: float, rel_height: float) -> "WaveEngine":
        """
        Set the normalized size of the drawing area.

        Args:
            rel_width: Width relative to the longer side, in [0, 1]
            rel_height: Height relative to the longer side, in [0, 1]

        Raises:
            ValueError: If a fraction is out of range or neither equals 1
        """
        if not (0 <= rel_width <= 1 and 0 <= rel_height <= 1) or (rel_width != 1 and rel_height != 1):
            raise ValueError(
                f"Dimensions must be fractions in [0, 1] with the longer side equal to 1, "
                f"got {rel_width!r} x {rel_height!r}"
            )
        self.rel_width = rel_width
        self.rel_height = rel_height
        return self

    def reset(self) -> None:
        """Drop every node and edge and restart the population ramp."""
        self.nodes = []
        self.edges = []
        self.frame = 0
        self.stats = self._empty_stats()

    def target_num_nodes(self) -> int:
        """Node count wanted at the current frame."""
        ramp = max(1, self.config.ramp_frames_per_node)
        return min(self.frame // ramp, self.config.ideal_num_nodes)

    def advance(self, n: int = 1) -> Dict[str, Any]:
        """
        Advance the animation by `n` frames.

        Args:
            n: Number of frames to advance (default: 1)

        Returns:
            dict: Snapshot of the graph after advancing
        """
        self.step(n)
        return self.snapshot()

    def step(self, n: int = 1) -> None:
        """Advance `n` frames without building a snapshot."""
        for _ in range(n):
            self.frame += 1
            self._update_nodes()
            self._update_edges()

    # ----- nodes -----
    def _update_nodes(self) -> None:
        cfg = self.config
        target = self.target_num_nodes()
        kept: List[Node] = []
        for node in self.nodes:
            node.x += node.vx * cfg.drift_speed
            node.y += node.vy * cfg.drift_speed
            node.vx = node.vx * cfg.velocity_damping + (self.rng.random() - 0.5) * cfg.velocity_jitter
            node.vy = node.vy * cfg.velocity_damping + (self.rng.random() - 0.5) * cfg.velocity_jitter

            # Fade out near the borders, or when over the target count
            insideness = min(node.x, self.rel_width - node.x, node.y, self.rel_height - node.y)
            wanted = len(kept) < target and insideness > cfg.border_fade
            node.fade(cfg.fade_in_per_frame if wanted else cfg.fade_out_per_frame)
            if node.opacity > 0:
                kept.append(node)
        self.stats["nodes_removed"] += len(self.nodes) - len(kept)

        while len(kept) < target:
            kept.append(self._spawn_node())
            self.stats["nodes_spawned"] += 1

        self.nodes = kept
        self._apply_repulsion()

    def _spawn_node(self) -> Node:
        radius = (self.rng.random() ** RADIUS_SKEW + RADIUS_FLOOR) * RADIUS_SCALE
        return Node(
            x=self.rng.random() * self.rel_width,
            y=self.rng.random() * self.rel_height,
            radius=radius,
        )

    def _apply_repulsion(self) -> None:
        """Spread nodes apart by perturbing positions rather than velocities."""
        force = self.config.repulsion_force
        nodes = self.nodes
        for i, a in enumerate(nodes):
            a.dx = 0.0
            a.dy = 0.0
            for b in nodes[:i]:
                dx = a.x - b.x
                dy = a.y - b.y
                dist_sqr = dx * dx + dy * dy
                if dist_sqr == 0.0:
                    continue
                factor = force / (math.sqrt(dist_sqr) * (dist_sqr + REPULSION_EPSILON))
                dx *= factor
                dy *= factor
                a.dx += dx
                a.dy += dy
                b.dx -= dx
                b.dy -= dy
        for node in nodes:
            node.x += node.dx
            node.y += node.dy

    # ----- edges -----
    def ideal_edges(self) -> List[Edge]:
        """Return this frame's ideal edges as fresh records (opacity 0)."""
        pairs = topology.ideal_edges(self.nodes, self.config.radii_weight_power, self.config.extra_edge_proportion)
        return [Edge(self.nodes[i], self.nodes[j]) for i, j in pairs]

    def ideal_num_edges(self) -> int:
        return topology.ideal_edge_count(len(self.nodes), self.config.extra_edge_proportion)

    def _update_edges(self) -> None:
        cfg = self.config
        target = self.ideal_num_edges()
        ideal = self.ideal_edges()
        ideal_keys = {e.key for e in ideal}

        kept: List[Edge] = []
        for edge in self.edges:
            edge.fade(cfg.fade_in_per_frame if edge.key in ideal_keys else cfg.fade_out_per_frame)
            if edge.effective_opacity > 0:
                kept.append(edge)
        self.stats["edges_removed"] += len(self.edges) - len(kept)

        # Room left: missing tree edges first (they lead the ideal list), then extras
        present = {e.key for e in kept}
        for edge in ideal:
            if len(kept) >= target:
                break
            if edge.key not in present:
                present.add(edge.key)
                kept.append(edge)
                self.stats["edges_created"] += 1
        self.edges = kept
        logger.debug("frame %d: %d nodes, %d edges", self.frame, len(self.nodes), len(self.edges))

    # ----- inspection -----
    def snapshot(self) -> Dict[str, Any]:
        """
        Capture the current graph as plain data.

        Nodes are identified by their index in `nodes`; edges refer to those
        indices. Used by the CLI, visualization and tests.
        """
        index = {node: i for i, node in enumerate(self.nodes)}
        return {
            "frame": self.frame,
            "dimensions": {"width": self.rel_width, "height": self.rel_height},
            "nodes": [
                {
                    "id": i,
                    "x": float(node.x),
                    "y": float(node.y),
                    "radius": float(node.radius),
                    "opacity": float(node.opacity),
                }
                for i, node in enumerate(self.nodes)
            ],
            "edges": [
                {
                    "a": index[edge.a],
                    "b": index[edge.b],
                    "opacity": float(edge.opacity),
                    "effective_opacity": float(edge.effective_opacity),
                }
                for edge in self.edges
            ],
            "stats": dict(self.stats),
        }

    def to_networkx(self) -> nx.Graph:
        """
        Convert the live graph to an undirected NetworkX graph.

        Node keys are indices into `nodes`; positions, radii and opacities are
        kept as attributes.
        """
        G = nx.Graph()
        index = {node: i for i, node in enumerate(self.nodes)}
        for i, node in enumerate(self.nodes):
            G.add_node(i, x=float(node.x), y=float(node.y), radius=float(node.radius), opacity=float(node.opacity))
        for edge in self.edges:
            G.add_edge(index[edge.a], index[edge.b], opacity=float(edge.opacity))
        return G

    def export_graphml(self, filepath: str) -> None:
        """
        Export the current frame to GraphML.

        Args:
            filepath: Path where to save the GraphML file
        """
        nx.write_graphml(self.to_networkx(), filepath)
