"""
Metrics utilities for the wave background engine.

This module provides:
- Convenience helpers reading lifetime counters from the engine
- Per-frame summaries (population, mean opacity)
- Invariant checks used by the CLI's --validate mode and by tests

The engine records the following counters in `engine.stats`:
- nodes_spawned: nodes created since the last reset
- nodes_removed: nodes dropped after fading out completely
- edges_created: edges added from the ideal set
- edges_removed: edges dropped after fading out or losing an endpoint
"""

from __future__ import annotations
from typing import Any, Dict, List

import networkx as nx
import numpy as np

from .topology import all_edge_weights, ideal_edge_count, ideal_edges


def total_nodes_spawned(engine) -> int:
    """Return the number of nodes spawned since the last reset."""
    return int(engine.stats.get("nodes_spawned", 0))


def total_edges_created(engine) -> int:
    """Return the number of edges created since the last reset."""
    return int(engine.stats.get("edges_created", 0))


def frame_summary(engine) -> Dict[str, Any]:
    """
    Summarize the current frame.

    Returns:
        dict with keys: frame, nodes, edges, visible_edges, target_nodes,
        ideal_edges, mean_node_opacity, mean_edge_opacity
    """
    node_opacity = np.array([n.opacity for n in engine.nodes], dtype=float)
    edge_opacity = np.array([e.effective_opacity for e in engine.edges], dtype=float)
    return {
        "frame": engine.frame,
        "nodes": len(engine.nodes),
        "edges": len(engine.edges),
        "visible_edges": int(np.count_nonzero(edge_opacity > 0)),
        "target_nodes": engine.target_num_nodes(),
        "ideal_edges": engine.ideal_num_edges(),
        "mean_node_opacity": float(node_opacity.mean()) if node_opacity.size else 0.0,
        "mean_edge_opacity": float(edge_opacity.mean()) if edge_opacity.size else 0.0,
    }


def opacity_violations(engine) -> List[str]:
    """Describe every node or edge whose opacity lies outside [0, 1]."""
    issues = []
    for i, node in enumerate(engine.nodes):
        if not 0.0 <= node.opacity <= 1.0:
            issues.append(f"node {i} opacity {node.opacity!r} out of [0, 1]")
    for i, edge in enumerate(engine.edges):
        if not 0.0 <= edge.opacity <= 1.0:
            issues.append(f"edge {i} opacity {edge.opacity!r} out of [0, 1]")
    return issues


def dangling_edges(engine) -> List[str]:
    """Describe every live edge whose endpoint is no longer a live node."""
    live = set(engine.nodes)
    issues = []
    for i, edge in enumerate(engine.edges):
        if edge.a not in live or edge.b not in live:
            issues.append(f"edge {i} refers to a removed node")
    return issues


def duplicate_edges(engine) -> List[str]:
    """Describe every live edge that repeats an earlier endpoint pair."""
    seen = set()
    issues = []
    for i, edge in enumerate(engine.edges):
        if edge.key in seen:
            issues.append(f"edge {i} duplicates an earlier edge")
        seen.add(edge.key)
    return issues


def weight_graph(nodes, radii_weight_power: float) -> "nx.Graph":
    """Build the weighted complete graph the topology is computed over."""
    G = nx.Graph()
    G.add_nodes_from(range(len(nodes)))
    for weight, i, j in all_edge_weights(nodes, radii_weight_power):
        G.add_edge(i, j, weight=weight)
    return G


def spanning_tree_issues(engine) -> List[str]:
    """
    Check the current ideal edge set against NetworkX.

    The leading n - 1 ideal edges must form a spanning tree whose total weight
    matches `networkx.minimum_spanning_tree`, followed by exactly the number of
    extra edges implied by `extra_edge_proportion`, none repeated.
    """
    cfg = engine.config
    nodes = engine.nodes
    n = len(nodes)
    issues: List[str] = []
    if n < 2:
        return issues

    pairs = ideal_edges(nodes, cfg.radii_weight_power, cfg.extra_edge_proportion)
    G = weight_graph(nodes, cfg.radii_weight_power)
    tree = pairs[: n - 1]

    T = nx.Graph()
    T.add_nodes_from(range(n))
    T.add_edges_from(tree)
    if not nx.is_tree(T):
        issues.append("leading ideal edges do not form a spanning tree")

    tree_weight = sum(G[i][j]["weight"] for i, j in tree)
    mst_weight = nx.minimum_spanning_tree(G).size(weight="weight")
    if not np.isclose(tree_weight, mst_weight):
        issues.append(f"tree weight {tree_weight:.6g} differs from minimum {mst_weight:.6g}")

    expected = min(max(ideal_edge_count(n, cfg.extra_edge_proportion), n - 1), n * (n - 1) // 2)
    if len(pairs) != expected:
        issues.append(f"expected {expected} ideal edges, found {len(pairs)}")
    if len({frozenset(p) for p in pairs}) != len(pairs):
        issues.append("ideal edge set contains a duplicate pair")
    return issues


def validate_engine(engine) -> Dict[str, List[str]]:
    """Run every invariant check and return issues grouped by check name."""
    results = {
        "opacity": opacity_violations(engine),
        "dangling_edges": dangling_edges(engine),
        "duplicate_edges": duplicate_edges(engine),
        "spanning_tree": spanning_tree_issues(engine),
    }
    return {k: v for k, v in results.items() if v}
