"""
Lightweight visualization utilities decoupled from Streamlit to enable testing.
"""

from __future__ import annotations

from typing import List, Dict, Any

import numpy as np

from wave_core.engine import WaveEngine

from wave_anim.adapters.svg import SvgRenderer, SvgSurface
from wave_anim.runner.driver import WaveBackground


def build_cytoscape_elements(engine: WaveEngine, scale: float = 500.0) -> List[Dict[str, Any]]:
    """Convert the engine's live graph into Cytoscape-compatible elements.

    Node ids are indices into `engine.nodes`; positions are scaled from the
    normalized rectangle to `scale` pixels on the longer side. Cosmetic styles
    are used when already assigned.
    """
    elements: List[Dict[str, Any]] = []
    index = {node: i for i, node in enumerate(engine.nodes)}

    # Nodes
    for i, node in enumerate(engine.nodes):
        data: Dict[str, Any] = {
            "id": str(i),
            "size": max(4, int(round(2 * node.radius * scale))),
            "opacity": float(node.opacity),
            "color": node.style.fill if node.style is not None else "#ffffff",
        }
        if node.style is not None:
            data["avatar"] = node.style.avatar
        elements.append({
            "data": data,
            "position": {"x": float(node.x * scale), "y": float(node.y * scale)},
        })

    # Edges
    for edge in engine.edges:
        a, b = index[edge.a], index[edge.b]
        elements.append({
            "data": {
                "id": f"{a}-{b}",
                "source": str(a),
                "target": str(b),
                "opacity": float(edge.effective_opacity),
                "color": edge.style.color if edge.style is not None else "#ffffff",
            }
        })

    return elements


def new_svg_background(config, width: int, height: int, seed: int | None = None) -> WaveBackground:
    """Create and initialize an SVG-backed background of the given pixel size."""
    bg = WaveBackground(SvgRenderer(), config, np.random.default_rng(seed))
    return bg.initialize(SvgSurface(width, height))


def population_history(history: List[Dict[str, Any]]) -> Dict[str, List[float]]:
    """Turn a list of `frame_summary` dicts into per-metric series for plotting."""
    keys = ("frame", "nodes", "edges", "mean_node_opacity")
    return {k: [float(h[k]) for h in history] for k in keys}
