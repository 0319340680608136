"""
Wave Core Package.

This package contains the animated graph behind the Bloke directory's
landing page, including:

- Core data structures (Node, Edge, fade function, cosmetic styles)
- Union-find and the spanning-tree-plus-extras topology
- The per-frame engine (drift, spawning, repulsion, edge fading)
- YAML configuration loading and metrics/invariant checks

Drawing lives in the sibling `wave_anim` package; nothing here depends on a
particular drawing surface.
"""

# Wave Core Package

__version__ = "0.1.0"

from .config import WaveConfig
from .graph import Node, Edge, NodeStyle, EdgeStyle, apply_fade
from .disjoint_set import DisjointSet
from .engine import WaveEngine
from .loader import config_from_dict, config_from_yaml, config_from_file

# expose metrics utilities
from .metrics import (
    frame_summary,
    total_nodes_spawned,
    total_edges_created,
    validate_engine,
)
