"""
Configuration objects for the wave background engine.

Exposes the population, topology, drift and fade parameters of the animated
graph, enabling experiments without editing core logic.
"""

from __future__ import annotations
from dataclasses import dataclass, fields


@dataclass
class WaveConfig:
    """
    Configuration for `WaveEngine` behavior.

    Defaults reproduce the look of the directory's landing page background.
    Fade rates are signed deltas applied to opacity once per frame.
    """

    # Population
    ideal_num_nodes: int = 20
    ramp_frames_per_node: int = 3

    # Topology: MST plus this fraction of extra short edges
    extra_edge_proportion: float = 0.5
    # Bigger nodes attract edges: weight = distance / (r_a * r_b) ** power
    radii_weight_power: float = 0.3

    # Motion
    drift_speed: float = 0.00005
    velocity_damping: float = 0.99
    velocity_jitter: float = 0.3
    repulsion_force: float = 0.000005

    # Fading
    border_fade: float = -0.02
    fade_in_per_frame: float = 0.02
    fade_out_per_frame: float = -0.01

    # Driver
    frame_interval_ms: int = 20

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the names of all tunable fields in declaration order."""
        return [f.name for f in fields(cls)]
