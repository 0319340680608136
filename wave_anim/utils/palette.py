from __future__ import annotations

from typing import Sequence

import numpy as np

from wave_core.graph import EdgeStyle, NodeStyle

# Pools are picked from by uniform random index and never mutated.
FILL_COLORS: tuple[str, ...] = (
    "#6600ff",
    "#1a00ff",
    "#9d00ff",
    "#3c00ff",
    "#7700ff",
    "#0033ff",
)

BORDER_COLORS: tuple[str, ...] = (
    "#ffffff",
    "#e5e7eb",
    "#c4b5fd",
    "#a5b4fc",
)

EDGE_COLORS: tuple[str, ...] = (
    "#ffffff",
    "#ddd6fe",
    "#c7d2fe",
    "#e0e7ff",
)

AVATARS: tuple[str, ...] = tuple(
    f"https://avatars.githubusercontent.com/u/{uid}?v=4"
    for uid in (1, 2, 3, 4, 5, 6, 17, 21, 38, 44, 85, 100)
)

# Background gradient stops of the SVG surface
GRADIENT_STOPS: tuple[str, str] = ("#575E85", "#2E3145")


def pick(rng: np.random.Generator, pool: Sequence[str]) -> str:
    """Return a uniformly random entry of `pool`."""
    return pool[int(rng.integers(len(pool)))]


def pick_node_style(rng: np.random.Generator) -> NodeStyle:
    return NodeStyle(
        fill=pick(rng, FILL_COLORS),
        border=pick(rng, BORDER_COLORS),
        avatar=pick(rng, AVATARS),
    )


def pick_edge_style(rng: np.random.Generator) -> EdgeStyle:
    return EdgeStyle(color=pick(rng, EDGE_COLORS))
