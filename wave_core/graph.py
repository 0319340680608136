"""
Graph data structures for the wave background.

This module defines the plain records the engine animates:
- Node: a drifting circle with a fade-in/fade-out opacity
- Edge: an undirected connection between two live nodes
- NodeStyle / EdgeStyle: cosmetic attributes assigned once, on first draw

Fading is a shared pure function (`apply_fade`) rather than inherited state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional


def apply_fade(opacity: float, delta: float) -> float:
    """
    Shift an opacity by `delta` and clamp the result to [0, 1].

    Args:
        opacity: Current opacity
        delta: Signed per-frame change (positive fades in, negative fades out)

    Returns:
        The new opacity, within [0, 1]
    """
    return max(min(opacity + delta, 1.0), 0.0)


@dataclass(frozen=True)
class NodeStyle:
    """Cosmetic attributes of a node, picked once from the asset pools."""

    fill: str
    """Fill color shown behind the avatar."""

    border: str
    """Color of the ring outline."""

    avatar: str
    """Reference (URL or path) of the decorative avatar image."""


@dataclass(frozen=True)
class EdgeStyle:
    """Cosmetic attributes of an edge, picked once from the asset pools."""

    color: str
    """Stroke color of the line segment."""


@dataclass(eq=False)
class Node:
    """
    A drifting, fading circle in normalized unit-rectangle coordinates.

    Nodes compare and hash by identity: two nodes at the same position are
    still different nodes, and edges refer to them by identity.

    Attributes:
        x, y: Position (0..rel_width, 0..rel_height while visible)
        radius: Circle radius in the same normalized units
        vx, vy: Velocity, scaled by the drift speed when integrated
        opacity: Fade state in [0, 1]; visible iff > 0
        dx, dy: Displacement accumulated during one repulsion pass
        style: Cosmetic attributes, None until first drawn
    """

    x: float
    y: float
    radius: float
    vx: float = 0.0
    vy: float = 0.0
    opacity: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    style: Optional[NodeStyle] = None

    def fade(self, delta: float) -> None:
        """Apply one fade step to this node's opacity."""
        self.opacity = apply_fade(self.opacity, delta)

    @property
    def visible(self) -> bool:
        return self.opacity > 0.0


@dataclass(eq=False)
class Edge:
    """
    An undirected connection between two nodes.

    The endpoints are held by identity; `(a, b)` and `(b, a)` describe the same
    edge, see `key`.

    Attributes:
        a, b: Endpoint nodes
        opacity: Own fade state in [0, 1]
        style: Cosmetic attributes, None until first drawn
    """

    a: Node
    b: Node
    opacity: float = 0.0
    style: Optional[EdgeStyle] = None

    def fade(self, delta: float) -> None:
        """Apply one fade step to this edge's own opacity."""
        self.opacity = apply_fade(self.opacity, delta)

    @property
    def key(self) -> FrozenSet[Node]:
        """Order-independent identity of the endpoint pair."""
        return edge_key(self.a, self.b)

    @property
    def effective_opacity(self) -> float:
        """Visible opacity, bounded by both endpoints."""
        return min(self.opacity, self.a.opacity, self.b.opacity)


def edge_key(a: Node, b: Node) -> FrozenSet[Node]:
    """Return the order-independent key of the pair (a, b)."""
    return frozenset((a, b))
