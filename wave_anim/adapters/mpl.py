"""
Matplotlib rendering of the wave background.

Avatars are drawn only for URLs present in `avatar_images`, a mapping from
avatar URL to an already-loaded image array; the renderer never fetches
anything. Nodes without a loaded image show their fill color instead.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np
from matplotlib.artist import Artist
from matplotlib.lines import Line2D
from matplotlib.patches import Circle

from wave_core.graph import NodeStyle

from wave_anim.adapters.base import Renderer, Surface
from wave_anim.utils.palette import GRADIENT_STOPS


class AxesSurface(Surface):
    """Wraps a matplotlib `Axes` so the wave can be drawn into a figure."""

    def __init__(self, ax, background: str = GRADIENT_STOPS[1]):
        self.ax = ax
        self.background = background

    def pixel_size(self) -> Tuple[float, float]:
        bbox = self.ax.get_window_extent()
        return float(bbox.width), float(bbox.height)

    def set_view_box(self, rel_width: float, rel_height: float) -> None:
        ax = self.ax
        ax.set_xlim(0.0, rel_width)
        # y grows downward, as in the SVG view box
        ax.set_ylim(rel_height, 0.0)
        ax.set_aspect("equal")
        ax.set_facecolor(self.background)
        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)


class MatplotlibRenderer(Renderer[AxesSurface]):
    """
    Draws into an `Axes` with lines, circle patches and clipped images.

    Each node is a filled circle, the avatar image clipped to that circle when
    one is loaded, and a border ring on top.
    """

    def __init__(
        self,
        edge_width: float = 0.8,
        ring_width: float = 0.8,
        avatar_images: Optional[Dict[str, np.ndarray]] = None,
    ):
        super().__init__()
        self.edge_width = edge_width
        self.ring_width = ring_width
        self.avatar_images = avatar_images or {}
        self._artists: List[Artist] = []

    @property
    def artists(self) -> List[Artist]:
        return list(self._artists)

    def clear(self) -> None:
        self._require_surface()
        for artist in self._artists:
            artist.remove()
        self._artists = []

    def draw_edge(self, x1: float, y1: float, x2: float, y2: float, opacity: float, color: str) -> None:
        ax = self._require_surface().ax
        line = Line2D([x1, x2], [y1, y2], color=color, alpha=opacity, linewidth=self.edge_width, zorder=1)
        ax.add_line(line)
        self._artists.append(line)

    def draw_node(self, x: float, y: float, radius: float, opacity: float, style: NodeStyle) -> None:
        ax = self._require_surface().ax
        body = Circle((x, y), radius, facecolor=style.fill, edgecolor="none", alpha=opacity, zorder=2)
        ax.add_patch(body)
        self._artists.append(body)

        image = self.avatar_images.get(style.avatar)
        if image is not None:
            # Row 0 at the top: the y axis is inverted
            avatar = ax.imshow(
                image,
                extent=(x - radius, x + radius, y + radius, y - radius),
                alpha=opacity,
                zorder=2.5,
                interpolation="bilinear",
            )
            avatar.set_clip_path(body)
            self._artists.append(avatar)

        ring = Circle(
            (x, y),
            radius,
            facecolor="none",
            edgecolor=style.border,
            linewidth=self.ring_width,
            alpha=opacity,
            zorder=3,
        )
        ax.add_patch(ring)
        self._artists.append(ring)
