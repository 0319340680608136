from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Tuple, TypeVar

from wave_core.graph import NodeStyle


class Surface(ABC):
    """A retained drawing target the renderer projects the graph onto."""

    @abstractmethod
    def pixel_size(self) -> Tuple[float, float]:
        """Current (width, height) of the surface in pixels."""
        ...

    @abstractmethod
    def set_view_box(self, rel_width: float, rel_height: float) -> None:
        """Map the normalized rectangle (0, 0)-(rel_width, rel_height) onto the surface."""
        ...


S = TypeVar("S", bound=Surface)


class Renderer(ABC, Generic[S]):
    """
    One-way projection of the wave graph onto a bound surface.

    Renderers receive plain coordinates and styles and never read anything
    back from the surface. Drawing before `bind()` is a caller ordering bug.
    """

    def __init__(self) -> None:
        self.surface: Optional[S] = None

    def bind(self, surface: S) -> None:
        self.surface = surface

    def _require_surface(self) -> S:
        if self.surface is None:
            raise RuntimeError(f"{type(self).__name__} has no bound surface; call initialize() first")
        return self.surface

    @abstractmethod
    def clear(self) -> None:
        """Remove everything drawn since the last clear."""
        ...

    @abstractmethod
    def draw_edge(self, x1: float, y1: float, x2: float, y2: float, opacity: float, color: str) -> None:
        ...

    @abstractmethod
    def draw_node(self, x: float, y: float, radius: float, opacity: float, style: NodeStyle) -> None:
        ...
