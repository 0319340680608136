from __future__ import annotations

import logging
import time
from typing import Optional

import numpy as np

from wave_core.config import WaveConfig
from wave_core.engine import WaveEngine

from wave_anim.adapters.base import Renderer, Surface
from wave_anim.utils.palette import pick_edge_style, pick_node_style

logger = logging.getLogger(__name__)


class WaveBackground:
    """
    The animated background: an engine plus the renderer it is drawn with.

    Callers use `initialize(surface)` once, then `tick()` once per timer
    period. The timer itself belongs to the caller (see `FrameTimer` and
    `animate`).
    """

    def __init__(
        self,
        renderer: Renderer,
        config: WaveConfig | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.config = config or WaveConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.engine = WaveEngine(self.config, self.rng)
        self.renderer = renderer

    def initialize(self, surface: Surface) -> "WaveBackground":
        """
        Read the surface size once, bind it and draw the empty scene.

        Raises:
            ValueError: If the surface has no area
        """
        width, height = surface.pixel_size()
        longest = max(width, height)
        if longest <= 0:
            raise ValueError(f"Surface has no area: {width!r} x {height!r}")
        self.engine.set_dimensions(width / longest, height / longest)
        surface.set_view_box(self.engine.rel_width, self.engine.rel_height)
        self.renderer.bind(surface)
        self.engine.reset()
        logger.info(
            "Initialized %.0fx%.0f px surface as %.3f x %.3f",
            width,
            height,
            self.engine.rel_width,
            self.engine.rel_height,
        )
        self.redraw()
        return self

    def advance(self) -> None:
        self.engine.step()

    def redraw(self) -> None:
        """Project the current graph onto the surface, edges below nodes."""
        r = self.renderer
        r.clear()
        for edge in self.engine.edges:
            if edge.style is None:
                edge.style = pick_edge_style(self.rng)
            a, b = edge.a, edge.b
            r.draw_edge(a.x, a.y, b.x, b.y, edge.effective_opacity, edge.style.color)
        for node in self.engine.nodes:
            if node.style is None:
                node.style = pick_node_style(self.rng)
            r.draw_node(node.x, node.y, node.radius, node.opacity, node.style)

    def tick(self) -> None:
        self.advance()
        self.redraw()


class FrameTimer:
    """
    Fixed-period blocking loop calling `background.tick()`.

    Use as a context manager; leaving the block always stops the loop:

        with FrameTimer(background) as timer:
            timer.run(frames=500)
    """

    def __init__(self, background: WaveBackground, interval_ms: Optional[float] = None):
        self.background = background
        if interval_ms is None:
            interval_ms = background.config.frame_interval_ms
        self.period = float(interval_ms) / 1000.0
        self.frames = 0
        self._running = False

    def __enter__(self) -> "FrameTimer":
        self._running = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        self._running = False

    def run(self, frames: Optional[int] = None) -> int:
        """
        Tick until `frames` ticks have run or `stop()` is called.

        A tick that overruns its period is followed immediately by the next
        one; missed periods are not made up.

        Returns:
            Number of ticks run by this call
        """
        self._running = True
        ran = 0
        deadline = time.perf_counter()
        while self._running and (frames is None or ran < frames):
            self.background.tick()
            ran += 1
            self.frames += 1
            deadline += self.period
            delay = deadline - time.perf_counter()
            if delay > 0:
                time.sleep(delay)
            else:
                deadline = time.perf_counter()
        logger.debug("Timer ran %d ticks", ran)
        return ran


def animate(background: WaveBackground, fig, interval_ms: Optional[float] = None, frames=None):
    """
    Drive the background from matplotlib's GUI timer.

    The caller must keep a reference to the returned animation, otherwise it
    is garbage-collected and only a static frame is shown.
    """
    from matplotlib import animation

    if interval_ms is None:
        interval_ms = background.config.frame_interval_ms

    def update(_frame):
        background.tick()
        return background.renderer.artists if hasattr(background.renderer, "artists") else []

    return animation.FuncAnimation(
        fig,
        update,
        frames=frames,
        interval=interval_ms,
        blit=False,
        cache_frame_data=False,
    )
