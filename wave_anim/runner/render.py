from __future__ import annotations

import argparse
import logging
import os

import numpy as np

from wave_core.config import WaveConfig
from wave_core.loader import config_from_file

from wave_anim.adapters.svg import SvgRenderer, SvgSurface
from wave_anim.runner.driver import WaveBackground, animate

logger = logging.getLogger(__name__)


def render_svg(
    config: WaveConfig,
    frames: int,
    width: int = 1280,
    height: int = 720,
    seed: int | None = 0,
    out_path: str | None = None,
    frames_dir: str | None = None,
) -> str:
    """
    Run the background for `frames` ticks and return the final SVG markup.

    Args:
        out_path: Optional file for the final frame
        frames_dir: Optional directory receiving every frame as frame_00001.svg, ...
    """
    surface = SvgSurface(width, height)
    bg = WaveBackground(SvgRenderer(), config, np.random.default_rng(seed)).initialize(surface)

    if frames_dir:
        os.makedirs(frames_dir, exist_ok=True)
    for k in range(1, frames + 1):
        bg.tick()
        if frames_dir:
            surface.write(os.path.join(frames_dir, f"frame_{k:05d}.svg"))

    if out_path:
        surface.write(out_path)
        logger.info("Wrote %s after %d frames", out_path, frames)
    return surface.to_string()


def show_live(config: WaveConfig, width: int = 1280, height: int = 720, seed: int | None = None) -> None:
    import matplotlib.pyplot as plt

    from wave_anim.adapters.mpl import AxesSurface, MatplotlibRenderer

    dpi = 100
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    bg = WaveBackground(MatplotlibRenderer(), config, np.random.default_rng(seed))
    bg.initialize(AxesSurface(ax))
    anim = animate(bg, fig)
    # Keep a reference so the animation is not garbage-collected
    _ = anim
    plt.show()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render the wave background")
    parser.add_argument("--config", help="YAML config (configs/*.yaml)")
    parser.add_argument("--frames", type=int, default=300)
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--out", default="wave.svg", help="SVG file for the final frame")
    parser.add_argument("--frames-dir", help="Write every frame into this directory")
    parser.add_argument("--show", action="store_true", help="Open a live matplotlib window instead")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    try:
        config = config_from_file(args.config) if args.config else WaveConfig()
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Invalid config: {exc}")

    if args.show:
        show_live(config, args.width, args.height, args.seed)
        return

    render_svg(
        config,
        args.frames,
        width=args.width,
        height=args.height,
        seed=args.seed,
        out_path=args.out,
        frames_dir=args.frames_dir,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
