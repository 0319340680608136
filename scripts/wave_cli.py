#!/usr/bin/env python3
"""
Wave background CLI

Usage modes:
- Default run: advance the engine headlessly, print a frame summary or write JSON
- Validation: check opacity bounds, edge integrity and the spanning tree
- Stats: print lifetime counters and the per-frame summary
- Export: write the final frame as GraphML or SVG
- Utility: list bundled configs, show version
"""

from __future__ import annotations

import argparse
import json
import logging
from glob import glob
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

from wave_core import WaveEngine  # type: ignore
from wave_core.config import WaveConfig  # type: ignore
from wave_core.loader import config_from_file  # type: ignore
from wave_core.metrics import frame_summary, validate_engine  # type: ignore


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Run the wave background engine and dump snapshot/metrics",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Utilities / meta
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v, -vv)")
    p.add_argument("--list-configs", action="store_true", help="List bundled YAML configs and exit")

    # Primary input
    p.add_argument("config", nargs="?", help="Optional YAML config (e.g., configs/default.yaml)")

    # Execution
    p.add_argument("--frames", type=int, default=100, help="Number of frames to advance")
    p.add_argument("--seed", type=int, default=0, help="Random seed")
    p.add_argument("--width", type=float, default=1.0, help="Relative width (one side must be 1)")
    p.add_argument("--height", type=float, default=1.0, help="Relative height (one side must be 1)")
    p.add_argument("--out", type=str, default="", help="Optional output JSON file path")
    p.add_argument("--full", action="store_true", help="Output the full snapshot instead of a summary")

    # Config overrides
    p.add_argument("--nodes", type=int, default=None, help="Ideal number of nodes")
    p.add_argument("--extra-edges", type=float, default=None, help="Extra edge proportion")
    p.add_argument("--radii-power", type=float, default=None, help="Radius weight power")
    p.add_argument("--repulsion", type=float, default=None, help="Repulsion force")
    p.add_argument("--drift", type=float, default=None, help="Drift speed")

    # Analysis / export
    p.add_argument("--validate", action="store_true", help="Check engine invariants after running")
    p.add_argument("--stats", action="store_true", help="Print lifetime counters and frame summary")
    p.add_argument("--export-graphml", type=str, default="", help="Export final frame to GraphML at given path")
    p.add_argument("--export-svg", type=str, default="", help="Render final frame to SVG at given path")

    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> WaveConfig:
    cfg = config_from_file(args.config) if args.config else WaveConfig()
    if args.nodes is not None:
        cfg.ideal_num_nodes = int(args.nodes)
    if args.extra_edges is not None:
        cfg.extra_edge_proportion = float(args.extra_edges)
    if args.radii_power is not None:
        cfg.radii_weight_power = float(args.radii_power)
    if args.repulsion is not None:
        cfg.repulsion_force = float(args.repulsion)
    if args.drift is not None:
        cfg.drift_speed = float(args.drift)
    return cfg


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def find_configs() -> List[str]:
    here = Path(__file__).resolve()
    repo_root = here.parent.parent
    return sorted(glob(str(repo_root / "configs" / "*.yaml")))


def export_svg(engine: WaveEngine, path: str, seed: int) -> None:
    from wave_anim.adapters.svg import SvgRenderer, SvgSurface
    from wave_anim.runner.driver import WaveBackground

    # Pixel size only needs the right aspect ratio
    surface = SvgSurface(engine.rel_width * 1000, engine.rel_height * 1000)
    bg = WaveBackground(SvgRenderer(), engine.config, np.random.default_rng(seed))
    bg.initialize(surface)
    bg.engine = engine
    bg.redraw()
    surface.write(path)


def main(argv: List[str] | None = None) -> int:
    from wave_core import __version__ as wave_version

    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.version:
        print(wave_version)
        return 0

    if args.list_configs:
        print(json.dumps(find_configs(), indent=2))
        return 0

    try:
        cfg = build_config(args)
    except (OSError, ValueError) as exc:
        logging.error("Invalid config: %s", exc)
        return 2

    engine = WaveEngine(cfg, np.random.default_rng(args.seed))
    try:
        engine.set_dimensions(args.width, args.height)
    except ValueError as exc:
        logging.error("%s", exc)
        return 2

    logging.info("Advancing %d frames", args.frames)
    snap = engine.advance(args.frames) if args.frames > 0 else engine.snapshot()

    if args.validate:
        issues = validate_engine(engine)
        logging.info("Validation issues: %d", sum(len(v) for v in issues.values()))
        print(json.dumps({"valid": not issues, "issues": issues}, indent=2))
        return 1 if issues else 0

    if args.export_graphml:
        logging.info("Exporting GraphML to %s", args.export_graphml)
        engine.export_graphml(args.export_graphml)

    if args.export_svg:
        logging.info("Rendering SVG to %s", args.export_svg)
        export_svg(engine, args.export_svg, args.seed)

    if args.stats:
        print(json.dumps({"stats": engine.stats, "frame": frame_summary(engine)}, indent=2))
        return 0

    output: Dict[str, Any] = snap if args.full else frame_summary(engine)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump(output, f, indent=2)
    else:
        print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
