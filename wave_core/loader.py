"""
YAML configuration loader for the wave background.

A config file is a flat mapping of `WaveConfig` field names to numbers.
Missing fields keep their defaults:

ideal_num_nodes: 30
extra_edge_proportion: 0.8
fade_in_per_frame: 0.04

An optional top-level `wave:` key may wrap the mapping, so the settings can
live inside a larger application config.
"""

from __future__ import annotations

import math
from dataclasses import fields
from typing import Any, Dict

import yaml

from .config import WaveConfig


def config_from_dict(spec: Dict[str, Any] | None) -> WaveConfig:
    """
    Build a `WaveConfig` from a parsed mapping.

    Args:
        spec: Parsed YAML mapping (None or empty means all defaults)

    Returns:
        WaveConfig: Defaults overridden by the given values

    Raises:
        ValueError: On unknown keys, non-finite values or values of the wrong type
    """
    if not spec:
        return WaveConfig()
    if not isinstance(spec, dict):
        raise ValueError(f"Config must be a mapping, got {type(spec).__name__}")
    if set(spec) == {"wave"}:
        return config_from_dict(spec["wave"])

    types = {f.name: f.type for f in fields(WaveConfig)}
    unknown = sorted(set(spec) - set(types))
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key, raw in spec.items():
        # bool is an int subclass, but never a meaningful number here
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise ValueError(f"Config value for {key!r} must be a number, got {raw!r}")
        if isinstance(raw, float) and not math.isfinite(raw):
            raise ValueError(f"Config value for {key!r} must be finite, got {raw!r}")
        if types[key] in ("int", int):
            if float(raw) != int(raw):
                raise ValueError(f"Config value for {key!r} must be an integer, got {raw!r}")
            values[key] = int(raw)
        else:
            values[key] = float(raw)
    return WaveConfig(**values)


def config_from_yaml(text: str) -> WaveConfig:
    """Parse YAML text into a `WaveConfig`."""
    return config_from_dict(yaml.safe_load(text))


def config_from_file(path: str) -> WaveConfig:
    """Read a YAML file into a `WaveConfig`."""
    with open(path, "r", encoding="utf-8") as f:
        return config_from_yaml(f.read())
