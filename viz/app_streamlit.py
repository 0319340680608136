"""
Streamlit viewer for the wave background.

This module provides an interactive playground for the animated graph behind
the directory's landing page. Users tune the engine's parameters, step or play
the animation, and watch the live SVG frame next to population charts.

Interface includes:
- Sidebar sliders for every tunable in `WaveConfig`
- Step / play / reset controls
- Live SVG frame rendered through the SVG renderer
- Node and edge counts over time (matplotlib)
"""

import os
import sys
import time

# Add project root to Python path BEFORE any imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import matplotlib.pyplot as plt
import streamlit as st

from wave_core.config import WaveConfig
from wave_core.metrics import frame_summary, validate_engine
from viz.utils import new_svg_background, population_history

SURFACE_SIZE = (960, 540)
MAX_HISTORY = 500

st.set_page_config(layout="wide", page_title="Wave Background")

plt.style.use("seaborn-v0_8-whitegrid")


def sidebar_config() -> WaveConfig:
    st.header("Parameters")
    return WaveConfig(
        ideal_num_nodes=st.slider("Nodes", 2, 80, 20),
        ramp_frames_per_node=st.slider("Frames per spawned node", 1, 10, 3),
        extra_edge_proportion=st.slider("Extra edge proportion", 0.0, 2.0, 0.5, 0.05),
        radii_weight_power=st.slider("Radius weight power", 0.0, 1.0, 0.3, 0.05),
        drift_speed=st.slider("Drift speed (x1e-5)", 0.0, 50.0, 5.0) * 1e-5,
        repulsion_force=st.slider("Repulsion (x1e-6)", 0.0, 50.0, 5.0) * 1e-6,
        fade_in_per_frame=st.slider("Fade in per frame", 0.005, 0.2, 0.02, 0.005),
        fade_out_per_frame=-st.slider("Fade out per frame", 0.005, 0.2, 0.01, 0.005),
    )


def reset_background(config: WaveConfig, seed: int) -> None:
    st.session_state.bg = new_svg_background(config, *SURFACE_SIZE, seed=seed)
    st.session_state.config = config
    st.session_state.history = []


def advance(frames: int) -> None:
    bg = st.session_state.bg
    for _ in range(frames):
        bg.tick()
        st.session_state.history.append(frame_summary(bg.engine))
    del st.session_state.history[:-MAX_HISTORY]


with st.sidebar:
    config = sidebar_config()
    seed = st.number_input("Seed", min_value=0, value=0, step=1)
    col_reset, col_step = st.columns(2)
    with col_reset:
        reset_clicked = st.button("Reset", use_container_width=True)
    with col_step:
        step_clicked = st.button("Step", use_container_width=True)
    play_frames = st.slider("Frames per play", 10, 500, 150, 10)
    play_clicked = st.button("Play", type="primary", use_container_width=True)

if "bg" not in st.session_state or reset_clicked or st.session_state.config != config:
    reset_background(config, int(seed))

st.title("Wave background")
col_frame, col_stats = st.columns([1.6, 1])

with col_frame:
    frame_slot = st.empty()

with col_stats:
    metrics_slot = st.empty()
    chart_slot = st.empty()


def render() -> None:
    bg = st.session_state.bg
    surface = bg.renderer.surface
    frame_slot.markdown(
        f'<div style="width:100%">{surface.to_string()}</div>', unsafe_allow_html=True
    )
    summary = frame_summary(bg.engine)
    with metrics_slot.container():
        c1, c2, c3 = st.columns(3)
        c1.metric("Frame", summary["frame"])
        c2.metric("Nodes", summary["nodes"])
        c3.metric("Edges", summary["edges"])
        issues = validate_engine(bg.engine)
        if issues:
            st.warning(f"{sum(len(v) for v in issues.values())} invariant issue(s)")

    series = population_history(st.session_state.history)
    if series["frame"]:
        fig, ax = plt.subplots(figsize=(5, 3))
        ax.plot(series["frame"], series["nodes"], label="nodes")
        ax.plot(series["frame"], series["edges"], label="edges")
        ax.set_xlabel("frame")
        ax.legend(loc="upper left")
        chart_slot.pyplot(fig)
        plt.close(fig)


if step_clicked:
    advance(1)

if play_clicked:
    interval = st.session_state.config.frame_interval_ms / 1000.0
    for _ in range(play_frames):
        advance(1)
        render()
        time.sleep(interval)
else:
    render()
