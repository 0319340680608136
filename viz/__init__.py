"""
Visualization Package.

This package provides interactive tools for exploring the wave background,
including a Streamlit playground for tuning the engine and watching frames
and population metrics evolve.
"""

# Visualization Package
