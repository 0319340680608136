"""
Wave background rendering package.

This package provides:
- The `Renderer` / `Surface` interfaces the engine is projected through
- SVG (ElementTree) and matplotlib renderers
- The driver that owns the frame timer (`WaveBackground`, `FrameTimer`)
- Asset pools for cosmetic styles
"""
