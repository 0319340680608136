"""
SVG output for the wave background.

`SvgSurface` is a retained scene built with `xml.etree.ElementTree`: a
gradient in `<defs>`, a background `<rect>` and one `<g>` layer holding every
movable element. `SvgRenderer` empties that layer on `clear()` and appends one
`<line>` per edge and one `<g>` per node.
"""

from __future__ import annotations

from typing import Tuple
from xml.etree import ElementTree as ET

from wave_core.graph import NodeStyle

from wave_anim.adapters.base import Renderer, Surface
from wave_anim.utils.palette import GRADIENT_STOPS

SVG_NS = "http://www.w3.org/2000/svg"


def _num(value: float) -> str:
    return format(float(value), ".6g")


class SvgSurface(Surface):
    def __init__(self, width_px: float, height_px: float, gradient: Tuple[str, str] = GRADIENT_STOPS):
        self.width_px = float(width_px)
        self.height_px = float(height_px)
        self.root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "width": _num(self.width_px),
                "height": _num(self.height_px),
            },
        )
        defs = ET.SubElement(self.root, "defs")
        grad = ET.SubElement(
            defs,
            "linearGradient",
            {"id": "bg-gradient", "x1": "0%", "y1": "0%", "x2": "100%", "y2": "100%"},
        )
        ET.SubElement(grad, "stop", {"offset": "0%", "stop-color": gradient[0]})
        ET.SubElement(grad, "stop", {"offset": "100%", "stop-color": gradient[1]})
        self.background = ET.SubElement(
            self.root, "rect", {"width": "1", "height": "1", "fill": "url(#bg-gradient)"}
        )
        self.layer = ET.SubElement(self.root, "g")

    def pixel_size(self) -> Tuple[float, float]:
        return self.width_px, self.height_px

    def set_view_box(self, rel_width: float, rel_height: float) -> None:
        self.root.set("viewBox", f"0 0 {_num(rel_width)} {_num(rel_height)}")
        self.background.set("width", _num(rel_width))
        self.background.set("height", _num(rel_height))

    def to_string(self) -> str:
        return ET.tostring(self.root, encoding="unicode")

    def write(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_string())


class SvgRenderer(Renderer[SvgSurface]):
    """
    Draws edges as stroked lines and nodes as clipped avatars with a ring.

    Clip path ids are numbered in draw order and restart on every `clear()`,
    so redrawing an unchanged graph yields identical markup.
    """

    def __init__(self, edge_width: float = 0.002, ring_width: float = 0.0015, id_prefix: str = "wave-clip"):
        super().__init__()
        self.edge_width = edge_width
        self.ring_width = ring_width
        self.id_prefix = id_prefix
        self._clip_count = 0

    def clear(self) -> None:
        layer = self._require_surface().layer
        for child in list(layer):
            layer.remove(child)
        self._clip_count = 0

    def draw_edge(self, x1: float, y1: float, x2: float, y2: float, opacity: float, color: str) -> None:
        layer = self._require_surface().layer
        ET.SubElement(
            layer,
            "line",
            {
                "x1": _num(x1),
                "y1": _num(y1),
                "x2": _num(x2),
                "y2": _num(y2),
                "stroke": color,
                "stroke-opacity": f"{opacity:.3f}",
                "stroke-width": _num(self.edge_width),
            },
        )

    def draw_node(self, x: float, y: float, radius: float, opacity: float, style: NodeStyle) -> None:
        layer = self._require_surface().layer
        clip_id = f"{self.id_prefix}-{self._clip_count}"
        self._clip_count += 1

        cx, cy, r = _num(x), _num(y), _num(radius)
        group = ET.SubElement(layer, "g", {"opacity": f"{opacity:.3f}"})
        clip = ET.SubElement(group, "clipPath", {"id": clip_id})
        ET.SubElement(clip, "circle", {"cx": cx, "cy": cy, "r": r})
        ET.SubElement(group, "circle", {"cx": cx, "cy": cy, "r": r, "fill": style.fill})
        ET.SubElement(
            group,
            "image",
            {
                "href": style.avatar,
                "x": _num(x - radius),
                "y": _num(y - radius),
                "width": _num(2 * radius),
                "height": _num(2 * radius),
                "preserveAspectRatio": "xMidYMid slice",
                "clip-path": f"url(#{clip_id})",
            },
        )
        ET.SubElement(
            group,
            "circle",
            {
                "cx": cx,
                "cy": cy,
                "r": r,
                "fill": "none",
                "stroke": style.border,
                "stroke-width": _num(self.ring_width),
            },
        )
