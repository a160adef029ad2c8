"""
SVG rendering for generated floor plans.

Drawing primitives are collected into four ordered layers and serialized in
one pass at the end, so stacking order depends only on the layer a
primitive is added to:

  FILLS     room rectangles (walls are their strokes)
  OVERLAYS  entrance wall erasure
  DOORS     door gaps and swings
  LABELS    room labels and the main-exit marker
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .doors import door_for_room, entrance_marks, fmt
from .layout_config import LayoutConfig
from .room_model import Room, RoomCategory

SVG_NS = "http://www.w3.org/2000/svg"

FILLS = 0
OVERLAYS = 1
DOORS = 2
LABELS = 3
LAYER_ORDER = (FILLS, OVERLAYS, DOORS, LABELS)

PUBLIC_COLOR = "#e0f2fe"
PUBLIC_TEXT_COLOR = "#0284c7"
EXIT_COLOR = "#ef4444"

STYLESHEET = """
.wall { fill: #f8fafc; stroke: #334155; stroke-width: 3; }
.public { fill: #e0f2fe; stroke: #0284c7; stroke-width: 3; }
.entrance { fill: #e0f2fe; stroke: #334155; stroke-width: 3; }
.office { fill: #f1f5f9; stroke: #334155; stroke-width: 3; }
.meeting { fill: #f0fdf4; stroke: #16a34a; stroke-width: 3; }
.toilet { fill: #faf5ff; stroke: #9333ea; stroke-width: 3; }
.storage { fill: #e2e8f0; stroke: #64748b; stroke-width: 3; }
.server { fill: #1e293b; stroke: #0f172a; stroke-width: 3; }
.label { font-family: sans-serif; font-size: 14px; fill: #475569; text-anchor: middle; font-weight: 600; }
.label-white { font-family: sans-serif; font-size: 12px; fill: #f8fafc; text-anchor: middle; font-weight: 600; }
.door-swing { stroke: #334155; stroke-width: 2; fill: none; }
.door-gap { stroke: white; stroke-width: 6; }
.exit { stroke: #ef4444; stroke-width: 5; }
"""

# Rooms with a dark fill need a light label
DARK_CATEGORIES = (RoomCategory.SERVER,)


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

@dataclass
class SvgRect:
    x: float
    y: float
    w: float
    h: float
    css_class: Optional[str] = None
    attrs: Dict[str, str] = field(default_factory=dict)

    def to_element(self) -> ET.Element:
        el = ET.Element("rect", {
            "x": fmt(self.x), "y": fmt(self.y),
            "width": fmt(self.w), "height": fmt(self.h),
        })
        if self.css_class:
            el.set("class", self.css_class)
        for k, v in self.attrs.items():
            el.set(k, v)
        return el


@dataclass
class SvgLine:
    x1: float
    y1: float
    x2: float
    y2: float
    css_class: Optional[str] = None
    attrs: Dict[str, str] = field(default_factory=dict)

    def to_element(self) -> ET.Element:
        el = ET.Element("line", {
            "x1": fmt(self.x1), "y1": fmt(self.y1),
            "x2": fmt(self.x2), "y2": fmt(self.y2),
        })
        if self.css_class:
            el.set("class", self.css_class)
        for k, v in self.attrs.items():
            el.set(k, v)
        return el


@dataclass
class SvgPath:
    d: str
    css_class: Optional[str] = None

    def to_element(self) -> ET.Element:
        el = ET.Element("path", {"d": self.d})
        if self.css_class:
            el.set("class", self.css_class)
        return el


@dataclass
class SvgText:
    x: float
    y: float
    text: str
    css_class: str = "label"
    style: Optional[str] = None

    def to_element(self) -> ET.Element:
        el = ET.Element("text", {"x": fmt(self.x), "y": fmt(self.y), "class": self.css_class})
        if self.style:
            el.set("style", self.style)
        el.text = self.text
        return el


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class SvgBuilder:
    """Collects primitives per layer and serializes them in layer order."""

    def __init__(self, layout: LayoutConfig):
        self.layout = layout
        self._layers: Dict[int, list] = {layer: [] for layer in LAYER_ORDER}

    def add(self, layer: int, primitive) -> None:
        if layer not in self._layers:
            raise ValueError(f"unknown layer {layer}")
        self._layers[layer].append(primitive)

    def primitives(self, layer: int) -> list:
        return list(self._layers[layer])

    def _root(self) -> ET.Element:
        w, h = fmt(self.layout.width), fmt(self.layout.height)
        root = ET.Element("svg", {
            "width": w, "height": h,
            "viewBox": f"0 0 {w} {h}",
            "xmlns": SVG_NS,
        })

        g = fmt(self.layout.grid_size)
        defs = ET.SubElement(root, "defs")
        pattern = ET.SubElement(defs, "pattern", {
            "id": "grid", "width": g, "height": g,
            "patternUnits": "userSpaceOnUse",
        })
        ET.SubElement(pattern, "path", {
            "d": f"M {g} 0 L 0 0 0 {g}",
            "fill": "none", "stroke": "#e2e8f0", "stroke-width": "1",
        })
        style = ET.SubElement(root, "style")
        style.text = STYLESHEET

        ET.SubElement(root, "rect", {"width": w, "height": h, "fill": "white"})
        ET.SubElement(root, "rect", {"width": w, "height": h, "fill": "url(#grid)"})
        return root

    def to_string(self) -> str:
        root = self._root()
        for layer in LAYER_ORDER:
            for prim in self._layers[layer]:
                root.append(prim.to_element())
        return ET.tostring(root, encoding="unicode")


# ---------------------------------------------------------------------------
# Room list -> SVG
# ---------------------------------------------------------------------------

def build_svg(rooms: List[Room], layout: LayoutConfig) -> SvgBuilder:
    """Populate a builder with every layer for *rooms*."""
    builder = SvgBuilder(layout)

    for room in rooms:
        r = room.rect
        builder.add(FILLS, SvgRect(r.x, r.y, r.w, r.h, room.category.value,
                                   {"data-room-id": room.room_id}))

    for room in rooms:
        if room.category == RoomCategory.ENTRANCE:
            marks = entrance_marks(room, layout)
            builder.add(OVERLAYS, SvgLine(
                *marks.erasure_start, *marks.erasure_end,
                attrs={"stroke": PUBLIC_COLOR, "stroke-width": "6"},
            ))

    for room in rooms:
        door = door_for_room(room, layout)
        if door is None:
            continue
        builder.add(DOORS, SvgLine(*door.gap_start, *door.gap_end, "door-gap"))
        builder.add(DOORS, SvgPath(door.swing_path(), "door-swing"))

    for room in rooms:
        cx, cy = room.rect.center
        if room.category != RoomCategory.ENTRANCE:
            css = "label-white" if room.category in DARK_CATEGORIES else "label"
            builder.add(LABELS, SvgText(cx, cy, room.label, css))
            continue

        builder.add(LABELS, SvgText(cx, cy, "ENTRANCE", "label",
                                    f"fill:{PUBLIC_TEXT_COLOR}"))
        marks = entrance_marks(room, layout)
        builder.add(LABELS, SvgLine(*marks.exit_start, *marks.exit_end, "exit"))
        builder.add(LABELS, SvgText(*marks.exit_label_at, "MAIN EXIT", "label",
                                    f"fill: {EXIT_COLOR}; font-size: 10px;"))

    return builder


def render_svg(rooms: List[Room], layout: LayoutConfig) -> str:
    """Serialize *rooms* as a standalone SVG document."""
    return build_svg(rooms, layout).to_string()
