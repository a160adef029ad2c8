"""
Axis-aligned rectangle helpers and tiling validation.

Rooms are plain ``Rect`` values during generation; Shapely is only used to
check that a set of rooms tiles its zone without gaps or overlaps.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from shapely.geometry import Polygon, box
from shapely.ops import unary_union


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, origin at the top-left (SVG convention)."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.w / 2, self.y + self.h / 2)

    @property
    def area(self) -> float:
        return self.w * self.h

    def to_polygon(self) -> Polygon:
        """Shapely polygon for this rectangle."""
        return box(self.x, self.y, self.x + self.w, self.y + self.h)

    def to_dict(self) -> dict:
        return {
            "x": round(self.x, 4),
            "y": round(self.y, 4),
            "w": round(self.w, 4),
            "h": round(self.h, 4),
        }


def detect_overlaps(rects: List[Rect],
                    tolerance: float = 1e-6) -> List[Tuple[int, int]]:
    """
    Return a list of (i, j) index pairs for rectangles that overlap.

    Rectangles sharing only an edge (zero-area intersection) are **not**
    considered overlapping.
    """
    polys = [r.to_polygon() for r in rects]
    overlaps = []
    for i in range(len(polys)):
        for j in range(i + 1, len(polys)):
            if polys[i].intersection(polys[j]).area > tolerance:
                overlaps.append((i, j))
    return overlaps


def has_overlaps(rects: List[Rect], tolerance: float = 1e-6) -> bool:
    """Quick check — are there *any* overlapping pairs?"""
    return len(detect_overlaps(rects, tolerance)) > 0


def uncovered_area(rects: Iterable[Rect], bounds: Rect) -> float:
    """Area of *bounds* not covered by the union of *rects*."""
    polys = [r.to_polygon() for r in rects]
    if not polys:
        return bounds.area
    merged = unary_union(polys)
    return bounds.to_polygon().difference(merged).area


def tiles_exactly(rects: List[Rect], bounds: Rect,
                  tolerance: float = 1e-6) -> bool:
    """
    True when *rects* cover *bounds* with no gaps, no overlaps and nothing
    sticking out.
    """
    if has_overlaps(rects, tolerance):
        return False
    total = sum(r.area for r in rects)
    if abs(total - bounds.area) > tolerance * max(bounds.area, 1.0):
        return False
    return uncovered_area(rects, bounds) <= tolerance * max(bounds.area, 1.0)
