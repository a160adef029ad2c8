"""
Door geometry for rooms that open onto the central public area.

Each perimeter room gets one door on its ``door_wall``. The door is centred
on the part of that wall which actually touches the central rectangle, so
rooms in the corners of the top/bottom strips still open into the hub and
not into a neighbouring side strip.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .geometry_utils import Rect
from .layout_config import LayoutConfig
from .room_model import DoorWall, Room, RoomCategory

Point = Tuple[float, float]

# (sweep flag, leaf direction) per wall; leaf points into the room
_SWING = {
    DoorWall.TOP: (0, (0, 1)),
    DoorWall.BOTTOM: (1, (0, -1)),
    DoorWall.LEFT: (1, (1, 0)),
    DoorWall.RIGHT: (0, (-1, 0)),
}


def fmt(value: float) -> str:
    """Compact number formatting for SVG attributes and path data."""
    value = round(float(value), 4)
    if value == int(value):
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class DoorGeometry:
    """Gap in the wall plus the quarter-circle swing."""

    wall: DoorWall
    gap_start: Point
    gap_end: Point
    size: float

    @property
    def hinge(self) -> Point:
        return self.gap_start

    @property
    def leaf_end(self) -> Point:
        """Tip of the open door leaf, inside the room."""
        _, (dx, dy) = _SWING[self.wall]
        x, y = self.gap_start
        return (x + dx * self.size, y + dy * self.size)

    def swing_path(self) -> str:
        """SVG path: leaf drawn into the room, then the arc back to the gap end."""
        sweep, (dx, dy) = _SWING[self.wall]
        x, y = self.gap_start
        d = self.size
        if dx == 0:
            leaf = f"v {fmt(dy * d)}"
        else:
            leaf = f"h {fmt(dx * d)}"
        ex, ey = self.gap_end
        return (
            f"M {fmt(x)} {fmt(y)} {leaf} "
            f"A {fmt(d)} {fmt(d)} 0 0 {sweep} {fmt(ex)} {fmt(ey)}"
        )

    def to_dict(self) -> dict:
        return {
            "wall": self.wall.value,
            "gap_start": [round(self.gap_start[0], 4), round(self.gap_start[1], 4)],
            "gap_end": [round(self.gap_end[0], 4), round(self.gap_end[1], 4)],
            "hinge": [round(self.hinge[0], 4), round(self.hinge[1], 4)],
            "leaf_end": [round(self.leaf_end[0], 4), round(self.leaf_end[1], 4)],
            "size": self.size,
        }


def _overlap_mid(start: float, end: float, valid: Tuple[float, float]) -> float:
    lo = max(start, valid[0])
    hi = min(end, valid[1])
    return (lo + hi) / 2


def door_for_room(room: Room, layout: LayoutConfig) -> Optional[DoorGeometry]:
    """
    Door on the wall of *room* facing the hub, or ``None`` for the public
    area, the entrance and rooms without a door wall.
    """
    if not room.has_door:
        return None

    r: Rect = room.rect
    half = layout.door_size / 2
    wall = room.door_wall

    if wall in (DoorWall.TOP, DoorWall.BOTTOM):
        mid = _overlap_mid(r.x, r.right, layout.central_x_range)
        y = r.y if wall == DoorWall.TOP else r.bottom
        start, end = (mid - half, y), (mid + half, y)
    else:
        mid = _overlap_mid(r.y, r.bottom, layout.central_y_range)
        x = r.x if wall == DoorWall.LEFT else r.right
        start, end = (x, mid - half), (x, mid + half)

    return DoorGeometry(wall=wall, gap_start=start, gap_end=end, size=layout.door_size)


@dataclass(frozen=True)
class EntranceMarks:
    """Open wall towards the hub and the external exit marker."""

    erasure_start: Point
    erasure_end: Point
    exit_start: Point
    exit_end: Point
    exit_label_at: Point


def entrance_marks(room: Room, layout: LayoutConfig) -> EntranceMarks:
    if room.category != RoomCategory.ENTRANCE:
        raise ValueError(f"{room.room_id} is not an entrance")

    r = room.rect
    inset = layout.entrance_erasure_inset
    exit_x = r.x + r.w / 2
    exit_y = r.bottom
    half = layout.exit_marker_half_length
    return EntranceMarks(
        erasure_start=(r.x + inset, r.y),
        erasure_end=(r.right - inset, r.y),
        exit_start=(exit_x - half, exit_y),
        exit_end=(exit_x + half, exit_y),
        exit_label_at=(exit_x, exit_y - 15),
    )
