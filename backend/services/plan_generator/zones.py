"""
Zone allocator.

The envelope is split into a central public rectangle and four perimeter
strips (top, bottom, left, right). Top and bottom span the full width; left
and right fill the height between them so corners belong to top/bottom.
Queued rooms are dealt to the strips round-robin.
"""

import math
from dataclasses import dataclass, field
from typing import List, Tuple

from .geometry_utils import Rect
from .layout_config import LayoutConfig
from .room_model import DISPLAY_NAMES, DoorWall, Room, RoomCategory
from .room_queue import QueuedRoom
from .strip import HORIZONTAL, VERTICAL

ZONE_ORDER = ("top", "bottom", "left", "right")


@dataclass
class Zone:
    zone_id: str
    rect: Rect
    door_direction: DoorWall
    items: List[QueuedRoom] = field(default_factory=list)

    @property
    def direction(self) -> str:
        return HORIZONTAL if self.zone_id in ("top", "bottom") else VERTICAL


@dataclass
class StripTask:
    """One strip to hand to the partitioner."""
    zone_id: str
    items: List[QueuedRoom]
    bounds: Rect
    direction: str
    door_wall: DoorWall


def central_rect(layout: LayoutConfig) -> Rect:
    r = layout.ring_thickness
    return Rect(r, r, layout.width - 2 * r, layout.height - 2 * r)


def build_zones(layout: LayoutConfig) -> List[Zone]:
    """The four perimeter zones, in round-robin order."""
    w, h, r = layout.width, layout.height, layout.ring_thickness
    return [
        Zone("top", Rect(0, 0, w, r), DoorWall.BOTTOM),
        Zone("bottom", Rect(0, h - r, w, r), DoorWall.TOP),
        Zone("left", Rect(0, r, r, h - 2 * r), DoorWall.RIGHT),
        Zone("right", Rect(w - r, r, r, h - 2 * r), DoorWall.LEFT),
    ]


def assign_round_robin(queue: List[QueuedRoom], zones: List[Zone]) -> List[Zone]:
    """
    Deal rooms from the end of *queue* into *zones* in turn until empty.

    The queue is consumed. Zone counts differ by at most one.
    """
    idx = 0
    while queue:
        zones[idx].items.append(queue.pop())
        idx = (idx + 1) % len(zones)
    return zones


def entrance_rect(layout: LayoutConfig) -> Rect:
    """Fixed-width entrance centred in the bottom zone."""
    x = layout.width / 2 - layout.entrance_width / 2
    return Rect(x, layout.height - layout.ring_thickness,
                layout.entrance_width, layout.ring_thickness)


def entrance_room(layout: LayoutConfig) -> Room:
    return Room(
        room_id="entrance",
        rect=entrance_rect(layout),
        category=RoomCategory.ENTRANCE,
        label=DISPLAY_NAMES[RoomCategory.ENTRANCE],
    )


def public_room(layout: LayoutConfig) -> Room:
    return Room(
        room_id="public",
        rect=central_rect(layout),
        category=RoomCategory.PUBLIC,
        label=DISPLAY_NAMES[RoomCategory.PUBLIC],
    )


def split_bottom_items(items: List[QueuedRoom]) -> Tuple[List[QueuedRoom], List[QueuedRoom]]:
    """First ceil(n/2) items go left of the entrance, the rest right."""
    mid = math.ceil(len(items) / 2)
    return items[:mid], items[mid:]


def strip_tasks(zones: List[Zone], layout: LayoutConfig) -> List[StripTask]:
    """
    Turn populated zones into partitioner tasks.

    The bottom zone yields two tasks, one each side of the entrance.
    """
    tasks: List[StripTask] = []
    for zone in zones:
        if zone.zone_id != "bottom":
            tasks.append(StripTask(zone.zone_id, list(zone.items), zone.rect,
                                   zone.direction, zone.door_direction))
            continue

        ent = entrance_rect(layout)
        left_items, right_items = split_bottom_items(zone.items)
        tasks.append(StripTask(
            "bottom-left", left_items,
            Rect(zone.rect.x, zone.rect.y, ent.x - zone.rect.x, zone.rect.h),
            HORIZONTAL, zone.door_direction,
        ))
        tasks.append(StripTask(
            "bottom-right", right_items,
            Rect(ent.right, zone.rect.y, zone.rect.right - ent.right, zone.rect.h),
            HORIZONTAL, zone.door_direction,
        ))
    return tasks
