"""
Room data model for generated floor plans.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .geometry_utils import Rect


class RoomCategory(str, Enum):
    PUBLIC = "public"
    ENTRANCE = "entrance"
    OFFICE = "office"
    MEETING = "meeting"
    TOILET = "toilet"
    STORAGE = "storage"
    SERVER = "server"


class DoorWall(str, Enum):
    """Edge of a room that faces the central public area."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


# Categories a caller can ask for, in queue order
REQUESTABLE_CATEGORIES = (RoomCategory.OFFICE, RoomCategory.MEETING, RoomCategory.TOILET)

DISPLAY_NAMES = {
    RoomCategory.OFFICE: "Office",
    RoomCategory.MEETING: "Meeting",
    RoomCategory.TOILET: "WC",
    RoomCategory.STORAGE: "Store",
    RoomCategory.SERVER: "Server",
    RoomCategory.PUBLIC: "Public Area",
    RoomCategory.ENTRANCE: "Entrance",
}


@dataclass
class Room:
    """A placed room rectangle."""

    room_id: str
    rect: Rect
    category: RoomCategory
    label: str
    door_wall: Optional[DoorWall] = None

    @property
    def has_door(self) -> bool:
        return self.door_wall is not None and self.category not in (
            RoomCategory.PUBLIC, RoomCategory.ENTRANCE,
        )

    def to_dict(self) -> dict:
        """Serialize room to a dictionary."""
        return {
            "id": self.room_id,
            "category": self.category.value,
            "label": self.label,
            "rect": self.rect.to_dict(),
            "door_wall": self.door_wall.value if self.door_wall else None,
        }

    def __repr__(self) -> str:
        return (
            f"Room(id={self.room_id}, {self.category.value}, '{self.label}', "
            f"x={self.rect.x:.1f}, y={self.rect.y:.1f}, "
            f"w={self.rect.w:.1f}, h={self.rect.h:.1f})"
        )
