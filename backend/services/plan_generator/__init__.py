"""
Central-hub floor plan generator.

Partitions a rectangular building into a public atrium, four perimeter
strips of weighted rooms and a bottom entrance, then renders the plan as a
standalone SVG document.
"""

from .generator import (
    FloorPlanGenerator,
    FloorPlanLayout,
    generate_floor_plan_svg,
    plan_summary_name,
)
from .layout_config import DEFAULT_LAYOUT, LayoutConfig
from .room_model import DoorWall, Room, RoomCategory
from .room_queue import GeneratorConfig, QueuedRoom, RoomRequest, build_room_queue
from .strip import LayoutError, StripOverflowError, partition_strip

__all__ = [
    "FloorPlanGenerator",
    "FloorPlanLayout",
    "generate_floor_plan_svg",
    "plan_summary_name",
    "DEFAULT_LAYOUT",
    "LayoutConfig",
    "DoorWall",
    "Room",
    "RoomCategory",
    "GeneratorConfig",
    "QueuedRoom",
    "RoomRequest",
    "build_room_queue",
    "LayoutError",
    "StripOverflowError",
    "partition_strip",
]
