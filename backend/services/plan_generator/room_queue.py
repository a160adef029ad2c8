"""
Room queue builder.

Expands per-category counts into individual weighted room descriptors and
shuffles them so room types interleave unpredictably across the zones.
"""

import random
from dataclasses import dataclass
from typing import List, MutableSequence, TypeVar

from .layout_config import LayoutConfig
from .room_model import DISPLAY_NAMES, REQUESTABLE_CATEGORIES, RoomCategory

T = TypeVar("T")


@dataclass(frozen=True)
class GeneratorConfig:
    """Requested room counts. Values are not validated or clamped here."""

    offices: int = 0
    meeting_rooms: int = 0
    toilets: int = 0

    def count_for(self, category: RoomCategory) -> int:
        return {
            RoomCategory.OFFICE: self.offices,
            RoomCategory.MEETING: self.meeting_rooms,
            RoomCategory.TOILET: self.toilets,
        }.get(category, 0)

    @property
    def total(self) -> int:
        return self.offices + self.meeting_rooms + self.toilets

    def to_dict(self) -> dict:
        return {
            "offices": self.offices,
            "meeting_rooms": self.meeting_rooms,
            "toilets": self.toilets,
        }


@dataclass(frozen=True)
class RoomRequest:
    category: RoomCategory
    count: int
    weight: float


@dataclass(frozen=True)
class QueuedRoom:
    category: RoomCategory
    weight: float
    label: str


def build_requests(config: GeneratorConfig, layout: LayoutConfig) -> List[RoomRequest]:
    """One request per requestable category, in office / meeting / toilet order."""
    return [
        RoomRequest(
            category=cat,
            count=config.count_for(cat),
            weight=layout.weight_for(cat.value),
        )
        for cat in REQUESTABLE_CATEGORIES
    ]


def fisher_yates_shuffle(items: MutableSequence[T], rng: random.Random) -> MutableSequence[T]:
    """
    In-place uniform shuffle walking from the end of the list.

    Uses only ``rng.random()`` so any object exposing that method can drive it.
    """
    current = len(items)
    while current != 0:
        pick = int(rng.random() * current)
        current -= 1
        items[current], items[pick] = items[pick], items[current]
    return items


def build_room_queue(
    config: GeneratorConfig,
    layout: LayoutConfig,
    rng: random.Random,
) -> List[QueuedRoom]:
    """
    Expand *config* into a shuffled list of ``QueuedRoom`` entries.

    Labels are 1-based per category, e.g. ``Office 1``, ``Meeting 2``,
    ``WC 1``. Zero (or negative) counts contribute nothing.
    """
    queue: List[QueuedRoom] = []
    for req in build_requests(config, layout):
        name = DISPLAY_NAMES[req.category]
        for i in range(req.count):
            queue.append(QueuedRoom(req.category, req.weight, f"{name} {i + 1}"))
    return list(fisher_yates_shuffle(queue, rng))
