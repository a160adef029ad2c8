"""
Central-hub floor plan generator — public API.

Coordinates the room queue, zone allocation, strip partitioning and SVG
rendering for one request.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .geometry_utils import Rect, tiles_exactly
from .layout_config import DEFAULT_LAYOUT, LayoutConfig
from .room_model import Room, RoomCategory
from .room_queue import GeneratorConfig, build_room_queue
from .strip import default_id_factory, partition_strip
from .svg_renderer import render_svg
from .zones import (
    assign_round_robin,
    build_zones,
    entrance_room,
    public_room,
    strip_tasks,
)

logger = logging.getLogger(__name__)


@dataclass
class StripResult:
    zone_id: str
    bounds: Rect
    rooms: List[Room]

    @property
    def tiles_bounds(self) -> bool:
        if not self.rooms:
            return True
        return tiles_exactly([r.rect for r in self.rooms], self.bounds)


@dataclass
class FloorPlanLayout:
    """Everything produced by one generation call."""

    config: GeneratorConfig
    rooms: List[Room]
    strips: List[StripResult]
    svg: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)

    def rooms_of(self, category: RoomCategory) -> List[Room]:
        return [r for r in self.rooms if r.category == category]

    @property
    def zone_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for s in self.strips:
            zone = s.zone_id.split("-")[0]
            counts[zone] = counts.get(zone, 0) + len(s.rooms)
        return counts

    def to_dict(self, include_svg: bool = True) -> Dict[str, Any]:
        out = {
            "config": self.config.to_dict(),
            "name": plan_summary_name(self.config),
            "rooms": [r.to_dict() for r in self.rooms],
            "zones": self.zone_counts,
            "metadata": self.metadata,
        }
        if include_svg:
            out["svg"] = self.svg
        return out


def plan_summary_name(config: GeneratorConfig) -> str:
    """Short name shown in the plan list, e.g. ``Generated (6 Off, 2 Mtg)``."""
    return f"Generated ({config.offices} Off, {config.meeting_rooms} Mtg)"


class FloorPlanGenerator:
    """
    Generate central-hub office floor plans.

    Typical workflow::

        gen = FloorPlanGenerator()
        plan = gen.generate(GeneratorConfig(offices=6, meeting_rooms=2, toilets=3))
        svg = plan.svg
    """

    def __init__(self, layout: Optional[LayoutConfig] = None):
        self.layout = layout or DEFAULT_LAYOUT

    def build_rooms(
        self,
        config: GeneratorConfig,
        rng: Optional[random.Random] = None,
    ) -> List[StripResult]:
        """Room rectangles per strip, without the public area or entrance."""
        rng = rng or random.Random()
        ids = default_id_factory(rng)

        queue = build_room_queue(config, self.layout, rng)
        zones = assign_round_robin(queue, build_zones(self.layout))
        for z in zones:
            logger.debug(f"Zone {z.zone_id}: {[q.label for q in z.items]}")

        results: List[StripResult] = []
        for task in strip_tasks(zones, self.layout):
            rooms = partition_strip(
                task.items, task.bounds, task.direction,
                task.door_wall, self.layout, ids,
            )
            results.append(StripResult(task.zone_id, task.bounds, rooms))
        return results

    def generate(
        self,
        config: GeneratorConfig,
        rng: Optional[random.Random] = None,
    ) -> FloorPlanLayout:
        """
        Lay out and render one floor plan.

        Parameters
        ----------
        config : GeneratorConfig
            Requested office / meeting / toilet counts.
        rng : random.Random, optional
            Source for the shuffle and room ids. A fresh unseeded generator
            is used when omitted.
        """
        strips = self.build_rooms(config, rng)

        rooms: List[Room] = []
        # Bottom-zone entrance precedes the bottom strips; public area goes last
        for s in strips:
            if s.zone_id == "bottom-left":
                rooms.append(entrance_room(self.layout))
            rooms.extend(s.rooms)
        rooms.append(public_room(self.layout))

        svg = render_svg(rooms, self.layout)

        fillers = sum(
            1 for r in rooms if r.category in (RoomCategory.STORAGE, RoomCategory.SERVER)
        )
        logger.info(
            f"Generated floor plan: {config.offices} offices, "
            f"{config.meeting_rooms} meeting, {config.toilets} toilets "
            f"-> {len(rooms)} rooms ({fillers} filler)"
        )

        return FloorPlanLayout(
            config=config,
            rooms=rooms,
            strips=strips,
            svg=svg,
            metadata={
                "room_count": len(rooms),
                "filler_rooms": fillers,
                "strips_tiled": all(s.tiles_bounds for s in strips),
                "envelope": {"width": self.layout.width, "height": self.layout.height},
            },
        )


def generate_floor_plan_svg(
    config: GeneratorConfig,
    layout: Optional[LayoutConfig] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """One-call convenience: counts in, SVG markup out."""
    return FloorPlanGenerator(layout).generate(config, rng).svg
