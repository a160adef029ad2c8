"""
Linear strip partitioner.

Splits one perimeter strip into rooms along a single axis, proportional to
room weight, with two corrections:

  1. Toilets narrower than ``min_toilet_width`` are clamped to it and the
     leftover length is re-spread over the other rooms by weight.
  2. Toilets wider than ``toilet_overflow_cap`` are capped at
     ``capped_toilet_width`` and the rest of their span becomes a
     storage or server filler room.

When the clamped toilets alone need more than the strip length the spans
are left as computed, so rooms run past the strip end. Set
``LayoutConfig.strict`` to raise ``StripOverflowError`` instead.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .geometry_utils import Rect
from .layout_config import LayoutConfig
from .room_model import DISPLAY_NAMES, DoorWall, Room, RoomCategory
from .room_queue import QueuedRoom

logger = logging.getLogger(__name__)

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


class LayoutError(ValueError):
    """Base class for layouts that cannot be produced."""


class StripOverflowError(LayoutError):
    """Fixed-width rooms do not fit in the strip (strict mode only)."""

    def __init__(self, total_length: float, fixed_length: float, spans: Sequence[float]):
        self.total_length = total_length
        self.fixed_length = fixed_length
        self.spans = list(spans)
        super().__init__(
            f"strip of length {total_length:.1f} cannot hold "
            f"{fixed_length:.1f} of minimum-width rooms"
        )


@dataclass
class Allocation:
    item: QueuedRoom
    span: float
    fixed: bool = False


def default_id_factory(rng: random.Random) -> Callable[[str], str]:
    """Ids of the form ``room-1a2b3c4d`` drawn from *rng*."""
    def make(prefix: str) -> str:
        return f"{prefix}-{rng.getrandbits(32):08x}"
    return make


def allocate_spans(
    items: Sequence[QueuedRoom],
    total_length: float,
    layout: LayoutConfig,
) -> List[Allocation]:
    """
    Weighted spans for *items* after the minimum-width pass.

    Returns one ``Allocation`` per item, in order.
    """
    total_weight = sum(item.weight for item in items)
    allocations = [
        Allocation(item, (item.weight / total_weight) * total_length)
        for item in items
    ]

    violations = False
    for alloc in allocations:
        if alloc.item.category == RoomCategory.TOILET and alloc.span < layout.min_toilet_width:
            alloc.span = layout.min_toilet_width
            alloc.fixed = True
            violations = True

    if not violations:
        return allocations

    fixed_len = sum(a.span for a in allocations if a.fixed)
    flexible_weight = sum(a.item.weight for a in allocations if not a.fixed)
    remaining = total_length - fixed_len

    if remaining > 0 and flexible_weight > 0:
        for alloc in allocations:
            if not alloc.fixed:
                alloc.span = (alloc.item.weight / flexible_weight) * remaining
    else:
        used = sum(a.span for a in allocations)
        if used > total_length + 1e-9:
            if layout.strict:
                raise StripOverflowError(total_length, fixed_len, [a.span for a in allocations])
            logger.warning(
                f"Strip over-full: {used:.1f} allocated in {total_length:.1f}; "
                f"rooms will extend past the strip"
            )

    if layout.strict and any(a.span < 0 for a in allocations):
        raise StripOverflowError(total_length, fixed_len, [a.span for a in allocations])

    return allocations


def _place(bounds: Rect, direction: str, pos: float, span: float) -> Rect:
    if direction == HORIZONTAL:
        return Rect(pos, bounds.y, span, bounds.h)
    return Rect(bounds.x, pos, bounds.w, span)


def partition_strip(
    items: Sequence[QueuedRoom],
    bounds: Rect,
    direction: str,
    door_wall: DoorWall,
    layout: LayoutConfig,
    id_factory: Optional[Callable[[str], str]] = None,
) -> List[Room]:
    """
    Tile *bounds* with one room per item along *direction*.

    Parameters
    ----------
    items : sequence of QueuedRoom
        Rooms in placement order (left-to-right or top-to-bottom).
    bounds : Rect
        The strip to fill.
    direction : str
        ``"horizontal"`` (top/bottom zones) or ``"vertical"`` (left/right).
    door_wall : DoorWall
        Edge facing the central area; copied onto every emitted room.
    layout : LayoutConfig
        Minimum widths, caps and thresholds.
    id_factory : callable, optional
        ``prefix -> id``; defaults to random hex suffixes.

    Returns
    -------
    list[Room]
        Rooms in cursor order. A capped toilet is immediately followed by
        its filler room.
    """
    if not items:
        return []
    if id_factory is None:
        id_factory = default_id_factory(random.Random())

    total_length = bounds.w if direction == HORIZONTAL else bounds.h
    allocations = allocate_spans(items, total_length, layout)

    rooms: List[Room] = []
    cursor = bounds.x if direction == HORIZONTAL else bounds.y

    for alloc in allocations:
        item = alloc.item
        span = alloc.span

        if item.category == RoomCategory.TOILET and span > layout.toilet_overflow_cap:
            capped = layout.capped_toilet_width
            remainder = span - capped

            rooms.append(Room(
                room_id=id_factory("room"),
                rect=_place(bounds, direction, cursor, capped),
                category=RoomCategory.TOILET,
                label=item.label,
                door_wall=door_wall,
            ))
            cursor += capped

            filler = (RoomCategory.SERVER if remainder > layout.server_filler_threshold
                      else RoomCategory.STORAGE)
            rooms.append(Room(
                room_id=id_factory("filler"),
                rect=_place(bounds, direction, cursor, remainder),
                category=filler,
                label=DISPLAY_NAMES[filler],
                door_wall=door_wall,
            ))
            cursor += remainder
        else:
            rooms.append(Room(
                room_id=id_factory("room"),
                rect=_place(bounds, direction, cursor, span),
                category=item.category,
                label=item.label,
                door_wall=door_wall,
            ))
            cursor += span

    return rooms
