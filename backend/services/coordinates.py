"""Conversions between viewer screen space and plan space."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class TransformState:
    """Pan/zoom state of the viewer."""
    scale: float
    position_x: float
    position_y: float


@dataclass
class ContainerRect:
    """Top-left corner of the viewer element on screen."""
    left: float
    top: float


def screen_to_plan(
    screen_x: float,
    screen_y: float,
    transform: TransformState,
    container: ContainerRect,
) -> Tuple[float, float]:
    """Invert the pan/zoom transform for a pointer position."""
    local_x = screen_x - container.left
    local_y = screen_y - container.top
    return (
        (local_x - transform.position_x) / transform.scale,
        (local_y - transform.position_y) / transform.scale,
    )


def plan_to_screen(
    plan_x: float,
    plan_y: float,
    transform: TransformState,
    container: ContainerRect,
) -> Tuple[float, float]:
    local_x = plan_x * transform.scale + transform.position_x
    local_y = plan_y * transform.scale + transform.position_y
    return (local_x + container.left, local_y + container.top)
