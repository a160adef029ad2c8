"""
Device catalog and wiring records for the plan viewer.

The viewer places devices on a generated plan and draws wires between their
terminals. This module only describes the devices and resolves terminal
positions in plan space; it does not check placement or wiring.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

BASE_WIDTH = 40
BASE_HEIGHT = 40


@dataclass(frozen=True)
class Terminal:
    """A connection point, offset from the device centre."""
    terminal_id: str      # "1+", "1-", ... "4-"
    x: float
    y: float
    label: str
    is_positive: bool
    pair_index: int       # 0-3

    def to_dict(self) -> dict:
        return {
            "id": self.terminal_id,
            "x": self.x,
            "y": self.y,
            "label": self.label,
            "is_positive": self.is_positive,
            "pair_index": self.pair_index,
        }


@dataclass(frozen=True)
class DeviceType:
    type_id: str
    name: str
    width: float
    height: float
    terminals: Tuple[Terminal, ...]

    def terminal(self, terminal_id: str) -> Optional[Terminal]:
        for t in self.terminals:
            if t.terminal_id == terminal_id:
                return t
        return None

    def to_dict(self) -> dict:
        return {
            "type_id": self.type_id,
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "terminals": [t.to_dict() for t in self.terminals],
        }


@dataclass
class PlacedDevice:
    """A device dropped on the plan; x/y is its centre in plan units."""
    device_id: str
    type_id: str
    x: float
    y: float
    rotation: float = 0.0


@dataclass
class Wire:
    wire_id: str
    start_device_id: str
    start_terminal_id: str
    end_device_id: str
    end_terminal_id: str


def _pair(index: int, plus: Tuple[float, float], minus: Tuple[float, float]) -> List[Terminal]:
    n = index + 1
    return [
        Terminal(f"{n}+", plus[0], plus[1], "+", True, index),
        Terminal(f"{n}-", minus[0], minus[1], "-", False, index),
    ]


# Four +/- pairs at the corners: top-right, bottom-right, bottom-left, top-left
AUTROGUARD_TERMINALS = tuple(
    _pair(0, (10, -16), (16, -10))
    + _pair(1, (16, 10), (10, 16))
    + _pair(2, (-10, 16), (-16, 10))
    + _pair(3, (-16, -10), (-10, -16))
)

DEVICE_DEFINITIONS: Dict[str, DeviceType] = {
    "autroguard-base": DeviceType(
        type_id="autroguard-base",
        name="AutroGuard Base",
        width=BASE_WIDTH,
        height=BASE_HEIGHT,
        terminals=AUTROGUARD_TERMINALS,
    ),
}


def get_device_type(type_id: str) -> Optional[DeviceType]:
    return DEVICE_DEFINITIONS.get(type_id)


def terminal_position(
    device: PlacedDevice,
    terminal_id: str,
    definitions: Optional[Dict[str, DeviceType]] = None,
) -> Optional[Tuple[float, float]]:
    """
    Absolute plan position of a terminal, or ``None`` if the device type or
    terminal is unknown.

    Rotation is a display concern of the viewer and is not applied here.
    """
    definitions = definitions if definitions is not None else DEVICE_DEFINITIONS
    dtype = definitions.get(device.type_id)
    if dtype is None:
        return None
    term = dtype.terminal(terminal_id)
    if term is None:
        return None
    return (device.x + term.x, device.y + term.y)


@dataclass
class WireEndpoints:
    start: Tuple[float, float]
    end: Tuple[float, float]


def wire_endpoints(
    wire: Wire,
    devices: Dict[str, PlacedDevice],
) -> Optional[WireEndpoints]:
    """Resolve both ends of *wire*; ``None`` if either end is dangling."""
    start_dev = devices.get(wire.start_device_id)
    end_dev = devices.get(wire.end_device_id)
    if start_dev is None or end_dev is None:
        return None
    start = terminal_position(start_dev, wire.start_terminal_id)
    end = terminal_position(end_dev, wire.end_terminal_id)
    if start is None or end is None:
        return None
    return WireEndpoints(start, end)
