"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


# ---------- Floor Plan Generation ----------
class GeneratorConfigIn(BaseModel):
    """Room counts, clamped to what the generation dialog allows."""
    model_config = ConfigDict(populate_by_name=True)

    offices: int = Field(default=6, ge=0, le=9)
    meeting_rooms: int = Field(default=2, ge=0, le=2, alias="meetingRooms")
    toilets: int = Field(default=3, ge=0, le=3)
    seed: Optional[int] = Field(
        default=None,
        description="Fix the shuffle and room ids; omit for a fresh layout",
    )


class RectOut(BaseModel):
    x: float
    y: float
    w: float
    h: float


class RoomOut(BaseModel):
    id: str
    category: str
    label: str
    rect: RectOut
    door_wall: Optional[str] = None


class GeneratedPlanOut(BaseModel):
    plan_id: str
    name: str
    rooms: list[RoomOut]
    zones: dict[str, int]
    metadata: dict = {}
    svg: str


# ---------- Devices ----------
class TerminalOut(BaseModel):
    id: str
    x: float
    y: float
    label: str
    is_positive: bool
    pair_index: int


class DeviceTypeOut(BaseModel):
    type_id: str
    name: str
    width: float
    height: float
    terminals: list[TerminalOut]


class PlacedDeviceIn(BaseModel):
    id: str
    type_id: str = Field(..., alias="typeId")
    x: float
    y: float
    rotation: float = 0.0

    model_config = ConfigDict(populate_by_name=True)


class TerminalPositionRequest(BaseModel):
    device: PlacedDeviceIn
    terminal_id: str = Field(..., alias="terminalId")

    model_config = ConfigDict(populate_by_name=True)


class PointOut(BaseModel):
    x: float
    y: float


# ---------- Coordinates ----------
class TransformIn(BaseModel):
    scale: float = Field(..., gt=0)
    position_x: float = Field(default=0.0, alias="positionX")
    position_y: float = Field(default=0.0, alias="positionY")

    model_config = ConfigDict(populate_by_name=True)


class ContainerIn(BaseModel):
    left: float = 0.0
    top: float = 0.0


class CoordinateRequest(BaseModel):
    x: float
    y: float
    transform: TransformIn
    container: ContainerIn = ContainerIn()


# ---------- Wires ----------
class WireIn(BaseModel):
    id: str
    start_device_id: str = Field(..., alias="startDeviceId")
    start_terminal_id: str = Field(..., alias="startTerminalId")
    end_device_id: str = Field(..., alias="endDeviceId")
    end_terminal_id: str = Field(..., alias="endTerminalId")

    model_config = ConfigDict(populate_by_name=True)


class WireEndpointsRequest(BaseModel):
    wire: WireIn
    devices: list[PlacedDeviceIn]


class WireEndpointsOut(BaseModel):
    wire_id: str
    start: PointOut
    end: PointOut
