"""
Device palette and coordinate helpers for the plan viewer.

Endpoints:
  GET  /api/devices                          — Device catalog
  POST /api/devices/terminal-position        — Terminal position in plan space
  POST /api/devices/wire-endpoints           — Both ends of a wire in plan space
  POST /api/coordinates/screen-to-plan       — Pointer -> plan coordinates
  POST /api/coordinates/plan-to-screen       — Plan -> screen coordinates
"""

from fastapi import APIRouter, HTTPException

from schemas import (
    CoordinateRequest,
    DeviceTypeOut,
    PointOut,
    TerminalPositionRequest,
    WireEndpointsOut,
    WireEndpointsRequest,
)
from services.coordinates import ContainerRect, TransformState, plan_to_screen, screen_to_plan
from services.devices import (
    DEVICE_DEFINITIONS,
    PlacedDevice,
    Wire,
    get_device_type,
    terminal_position,
    wire_endpoints,
)

router = APIRouter(prefix="/api", tags=["devices"])


@router.get("/devices", response_model=list[DeviceTypeOut])
async def list_devices():
    """All placeable device types."""
    return [d.to_dict() for d in DEVICE_DEFINITIONS.values()]


@router.post("/devices/terminal-position", response_model=PointOut)
async def get_terminal_position(req: TerminalPositionRequest):
    """Absolute plan coordinates of one terminal on a placed device."""
    if get_device_type(req.device.type_id) is None:
        raise HTTPException(status_code=404, detail=f"Unknown device type '{req.device.type_id}'")

    device = PlacedDevice(
        device_id=req.device.id,
        type_id=req.device.type_id,
        x=req.device.x,
        y=req.device.y,
        rotation=req.device.rotation,
    )
    pos = terminal_position(device, req.terminal_id)
    if pos is None:
        raise HTTPException(status_code=404, detail=f"Unknown terminal '{req.terminal_id}'")
    return PointOut(x=pos[0], y=pos[1])


@router.post("/devices/wire-endpoints", response_model=WireEndpointsOut)
async def get_wire_endpoints(req: WireEndpointsRequest):
    """Resolve a wire drawn between two placed devices to plan coordinates."""
    devices = {
        d.id: PlacedDevice(device_id=d.id, type_id=d.type_id, x=d.x, y=d.y, rotation=d.rotation)
        for d in req.devices
    }
    wire = Wire(
        wire_id=req.wire.id,
        start_device_id=req.wire.start_device_id,
        start_terminal_id=req.wire.start_terminal_id,
        end_device_id=req.wire.end_device_id,
        end_terminal_id=req.wire.end_terminal_id,
    )
    ends = wire_endpoints(wire, devices)
    if ends is None:
        raise HTTPException(status_code=404, detail=f"Wire '{wire.wire_id}' has an unresolved end")
    return WireEndpointsOut(
        wire_id=wire.wire_id,
        start=PointOut(x=ends.start[0], y=ends.start[1]),
        end=PointOut(x=ends.end[0], y=ends.end[1]),
    )


def _transform(req: CoordinateRequest):
    return (
        TransformState(req.transform.scale, req.transform.position_x, req.transform.position_y),
        ContainerRect(req.container.left, req.container.top),
    )


@router.post("/coordinates/screen-to-plan", response_model=PointOut)
async def convert_screen_to_plan(req: CoordinateRequest):
    transform, container = _transform(req)
    x, y = screen_to_plan(req.x, req.y, transform, container)
    return PointOut(x=x, y=y)


@router.post("/coordinates/plan-to-screen", response_model=PointOut)
async def convert_plan_to_screen(req: CoordinateRequest):
    transform, container = _transform(req)
    x, y = plan_to_screen(req.x, req.y, transform, container)
    return PointOut(x=x, y=y)
