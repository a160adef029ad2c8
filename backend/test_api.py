"""API endpoint tests for generation, devices and coordinates."""
import os
import sys
import xml.etree.ElementTree as ET

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest
from fastapi.testclient import TestClient

from main import app
from services.coordinates import ContainerRect, TransformState, plan_to_screen, screen_to_plan
from services.devices import (
    DEVICE_DEFINITIONS,
    PlacedDevice,
    Wire,
    terminal_position,
    wire_endpoints,
)

client = TestClient(app)


def test_health():
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_generate_svg_empty_building():
    r = client.post("/api/generator/svg", json={
        "offices": 0, "meetingRooms": 0, "toilets": 0, "seed": 1,
    })
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("image/svg+xml")
    root = ET.fromstring(r.text)
    assert root.get("viewBox") == "0 0 1200 800"
    assert "MAIN EXIT" in r.text


def test_generate_svg_rejects_counts_beyond_dialog_limits():
    r = client.post("/api/generator/svg", json={"offices": 10, "meetingRooms": 0, "toilets": 0})
    assert r.status_code == 422
    r = client.post("/api/generator/svg", json={"offices": -1})
    assert r.status_code == 422


def test_generate_layout_json():
    r = client.post("/api/generator/layout", json={
        "offices": 6, "meetingRooms": 2, "toilets": 3, "seed": 7,
    })
    assert r.status_code == 200
    d = r.json()
    assert d["name"] == "Generated (6 Off, 2 Mtg)"
    assert d["plan_id"].startswith("gen-")
    cats = [room["category"] for room in d["rooms"]]
    assert cats.count("office") == 6
    assert cats.count("meeting") == 2
    assert cats.count("toilet") == 3
    assert cats.count("public") == 1
    assert cats.count("entrance") == 1
    assert d["metadata"]["strips_tiled"] is True
    assert sum(d["zones"].values()) == len(d["rooms"]) - 2
    assert d["svg"].startswith("<svg")


def test_seeded_generation_is_repeatable():
    body = {"offices": 4, "meeting_rooms": 1, "toilets": 2, "seed": 99}
    a = client.post("/api/generator/svg", json=body).text
    b = client.post("/api/generator/svg", json=body).text
    assert a == b


def test_device_catalog():
    r = client.get("/api/devices")
    assert r.status_code == 200
    devices = r.json()
    assert [d["type_id"] for d in devices] == ["autroguard-base"]
    base = devices[0]
    assert base["name"] == "AutroGuard Base"
    assert (base["width"], base["height"]) == (40, 40)
    assert len(base["terminals"]) == 8
    assert sorted({t["pair_index"] for t in base["terminals"]}) == [0, 1, 2, 3]


def test_terminal_position_endpoint():
    r = client.post("/api/devices/terminal-position", json={
        "device": {"id": "d1", "typeId": "autroguard-base", "x": 100, "y": 100},
        "terminalId": "1+",
    })
    assert r.status_code == 200
    assert r.json() == {"x": 110, "y": 84}


@pytest.mark.parametrize("device_type,terminal", [
    ("autroguard-base", "9+"),
    ("smoke-detector", "1+"),
])
def test_terminal_position_unknown(device_type, terminal):
    r = client.post("/api/devices/terminal-position", json={
        "device": {"id": "d1", "typeId": device_type, "x": 0, "y": 0},
        "terminalId": terminal,
    })
    assert r.status_code == 404


WIRED_DEVICES = [
    {"id": "a", "typeId": "autroguard-base", "x": 100, "y": 100},
    {"id": "b", "typeId": "autroguard-base", "x": 300, "y": 200, "rotation": 90},
]


def test_wire_endpoints_endpoint():
    r = client.post("/api/devices/wire-endpoints", json={
        "wire": {"id": "w1", "startDeviceId": "a", "startTerminalId": "2-",
                 "endDeviceId": "b", "endTerminalId": "4+"},
        "devices": WIRED_DEVICES,
    })
    assert r.status_code == 200
    assert r.json() == {
        "wire_id": "w1",
        "start": {"x": 110, "y": 116},
        "end": {"x": 284, "y": 190},
    }


@pytest.mark.parametrize("end_device,end_terminal", [
    ("missing", "1+"),
    ("b", "9-"),
])
def test_wire_endpoints_unresolved(end_device, end_terminal):
    r = client.post("/api/devices/wire-endpoints", json={
        "wire": {"id": "w2", "startDeviceId": "a", "startTerminalId": "1+",
                 "endDeviceId": end_device, "endTerminalId": end_terminal},
        "devices": WIRED_DEVICES,
    })
    assert r.status_code == 404


def test_coordinate_endpoints_round_trip():
    transform = {"scale": 2, "positionX": 10, "positionY": 20}
    container = {"left": 5, "top": 5}
    r = client.post("/api/coordinates/screen-to-plan", json={
        "x": 45, "y": 65, "transform": transform, "container": container,
    })
    assert r.json() == {"x": 15, "y": 20}
    r = client.post("/api/coordinates/plan-to-screen", json={
        "x": 15, "y": 20, "transform": transform, "container": container,
    })
    assert r.json() == {"x": 45, "y": 65}


def test_zero_scale_rejected():
    r = client.post("/api/coordinates/screen-to-plan", json={
        "x": 1, "y": 1, "transform": {"scale": 0},
    })
    assert r.status_code == 422


# ---------- services, without HTTP ----------

def test_screen_plan_conversion_inverse():
    t = TransformState(scale=1.5, position_x=-30, position_y=12)
    c = ContainerRect(left=100, top=50)
    px, py = screen_to_plan(400, 300, t, c)
    assert plan_to_screen(px, py, t, c) == pytest.approx((400, 300))


def test_wire_endpoints():
    devices = {
        "a": PlacedDevice("a", "autroguard-base", 100, 100),
        "b": PlacedDevice("b", "autroguard-base", 300, 200, rotation=90),
    }
    ends = wire_endpoints(Wire("w1", "a", "2-", "b", "4+"), devices)
    assert ends.start == (110, 116)
    assert ends.end == (284, 190)
    assert wire_endpoints(Wire("w2", "a", "1+", "missing", "1+"), devices) is None


def test_terminal_position_unknown_type():
    dev = PlacedDevice("x", "nope", 0, 0)
    assert terminal_position(dev, "1+") is None
    assert terminal_position(dev, "1+", DEVICE_DEFINITIONS) is None


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
