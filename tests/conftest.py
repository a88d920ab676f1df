"""Shared fixtures: an in-memory bridge and a timer the tests fire by hand."""
from __future__ import annotations

from typing import Any

import pytest

from hueframe.api.bridge_client import BridgeClient
from hueframe.exceptions import BridgeError
from hueframe.services.device_controller import DeviceController


def make_light(modelid: str = "LCT001", on: bool = True, xy=(0.3, 0.3), bri: int = 200,
               transitiontime: int | None = 4) -> dict[str, Any]:
    state: dict[str, Any] = {"on": on, "bri": bri, "xy": list(xy), "reachable": True}
    if transitiontime is not None:
        state["transitiontime"] = transitiontime
    return {"modelid": modelid, "name": f"{modelid} lamp", "type": "Extended color light", "state": state}


class FakeHttp:
    """Stands in for HttpClient, serves /lights from a dict."""

    def __init__(self, lights: dict[str, Any]):
        self.lights = lights
        self.gets: list[str] = []
        self.puts: list[tuple[str, dict]] = []
        self.fail_puts: set[str] = set()
        self.closed = False

    def get(self, path: str, *, timeout=None):
        self.gets.append(path)
        if path == "lights":
            return self.lights
        light_id = path.split("/")[1]
        if light_id in self.lights:
            return self.lights[light_id]
        return [{"error": {"type": 3, "address": f"/{path}",
                           "description": f"resource, /{path}, not available"}}]

    def put(self, path: str, payload: dict, *, timeout=None):
        if path in self.fail_puts:
            raise BridgeError(f"PUT {path} failed: timed out")
        self.puts.append((path, payload))
        return [{"success": {f"/{path}/{key}": value}} for key, value in payload.items()]

    def close(self):
        self.closed = True

    def puts_for(self, light_id: int) -> list[dict]:
        return [payload for path, payload in self.puts if path == f"lights/{light_id}/state"]


class FakeTimer:
    """threading.Timer lookalike that only runs when ``fire()`` is called."""

    created: list["FakeTimer"] = []

    def __init__(self, interval, function, args=()):
        self.interval = interval
        self.function = function
        self.args = args
        self.daemon = False
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function(*self.args)


@pytest.fixture
def timers() -> list[FakeTimer]:
    FakeTimer.created = []
    return FakeTimer.created


@pytest.fixture
def http() -> FakeHttp:
    return FakeHttp({
        "1": make_light("LCT001"),
        "2": make_light("LLC020", xy=(0.5, 0.4), bri=100),
        "3": make_light("LLC001", on=False),
    })


@pytest.fixture
def bridge(http: FakeHttp) -> BridgeClient:
    return BridgeClient("bridge.local", "newdeveloper", http=http)


@pytest.fixture
def make_device(bridge: BridgeClient, timers):
    def _factory(**kwargs) -> DeviceController:
        kwargs.setdefault("timer_cls", FakeTimer)
        return DeviceController("bridge.local", bridge=bridge, **kwargs)

    return _factory
