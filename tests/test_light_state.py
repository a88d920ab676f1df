from __future__ import annotations

import pytest

from conftest import make_light
from hueframe.color.gamut import GAMUT_A, GAMUT_B, GAMUT_DEFAULT
from hueframe.commands.base import StateCommand
from hueframe.models.color import BLACK, CiColor
from hueframe.models.light import LightModel
from hueframe.services.light_state import LightState, wire_brightness

RED = CiColor(x=0.675, y=0.322, bri=0.25)


def _light(bridge, light_id: int = 1, **kwargs) -> LightState:
    return LightState.from_model(bridge, light_id, LightModel.model_validate(make_light(**kwargs)))


def test_from_model_captures_original_state_of_lit_lamp(bridge, http) -> None:
    light = _light(bridge, modelid="LCT001", xy=(0.31, 0.32), bri=127, transitiontime=4)

    assert light.gamut is GAMUT_B
    assert light.model_id == "LCT001"
    assert light.on is True
    assert light.color == CiColor(x=0.31, y=0.32, bri=127 / 254)
    assert light.transition_time == 4
    assert light.original_state.payload() == {"on": True, "bri": 127, "xy": [0.31, 0.32], "transitiontime": 4}
    # capturing the state must not touch the lamp
    assert http.puts == []


def test_from_model_of_dark_lamp_only_remembers_on_flag(bridge) -> None:
    light = _light(bridge, modelid="LLC001", on=False)

    assert light.gamut is GAMUT_A
    assert light.on is False
    assert light.color == BLACK
    assert light.transition_time is None
    assert light.original_state.payload() == {"on": False}


def test_from_model_unknown_model_gets_full_gamut(bridge) -> None:
    assert _light(bridge, modelid="XYZ123").gamut is GAMUT_DEFAULT


@pytest.mark.parametrize(
    ("bri", "factor", "expected"),
    [(0.0, 1.0, 0), (1.0, 1.0, 254), (0.5, 1.0, 127), (0.5, 0.5, 64), (1.0, 2.0, 254), (0.001, 1.0, 0)],
)
def test_wire_brightness(bri, factor, expected) -> None:
    assert wire_brightness(bri, factor) == expected


def test_apply_sends_only_changed_fields(bridge, http) -> None:
    light = _light(bridge)

    sent = light.apply(RED, on=True, transition_time=1)

    assert sent is not None
    assert http.puts == [("lights/1/state", {"bri": 64, "xy": [0.675, 0.322], "transitiontime": 1})]
    assert light.color == RED
    assert light.transition_time == 1


def test_apply_unchanged_color_sends_nothing(bridge, http) -> None:
    light = _light(bridge)
    light.apply(RED, on=True, transition_time=1)

    assert light.apply(RED, on=True, transition_time=1) is None
    assert len(http.puts) == 1


def test_apply_force_resends(bridge, http) -> None:
    light = _light(bridge)
    light.apply(RED, on=True, transition_time=1)
    light.apply(RED, on=True, transition_time=1, force=True)

    assert http.puts[-1] == ("lights/1/state", {"on": True, "bri": 64, "xy": [0.675, 0.322], "transitiontime": 1})


def test_apply_off_carries_no_color(bridge, http) -> None:
    light = _light(bridge)

    light.apply(BLACK, on=False, transition_time=2)

    assert http.puts == [("lights/1/state", {"on": False, "transitiontime": 2})]
    assert light.on is False
    assert light.color == BLACK


def test_apply_turning_on_sends_flag_and_color_together(bridge, http) -> None:
    light = _light(bridge, on=False)

    light.apply(RED, on=True, transition_time=1, brightness_factor=2.0)

    assert http.puts == [("lights/1/state", {"on": True, "bri": 127, "xy": [0.675, 0.322], "transitiontime": 1})]


def test_apply_rounds_xy_on_the_wire(bridge, http) -> None:
    light = _light(bridge)

    light.apply(CiColor(x=0.123456, y=0.654321, bri=1.0), transition_time=1)

    assert http.puts[0][1]["xy"] == [0.1235, 0.6543]


def test_restore_sends_original_state(bridge, http) -> None:
    light = _light(bridge, light_id=2, xy=(0.4, 0.5), bri=254, transitiontime=None)
    light.apply(BLACK, on=False, transition_time=1)

    light.restore()

    assert http.puts[-1] == ("lights/2/state", {"on": True, "bri": 254, "xy": [0.4, 0.5]})


def test_state_command_drops_unset_fields() -> None:
    assert StateCommand().is_empty()
    assert StateCommand(on=False).payload() == {"on": False}
