import logging
from typing import Optional

from hueframe.api.bridge_client import BridgeClient
from hueframe.color.gamut import gamut_for_model
from hueframe.commands.base import StateCommand
from hueframe.models.color import BLACK, CiColor, GamutTriangle
from hueframe.models.light import LightModel

_LOGGER = logging.getLogger(__name__)

MAX_BRIGHTNESS = 254


def wire_brightness(bri: float, brightness_factor: float = 1.0) -> int:
    """Normalized brightness to the bridge's 0..254 scale."""
    return max(0, min(MAX_BRIGHTNESS, round(bri * brightness_factor * MAX_BRIGHTNESS)))


def wire_xy(color: CiColor) -> tuple[float, float]:
    return round(color.x, 4), round(color.y, 4)


class LightState:
    """Cached mirror of one lamp under control.

    Keeps what was last commanded so unchanged values are not sent again,
    and the state the lamp had before we took over so it can be put back.
    """

    def __init__(self, bridge: BridgeClient, light_id: int, gamut: GamutTriangle,
                 original_state: StateCommand, *, model_id: str = "", on: bool = False,
                 color: CiColor = BLACK, transition_time: Optional[int] = None):
        self.bridge = bridge
        self.id = light_id
        self.model_id = model_id
        self.gamut = gamut
        self.original_state = original_state

        self.on = on
        self.color = color
        self.transition_time = transition_time

    @classmethod
    def from_model(cls, bridge: BridgeClient, light_id: int, light: LightModel) -> "LightState":
        state = light.state
        original = StateCommand(on=state.on)
        color = BLACK
        transition_time = None

        # color and transition time only mean something while the lamp is on
        if state.on:
            bri = min(state.bri if state.bri is not None else MAX_BRIGHTNESS, MAX_BRIGHTNESS)
            original.bri = bri
            if state.xy is not None:
                original.xy = (state.xy[0], state.xy[1])
                color = CiColor(x=state.xy[0], y=state.xy[1], bri=bri / MAX_BRIGHTNESS)
            else:
                color = CiColor(bri=bri / MAX_BRIGHTNESS)
            if state.transitiontime is not None:
                original.transitiontime = state.transitiontime
                transition_time = state.transitiontime

        return cls(
            bridge,
            light_id,
            gamut_for_model(light.modelid),
            original,
            model_id=light.modelid,
            on=state.on,
            color=color,
            transition_time=transition_time,
        )

    def __repr__(self) -> str:
        return f"LightState(id={self.id}, model_id={self.model_id!r}, on={self.on}, color={self.color!r})"

    def _send(self, command: StateCommand):
        self.bridge.set_light_state(self.id, command)

    # ---- Frame update
    def apply(self, color: CiColor, *, on: bool = True, transition_time: Optional[int] = None,
              brightness_factor: float = 1.0, force: bool = False) -> Optional[StateCommand]:
        """Bring the lamp to ``color``/``on`` with a single PUT of the changed fields.

        Returns the command that was sent, or None when nothing changed.
        """
        command = StateCommand()
        if force or self.on != on:
            command.on = on
        if on and (force or self.color != color):
            command.xy = wire_xy(color)
            command.bri = wire_brightness(color.bri, brightness_factor)

        sent = None
        if not command.is_empty():
            if transition_time is not None:
                command.transitiontime = transition_time
            self._send(command)
            sent = command

        self.on = on
        self.color = color
        if transition_time is not None:
            self.transition_time = transition_time
        return sent

    def restore(self) -> None:
        """Put the lamp back into the state it had when it was discovered."""
        _LOGGER.debug("Restoring light %s to %s", self.id, self.original_state.payload())
        self._send(self.original_state)
