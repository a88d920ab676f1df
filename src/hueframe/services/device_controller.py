"""Drives a row of hue lamps as if they were the pixels of an LED device.

Lamps are claimed lazily on the first ``write``, their state is captured
at that moment and handed back on ``switch_off`` or when no frame has
arrived for ``idle_timeout`` seconds.
"""
import logging
import threading
from enum import IntEnum
from typing import Optional, Sequence

from hueframe.api.bridge_client import BridgeClient
from hueframe.color.converter import rgb255_to_gamut_color
from hueframe.config import DeviceSettings
from hueframe.exceptions import HueError
from hueframe.models.color import BLACK
from hueframe.repo.light_repository import LightRepository
from hueframe.services.light_state import LightState
from hueframe.timer import IdleTimer

_LOGGER = logging.getLogger(__name__)

DEFAULT_IDLE_TIMEOUT = 3.0

RGB = Sequence[int]


class WriteStatus(IntEnum):
    OK = 0
    # the frame did not match the held lamps, they were released
    FRAME_DROPPED = -1


class DeviceController:
    """Maps pixel values onto hue lamps through the bridge.

    Not meant for concurrent callers, but the idle timer fires on its own
    thread so the public entry points share one lock.
    """

    def __init__(self, host: str, username: str = "newdeveloper", switch_off_on_black: bool = False,
                 brightness_factor: float = 1.0, transition_time: int = 1,
                 light_ids: Optional[Sequence[int]] = None, *,
                 bridge: Optional[BridgeClient] = None,
                 idle_timeout: float = DEFAULT_IDLE_TIMEOUT,
                 timer_cls: type = threading.Timer,
                 request_timeout: float = 5):
        self.bridge = bridge or BridgeClient(host, username, timeout=request_timeout)
        self.repository = LightRepository(self.bridge)

        self.switch_off_on_black = switch_off_on_black
        self.brightness_factor = brightness_factor
        self.transition_time = transition_time

        self._light_ids: list[int] = list(light_ids or [])
        self._lights: list[LightState] = []
        self._lock = threading.RLock()
        self._timer = IdleTimer(idle_timeout, self._on_idle, timer_cls=timer_cls)

    @classmethod
    def from_settings(cls, settings: DeviceSettings, **kwargs) -> "DeviceController":
        return cls(
            settings.host,
            settings.username,
            settings.switch_off_on_black,
            settings.brightness_factor,
            settings.transition_time,
            settings.light_ids,
            idle_timeout=settings.idle_timeout,
            request_timeout=settings.request_timeout,
            **kwargs,
        )

    def __enter__(self) -> "DeviceController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.switch_off()

    # ---- Properties
    @property
    def lights(self) -> tuple[LightState, ...]:
        return tuple(self._lights)

    @property
    def is_active(self) -> bool:
        return bool(self._lights)

    @property
    def light_ids(self) -> list[int]:
        return list(self._light_ids)

    @light_ids.setter
    def light_ids(self, light_ids: Sequence[int]) -> None:
        with self._lock:
            self.switch_off()
            self._light_ids = list(light_ids)

    # ---- Public API
    def write(self, pixels: Sequence[RGB], *, force: bool = False) -> WriteStatus:
        """Send one frame of RGB values (0..255), one per lamp."""
        with self._lock:
            if not self._lights:
                if not pixels:
                    return WriteStatus.OK
                self.discover(len(pixels))

            if len(self._lights) != len(pixels):
                _LOGGER.warning(
                    "Got %d colors for %d lights, releasing the lights",
                    len(pixels), len(self._lights),
                )
                self._timer.cancel()
                self._release()
                return WriteStatus.FRAME_DROPPED

            try:
                for light, (red, green, blue) in zip(self._lights, pixels):
                    if self.switch_off_on_black and red == green == blue == 0:
                        # switched off, no color goes on the wire
                        light.apply(BLACK, on=False, transition_time=self.transition_time, force=force)
                        continue
                    light.apply(
                        rgb255_to_gamut_color(red, green, blue, light.gamut),
                        on=True,
                        transition_time=self.transition_time,
                        brightness_factor=self.brightness_factor,
                        force=force,
                    )
            finally:
                # lamps stay claimed after a failed PUT, the timer hands them back
                self._timer.start()
            return WriteStatus.OK

    def switch_off(self) -> WriteStatus:
        """Give all lamps back in the state they had before; safe to repeat."""
        with self._lock:
            self._timer.cancel()
            if self._lights:
                self._release()
            return WriteStatus.OK

    def close(self) -> None:
        try:
            self.switch_off()
        finally:
            self.bridge.close()

    def discover(self, count: int) -> list[LightState]:
        """Claim ``count`` lamps and capture their current state.

        Lamps already held are given back first. Either all of them are
        claimed or, on error, none.
        """
        with self._lock:
            if self._lights:
                self._timer.cancel()
                self._release()

            light_ids = self.repository.resolve_light_ids(count, self._light_ids)

            lights = [
                LightState.from_model(self.bridge, light_id, self.repository.get_light(light_id))
                for light_id in light_ids
            ]

            self._light_ids = light_ids
            self._lights = lights
            _LOGGER.info("Controlling lights %s", ", ".join(map(str, light_ids)))
            return list(lights)

    # ---- Internals
    def _on_idle(self, generation: int) -> None:
        with self._lock:
            if not self._timer.is_current(generation):
                return
            self._timer.disarm()
            if self._lights:
                _LOGGER.info("No frames for %.1fs, restoring lights", self._timer.interval)
                try:
                    self._release()
                except HueError as e:
                    # nobody to hand this to on the timer thread
                    _LOGGER.error("Restoring lights after idle timeout failed: %s", e)

    def _release(self) -> None:
        error = None
        for light in self._lights:
            try:
                light.restore()
            except HueError as e:
                _LOGGER.error("Could not restore light %s: %s", light.id, e)
                error = error or e

        _LOGGER.info("Released %d lights", len(self._lights))
        self._lights = []
        if error is not None:
            raise error
