"""Client for the light endpoints of the hue bridge v1 REST API."""
import logging

from hueframe.api.http_client import HttpClient
from hueframe.commands.base import StateCommand
from hueframe.exceptions import BridgeError, BridgeResponseError
from hueframe.models.light import LightModel

_LOGGER = logging.getLogger(__name__)


def _errors(response) -> list[dict]:
    # the bridge reports failures as [{"error": {...}}] with HTTP 200
    if not isinstance(response, list):
        return []
    return [item["error"] for item in response if isinstance(item, dict) and "error" in item]


class BridgeClient:
    def __init__(self, host: str, username: str, http: HttpClient | None = None,
                 timeout: float = 5):
        self.host = host
        self.username = username
        self.http = http or HttpClient(f"http://{host}/api/{username}", timeout=timeout)

    def _get(self, path: str):
        response = self.http.get(path)
        errors = _errors(response)
        if errors:
            raise BridgeResponseError(path, errors)
        return response

    def get_lights(self) -> list[int]:
        """Light ids in the order the bridge lists them."""
        lights = self._get("lights")
        if not isinstance(lights, dict):
            raise BridgeError(f"Unexpected lights listing from {self.host}: {lights!r}")

        ids = []
        for key in lights:
            try:
                ids.append(int(key))
            except ValueError:
                _LOGGER.debug("Ignoring non numeric light key %r", key)
        return ids

    def get_light_raw(self, light_id: int) -> dict:
        return self._get(f"lights/{light_id}")

    def get_light(self, light_id: int) -> LightModel:
        return LightModel.model_validate(self.get_light_raw(light_id))

    def set_light_state(self, light_id: int, command: StateCommand):
        path = f"lights/{light_id}/state"
        response = self.http.put(path, command.payload())

        errors = _errors(response)
        if errors:
            _LOGGER.warning("Hue errors for light %s: %s", light_id, errors)
        return response

    def close(self):
        self.http.close()
