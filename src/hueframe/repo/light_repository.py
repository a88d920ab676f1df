import logging

from pydantic import ValidationError

from hueframe.api.bridge_client import BridgeClient
from hueframe.exceptions import BridgeError, DiscoveryError, MalformedLightError
from hueframe.models.light import LightModel

_LOGGER = logging.getLogger(__name__)


class LightRepository:
    """Resolves which lamps back the pixel slots and reads their state."""

    def __init__(self, api: BridgeClient):
        self.api = api

    def resolve_light_ids(self, count: int, configured: list[int] | None = None) -> list[int]:
        """Return ``count`` light ids.

        Configured ids are used as they are when there are exactly enough of
        them, otherwise the first ``count`` lights the bridge lists are taken.
        """
        if configured and len(configured) == count:
            return list(configured)

        try:
            available = self.api.get_lights()
        except BridgeError as e:
            raise DiscoveryError(f"No lights found: {e}") from e

        light_ids = available[:count]
        for light_id in light_ids:
            _LOGGER.debug("Found light with id %s", light_id)

        if len(light_ids) != count:
            raise DiscoveryError(
                f"Not enough lights found: wanted {count}, bridge has {len(available)}"
            )
        return light_ids

    def get_light(self, light_id: int) -> LightModel:
        try:
            return self.api.get_light(light_id)
        except ValidationError as e:
            raise MalformedLightError(f"Got invalid state object from light {light_id}") from e
        except BridgeError as e:
            raise DiscoveryError(f"Could not read light {light_id}: {e}") from e
