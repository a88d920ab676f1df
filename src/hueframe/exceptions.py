class HueError(Exception):
    """Base error of hueframe."""


class BridgeError(HueError):
    """The bridge could not be reached or answered with garbage."""


class BridgeResponseError(BridgeError):
    """The bridge answered with an error object."""

    def __init__(self, path: str, errors: list[dict]):
        self.path = path
        self.errors = errors
        descriptions = ", ".join(
            str(e.get("description", e)) for e in errors
        )
        super().__init__(f"Bridge rejected '{path}': {descriptions}")


class DiscoveryError(HueError):
    """The lights to control could not be determined or read."""


class MalformedLightError(DiscoveryError):
    """A light's state object is missing or incomplete."""
