import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, PositiveInt, field_validator

ENV_PREFIX = "HUE_"
_HOST_ENV = "HUE_BRIDGE_IP"


class DeviceSettings(BaseModel):
    host: str
    username: str = "newdeveloper"
    switch_off_on_black: bool = False
    brightness_factor: float = Field(1.0, ge=0.0)
    # multiples of 100 ms, the lamps default to 4 (400 ms)
    transition_time: int = Field(1, ge=0)
    light_ids: list[PositiveInt] = Field(default_factory=list)
    idle_timeout: float = Field(3.0, gt=0.0)
    request_timeout: float = Field(5.0, gt=0.0)

    @field_validator("light_ids", mode="before")
    @classmethod
    def _split_ids(cls, value):
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


def load_settings(env_file: Optional[str] = None, **overrides) -> DeviceSettings:
    """Read settings from the environment (and a .env file, if any)."""
    load_dotenv(env_file or find_dotenv())

    host = overrides.pop("host", None) or os.getenv(_HOST_ENV)
    if not host:
        raise ValueError(f"{_HOST_ENV} fehlt.")

    values = {"host": host}
    for name in DeviceSettings.model_fields:
        if name == "host":
            continue
        raw = os.getenv(ENV_PREFIX + name.upper())
        if raw is not None and raw.strip():
            values[name] = raw.strip()
    values.update(overrides)

    return DeviceSettings.model_validate(values)
