from typing import Optional

from pydantic import BaseModel, Field


class LightStateModel(BaseModel):
    on: bool
    xy: Optional[list[float]] = Field(None, min_length=2, max_length=2)
    bri: Optional[int] = Field(None, ge=0, le=255)
    transitiontime: Optional[int] = Field(None, ge=0)


class LightModel(BaseModel):
    """Response of GET /api/<user>/lights/<id>."""

    modelid: str = ""  # z.B. "LCT001"
    name: str = ""
    state: LightStateModel
