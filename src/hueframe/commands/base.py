from typing import Optional

from pydantic import BaseModel, Field


class StateCommand(BaseModel):
    """Body of PUT /api/<user>/lights/<id>/state.

    Every field is optional, the bridge applies partial updates. Only set
    fields end up on the wire, see ``payload()``.
    """

    on: Optional[bool] = None
    bri: Optional[int] = Field(None, ge=0, le=254)
    xy: Optional[tuple[float, float]] = None
    transitiontime: Optional[int] = Field(None, ge=0)

    def payload(self) -> dict:
        return self.model_dump(exclude_none=True, mode="json")

    def is_empty(self) -> bool:
        return not self.payload()
