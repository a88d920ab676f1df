from pydantic import BaseModel, ConfigDict, Field


class CiColor(BaseModel):
    """A point in the color space of the hue system plus its brightness."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(0.0, ge=0.0, le=1.0)
    y: float = Field(0.0, ge=0.0, le=1.0)
    bri: float = Field(0.0, ge=0.0, le=1.0)

    @classmethod
    def point(cls, x: float, y: float, bri: float = 0.0) -> "CiColor":
        """Build without validation, used on the per-pixel hot path."""
        return cls.model_construct(x=x, y=y, bri=bri)


BLACK = CiColor(x=0.0, y=0.0, bri=0.0)


class GamutTriangle(BaseModel):
    """Reachable chromaticities of a lamp class."""

    model_config = ConfigDict(frozen=True)

    red: CiColor
    green: CiColor
    blue: CiColor
