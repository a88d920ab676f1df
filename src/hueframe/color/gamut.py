"""Static lookup from a lamp's model id to the gamut triangle it can reach.

Model ids per http://www.developers.meethue.com/documentation/supported-lights
"""
from hueframe.models.color import CiColor, GamutTriangle

# Light strips, color iris, ...
GAMUT_A = GamutTriangle(
    red=CiColor(x=0.703, y=0.296),
    green=CiColor(x=0.2151, y=0.7106),
    blue=CiColor(x=0.138, y=0.08),
)
# Hue bulbs, spots, ...
GAMUT_B = GamutTriangle(
    red=CiColor(x=0.675, y=0.322),
    green=CiColor(x=0.4091, y=0.518),
    blue=CiColor(x=0.167, y=0.04),
)
# Hue Lightstrip plus, go, ...
GAMUT_C = GamutTriangle(
    red=CiColor(x=0.675, y=0.322),
    green=CiColor(x=0.2151, y=0.7106),
    blue=CiColor(x=0.167, y=0.04),
)
# Unknown lamps: the whole xy plane quadrant
GAMUT_DEFAULT = GamutTriangle(
    red=CiColor(x=1.0, y=0.0),
    green=CiColor(x=0.0, y=1.0),
    blue=CiColor(x=0.0, y=0.0),
)

GAMUT_A_MODEL_IDS = frozenset({
    "LLC001", "LLC005", "LLC006", "LLC007", "LLC010",
    "LLC011", "LLC012", "LLC013", "LLC014", "LST001",
})
GAMUT_B_MODEL_IDS = frozenset({"LCT001", "LCT002", "LCT003", "LCT007", "LLM001"})
GAMUT_C_MODEL_IDS = frozenset({"LLC020", "LST002"})

_CATALOG = (
    (GAMUT_A_MODEL_IDS, GAMUT_A),
    (GAMUT_B_MODEL_IDS, GAMUT_B),
    (GAMUT_C_MODEL_IDS, GAMUT_C),
)


def gamut_for_model(model_id: str) -> GamutTriangle:
    for model_ids, gamut in _CATALOG:
        if model_id in model_ids:
            return gamut
    return GAMUT_DEFAULT
