"""RGB to hue xy conversion, clamped into a lamp's gamut triangle.

Follows the Philips "RGB to xy Color conversion" application note: sRGB
gamma is removed, the linear color is taken to XYZ with a wide gamut
matrix, and chromaticities outside the lamp's reach are pulled onto the
nearest edge of its triangle.
"""
import math

from hueframe.models.color import CiColor, GamutTriangle

# sRGB (D65) -> XYZ, wide gamut variant of the hue application note
_RGB_TO_XYZ = (
    (0.664511, 0.154324, 0.162028),
    (0.283881, 0.668433, 0.047685),
    (0.000088, 0.072310, 0.986039),
)


def gamma_correct(c: float) -> float:
    """Undo the sRGB transfer curve of one channel in [0, 1]."""
    if c > 0.04045:
        return math.pow((c + 0.055) / (1.0 + 0.055), 2.4)
    return c / 12.92


def cross_product(p1: CiColor, p2: CiColor) -> float:
    return p1.x * p2.y - p1.y * p2.x


def distance(p1: CiColor, p2: CiColor) -> float:
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def is_point_in_lamps_reach(p: CiColor, gamut: GamutTriangle) -> bool:
    """True if p lies inside (or on) the gamut triangle.

    The triangle must not be degenerate.
    """
    v1 = CiColor.point(gamut.green.x - gamut.red.x, gamut.green.y - gamut.red.y)
    v2 = CiColor.point(gamut.blue.x - gamut.red.x, gamut.blue.y - gamut.red.y)
    q = CiColor.point(p.x - gamut.red.x, p.y - gamut.red.y)

    denom = cross_product(v1, v2)
    s = cross_product(q, v2) / denom
    t = cross_product(v1, q) / denom
    return s >= 0.0 and t >= 0.0 and s + t <= 1.0


def closest_point_on_segment(a: CiColor, b: CiColor, p: CiColor) -> CiColor:
    """Project p onto the segment a-b, never past either endpoint."""
    ap_x, ap_y = p.x - a.x, p.y - a.y
    ab_x, ab_y = b.x - a.x, b.y - a.y

    t = (ap_x * ab_x + ap_y * ab_y) / (ab_x * ab_x + ab_y * ab_y)
    t = min(1.0, max(0.0, t))
    return CiColor.point(a.x + ab_x * t, a.y + ab_y * t)


def rgb_to_gamut_color(red: float, green: float, blue: float, gamut: GamutTriangle) -> CiColor:
    """Convert an RGB color with channels in [0, 1] to a reachable CiColor."""
    r, g, b = gamma_correct(red), gamma_correct(green), gamma_correct(blue)

    X, Y, Z = (row[0] * r + row[1] * g + row[2] * b for row in _RGB_TO_XYZ)

    total = X + Y + Z
    cx = X / total if total else 0.0
    cy = Y / total if total else 0.0
    if math.isnan(cx):
        cx = 0.0
    if math.isnan(cy):
        cy = 0.0

    # brightness is simply Y
    xy = CiColor.point(cx, cy, Y)
    if is_point_in_lamps_reach(xy, gamut):
        return xy

    # out of reach: take the closest point on the triangle's edges
    candidates = (
        closest_point_on_segment(gamut.red, gamut.green, xy),
        closest_point_on_segment(gamut.blue, gamut.red, xy),
        closest_point_on_segment(gamut.green, gamut.blue, xy),
    )
    closest = candidates[0]
    lowest = distance(xy, closest)
    for candidate in candidates[1:]:
        d = distance(xy, candidate)
        if d < lowest:
            lowest = d
            closest = candidate

    return CiColor.point(closest.x, closest.y, Y)


def rgb255_to_gamut_color(red: int, green: int, blue: int, gamut: GamutTriangle) -> CiColor:
    """Same as ``rgb_to_gamut_color`` for 8 bit channels."""
    return rgb_to_gamut_color(red / 255.0, green / 255.0, blue / 255.0, gamut)
